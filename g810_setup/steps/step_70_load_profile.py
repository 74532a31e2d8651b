from __future__ import annotations

from typing import Any, Dict

from ..lib import profile
from ..pipeline import RunContext
from ..result import StepResult


class LoadProfileStep:
    step_id = "70_load_profile"
    reaches = None
    best_effort = True

    def run(self, ctx: RunContext, state: Dict[str, Any]) -> StepResult:
        generated = state.get("profile") or profile.generate(ctx.config.keyboard)
        return profile.apply(ctx.executor, generated)
