from __future__ import annotations

from typing import Any, Dict

from ..lib import profile
from ..pipeline import RunContext
from ..result import StepResult


class RemoveProfileStep:
    step_id = "65_remove_profile"
    reaches = None
    best_effort = True

    def run(self, ctx: RunContext, state: Dict[str, Any]) -> StepResult:
        return profile.remove(ctx.executor, ctx.config.keyboard.profile_path)
