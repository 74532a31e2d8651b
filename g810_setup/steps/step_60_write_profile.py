from __future__ import annotations

from typing import Any, Dict

from ..lib import profile
from ..pipeline import ProvisioningState, RunContext
from ..result import StepResult


class WriteProfileStep:
    step_id = "60_write_profile"
    reaches = ProvisioningState.CONFIGURED
    best_effort = False

    def run(self, ctx: RunContext, state: Dict[str, Any]) -> StepResult:
        generated = profile.generate(ctx.config.keyboard)
        state["profile"] = generated
        return profile.write(ctx.executor, generated, confirm=ctx.confirm)
