from __future__ import annotations

from typing import Any, Dict

from ..lib.deps import verify_elevated_access
from ..pipeline import ProvisioningState, RunContext
from ..result import StepResult


class VerifyAccessStep:
    step_id = "30_verify_access"
    reaches = ProvisioningState.ACCESS_VERIFIED
    best_effort = False

    def run(self, ctx: RunContext, state: Dict[str, Any]) -> StepResult:
        return verify_elevated_access(ctx.executor)
