from __future__ import annotations

from typing import Any, Dict

from ..lib.service import ensure_enabled
from ..pipeline import ProvisioningState, RunContext
from ..result import StepResult


class EnableServiceStep:
    step_id = "80_enable_service"
    reaches = ProvisioningState.SERVICE_ENABLED
    best_effort = True

    def run(self, ctx: RunContext, state: Dict[str, Any]) -> StepResult:
        return ensure_enabled(ctx.executor, ctx.config.service_unit)
