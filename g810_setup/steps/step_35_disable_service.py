from __future__ import annotations

from typing import Any, Dict

from ..lib.service import ensure_disabled
from ..pipeline import RunContext
from ..result import StepResult


class DisableServiceStep:
    step_id = "35_disable_service"
    reaches = None
    best_effort = True

    def run(self, ctx: RunContext, state: Dict[str, Any]) -> StepResult:
        return ensure_disabled(ctx.executor, ctx.config.service_unit)
