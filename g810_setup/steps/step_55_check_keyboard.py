from __future__ import annotations

from typing import Any, Dict

from ..lib.keyboard import check_keyboard
from ..pipeline import RunContext
from ..result import StepResult


class KeyboardCheckStep:
    step_id = "55_check_keyboard"
    reaches = None
    best_effort = True

    def run(self, ctx: RunContext, state: Dict[str, Any]) -> StepResult:
        return check_keyboard(ctx.executor)
