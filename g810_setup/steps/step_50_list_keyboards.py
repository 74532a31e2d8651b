from __future__ import annotations

from typing import Any, Dict

from ..lib.keyboard import list_keyboards
from ..pipeline import RunContext
from ..result import StepResult


class ListKeyboardsStep:
    step_id = "50_list_keyboards"
    reaches = None
    best_effort = True

    def run(self, ctx: RunContext, state: Dict[str, Any]) -> StepResult:
        return list_keyboards()
