from __future__ import annotations

from typing import Any, Dict

from ..lib.deps import check_dependencies
from ..pipeline import ProvisioningState, RunContext
from ..result import StepResult
from ._state import platform_from_state


class CheckDependenciesStep:
    step_id = "20_check_dependencies"
    reaches = ProvisioningState.DEPS_VERIFIED
    best_effort = False

    def run(self, ctx: RunContext, state: Dict[str, Any]) -> StepResult:
        return check_dependencies(platform_from_state(state))
