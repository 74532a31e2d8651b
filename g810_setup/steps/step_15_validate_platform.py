from __future__ import annotations

from typing import Any, Dict

from ..lib.distro import validate
from ..pipeline import ProvisioningState, RunContext
from ..result import StepResult
from ._state import platform_from_state


class ValidatePlatformStep:
    step_id = "15_validate_platform"
    reaches = ProvisioningState.VALIDATED
    best_effort = False

    def run(self, ctx: RunContext, state: Dict[str, Any]) -> StepResult:
        return validate(platform_from_state(state))
