from __future__ import annotations

import logging
from typing import Any, Dict

from ..lib.distro import detect
from ..pipeline import ProvisioningState, RunContext
from ..result import StepResult

logger = logging.getLogger(__name__)


class DetectPlatformStep:
    step_id = "10_detect_platform"
    reaches = ProvisioningState.DETECTED
    best_effort = False

    def run(self, ctx: RunContext, state: Dict[str, Any]) -> StepResult:
        platform = detect(ctx.config.os_release_path)
        state["platform"] = platform
        logger.debug("Detected platform %s", platform)
        return StepResult.success()
