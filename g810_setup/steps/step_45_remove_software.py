from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from ..errors import CommandError
from ..lib import repo
from ..lib.distro import PackageManager
from ..lib.env import APT_PACKAGE
from ..lib.pkg import backend_for
from ..lib.udev import reload_rules
from ..pipeline import RunContext
from ..result import StepResult
from ._state import platform_from_state

logger = logging.getLogger(__name__)


class RemoveSoftwareStep:
    step_id = "45_remove_software"
    reaches = None
    best_effort = False

    def run(self, ctx: RunContext, state: Dict[str, Any]) -> StepResult:
        platform = platform_from_state(state)
        cfg = ctx.config
        logger.info("Removing g810-led")

        if platform.package_manager is PackageManager.PACMAN:
            # The checkout is kept; it is what knows how to uninstall.
            if not ctx.dry_run and not Path(cfg.repo_dir).is_dir():
                return StepResult.warning(
                    f"Repository directory not found: {cfg.repo_dir}; remove the g810-led binaries manually"
                )
            repo.make_uninstall(ctx.executor, cfg.repo_dir)
        else:
            try:
                backend_for(platform.package_manager, ctx.executor).remove_packages([APT_PACKAGE])
            except CommandError as e:
                return StepResult.failure(str(e))

        reload_rules(ctx.executor)
        return StepResult.success("g810-led removed")
