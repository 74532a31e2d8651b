from __future__ import annotations

import logging
from typing import Any, Dict

from ..lib import repo
from ..lib.deps import install_packages
from ..lib.distro import PackageManager
from ..lib.env import APT_PACKAGE, BUILD_DEPENDENCIES
from ..lib.udev import reload_rules
from ..pipeline import ProvisioningState, RunContext
from ..result import StepResult
from ._state import platform_from_state

logger = logging.getLogger(__name__)


class InstallSoftwareStep:
    step_id = "40_install_software"
    reaches = ProvisioningState.INSTALLED
    best_effort = False

    def run(self, ctx: RunContext, state: Dict[str, Any]) -> StepResult:
        platform = platform_from_state(state)
        cfg = ctx.config
        logger.info("Installing g810-led")

        if platform.package_manager is PackageManager.PACMAN:
            # Arch family builds from source to stay compatible with current GCC.
            state["checkout"] = repo.ensure_checkout(ctx.executor, repo_url=cfg.repo_url, repo_dir=cfg.repo_dir)

            logger.info("Installing build dependencies")
            deps = install_packages(ctx.executor, platform, list(BUILD_DEPENDENCIES))
            if deps.fatal:
                return deps

            repo.build(ctx.executor, cfg.repo_dir)
            repo.make_install(ctx.executor, cfg.repo_dir)
            state["install_method"] = "source"
        else:
            logger.info("Using package manager for installation")
            pkg = install_packages(ctx.executor, platform, [APT_PACKAGE])
            if pkg.fatal:
                return pkg
            state["install_method"] = "package"

        reload_rules(ctx.executor)
        return StepResult.success(f"g810-led installed ({state['install_method']})")
