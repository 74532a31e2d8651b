from __future__ import annotations

import logging
from typing import Sequence, Set

from ..errors import CommandError
from ..result import StepResult
from .command import CommandExecutor, cmd_exists
from .distro import PlatformProfile
from .pkg import backend_for

logger = logging.getLogger(__name__)

BASE_TOOLS = frozenset({"git", "sudo"})


def required_tools(profile: PlatformProfile) -> Set[str]:
    tools = set(BASE_TOOLS)
    if profile.supported:
        tools.add(profile.package_manager.value)
    return tools


def check_dependencies(profile: PlatformProfile) -> StepResult:
    missing = sorted(t for t in required_tools(profile) if not cmd_exists(t))
    if missing:
        return StepResult.failure(f"Missing required commands: {' '.join(missing)}")
    return StepResult.success("All required dependencies found")


def verify_elevated_access(executor: CommandExecutor) -> StepResult:
    """Make sure sudo works before anything mutating runs.

    Non-interactive first (cached credentials / NOPASSWD), then let sudo
    prompt for a password.
    """

    if executor.dry_run:
        return StepResult.success("Sudo check skipped (dry-run)")

    if executor.execute(["sudo", "-n", "true"], check=False).ok:
        return StepResult.success("Sudo access verified")

    logger.info("Requesting sudo privileges...")
    if executor.execute(["sudo", "-v"], check=False).ok:
        return StepResult.success("Sudo access verified")

    return StepResult.failure("Unable to obtain sudo privileges")


def install_packages(executor: CommandExecutor, profile: PlatformProfile, packages: Sequence[str]) -> StepResult:
    backend = backend_for(profile.package_manager, executor)
    logger.info("Installing packages: %s", " ".join(packages))
    try:
        backend.install_packages(packages)
    except CommandError as e:
        return StepResult.failure(str(e))
    return StepResult.success(f"Installed {' '.join(packages)}")
