from __future__ import annotations

import logging

from ..errors import CommandError
from ..result import StepResult
from .command import CommandExecutor, cmd_exists, probe_cmd

logger = logging.getLogger(__name__)

SYSTEMCTL = "systemctl"


def is_enabled(unit: str) -> bool:
    return probe_cmd([SYSTEMCTL, "is-enabled", unit]).ok


def ensure_enabled(executor: CommandExecutor, unit: str) -> StepResult:
    """Idempotently enable a boot-time unit.

    Minimal hosts and containers often have no systemd at all; that is a
    warning, not an error.
    """

    logger.info("Setting up systemd service for boot persistence")
    if not cmd_exists(SYSTEMCTL):
        return StepResult.warning("systemctl not found, skipping service setup")

    if is_enabled(unit):
        return StepResult.success("Service already enabled")

    try:
        executor.execute([SYSTEMCTL, "daemon-reload"], elevate=True)
        executor.execute([SYSTEMCTL, "enable", unit], elevate=True)
    except CommandError as e:
        return StepResult.warning(f"Could not enable service {unit}: {e}")
    return StepResult.success("Service enabled")


def ensure_disabled(executor: CommandExecutor, unit: str) -> StepResult:
    logger.info("Disabling systemd service %s", unit)
    if not cmd_exists(SYSTEMCTL):
        return StepResult.warning("systemctl not found, skipping service removal")

    if not is_enabled(unit):
        return StepResult.success("Service already disabled")

    try:
        executor.execute([SYSTEMCTL, "disable", unit], elevate=True)
        executor.execute([SYSTEMCTL, "daemon-reload"], elevate=True)
    except CommandError as e:
        return StepResult.warning(f"Could not disable service {unit}: {e}")
    return StepResult.success("Service disabled")
