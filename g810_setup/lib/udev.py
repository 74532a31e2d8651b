from __future__ import annotations

import logging

from .command import CommandExecutor

logger = logging.getLogger(__name__)


def reload_rules(executor: CommandExecutor) -> None:
    """Make freshly (un)installed udev rules effective without a reboot."""

    logger.info("Reloading udev rules")
    executor.execute(["udevadm", "control", "--reload-rules"], elevate=True)
    executor.execute(["udevadm", "trigger"], elevate=True)
