from __future__ import annotations

import logging

from ..result import StepResult
from .command import CommandExecutor, cmd_exists, probe_cmd
from .env import KEYBOARD_TOOL

logger = logging.getLogger(__name__)

TEST_COLOR = "ffffff"


def tool_available() -> bool:
    return cmd_exists(KEYBOARD_TOOL)


def list_keyboards() -> StepResult:
    """Read-only query, so it runs even in dry-run mode."""

    logger.info("Listing connected keyboards")
    if not tool_available():
        return StepResult.warning(f"{KEYBOARD_TOOL} not found in PATH")

    r = probe_cmd([KEYBOARD_TOOL, "--list-keyboards"])
    if not r.ok:
        return StepResult.warning("Failed to list keyboards (may not be connected)")

    for line in (r.stdout or "").splitlines():
        if line.strip():
            logger.info("  %s", line.strip())
    return StepResult.success("Keyboards listed")


def check_keyboard(executor: CommandExecutor) -> StepResult:
    logger.info("Testing keyboard connectivity")
    if not executor.dry_run and not tool_available():
        return StepResult.warning(f"{KEYBOARD_TOOL} not found, skipping test")

    r = executor.execute([KEYBOARD_TOOL, "-a", TEST_COLOR], elevate=True, check=False)
    if not r.ok:
        return StepResult.warning("Keyboard test failed (keyboard may not be connected)")
    return StepResult.success("Keyboard test successful")


def load_profile(executor: CommandExecutor, profile_path: str) -> StepResult:
    r = executor.execute([KEYBOARD_TOOL, "-p", profile_path], elevate=True, check=False)
    if not r.ok:
        return StepResult.warning(f"Could not load profile {profile_path}")
    return StepResult.success(f"Profile loaded from {profile_path}")
