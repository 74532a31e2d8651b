from __future__ import annotations

from typing import Sequence


class ProvisioningError(RuntimeError):
    """Fatal condition: the run aborts with a non-zero exit."""


class ConfigError(ProvisioningError):
    pass


class UsageError(ProvisioningError):
    pass


class CommandError(ProvisioningError):
    def __init__(self, argv: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr
        msg = f"Command failed (exit code {returncode}): {' '.join(self.argv)}"
        if stderr.strip():
            msg += f"\n{stderr.strip()}"
        super().__init__(msg)
