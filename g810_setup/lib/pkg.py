from __future__ import annotations

import logging
from typing import Dict, Protocol, Sequence, Type

from ..errors import ProvisioningError
from .command import CommandExecutor
from .distro import PackageManager

logger = logging.getLogger(__name__)


class PackageBackend(Protocol):
    """Package operations for one package-manager family."""

    manager: PackageManager
    tool: str

    def refresh_index(self) -> None:
        ...

    def install_packages(self, packages: Sequence[str]) -> None:
        ...

    def remove_packages(self, packages: Sequence[str]) -> None:
        ...


class PacmanBackend:
    manager = PackageManager.PACMAN
    tool = "pacman"

    def __init__(self, executor: CommandExecutor) -> None:
        self.executor = executor

    def refresh_index(self) -> None:
        self.executor.execute(["pacman", "-Sy"], elevate=True)

    def install_packages(self, packages: Sequence[str]) -> None:
        # No index refresh: a bare -Sy before -S is a partial upgrade.
        if not packages:
            return
        self.executor.execute(["pacman", "-S", "--noconfirm", *packages], elevate=True)

    def remove_packages(self, packages: Sequence[str]) -> None:
        if not packages:
            return
        self.executor.execute(["pacman", "-R", "--noconfirm", *packages], elevate=True)


class AptBackend:
    manager = PackageManager.APT
    tool = "apt"

    def __init__(self, executor: CommandExecutor) -> None:
        self.executor = executor

    def refresh_index(self) -> None:
        self.executor.execute(["apt", "update"], elevate=True)

    def install_packages(self, packages: Sequence[str]) -> None:
        if not packages:
            return
        self.refresh_index()
        self.executor.execute(["apt", "install", "-y", *packages], elevate=True)

    def remove_packages(self, packages: Sequence[str]) -> None:
        if not packages:
            return
        self.executor.execute(["apt", "remove", "-y", *packages], elevate=True)


BACKENDS: Dict[PackageManager, Type] = {
    PackageManager.PACMAN: PacmanBackend,
    PackageManager.APT: AptBackend,
}


def backend_for(manager: PackageManager, executor: CommandExecutor) -> PackageBackend:
    cls = BACKENDS.get(manager)
    if cls is None:
        raise ProvisioningError(f"Unknown package manager: {getattr(manager, 'value', manager)}")
    return cls(executor)
