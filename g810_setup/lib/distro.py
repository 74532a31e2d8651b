from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from ..result import StepResult
from .env import PATHS

logger = logging.getLogger(__name__)


class PlatformId(str, Enum):
    CACHYOS = "cachyos"
    ARCH = "arch"
    DEBIAN = "debian"
    UBUNTU = "ubuntu"
    UNKNOWN = "unknown"


class PackageManager(str, Enum):
    PACMAN = "pacman"
    APT = "apt"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class PlatformProfile:
    platform_id: PlatformId
    package_manager: PackageManager

    @property
    def supported(self) -> bool:
        return self.package_manager is not PackageManager.UNKNOWN

    def __str__(self) -> str:
        return f"{self.platform_id.value}/{self.package_manager.value}"


UNKNOWN_PLATFORM = PlatformProfile(PlatformId.UNKNOWN, PackageManager.UNKNOWN)

_ARCH_ID = re.compile(r'^ID="?arch"?$', re.IGNORECASE | re.MULTILINE)


def _contains(word: str) -> Callable[[str], bool]:
    return lambda text: word in text.lower()


# Order matters: CachyOS reports ID_LIKE=arch and Ubuntu reports
# ID_LIKE=debian, so the specific identities must win.
_RULES: List[Tuple[Callable[[str], bool], PlatformProfile]] = [
    (_contains("cachyos"), PlatformProfile(PlatformId.CACHYOS, PackageManager.PACMAN)),
    (lambda text: bool(_ARCH_ID.search(text)), PlatformProfile(PlatformId.ARCH, PackageManager.PACMAN)),
    (_contains("ubuntu"), PlatformProfile(PlatformId.UBUNTU, PackageManager.APT)),
    (_contains("debian"), PlatformProfile(PlatformId.DEBIAN, PackageManager.APT)),
]


def detect_from_text(text: str) -> PlatformProfile:
    for matches, profile in _RULES:
        if matches(text):
            return profile
    return UNKNOWN_PLATFORM


def _read_text(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8", errors="ignore")
    except OSError:
        return None


def detect(os_release_path: str = PATHS.os_release) -> PlatformProfile:
    """Map the host's release-identity file to a platform profile."""

    text = _read_text(Path(os_release_path))
    if text is None:
        logger.warning("Cannot read %s; platform is unknown", os_release_path)
        return UNKNOWN_PLATFORM

    profile = detect_from_text(text)
    logger.debug("Platform detection: %s -> %s", os_release_path, profile)
    return profile


def validate(profile: PlatformProfile) -> StepResult:
    if not profile.supported:
        return StepResult.failure("Unsupported distribution. Supported: CachyOS, Arch, Debian, Ubuntu")
    return StepResult.success(f"Detected {profile.platform_id.value} ({profile.package_manager.value})")
