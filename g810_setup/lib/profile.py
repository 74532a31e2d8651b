from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from .. import __version__
from ..errors import CommandError, ConfigError
from ..result import StepResult
from .command import CommandExecutor
from .env import KEYBOARD_TOOL, PATHS
from .keyboard import load_profile, tool_available

logger = logging.getLogger(__name__)

GENERATOR = "g810-setup"
TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S"
BACKUP_SUFFIX = ".bak"
FKEYS_GROUP = "fkeys"

# Key groups understood by ``g810-led -g``.
KNOWN_GROUPS = frozenset(
    {
        "logo",
        "indicators",
        "gkeys",
        "multimedia",
        "fkeys",
        "modifiers",
        "arrows",
        "numeric",
        "functions",
        "keys",
    }
)

_HEX_COLOR = re.compile(r"^[0-9a-fA-F]{6}$")


def normalize_color(value: object, *, what: str = "color") -> str:
    # Unquoted all-digit YAML colors arrive as ints; leading zeros are lost
    # (or read as octal), which the length check below rejects.
    s = str(value).strip().lstrip("#")
    if not _HEX_COLOR.match(s):
        hint = ""
        if isinstance(value, int) and not isinstance(value, bool):
            hint = '; quote the color in YAML (e.g. "001100")'
        raise ConfigError(f"Invalid {what} {value!r}: expected RRGGBB hex{hint}")
    return s.lower()


@dataclass(frozen=True)
class KeyboardSettings:
    all_keys_color: str = "909090"
    fkeys_color: str = "00ff00"
    groups: Mapping[str, str] = field(default_factory=dict)
    profile_path: str = PATHS.keyboard_profile

    def __post_init__(self) -> None:
        object.__setattr__(self, "all_keys_color", normalize_color(self.all_keys_color, what="all-keys color"))
        object.__setattr__(self, "fkeys_color", normalize_color(self.fkeys_color, what="F-keys color"))
        groups: Dict[str, str] = {}
        for name, color in dict(self.groups or {}).items():
            key = str(name).strip().lower()
            if key not in KNOWN_GROUPS:
                raise ConfigError(f"Unknown key group {name!r}; known: {', '.join(sorted(KNOWN_GROUPS))}")
            if key == FKEYS_GROUP:
                raise ConfigError("Set the F-keys color with keyboard.fkeys, not keyboard.groups.fkeys")
            groups[key] = normalize_color(color, what=f"color for group {key}")
        object.__setattr__(self, "groups", groups)


@dataclass(frozen=True)
class KeyboardProfile:
    all_keys_color: str
    fkeys_color: str
    groups: Tuple[Tuple[str, str], ...]
    target_path: str
    generated_at: datetime

    @property
    def backup_path(self) -> str:
        return self.target_path + BACKUP_SUFFIX

    def directives(self) -> List[str]:
        lines = [f"a {self.all_keys_color}", f"g {FKEYS_GROUP} {self.fkeys_color}"]
        lines += [f"g {name} {color}" for name, color in self.groups]
        lines.append("c")
        return lines

    def render(self) -> str:
        header = [
            "# G810/G513 LED Keyboard Profile",
            f"# Auto-generated by {GENERATOR} v{__version__}",
            f"# {self.generated_at.strftime(TIMESTAMP_FMT)}",
            "#",
            "# Configuration:",
            f"#   All keys:   {self.all_keys_color}",
            f"#   F-keys:     {self.fkeys_color}",
        ]
        header += [f"#   {name + ':':<11} {color}" for name, color in self.groups]
        header.append("#")
        return "\n".join(header + self.directives()) + "\n"


def generate(settings: KeyboardSettings, *, now: Optional[datetime] = None) -> KeyboardProfile:
    """Build the profile from settings. Pure: no I/O, no external calls."""

    return KeyboardProfile(
        all_keys_color=settings.all_keys_color,
        fkeys_color=settings.fkeys_color,
        groups=tuple(sorted(settings.groups.items())),
        target_path=settings.profile_path,
        generated_at=now or datetime.now(),
    )


def parse_directives(text: str) -> List[str]:
    """Return the directive lines of a profile, without comments or blanks."""

    out: List[str] = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        out.append(" ".join(line.split()))
    return out


def read_profile(path: str) -> List[str]:
    return parse_directives(Path(path).read_text(encoding="utf-8"))


def write(
    executor: CommandExecutor,
    profile: KeyboardProfile,
    *,
    confirm: Callable[[str], bool],
) -> StepResult:
    """Write the profile to disk (elevated), offering to back up a prior one."""

    path = profile.target_path
    content = profile.render()
    logger.info("Creating keyboard profile at %s", path)

    if executor.dry_run:
        executor.trace(f"Write profile to {path}")
        for line in content.splitlines():
            logger.info("%s", line)
        return StepResult.success(f"Profile rendered for {path} (dry-run)")

    try:
        if os.path.isfile(path):
            if confirm(f"Backup existing profile to {profile.backup_path}?"):
                executor.execute(["cp", path, profile.backup_path], elevate=True)
                logger.info("Profile backed up")
        executor.execute(["mkdir", "-p", os.path.dirname(path) or "."], elevate=True)
        executor.execute(["tee", path], elevate=True, input_text=content)
    except CommandError as e:
        return StepResult.failure(f"Could not write profile {path}: {e}")

    return StepResult.success("Profile created")


def apply(executor: CommandExecutor, profile: KeyboardProfile) -> StepResult:
    """Activate the profile. A missing tool or file only warns: the keyboard
    may simply be unplugged right now."""

    logger.info("Loading keyboard profile")
    path = profile.target_path
    if not executor.dry_run:
        if not os.path.isfile(path):
            return StepResult.warning(f"Profile file not found: {path}")
        if not tool_available():
            return StepResult.warning(f"{KEYBOARD_TOOL} not found, skipping profile load")
    return load_profile(executor, path)


def remove(executor: CommandExecutor, profile_path: str) -> StepResult:
    """Delete the profile; any ``.bak`` sibling is left in place."""

    if not executor.dry_run and not os.path.exists(profile_path):
        return StepResult.success(f"No profile at {profile_path}")
    r = executor.execute(["rm", "-f", profile_path], elevate=True, check=False)
    if not r.ok:
        return StepResult.warning(f"Could not remove profile {profile_path}")
    return StepResult.success(f"Removed {profile_path}")
