from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError
from .lib.env import PATHS, REPO_URL, SERVICE_UNIT
from .lib.profile import KeyboardSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunConfig:
    """Everything a run needs, fixed once the command line is parsed."""

    dry_run: bool = False
    uninstall: bool = False
    log_path: str = PATHS.log_default
    repo_dir: str = PATHS.repo_default
    repo_url: str = REPO_URL
    os_release_path: str = PATHS.os_release
    service_unit: str = SERVICE_UNIT
    keyboard: KeyboardSettings = field(default_factory=KeyboardSettings)


def load_settings(path: str, *, required: bool = False) -> Dict[str, Any]:
    """Load the optional YAML settings file.

    A missing file is fine unless it was asked for explicitly.
    """

    p = Path(path)
    if not p.exists():
        if required:
            raise ConfigError(f"Settings file not found: {path}")
        return {}

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read settings file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a mapping/object")
    return raw


def _keyboard_settings(raw: Dict[str, Any]) -> KeyboardSettings:
    kb = raw.get("keyboard") or {}
    if not isinstance(kb, dict):
        raise ConfigError("keyboard settings must be a mapping/object")
    groups = kb.get("groups") or {}
    if not isinstance(groups, dict):
        raise ConfigError("keyboard.groups must map group names to colors")

    defaults = KeyboardSettings()
    return KeyboardSettings(
        all_keys_color=kb.get("all_keys", defaults.all_keys_color),
        fkeys_color=kb.get("fkeys", defaults.fkeys_color),
        groups=groups,
        profile_path=str(kb.get("profile_path") or defaults.profile_path),
    )


def build_run_config(
    *,
    dry_run: bool = False,
    uninstall: bool = False,
    log_path: Optional[str] = None,
    repo_dir: Optional[str] = None,
    settings: Optional[Dict[str, Any]] = None,
) -> RunConfig:
    """Merge command-line values over the settings file over built-in defaults."""

    raw = settings or {}
    return RunConfig(
        dry_run=dry_run,
        uninstall=uninstall,
        log_path=log_path or PATHS.log_default,
        repo_dir=repo_dir or str(raw.get("repo_dir") or PATHS.repo_default),
        repo_url=str(raw.get("repo_url") or REPO_URL),
        os_release_path=str(raw.get("os_release_path") or PATHS.os_release),
        service_unit=str(raw.get("service_unit") or SERVICE_UNIT),
        keyboard=_keyboard_settings(raw),
    )
