from __future__ import annotations

import os
from dataclasses import dataclass, field


def _home() -> str:
    return os.environ.get("HOME") or "/tmp"


@dataclass(frozen=True)
class Paths:
    os_release: str = "/etc/os-release"
    keyboard_profile: str = "/etc/g810-led/profile"
    settings_default: str = "/etc/g810-setup/config.yaml"
    log_default: str = field(default_factory=lambda: os.path.join(_home(), "log", "g810-led-install.log"))
    repo_default: str = field(default_factory=lambda: os.path.join(_home(), "github", "g810-led"))


PATHS = Paths()

REPO_URL = "https://github.com/MatMoul/g810-led"
REPO_BRANCH = "master"
SERVICE_UNIT = "g810-led-reboot"
KEYBOARD_TOOL = "g810-led"
APT_PACKAGE = "g810-led"
BUILD_DEPENDENCIES = ("hidapi", "git", "gcc", "make")
