from __future__ import annotations

from typing import Any, Dict

from ..errors import ProvisioningError
from ..lib.distro import PlatformProfile


def platform_from_state(state: Dict[str, Any]) -> PlatformProfile:
    platform = state.get("platform")
    if not isinstance(platform, PlatformProfile):
        raise ProvisioningError("Platform not detected; run the detection step first")
    return platform
