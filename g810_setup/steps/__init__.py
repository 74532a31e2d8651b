from .step_10_detect_platform import DetectPlatformStep
from .step_15_validate_platform import ValidatePlatformStep
from .step_20_check_dependencies import CheckDependenciesStep
from .step_30_verify_access import VerifyAccessStep
from .step_35_disable_service import DisableServiceStep
from .step_40_install_software import InstallSoftwareStep
from .step_45_remove_software import RemoveSoftwareStep
from .step_50_list_keyboards import ListKeyboardsStep
from .step_55_check_keyboard import KeyboardCheckStep
from .step_60_write_profile import WriteProfileStep
from .step_65_remove_profile import RemoveProfileStep
from .step_70_load_profile import LoadProfileStep
from .step_80_enable_service import EnableServiceStep
from .step_90_summary import SummaryStep

__all__ = [
    "DetectPlatformStep",
    "ValidatePlatformStep",
    "CheckDependenciesStep",
    "VerifyAccessStep",
    "DisableServiceStep",
    "InstallSoftwareStep",
    "RemoveSoftwareStep",
    "ListKeyboardsStep",
    "KeyboardCheckStep",
    "WriteProfileStep",
    "RemoveProfileStep",
    "LoadProfileStep",
    "EnableServiceStep",
    "SummaryStep",
]
