import tempfile
import unittest
from pathlib import Path

from g810_setup.lib.distro import (
    UNKNOWN_PLATFORM,
    PackageManager,
    PlatformId,
    PlatformProfile,
    detect,
    detect_from_text,
    validate,
)

CACHYOS = 'NAME="CachyOS Linux"\nPRETTY_NAME="CachyOS"\nID=cachyos\nID_LIKE=arch\n'
ARCH = 'NAME="Arch Linux"\nPRETTY_NAME="Arch Linux"\nID=arch\nBUILD_ID=rolling\n'
UBUNTU = 'NAME="Ubuntu"\nVERSION_ID="24.04"\nID=ubuntu\nID_LIKE=debian\n'
DEBIAN = 'PRETTY_NAME="Debian GNU/Linux 12 (bookworm)"\nNAME="Debian GNU/Linux"\nID=debian\n'
FEDORA = 'NAME="Fedora Linux"\nID=fedora\n'
MANJARO = 'NAME="Manjaro Linux"\nID=manjaro\nID_LIKE=arch\n'


class DetectFromTextTests(unittest.TestCase):
    def test_supported_identities_map_to_exact_profiles(self):
        cases = {
            CACHYOS: (PlatformId.CACHYOS, PackageManager.PACMAN),
            ARCH: (PlatformId.ARCH, PackageManager.PACMAN),
            UBUNTU: (PlatformId.UBUNTU, PackageManager.APT),
            DEBIAN: (PlatformId.DEBIAN, PackageManager.APT),
        }
        for text, (platform_id, manager) in cases.items():
            with self.subTest(platform=platform_id):
                self.assertEqual(detect_from_text(text), PlatformProfile(platform_id, manager))

    def test_cachyos_wins_over_its_arch_id_like(self):
        self.assertEqual(detect_from_text(CACHYOS).platform_id, PlatformId.CACHYOS)

    def test_ubuntu_wins_over_its_debian_id_like(self):
        self.assertEqual(detect_from_text(UBUNTU).platform_id, PlatformId.UBUNTU)

    def test_quoted_arch_id_is_recognized(self):
        self.assertEqual(detect_from_text('ID="arch"\n').platform_id, PlatformId.ARCH)

    def test_arch_derivatives_without_exact_id_are_unknown(self):
        self.assertEqual(detect_from_text(MANJARO), UNKNOWN_PLATFORM)

    def test_unrelated_distribution_is_unknown(self):
        profile = detect_from_text(FEDORA)
        self.assertEqual(profile.platform_id, PlatformId.UNKNOWN)
        self.assertEqual(profile.package_manager, PackageManager.UNKNOWN)


class DetectFileTests(unittest.TestCase):
    def test_detect_reads_identity_file(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "os-release"
            path.write_text(ARCH, encoding="utf-8")
            self.assertEqual(str(detect(str(path))), "arch/pacman")

    def test_missing_identity_file_is_unknown(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertLogs("g810_setup.lib.distro", level="WARNING"):
                profile = detect(str(Path(temp_dir) / "missing"))
            self.assertEqual(profile, UNKNOWN_PLATFORM)


class ValidateTests(unittest.TestCase):
    def test_unknown_platform_is_fatal(self):
        result = validate(UNKNOWN_PLATFORM)
        self.assertTrue(result.fatal)
        self.assertIn("Unsupported distribution", result.message)

    def test_known_platforms_validate(self):
        for text in (CACHYOS, ARCH, UBUNTU, DEBIAN):
            with self.subTest(text=text.splitlines()[0]):
                result = validate(detect_from_text(text))
                self.assertTrue(result.ok)
                self.assertTrue(result.message.startswith("Detected "))


if __name__ == "__main__":
    unittest.main()
