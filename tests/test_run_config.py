import tempfile
import unittest
from pathlib import Path

from g810_setup.errors import ConfigError
from g810_setup.lib.env import PATHS, REPO_URL, SERVICE_UNIT
from g810_setup.run_config import build_run_config, load_settings

SETTINGS = """\
repo_url: https://example.invalid/g810-led.git
repo_dir: /opt/src/g810-led
service_unit: g810-led
keyboard:
  all_keys: "202020"
  fkeys: ff00ff
  profile_path: /tmp/g810/profile
  groups:
    logo: "0000ff"
"""


class LoadSettingsTests(unittest.TestCase):
    def test_missing_optional_file_is_empty(self):
        self.assertEqual(load_settings("/nonexistent/config.yaml"), {})

    def test_missing_required_file_is_an_error(self):
        with self.assertRaises(ConfigError):
            load_settings("/nonexistent/config.yaml", required=True)

    def test_top_level_must_be_a_mapping(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "config.yaml"
            path.write_text("- a\n- b\n", encoding="utf-8")
            with self.assertRaises(ConfigError):
                load_settings(str(path))

    def test_invalid_yaml_is_an_error(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "config.yaml"
            path.write_text("keyboard: [unclosed\n", encoding="utf-8")
            with self.assertRaises(ConfigError):
                load_settings(str(path))


class BuildRunConfigTests(unittest.TestCase):
    def test_defaults(self):
        cfg = build_run_config()
        self.assertFalse(cfg.dry_run)
        self.assertFalse(cfg.uninstall)
        self.assertEqual(cfg.repo_url, REPO_URL)
        self.assertEqual(cfg.repo_dir, PATHS.repo_default)
        self.assertEqual(cfg.service_unit, SERVICE_UNIT)
        self.assertEqual(cfg.keyboard.all_keys_color, "909090")

    def test_settings_file_values(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "config.yaml"
            path.write_text(SETTINGS, encoding="utf-8")
            cfg = build_run_config(settings=load_settings(str(path)))

        self.assertEqual(cfg.repo_url, "https://example.invalid/g810-led.git")
        self.assertEqual(cfg.repo_dir, "/opt/src/g810-led")
        self.assertEqual(cfg.service_unit, "g810-led")
        self.assertEqual(cfg.keyboard.all_keys_color, "202020")
        self.assertEqual(cfg.keyboard.fkeys_color, "ff00ff")
        self.assertEqual(cfg.keyboard.profile_path, "/tmp/g810/profile")
        self.assertEqual(dict(cfg.keyboard.groups), {"logo": "0000ff"})

    def test_command_line_wins_over_settings(self):
        cfg = build_run_config(dry_run=True, repo_dir="/tmp/checkout", settings={"repo_dir": "/opt/src"})
        self.assertTrue(cfg.dry_run)
        self.assertEqual(cfg.repo_dir, "/tmp/checkout")

    def test_bad_keyboard_section(self):
        with self.assertRaises(ConfigError):
            build_run_config(settings={"keyboard": ["a", "b"]})
        with self.assertRaises(ConfigError):
            build_run_config(settings={"keyboard": {"fkeys": "green"}})

    def test_fkeys_group_is_rejected(self):
        with self.assertRaises(ConfigError) as cm:
            build_run_config(settings={"keyboard": {"groups": {"fkeys": "ff0000"}}})
        self.assertIn("keyboard.fkeys", str(cm.exception))

    def test_unquoted_color_with_leading_zero(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "config.yaml"
            path.write_text("keyboard:\n  all_keys: 001100\n", encoding="utf-8")
            with self.assertRaises(ConfigError) as cm:
                build_run_config(settings=load_settings(str(path)))
        self.assertIn("quote the color in YAML", str(cm.exception))

    def test_unquoted_digit_color_without_leading_zero_is_accepted(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "config.yaml"
            path.write_text("keyboard:\n  all_keys: 909090\n", encoding="utf-8")
            cfg = build_run_config(settings=load_settings(str(path)))
        self.assertEqual(cfg.keyboard.all_keys_color, "909090")

    def test_config_is_immutable(self):
        cfg = build_run_config()
        with self.assertRaises(Exception):
            cfg.dry_run = True


if __name__ == "__main__":
    unittest.main()
