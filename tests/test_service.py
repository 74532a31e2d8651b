import unittest
from unittest.mock import Mock, patch

from g810_setup.lib.command import CmdResult
from g810_setup.lib.service import ensure_disabled, ensure_enabled

from ._fakes import RecordingExecutor

UNIT = "g810-led-reboot"


def _probe(returncode):
    return CmdResult(argv=["systemctl", "is-enabled", UNIT], returncode=returncode, stdout="", stderr="")


class EnsureEnabledTests(unittest.TestCase):
    def test_missing_systemctl_is_a_warning(self):
        executor = RecordingExecutor()
        with patch("g810_setup.lib.service.cmd_exists", return_value=False):
            result = ensure_enabled(executor, UNIT)
        self.assertEqual(result.severity.value, "warning")
        self.assertEqual(executor.calls, [])

    def test_already_enabled_is_not_enabled_again(self):
        executor = RecordingExecutor()
        with patch("g810_setup.lib.service.cmd_exists", return_value=True):
            with patch("g810_setup.lib.service.probe_cmd", return_value=_probe(0)):
                result = ensure_enabled(executor, UNIT)
        self.assertTrue(result.ok)
        self.assertEqual(executor.calls, [])

    def test_enables_after_reload(self):
        executor = RecordingExecutor()
        with patch("g810_setup.lib.service.cmd_exists", return_value=True):
            with patch("g810_setup.lib.service.probe_cmd", return_value=_probe(1)):
                result = ensure_enabled(executor, UNIT)
        self.assertTrue(result.ok)
        self.assertEqual(executor.commands, ["sudo systemctl daemon-reload", f"sudo systemctl enable {UNIT}"])

    def test_enable_failure_is_a_warning(self):
        executor = RecordingExecutor(fail=[("sudo", "systemctl", "enable")])
        with patch("g810_setup.lib.service.cmd_exists", return_value=True):
            with patch("g810_setup.lib.service.probe_cmd", return_value=_probe(1)):
                result = ensure_enabled(executor, UNIT)
        self.assertEqual(result.severity.value, "warning")

    def test_enabled_check_reaches_the_log(self):
        executor = RecordingExecutor()
        completed = Mock(returncode=0, stdout="enabled\n", stderr="")
        with patch("g810_setup.lib.service.cmd_exists", return_value=True):
            with patch("g810_setup.lib.command.subprocess.run", return_value=completed):
                with self.assertLogs("g810_setup", level="INFO") as cm:
                    result = ensure_enabled(executor, UNIT)
        self.assertTrue(result.ok)
        self.assertTrue(any(f"PROBE systemctl is-enabled {UNIT}" in line for line in cm.output))
        self.assertEqual(executor.calls, [])


class EnsureDisabledTests(unittest.TestCase):
    def test_disables_enabled_unit(self):
        executor = RecordingExecutor()
        with patch("g810_setup.lib.service.cmd_exists", return_value=True):
            with patch("g810_setup.lib.service.probe_cmd", return_value=_probe(0)):
                result = ensure_disabled(executor, UNIT)
        self.assertTrue(result.ok)
        self.assertEqual(executor.commands, [f"sudo systemctl disable {UNIT}", "sudo systemctl daemon-reload"])

    def test_already_disabled(self):
        executor = RecordingExecutor()
        with patch("g810_setup.lib.service.cmd_exists", return_value=True):
            with patch("g810_setup.lib.service.probe_cmd", return_value=_probe(1)):
                self.assertTrue(ensure_disabled(executor, UNIT).ok)
        self.assertEqual(executor.calls, [])


if __name__ == "__main__":
    unittest.main()
