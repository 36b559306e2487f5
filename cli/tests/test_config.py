"""Unit tests for configuration and bridge wiring."""

import json
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

cli_dir = Path(__file__).resolve().parents[1]
if str(cli_dir) not in sys.path:
    sys.path.insert(0, str(cli_dir))

from applebridge.bridge import Bridge
from applebridge.config import ENV_OVERRIDES, ConfigManager
from applebridge.errors import ConfigError

CLEAN_ENV = {k: v for k, v in os.environ.items() if k not in ENV_OVERRIDES}


class TestConfigManager(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.config_file = Path(self.tmp.name) / "config.json"

    def tearDown(self):
        self.tmp.cleanup()

    def _config(self, **env):
        with patch.dict(os.environ, dict(CLEAN_ENV, **env), clear=True):
            return ConfigManager(config_file=self.config_file, use_dotenv=False)

    def test_defaults(self):
        config = self._config()

        self.assertEqual(config.osascript_path, "osascript")
        self.assertEqual(config.script_timeout, 30.0)
        self.assertEqual(config.stderr_policy, "warn")
        self.assertFalse(config.trace_enabled)
        self.assertFalse(config.is_configured())

    def test_missing_calendar_name_is_fatal(self):
        config = self._config()

        with self.assertRaises(ConfigError) as ctx:
            config.require_calendar_name()

        self.assertEqual(ctx.exception.key, "calendar_name")
        self.assertIn("APPLE_CALENDAR_NAME", str(ctx.exception))

    def test_bridge_refuses_to_start_without_calendar(self):
        with self.assertRaises(ConfigError):
            Bridge.from_config(self._config())

    def test_environment_overrides_file(self):
        self.config_file.write_text(json.dumps({"calendar_name": "Home"}))

        config = self._config(APPLE_CALENDAR_NAME="Work", APPLEBRIDGE_STDERR_POLICY="FAIL")

        self.assertEqual(config.require_calendar_name(), "Work")
        self.assertEqual(config.stderr_policy, "fail")

    def test_invalid_values_fall_back(self):
        config = self._config(APPLEBRIDGE_SCRIPT_TIMEOUT="soon", APPLEBRIDGE_STDERR_POLICY="ignore")

        self.assertEqual(config.script_timeout, 30.0)
        self.assertEqual(config.stderr_policy, "warn")

    def test_trace_flag_from_env(self):
        self.assertTrue(self._config(APPLEBRIDGE_TRACE="yes").trace_enabled)
        self.assertFalse(self._config(APPLEBRIDGE_TRACE="no").trace_enabled)

    def test_set_persists(self):
        config = self._config()
        config.set("calendar_name", "Family")

        reloaded = self._config()

        self.assertEqual(reloaded.calendar_name, "Family")
        self.assertEqual(json.loads(self.config_file.read_text())["calendar_name"], "Family")

    def test_corrupt_file_is_ignored(self):
        self.config_file.write_text("{not json")

        config = self._config()

        self.assertEqual(config.osascript_path, "osascript")

    def test_bridge_from_config(self):
        config = self._config(
            APPLE_CALENDAR_NAME="Work",
            APPLEBRIDGE_OSASCRIPT="/usr/bin/osascript",
            APPLEBRIDGE_SCRIPT_TIMEOUT="12.5",
        )

        bridge = Bridge.from_config(config)

        self.assertEqual(bridge.calendar.default_calendar, "Work")
        self.assertEqual(bridge.executor.interpreter, "/usr/bin/osascript")
        self.assertEqual(bridge.executor.timeout, 12.5)
        self.assertIs(bridge.notes.builder, bridge.builder)


if __name__ == "__main__":
    unittest.main()
