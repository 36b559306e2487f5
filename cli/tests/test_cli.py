"""Tests for trace logging and the click command line."""

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

from click.testing import CliRunner

from applebridge import main as cli_main
from applebridge.config import ENV_OVERRIDES, ConfigManager
from applebridge.tracing import (
    BridgeTraceLogger,
    event_style,
    find_latest_trace_file,
    format_trace_text,
    load_trace_events,
    summarize_trace,
)

CLEAN_ENV = {k: v for k, v in os.environ.items() if k not in ENV_OVERRIDES}


class TestBridgeTraceLogger(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.traces_dir = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_disabled_logger_writes_nothing(self):
        logger = BridgeTraceLogger(enabled=False, session_id="abc", traces_dir=self.traces_dir)
        logger.log("script_started", {"operation": "notes_list"})

        self.assertIsNone(logger.file_path)
        self.assertIsNone(find_latest_trace_file(self.traces_dir))

    def test_events_round_trip_through_jsonl(self):
        logger = BridgeTraceLogger(enabled=True, session_id="abc", traces_dir=self.traces_dir)
        logger.log("script_started", {"operation": "notes_list", "args": ("a", "b")})
        logger.close({"tool": "notes_list"})

        path = find_latest_trace_file(self.traces_dir)
        events = load_trace_events(path)

        self.assertEqual(path, logger.file_path)
        self.assertEqual([e["event"] for e in events], ["trace_started", "script_started", "trace_finished"])
        self.assertEqual(events[1]["data"]["args"], ["a", "b"])

    def test_malformed_lines_are_kept(self):
        path = self.traces_dir / "broken.jsonl"
        path.write_text('{"event": "script_started", "data": {}}\nnot json\n')

        events = load_trace_events(path)

        self.assertEqual(events[1]["event"], "malformed_line")

    def test_plain_timeline(self):
        events = [
            {"event": "script_started", "elapsed_ms": 3, "data": {"operation": "notes_get", "application": "Notes", "arg_count": 1}},
            {"event": "script_failed", "elapsed_ms": 9, "data": {"operation": "notes_get", "kind": "timeout", "detail": "no answer"}},
        ]

        text = format_trace_text(events)

        self.assertIn("1 scripts, 1 failed", text)
        self.assertIn("[1] +3ms  script_started  notes_get in Notes (1 args)", text)
        self.assertIn("notes_get: timeout: no answer", text)

    def test_close_records_script_counters(self):
        logger = BridgeTraceLogger(enabled=True, session_id="abc", traces_dir=self.traces_dir)
        logger.log("script_started", {"operation": "notes_get"})
        logger.log("script_failed", {"operation": "notes_get", "kind": "timeout"})
        logger.close({"tool": "notes_get"})

        finished = load_trace_events(logger.file_path)[-1]

        self.assertEqual(finished["event"], "trace_finished")
        self.assertEqual(finished["data"], {"scripts": 1, "failures": 1, "warnings": 0, "tool": "notes_get"})

    def test_summary_groups_failures_by_operation(self):
        events = [
            {"event": "script_started", "data": {"operation": "contacts_get"}},
            {"event": "script_failed", "data": {"operation": "contacts_get", "kind": "process_error"}},
            {"event": "tool_called", "data": {"tool": "contacts_get"}},
        ]

        summary = summarize_trace(events)

        self.assertEqual(summary["scripts"], 1)
        self.assertEqual(summary["failed_operations"], {"contacts_get": ["process_error"]})

    def test_event_styles(self):
        self.assertEqual(event_style("script_failed")[1], "error")
        self.assertEqual(event_style("script_warning")[1], "warning")


class TestCommandLine(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.config_file = Path(self.tmp.name) / "config.json"
        self.runner = CliRunner()

    def tearDown(self):
        self.tmp.cleanup()

    def _invoke(self, args, **env):
        def make_config():
            return ConfigManager(config_file=self.config_file, use_dotenv=False)

        with patch.dict(os.environ, dict(CLEAN_ENV, **env), clear=True), \
                patch.object(cli_main, "ConfigManager", make_config):
            return self.runner.invoke(cli_main.cli, args)

    def test_tools_lists_every_tool(self):
        result = self._invoke(["tools"])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("Total 18 tools", result.output)

    def test_unknown_tool(self):
        result = self._invoke(["call", "notes_archive"])

        self.assertEqual(result.exit_code, 2)

    def test_call_without_calendar_exits(self):
        result = self._invoke(["call", "notes_list"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("APPLE_CALENDAR_NAME", result.output)

    def test_bad_argument_pair(self):
        result = self._invoke(["call", "notes_get", "-a", "title"], APPLE_CALENDAR_NAME="Work")

        self.assertNotEqual(result.exit_code, 0)
        self.assertIn("key=value", result.output)

    def test_config_set_persists(self):
        result = self._invoke(["config", "--set", "calendar_name", "Work"])

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(json.loads(self.config_file.read_text())["calendar_name"], "Work")


if __name__ == "__main__":
    unittest.main()
