"""Unit tests for the tool surface: registry, gateway and executor."""

import json
import sys
import unittest
from datetime import datetime
from pathlib import Path

cli_dir = Path(__file__).resolve().parents[1]
if str(cli_dir) not in sys.path:
    sys.path.insert(0, str(cli_dir))

from fakes import FakeExecutor

from applebridge.bridge import Bridge
from applebridge.bridge.results import FailureKind
from applebridge.tools import (
    ALL_TOOLS,
    CATEGORY_TOOL_MAP,
    ExecutionGateway,
    NotesListTool,
    TOOL_BY_NAME,
    ToolExecutor,
    get_tools_for_categories,
)
from applebridge.tools.registry import ToolRegistry

NOW = datetime(2024, 3, 1, 9, 0, 0)

EXPECTED_TOOLS = {
    "notes_list", "notes_search", "notes_get", "notes_create", "notes_edit", "notes_delete",
    "calendar_list_calendars", "calendar_list_events", "calendar_search_events",
    "calendar_today_events", "calendar_get_event", "calendar_create_event", "calendar_delete_event",
    "contacts_list", "contacts_search", "contacts_get", "contacts_create", "contacts_delete",
}


class ExplodingExecutor:
    def run(self, script):
        raise RuntimeError("boom")


class TestToolRegistry(unittest.TestCase):

    def test_all_tools_are_registered(self):
        names = {t["function"]["name"] for t in ALL_TOOLS}

        self.assertEqual(names, EXPECTED_TOOLS)

    def test_categories(self):
        self.assertEqual(set(CATEGORY_TOOL_MAP), {"NOTES", "CALENDAR", "CONTACTS"})
        self.assertEqual(len(CATEGORY_TOOL_MAP["CALENDAR"]), 7)
        self.assertEqual(len(get_tools_for_categories(["notes"])), 6)

    def test_duplicate_registration_is_rejected(self):
        registry = ToolRegistry()
        registry.register(NotesListTool)

        with self.assertRaises(ValueError):
            registry.register(NotesListTool)

    def test_schemas_are_objects(self):
        for tool in ALL_TOOLS:
            with self.subTest(tool=tool["function"]["name"]):
                self.assertEqual(tool["type"], "function")
                self.assertEqual(tool["function"]["parameters"]["type"], "object")


class TestExecutionGateway(unittest.TestCase):

    def setUp(self):
        self.gateway = ExecutionGateway()

    def test_unknown_tool(self):
        ok, _, error = self.gateway.validate_and_resolve("notes_archive", {})

        self.assertFalse(ok)
        self.assertIn("not found", error)

    def test_missing_required_field(self):
        ok, _, error = self.gateway.validate_and_resolve("notes_get", {})

        self.assertFalse(ok)
        self.assertIn("'title'", error)

    def test_unknown_field(self):
        ok, _, error = self.gateway.validate_and_resolve("notes_get", {"title": "x", "folder": "y"})

        self.assertFalse(ok)
        self.assertIn("folder", error)

    def test_wrong_string_type(self):
        ok, _, _ = self.gateway.validate_and_resolve("notes_get", {"title": 42})

        self.assertFalse(ok)

    def test_defaults_and_integer_coercion(self):
        ok, args, _ = self.gateway.validate_and_resolve("calendar_list_events", {"days": "3"})

        self.assertTrue(ok)
        self.assertEqual(args, {"days": 3})

        ok, args, _ = self.gateway.validate_and_resolve("calendar_search_events", {"query": "stand"})
        self.assertEqual(args, {"query": "stand", "days": 90})

    def test_fractional_days_are_rejected(self):
        ok, _, error = self.gateway.validate_and_resolve("calendar_list_events", {"days": 7.9})

        self.assertFalse(ok)
        self.assertIn("integer", error)

    def test_whole_float_and_bool_days(self):
        ok, args, _ = self.gateway.validate_and_resolve("calendar_list_events", {"days": 7.0})
        self.assertTrue(ok)
        self.assertEqual(args["days"], 7)

        ok, _, _ = self.gateway.validate_and_resolve("calendar_list_events", {"days": True})
        self.assertFalse(ok)

    def test_non_integer_days(self):
        ok, _, error = self.gateway.validate_and_resolve("calendar_list_events", {"days": "soon"})

        self.assertFalse(ok)
        self.assertIn("integer", error)


class TestToolExecutor(unittest.TestCase):

    def setUp(self):
        self.fake = FakeExecutor()
        self.bridge = Bridge(self.fake, default_calendar="Work", clock=lambda: NOW)
        self.tools = ToolExecutor(self.bridge)

    def test_tool_names(self):
        self.assertEqual(set(self.tools.tool_names), EXPECTED_TOOLS)

    def test_found_note_is_json(self):
        self.fake.queue_records(("n1", "Groceries", "milk"))

        output = self.tools.execute("notes_get", {"title": "Groceries"})

        self.assertEqual(json.loads(output), {"id": "n1", "title": "Groceries", "body": "milk"})

    def test_missing_note_message(self):
        output = self.tools.execute("notes_get", {"title": "Groceries"})

        self.assertEqual(output, "Note not found: Groceries")

    def test_failure_is_error_text(self):
        self.fake.queue_failure(FailureKind.TIMEOUT, "Notes did not answer within 30 seconds")

        output = self.tools.execute("notes_list")

        self.assertTrue(output.startswith("Error:"))
        self.assertIn("timeout", output)

    def test_validation_error_is_returned_not_raised(self):
        output = self.tools.execute("notes_get", {})

        self.assertTrue(output.startswith("Error:"))

    def test_unexpected_exception_is_returned_not_raised(self):
        tools = ToolExecutor(Bridge(ExplodingExecutor(), default_calendar="Work"))

        output = tools.execute("notes_list")

        self.assertEqual(output, "Error: boom")

    def test_list_calendars_joins_names(self):
        self.fake.queue_records(("Work",), ("Home",))

        self.assertEqual(self.tools.execute("calendar_list_calendars"), "Work, Home")

    def test_list_calendars_keeps_warnings(self):
        self.fake.queue_records(("Work",), ("Home",), warnings=["deprecated term"])

        output = self.tools.execute("calendar_list_calendars")

        self.assertTrue(output.startswith("Work, Home"))
        self.assertIn("deprecated term", output)

    def test_today_events_describes_whole_day(self):
        description = TOOL_BY_NAME["calendar_today_events"]["function"]["description"]

        self.assertIn("midnight", description)
        self.assertIn("earlier today", description)

    def test_list_events_uses_default_days_and_calendar(self):
        self.tools.execute("calendar_list_events", {})

        self.assertEqual(self.fake.last.args, ("Work", "iso:2024-03-01T09:00:00", "iso:2024-03-08T09:00:00"))

    def test_create_event_confirms(self):
        self.fake.queue_records(("Standup", "2024-03-01T10:00:00", "2024-03-01T10:15:00", "Work"))

        output = self.tools.execute("calendar_create_event", {
            "title": "Standup",
            "start_date": "2024-03-01T10:00:00",
            "end_date": "2024-03-01T10:15:00",
        })

        self.assertEqual(output, "✅ Event created: Standup")

    def test_contact_create_missing_is_failure(self):
        output = self.tools.execute("contacts_create", {"name": "Jane Doe"})

        self.assertEqual(output, "Failed to create contact.")

    def test_warnings_are_appended(self):
        self.fake.queue_records(("n1", "Groceries", ""), warnings=["deprecated term"])

        output = self.tools.execute("notes_delete", {"title": "Groceries"})

        self.assertTrue(output.startswith("✅ Note deleted: Groceries"))
        self.assertIn("deprecated term", output)

    def test_status_callback_receives_progress(self):
        messages = []
        tools = ToolExecutor(self.bridge, status_callback=messages.append)

        tools.execute("contacts_list")

        self.assertTrue(any("contacts" in m for m in messages))


if __name__ == "__main__":
    unittest.main()
