"""Unit tests for the Notes adapter."""

import sys
import unittest
from pathlib import Path

cli_dir = Path(__file__).resolve().parents[1]
if str(cli_dir) not in sys.path:
    sys.path.insert(0, str(cli_dir))

from fakes import FakeExecutor

from applebridge.adapters import Note, NotesAdapter
from applebridge.bridge import ScriptBuilder, OPERATIONS
from applebridge.bridge.results import ExecutionResult, Failed, FailureKind, Found, NotFound


class TestNotesAdapter(unittest.TestCase):

    def setUp(self):
        self.executor = FakeExecutor()
        self.notes = NotesAdapter(ScriptBuilder(OPERATIONS), self.executor)

    def test_list_decodes_records_in_order(self):
        self.executor.queue_records(("n1", "Groceries", "milk, eggs"), ("n2", "Ideas", "a|b"))

        result = self.notes.list_notes()

        self.assertIsInstance(result, Found)
        self.assertEqual(result.records, (
            Note("n1", "Groceries", "milk, eggs"),
            Note("n2", "Ideas", "a|b"),
        ))

    def test_empty_output_is_not_found(self):
        result = self.notes.search_notes("nothing")

        self.assertIsInstance(result, NotFound)
        self.assertEqual(result.records, ())

    def test_get_returns_first_match(self):
        self.executor.queue_records(("n1", "Groceries", "milk"))

        result = self.notes.get_note("Groceries")

        self.assertEqual(result.first.body, "milk")
        self.assertEqual(self.executor.last.args, ("Groceries",))

    def test_create_then_get(self):
        self.executor.queue_records(("n9", "Trip", "Pack: passport, charger"))
        self.executor.queue_records(("n9", "Trip", "Pack: passport, charger"))

        created = self.notes.create_note("Trip", "Pack: passport, charger")
        fetched = self.notes.get_note("Trip")

        self.assertTrue(created.found)
        self.assertEqual(fetched.first, created.first)
        self.assertEqual(self.executor.scripts[0].args, ("Trip", "Pack: passport, charger"))

    def test_create_with_empty_body_sends_one_argument(self):
        self.executor.queue_records(("n3", "Blank", ""))

        self.notes.create_note("Blank")

        self.assertEqual(self.executor.last.args, ("Blank",))

    def test_edit_missing_note_is_not_found(self):
        result = self.notes.edit_note("Nope", "new text")

        self.assertIsInstance(result, NotFound)

    def test_delete_returns_deleted_record(self):
        self.executor.queue_records(("n1", "Groceries", ""))

        result = self.notes.delete_note("Groceries")

        self.assertEqual(result.first.title, "Groceries")
        self.assertEqual(self.executor.last.operation, "notes_delete")

    def test_process_failure_is_failed(self):
        self.executor.queue_failure(FailureKind.PROCESS_ERROR, "Notes got an error", exit_code=1)

        result = self.notes.list_notes()

        self.assertIsInstance(result, Failed)
        self.assertFalse(result.ok)
        self.assertEqual(result.kind, FailureKind.PROCESS_ERROR)

    def test_short_record_is_malformed(self):
        self.executor.results.append(ExecutionResult(output="n1|||Groceries"))

        result = self.notes.list_notes()

        self.assertEqual(result.kind, FailureKind.MALFORMED_RECORD)

    def test_empty_title_is_rejected_before_spawning(self):
        result = self.notes.get_note("")

        self.assertEqual(result.kind, FailureKind.INVALID_INPUT)
        self.assertEqual(self.executor.scripts, [])

    def test_warnings_are_carried(self):
        self.executor.queue_records(("n1", "Groceries", "milk"), warnings=["deprecated term"])

        result = self.notes.list_notes()

        self.assertEqual(result.warnings, ("deprecated term",))


if __name__ == "__main__":
    unittest.main()
