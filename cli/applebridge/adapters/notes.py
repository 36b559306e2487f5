"""
🗒️ Notes Adapter
Apple Notes: list, search, get, create, edit and delete notes.
"""

from dataclasses import asdict, dataclass

from ..bridge.results import BridgeResult
from .base import BaseAdapter, RecordLayout

NOTE_LAYOUT = RecordLayout("note", ("id", "title", "body"))


@dataclass(frozen=True)
class Note:
    id: str
    title: str
    body: str

    def to_dict(self) -> dict:
        return asdict(self)


def _note(fields: dict[str, str]) -> Note:
    return Note(**fields)


class NotesAdapter(BaseAdapter):
    application = "Notes"

    def list_notes(self) -> BridgeResult:
        return self._call("notes_list", None, NOTE_LAYOUT, _note)

    def search_notes(self, query: str) -> BridgeResult:
        """Notes whose title or body contains `query` (case-insensitive)."""
        return self._call("notes_search", {"query": query}, NOTE_LAYOUT, _note)

    def get_note(self, title: str) -> BridgeResult:
        """First note whose title equals `title`."""
        return self._call("notes_get", {"title": title}, NOTE_LAYOUT, _note)

    def create_note(self, title: str, body: str = "") -> BridgeResult:
        return self._call("notes_create", {"title": title, "body": body}, NOTE_LAYOUT, _note)

    def edit_note(self, title: str, new_body: str) -> BridgeResult:
        return self._call("notes_edit", {"title": title, "new_body": new_body}, NOTE_LAYOUT, _note)

    def delete_note(self, title: str) -> BridgeResult:
        return self._call("notes_delete", {"title": title}, NOTE_LAYOUT, _note)
