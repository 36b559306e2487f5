"""
🗒️ Notes Tools
Apple Notes operations exposed to the agent.
"""

from typing import Any, Dict

from ..base import BaseTool


class NotesListTool(BaseTool):
    @property
    def name(self) -> str:
        return "notes_list"

    @property
    def description(self) -> str:
        return "List all notes in Apple Notes with their id, title and body."

    @property
    def category(self) -> str:
        return "NOTES"

    @property
    def parameters(self) -> Dict[str, Any]:
        return {"type": "object", "properties": {}, "required": []}

    def execute(self) -> str:
        self._emit("🗒️ Listing notes...")
        return self._render_records(self.bridge.notes.list_notes(), "No notes found.")


class NotesSearchTool(BaseTool):
    @property
    def name(self) -> str:
        return "notes_search"

    @property
    def description(self) -> str:
        return "Search notes in Apple Notes. Matches the query against title and body, case-insensitively."

    @property
    def category(self) -> str:
        return "NOTES"

    @property
    def parameters(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Search query string"},
            },
            "required": ["query"],
        }

    def execute(self, query: str) -> str:
        self._emit(f"🔎 Searching notes for '{query}'...")
        return self._render_records(self.bridge.notes.search_notes(query), "No matching notes found.")


class NotesGetTool(BaseTool):
    @property
    def name(self) -> str:
        return "notes_get"

    @property
    def description(self) -> str:
        return "Get the content of the note whose title exactly matches the given title."

    @property
    def category(self) -> str:
        return "NOTES"

    @property
    def parameters(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "Title of the note to retrieve"},
            },
            "required": ["title"],
        }

    def execute(self, title: str) -> str:
        self._emit(f"🗒️ Reading note '{title}'...")
        return self._render_records(self.bridge.notes.get_note(title), f"Note not found: {title}", single=True)


class NotesCreateTool(BaseTool):
    @property
    def name(self) -> str:
        return "notes_create"

    @property
    def description(self) -> str:
        return "Create a new note in Apple Notes."

    @property
    def category(self) -> str:
        return "NOTES"

    @property
    def parameters(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "Title of the note"},
                "body": {"type": "string", "description": "Body content of the note", "default": ""},
            },
            "required": ["title"],
        }

    def execute(self, title: str, body: str = "") -> str:
        self._emit("📝 Creating note...")
        result = self.bridge.notes.create_note(title, body)
        return self._render_change(result, f"✅ Note created: {title}", "Failed to create note.")


class NotesEditTool(BaseTool):
    @property
    def name(self) -> str:
        return "notes_edit"

    @property
    def description(self) -> str:
        return "Replace the body of the note whose title exactly matches the given title."

    @property
    def category(self) -> str:
        return "NOTES"

    @property
    def parameters(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "Title of the note to edit"},
                "new_body": {"type": "string", "description": "New body content for the note"},
            },
            "required": ["title", "new_body"],
        }

    def execute(self, title: str, new_body: str) -> str:
        self._emit(f"✏️ Editing note '{title}'...")
        result = self.bridge.notes.edit_note(title, new_body)
        return self._render_change(result, f"✅ Note updated: {title}", f"Note not found: {title}")


class NotesDeleteTool(BaseTool):
    @property
    def name(self) -> str:
        return "notes_delete"

    @property
    def description(self) -> str:
        return "Delete the note whose title exactly matches the given title."

    @property
    def category(self) -> str:
        return "NOTES"

    @property
    def parameters(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "Title of the note to delete"},
            },
            "required": ["title"],
        }

    def execute(self, title: str) -> str:
        self._emit(f"🗑️ Deleting note '{title}'...")
        result = self.bridge.notes.delete_note(title)
        return self._render_change(result, f"✅ Note deleted: {title}", f"Note not found: {title}")
