"""
👥 Contacts Tools
Apple Contacts operations exposed to the agent.
"""

from typing import Any, Dict, Optional

from ..base import BaseTool


class ContactsListTool(BaseTool):
    @property
    def name(self) -> str:
        return "contacts_list"

    @property
    def description(self) -> str:
        return "List all contacts in Apple Contacts."

    @property
    def category(self) -> str:
        return "CONTACTS"

    @property
    def parameters(self) -> Dict[str, Any]:
        return {"type": "object", "properties": {}, "required": []}

    def execute(self) -> str:
        self._emit("👥 Listing contacts...")
        return self._render_records(self.bridge.contacts.list_contacts(), "No contacts found.")


class ContactsSearchTool(BaseTool):
    @property
    def name(self) -> str:
        return "contacts_search"

    @property
    def description(self) -> str:
        return "Search contacts by name or organization (case-insensitive)."

    @property
    def category(self) -> str:
        return "CONTACTS"

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
        self._emit(f"🔎 Searching contacts for '{query}'...")
        return self._render_records(self.bridge.contacts.search_contacts(query), "No matching contacts found.")


class ContactsGetTool(BaseTool):
    @property
    def name(self) -> str:
        return "contacts_get"

    @property
    def description(self) -> str:
        return "Get details of the contact whose full name exactly matches."

    @property
    def category(self) -> str:
        return "CONTACTS"

    @property
    def parameters(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Full name of the contact to retrieve"},
            },
            "required": ["name"],
        }

    def execute(self, name: str) -> str:
        self._emit(f"👤 Reading contact '{name}'...")
        return self._render_records(self.bridge.contacts.get_contact(name), f"Contact not found: {name}", single=True)


class ContactsCreateTool(BaseTool):
    @property
    def name(self) -> str:
        return "contacts_create"

    @property
    def description(self) -> str:
        return "Create a new contact in Apple Contacts. Optional fields are only set when given."

    @property
    def category(self) -> str:
        return "CONTACTS"

    @property
    def parameters(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Full name of the contact"},
                "email": {"type": "string", "description": "Email address of the contact"},
                "phone": {"type": "string", "description": "Phone number of the contact"},
                "organization": {"type": "string", "description": "Organization of the contact"},
                "birthday": {
                    "type": "string",
                    "description": "Birthday, ISO format '1990-01-31' or text like 'Monday, January 1, 2024'",
                },
            },
            "required": ["name"],
        }

    def execute(
        self,
        name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        organization: Optional[str] = None,
        birthday: Optional[str] = None,
    ) -> str:
        self._emit(f"👤 Creating contact '{name}'...")
        result = self.bridge.contacts.create_contact(
            name, email=email, phone=phone, organization=organization, birthday=birthday
        )
        return self._render_change(result, f"✅ Contact created: {name}", "Failed to create contact.")


class ContactsDeleteTool(BaseTool):
    @property
    def name(self) -> str:
        return "contacts_delete"

    @property
    def description(self) -> str:
        return "Delete the contact whose full name exactly matches."

    @property
    def category(self) -> str:
        return "CONTACTS"

    @property
    def parameters(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Full name of the contact to delete"},
            },
            "required": ["name"],
        }

    def execute(self, name: str) -> str:
        self._emit(f"🗑️ Deleting contact '{name}'...")
        result = self.bridge.contacts.delete_contact(name)
        return self._render_change(result, f"✅ Contact deleted: {name}", f"Contact not found: {name}")
