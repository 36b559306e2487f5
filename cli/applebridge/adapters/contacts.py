"""
👥 Contacts Adapter
Apple Contacts: list, search, get, create and delete people.
"""

from dataclasses import asdict, dataclass
from datetime import date
from typing import Optional, Union

from ..bridge import codec
from ..bridge.results import BridgeResult
from .base import BaseAdapter, RecordLayout, optional_text

CONTACT_LAYOUT = RecordLayout(
    "contact",
    ("id", "name", "emails", "phones", "organization", "birthday"),
    required=4,
)


@dataclass(frozen=True)
class Contact:
    id: str
    name: str
    emails: tuple[str, ...] = ()
    phones: tuple[str, ...] = ()
    organization: Optional[str] = None
    birthday: Optional[str] = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["emails"] = list(self.emails)
        data["phones"] = list(self.phones)
        return data


def _contact(fields: dict[str, str]) -> Contact:
    return Contact(
        id=fields["id"],
        name=fields["name"],
        emails=tuple(codec.decode_list(fields["emails"])),
        phones=tuple(codec.decode_list(fields["phones"])),
        organization=optional_text(fields["organization"]),
        birthday=optional_text(fields["birthday"]),
    )


def split_name(name: str) -> tuple[str, Optional[str]]:
    """'Jane Doe' -> ('Jane', 'Doe'); a single word is a first name only."""
    name = " ".join(name.split())
    first, _, last = name.rpartition(" ")
    if not first:
        return last, None
    return first, last


class ContactsAdapter(BaseAdapter):
    application = "Contacts"

    def list_contacts(self) -> BridgeResult:
        return self._call("contacts_list", None, CONTACT_LAYOUT, _contact)

    def search_contacts(self, query: str) -> BridgeResult:
        """People whose name or organization contains `query`."""
        return self._call("contacts_search", {"query": query}, CONTACT_LAYOUT, _contact)

    def get_contact(self, name: str) -> BridgeResult:
        """First person whose full name equals `name`."""
        return self._call("contacts_get", {"name": name}, CONTACT_LAYOUT, _contact)

    def create_contact(
        self,
        name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        organization: Optional[str] = None,
        birthday: Optional[Union[date, str]] = None,
    ) -> BridgeResult:
        first_name, last_name = split_name(name or "")
        params = {
            "first_name": first_name,
            "last_name": last_name,
            "email": email,
            "phone": phone,
            "organization": organization,
            "birthday": birthday,
        }
        return self._call("contacts_create", params, CONTACT_LAYOUT, _contact)

    def delete_contact(self, name: str) -> BridgeResult:
        return self._call("contacts_delete", {"name": name}, CONTACT_LAYOUT, _contact)
