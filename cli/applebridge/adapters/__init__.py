"""
🔌 Domain Adapters
Notes, Calendar and Contacts on top of the shared script bridge.
"""

from .base import BaseAdapter, RecordLayout
from .calendar import Calendar, CalendarAdapter, CalendarEvent, EventDetail, LookaheadWindow
from .contacts import Contact, ContactsAdapter
from .notes import Note, NotesAdapter
