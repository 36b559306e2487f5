"""
📅 Calendar Tools
Apple Calendar operations exposed to the agent.
"""

from typing import Any, Dict, Optional

from ..base import BaseTool, _with_warnings

_CALENDAR_PARAM = {
    "type": "string",
    "description": "Name of the calendar. Defaults to the configured calendar (APPLE_CALENDAR_NAME).",
}
_DATE_HINT = "ISO format '2024-01-01T09:00:00' or text like 'Monday, January 1, 2024 at 9:00 AM'"


class CalendarListCalendarsTool(BaseTool):
    @property
    def name(self) -> str:
        return "calendar_list_calendars"

    @property
    def description(self) -> str:
        return "List all available calendars in Apple Calendar."

    @property
    def category(self) -> str:
        return "CALENDAR"

    @property
    def parameters(self) -> Dict[str, Any]:
        return {"type": "object", "properties": {}, "required": []}

    def execute(self) -> str:
        self._emit("📅 Listing calendars...")
        result = self.bridge.calendar.list_calendars()
        if result.ok and result.found:
            return _with_warnings(", ".join(c.name for c in result.records), result.warnings)
        return self._render_records(result, "No calendars found.")


class CalendarListEventsTool(BaseTool):
    @property
    def name(self) -> str:
        return "calendar_list_events"

    @property
    def description(self) -> str:
        return "List upcoming events in a calendar for the next N days (start dates from now to now + N days)."

    @property
    def category(self) -> str:
        return "CALENDAR"

    @property
    def parameters(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "calendar": _CALENDAR_PARAM,
                "days": {"type": "integer", "description": "Number of days to look ahead (default: 7)", "default": 7},
            },
            "required": [],
        }

    def execute(self, calendar: Optional[str] = None, days: int = 7) -> str:
        self._emit(f"📅 Listing events for the next {days} day(s)...")
        result = self.bridge.calendar.list_events(calendar, days)
        return self._render_records(result, "No events found.")


class CalendarSearchEventsTool(BaseTool):
    @property
    def name(self) -> str:
        return "calendar_search_events"

    @property
    def description(self) -> str:
        return "Search upcoming events by title or description (case-insensitive) within the next N days."

    @property
    def category(self) -> str:
        return "CALENDAR"

    @property
    def parameters(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Search query string"},
                "calendar": _CALENDAR_PARAM,
                "days": {"type": "integer", "description": "Number of days to search within (default: 90)", "default": 90},
            },
            "required": ["query"],
        }

    def execute(self, query: str, calendar: Optional[str] = None, days: int = 90) -> str:
        self._emit(f"🔎 Searching events for '{query}'...")
        result = self.bridge.calendar.search_events(query, calendar, days)
        return self._render_records(result, "No matching events found.")


class CalendarTodayEventsTool(BaseTool):
    @property
    def name(self) -> str:
        return "calendar_today_events"

    @property
    def description(self) -> str:
        return "Get all events scheduled for today, from midnight to 23:59:59 (including events earlier today)."

    @property
    def category(self) -> str:
        return "CALENDAR"

    @property
    def parameters(self) -> Dict[str, Any]:
        return {"type": "object", "properties": {"calendar": _CALENDAR_PARAM}, "required": []}

    def execute(self, calendar: Optional[str] = None) -> str:
        self._emit("📅 Loading today's events...")
        result = self.bridge.calendar.today_events(calendar)
        return self._render_records(result, "No events scheduled for today.")


class CalendarGetEventTool(BaseTool):
    @property
    def name(self) -> str:
        return "calendar_get_event"

    @property
    def description(self) -> str:
        return "Get details (description, location, url) of the event whose title exactly matches."

    @property
    def category(self) -> str:
        return "CALENDAR"

    @property
    def parameters(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "Title of the event"},
                "calendar": _CALENDAR_PARAM,
            },
            "required": ["title"],
        }

    def execute(self, title: str, calendar: Optional[str] = None) -> str:
        self._emit(f"📅 Reading event '{title}'...")
        result = self.bridge.calendar.get_event(title, calendar)
        return self._render_records(result, f"Event not found: {title}", single=True)


class CalendarCreateEventTool(BaseTool):
    @property
    def name(self) -> str:
        return "calendar_create_event"

    @property
    def description(self) -> str:
        return "Create a new event in Apple Calendar."

    @property
    def category(self) -> str:
        return "CALENDAR"

    @property
    def parameters(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "Title of the event"},
                "start_date": {"type": "string", "description": f"Start date, {_DATE_HINT}"},
                "end_date": {"type": "string", "description": f"End date, {_DATE_HINT}"},
                "calendar": _CALENDAR_PARAM,
                "description": {"type": "string", "description": "Description of the event", "default": ""},
                "location": {"type": "string", "description": "Location of the event", "default": ""},
            },
            "required": ["title", "start_date", "end_date"],
        }

    def execute(
        self,
        title: str,
        start_date: str,
        end_date: str,
        calendar: Optional[str] = None,
        description: str = "",
        location: str = "",
    ) -> str:
        self._emit(f"📅 Creating event '{title}'...")
        result = self.bridge.calendar.create_event(
            title, start_date, end_date, calendar=calendar, description=description, location=location
        )
        return self._render_change(result, f"✅ Event created: {title}", "Failed to create event.")


class CalendarDeleteEventTool(BaseTool):
    @property
    def name(self) -> str:
        return "calendar_delete_event"

    @property
    def description(self) -> str:
        return "Delete the first event whose title exactly matches."

    @property
    def category(self) -> str:
        return "CALENDAR"

    @property
    def parameters(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "Title of the event to delete"},
                "calendar": _CALENDAR_PARAM,
            },
            "required": ["title"],
        }

    def execute(self, title: str, calendar: Optional[str] = None) -> str:
        self._emit(f"🗑️ Deleting event '{title}'...")
        result = self.bridge.calendar.delete_event(title, calendar)
        return self._render_change(result, f"✅ Event deleted: {title}", f"Event not found: {title}")
