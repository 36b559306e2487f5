"""
📅 Calendar Adapter
Apple Calendar: calendars, windowed event listing/search, get, create, delete.

Time windows are computed here and passed to the script as ISO bounds, then
re-checked against the decoded start dates.
"""

from dataclasses import asdict, dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Optional, Union

from ..bridge.results import BridgeResult, Failed, FailureKind
from .base import BaseAdapter, RecordLayout, optional_text

LIST_DAYS_DEFAULT   = 7
SEARCH_DAYS_DEFAULT = 90

CALENDAR_LAYOUT = RecordLayout("calendar", ("name",))
EVENT_LAYOUT = RecordLayout("event", ("summary", "start", "end", "calendar"))
EVENT_DETAIL_LAYOUT = RecordLayout(
    "event detail",
    ("summary", "start", "end", "calendar", "description", "location", "url"),
    required=4,
)

DateInput = Union[datetime, str]


@dataclass(frozen=True)
class Calendar:
    name: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class CalendarEvent:
    summary: str
    start: str
    end: str
    calendar: str

    @property
    def start_datetime(self) -> Optional[datetime]:
        return _parse_iso(self.start)

    @property
    def end_datetime(self) -> Optional[datetime]:
        return _parse_iso(self.end)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class EventDetail(CalendarEvent):
    description: Optional[str] = None
    location: Optional[str] = None
    url: Optional[str] = None


@dataclass(frozen=True)
class LookaheadWindow:
    """Closed interval [start, end]; both bounds are included."""

    start: datetime
    end: datetime

    @classmethod
    def starting(cls, now: datetime, days: int) -> "LookaheadWindow":
        now = now.replace(microsecond=0)
        return cls(start=now, end=now + timedelta(days=days))

    @classmethod
    def today(cls, now: datetime) -> "LookaheadWindow":
        midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
        return cls(start=midnight, end=midnight + timedelta(days=1, seconds=-1))

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end


def _parse_iso(value: str) -> Optional[datetime]:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def _calendar(fields: dict[str, str]) -> Calendar:
    return Calendar(**fields)


def _event(fields: dict[str, str]) -> CalendarEvent:
    return CalendarEvent(**fields)


def _event_detail(fields: dict[str, str]) -> EventDetail:
    return EventDetail(
        summary=fields["summary"],
        start=fields["start"],
        end=fields["end"],
        calendar=fields["calendar"],
        description=optional_text(fields["description"]),
        location=optional_text(fields["location"]),
        url=optional_text(fields["url"]),
    )


class CalendarAdapter(BaseAdapter):
    application = "Calendar"

    def __init__(
        self,
        builder: Any,
        executor: Any,
        default_calendar: str,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__(builder, executor)
        self.default_calendar = default_calendar
        self.clock = clock

    def _calendar_name(self, calendar: Optional[str]) -> str:
        return calendar or self.default_calendar

    def _windowed(self, operation: str, params: dict[str, Any], window: LookaheadWindow) -> BridgeResult:
        params = dict(params, window_start=window.start, window_end=window.end)

        def in_window(event: CalendarEvent) -> bool:
            start = event.start_datetime
            # Unparseable dates were already filtered by the script's own window.
            return start is None or window.contains(start)

        return self._call(operation, params, EVENT_LAYOUT, _event, keep=in_window)

    def _lookahead(self, days: Any) -> Union[LookaheadWindow, Failed]:
        if isinstance(days, bool) or not isinstance(days, int) or days < 0:
            return Failed(FailureKind.INVALID_INPUT, f"days must be a non-negative integer, got {days!r}")
        try:
            return LookaheadWindow.starting(self.clock(), days)
        except OverflowError:
            return Failed(FailureKind.INVALID_INPUT, f"days is too large, got {days!r}")

    def list_calendars(self) -> BridgeResult:
        return self._call("calendar_list_calendars", None, CALENDAR_LAYOUT, _calendar)

    def list_events(self, calendar: Optional[str] = None, days: int = LIST_DAYS_DEFAULT) -> BridgeResult:
        """Events starting within [now, now + days]."""
        window = self._lookahead(days)
        if isinstance(window, Failed):
            return window
        return self._windowed("calendar_list_events", {"calendar": self._calendar_name(calendar)}, window)

    def search_events(
        self,
        query: str,
        calendar: Optional[str] = None,
        days: int = SEARCH_DAYS_DEFAULT,
    ) -> BridgeResult:
        """Events within [now, now + days] whose summary or description contains `query`."""
        window = self._lookahead(days)
        if isinstance(window, Failed):
            return window
        params = {"calendar": self._calendar_name(calendar), "query": query}
        return self._windowed("calendar_search_events", params, window)

    def today_events(self, calendar: Optional[str] = None) -> BridgeResult:
        window = LookaheadWindow.today(self.clock())
        return self._windowed("calendar_list_events", {"calendar": self._calendar_name(calendar)}, window)

    def get_event(self, title: str, calendar: Optional[str] = None) -> BridgeResult:
        params = {"calendar": self._calendar_name(calendar), "title": title}
        return self._call("calendar_get_event", params, EVENT_DETAIL_LAYOUT, _event_detail)

    def create_event(
        self,
        title: str,
        start: DateInput,
        end: DateInput,
        calendar: Optional[str] = None,
        description: str = "",
        location: str = "",
    ) -> BridgeResult:
        params = {
            "calendar": self._calendar_name(calendar),
            "title": title,
            "start_date": start,
            "end_date": end,
            "description": description,
            "location": location,
        }
        return self._call("calendar_create_event", params, EVENT_LAYOUT, _event)

    def delete_event(self, title: str, calendar: Optional[str] = None) -> BridgeResult:
        params = {"calendar": self._calendar_name(calendar), "title": title}
        return self._call("calendar_delete_event", params, EVENT_LAYOUT, _event)
