"""
🛠️ Tool System
Every adapter operation exposed as a schema-described tool.
"""

from .registry import registry
from .base import BaseTool

from .builtin.notes import (
    NotesListTool,
    NotesSearchTool,
    NotesGetTool,
    NotesCreateTool,
    NotesEditTool,
    NotesDeleteTool,
)
from .builtin.calendar import (
    CalendarListCalendarsTool,
    CalendarListEventsTool,
    CalendarSearchEventsTool,
    CalendarTodayEventsTool,
    CalendarGetEventTool,
    CalendarCreateEventTool,
    CalendarDeleteEventTool,
)
from .builtin.contacts import (
    ContactsListTool,
    ContactsSearchTool,
    ContactsGetTool,
    ContactsCreateTool,
    ContactsDeleteTool,
)


def _register_builtin():
    registry.register(NotesListTool)
    registry.register(NotesSearchTool)
    registry.register(NotesGetTool)
    registry.register(NotesCreateTool)
    registry.register(NotesEditTool)
    registry.register(NotesDeleteTool)
    registry.register(CalendarListCalendarsTool)
    registry.register(CalendarListEventsTool)
    registry.register(CalendarSearchEventsTool)
    registry.register(CalendarTodayEventsTool)
    registry.register(CalendarGetEventTool)
    registry.register(CalendarCreateEventTool)
    registry.register(CalendarDeleteEventTool)
    registry.register(ContactsListTool)
    registry.register(ContactsSearchTool)
    registry.register(ContactsGetTool)
    registry.register(ContactsCreateTool)
    registry.register(ContactsDeleteTool)


_register_builtin()

from .manager import (
    ALL_TOOLS,
    CATEGORY_TOOL_MAP,
    TOOL_BY_NAME,
    get_tools_for_categories,
    ExecutionGateway,
    ToolExecutor,
)
