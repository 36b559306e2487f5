"""
🌉 Script Bridge
Codec, script builder and process executor, wired together by Bridge.
"""

from datetime import datetime
from typing import Any, Callable, Optional

from .executor import ScriptExecutor
from .results import BridgeResult, Failed, FailureKind, Found, NotFound
from .scripts import Script, ScriptBuilder
from .templates import OPERATIONS


class Bridge:
    """
    Holds the executor, builder and the three adapters. Built once at startup
    and passed to whatever needs it.
    """

    def __init__(
        self,
        executor: ScriptExecutor,
        default_calendar: str,
        builder: Optional[ScriptBuilder] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        from ..adapters import CalendarAdapter, ContactsAdapter, NotesAdapter

        self.executor = executor
        self.builder = builder or ScriptBuilder(OPERATIONS)
        self.notes = NotesAdapter(self.builder, executor)
        self.calendar = CalendarAdapter(self.builder, executor, default_calendar, clock=clock)
        self.contacts = ContactsAdapter(self.builder, executor)

    @classmethod
    def from_config(
        cls,
        config: Any,
        trace_callback: Optional[Callable[[str, dict], None]] = None,
        status_callback: Optional[Callable[[str], None]] = None,
    ) -> "Bridge":
        """Build from a ConfigManager. Raises ConfigError without a calendar name."""
        executor = ScriptExecutor(
            interpreter=config.osascript_path,
            timeout=config.script_timeout,
            stderr_policy=config.stderr_policy,
            trace_callback=trace_callback,
            status_callback=status_callback,
        )
        return cls(executor, default_calendar=config.require_calendar_name())
