"""
🏗️ Base Tool Interface
Defines the contract all bridge tools must follow.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

from ..bridge.results import BridgeResult, Failed
from ..theme import TOOL_ERROR_PREFIX


class BaseTool(ABC):
    """
    Base class for all applebridge tools.
    Encapsulates both the schema definition and the execution logic.
    """

    def __init__(
        self,
        bridge: Any = None,
        status_callback: Optional[Callable[[str], None]] = None,
        config: Any = None,
    ) -> None:
        self.bridge = bridge
        self.status_callback = status_callback or (lambda msg: None)
        self.config = config

    def _emit(self, msg: str) -> None:
        """Helper to send status updates back to the UI."""
        self.status_callback(msg)

    @property
    @abstractmethod
    def name(self) -> str:
        """The tool name as it appears in the schema (e.g. 'notes_search')."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """A clear description of what the tool does for the agent."""
        pass

    @property
    @abstractmethod
    def category(self) -> str:
        """The category this tool belongs to (NOTES, CALENDAR or CONTACTS)."""
        pass

    @property
    @abstractmethod
    def parameters(self) -> Dict[str, Any]:
        """
        The JSON schema for parameters (the 'parameters' object).
        Should include 'type': 'object', 'properties', and 'required'.
        """
        pass

    def to_schema(self) -> Dict[str, Any]:
        """Convert to OpenAI-style tool schema."""
        return {
            "category": self.category,
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }

    @abstractmethod
    def execute(self, **kwargs: Any) -> str:
        """
        Execute the tool logic.
        Args are passed as keyword arguments derived from the schema.
        Should return a string (result or error message).
        """
        pass

    # ── Result rendering ──────────────────────────────────────────────────────

    def _render_records(self, result: BridgeResult, not_found: str, single: bool = False) -> str:
        """JSON for found records, `not_found` text otherwise."""
        if isinstance(result, Failed):
            return f"{TOOL_ERROR_PREFIX} {result}"
        if not result.found:
            return _with_warnings(not_found, result.warnings)
        if single:
            payload: Any = result.first.to_dict()
        else:
            payload = [r.to_dict() for r in result.records]
        return _with_warnings(json.dumps(payload, indent=2, ensure_ascii=False), result.warnings)

    def _render_change(self, result: BridgeResult, done: str, not_found: str) -> str:
        """One-line confirmation for create/edit/delete."""
        if isinstance(result, Failed):
            return f"{TOOL_ERROR_PREFIX} {result}"
        if not result.found:
            return _with_warnings(not_found, result.warnings)
        return _with_warnings(done, result.warnings)


def _with_warnings(text: str, warnings: tuple[str, ...]) -> str:
    if not warnings:
        return text
    return text + "\n\n⚠️ osascript warnings:\n" + "\n".join(f"• {w}" for w in warnings)
