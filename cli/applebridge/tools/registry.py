"""
📂 Tool Registry
Handles registration and lookup of all bridge tools.
"""

from typing import Any, Callable, Dict, List, Optional, Type

from .base import BaseTool


class ToolRegistry:
    def __init__(self) -> None:
        self._tool_classes: Dict[str, Type[BaseTool]] = {}

    def register(self, tool: Type[BaseTool]) -> None:
        """Register a tool class under its schema name."""
        temp_instance = tool()
        if temp_instance.name in self._tool_classes:
            raise ValueError(f"Tool '{temp_instance.name}' is already registered")
        self._tool_classes[temp_instance.name] = tool

    def get_tool_class(self, name: str) -> Optional[Type[BaseTool]]:
        """Look up a tool class by name."""
        return self._tool_classes.get(name)

    def get_all_tool_classes(self) -> List[Type[BaseTool]]:
        """Return all registered tool classes."""
        return list(self._tool_classes.values())

    def create_instances(
        self,
        bridge: Any,
        status_callback: Optional[Callable[[str], None]] = None,
        config: Any = None,
    ) -> Dict[str, BaseTool]:
        """Create instances bound to one bridge and return a map of name -> instance."""
        return {
            name: cls(bridge=bridge, status_callback=status_callback, config=config)
            for name, cls in self._tool_classes.items()
        }

    def get_schemas(self) -> List[Dict[str, Any]]:
        """Return all tool schemas for the agent host."""
        return [cls().to_schema() for cls in self._tool_classes.values()]


# Global registry instance
registry = ToolRegistry()
