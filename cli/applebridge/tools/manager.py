"""
🛠️ Tool Manager & Execution Gateway
This file acts as the primary interface for the tool system.
Nothing raised below ToolExecutor.execute() escapes it; callers get text.
"""

from typing import Any, Callable, Dict, List, Optional

from ..theme import GATEWAY_ERROR_PREFIX, TOOL_ERROR_PREFIX
from .registry import registry

# Populate schemas and maps from the registry
ALL_TOOLS: List[Dict[str, Any]] = registry.get_schemas()

CATEGORY_TOOL_MAP: Dict[str, List[str]] = {}
for _tool in ALL_TOOLS:
    CATEGORY_TOOL_MAP.setdefault(_tool["category"], []).append(_tool["function"]["name"])

TOOL_BY_NAME: Dict[str, Dict[str, Any]] = {t["function"]["name"]: t for t in ALL_TOOLS}


def get_tools_for_categories(categories: List[str]) -> List[Dict[str, Any]]:
    """Filter tool schemas to only those in the given categories."""
    wanted = {c.upper() for c in categories}
    return [t for t in ALL_TOOLS if t["category"] in wanted]


class ExecutionGateway:
    """
    Validation between agent tool calls and execution.
    Checks the tool exists, required fields and types, and applies defaults.
    """
    MAX_TEXT_LEN = 100_000

    def validate_and_resolve(self, tool_name: str, raw_args: dict) -> tuple[bool, dict, str]:
        schema = TOOL_BY_NAME.get(tool_name)
        if not schema:
            return False, {}, f"{GATEWAY_ERROR_PREFIX} Tool '{tool_name}' not found."
        if not isinstance(raw_args, dict):
            return False, {}, f"{GATEWAY_ERROR_PREFIX} Arguments must be an object."

        params_schema = schema["function"]["parameters"]
        required = params_schema.get("required", [])
        properties = params_schema.get("properties", {})

        unknown = sorted(set(raw_args) - set(properties))
        if unknown:
            return False, {}, f"{GATEWAY_ERROR_PREFIX} Unknown field(s): {', '.join(unknown)}."

        resolved = {}
        for field, spec in properties.items():
            val = raw_args.get(field)
            if val is None:
                if field in required:
                    return False, {}, f"{GATEWAY_ERROR_PREFIX} Missing required field '{field}'."
                if "default" in spec:
                    resolved[field] = spec["default"]
                continue

            expected_type = spec.get("type")
            if expected_type == "string":
                if not isinstance(val, str):
                    return False, {}, f"{GATEWAY_ERROR_PREFIX} Field '{field}' must be a string."
                if len(val) > self.MAX_TEXT_LEN:
                    return False, {}, f"{GATEWAY_ERROR_PREFIX} Field '{field}' is too long."
            if expected_type == "integer":
                try:
                    if isinstance(val, bool):
                        raise TypeError(val)
                    if isinstance(val, float) and not val.is_integer():
                        raise ValueError(val)
                    val = int(val)
                except (ValueError, TypeError):
                    return False, {}, f"{GATEWAY_ERROR_PREFIX} Field '{field}' must be an integer."

            resolved[field] = val

        return True, resolved, ""


class ToolExecutor:
    """
    Executes validated tool calls by dispatching to the tool instances bound
    to one Bridge.
    """
    def __init__(
        self,
        bridge: Any,
        config: Any = None,
        status_callback: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.bridge = bridge
        self.config = config
        self.gateway = ExecutionGateway()
        self._tool_call_count = 0
        self._tools = registry.create_instances(
            bridge=bridge,
            status_callback=status_callback,
            config=config,
        )

    @property
    def tool_names(self) -> List[str]:
        return sorted(self._tools)

    def execute(self, tool_name: str, args: Optional[dict] = None) -> str:
        self._tool_call_count += 1
        tool = self._tools.get(tool_name)
        if not tool:
            return f"{TOOL_ERROR_PREFIX} Tool '{tool_name}' has no executor."

        ok, resolved, error = self.gateway.validate_and_resolve(tool_name, args or {})
        if not ok:
            return error

        try:
            return str(tool.execute(**resolved))
        except Exception as e:
            return f"{TOOL_ERROR_PREFIX} {e}"
