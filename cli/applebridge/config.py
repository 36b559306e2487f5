"""
💾 Configuration Layer
Handles .env loading and the persistent config file (~/.applebridge/config.json).
"""

import json
import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from .errors import ConfigError

# ─── Paths ────────────────────────────────────────────────────────────────────
CONFIG_DIR  = Path.home() / ".applebridge"
CONFIG_FILE = CONFIG_DIR / "config.json"
TRACES_DIR  = CONFIG_DIR / "traces"

# ─── Default Config ───────────────────────────────────────────────────────────
DEFAULT_CONFIG: dict[str, Any] = {
    "calendar_name":          "",
    "osascript_path":         "osascript",
    "script_timeout_seconds": 30,
    "stderr_policy":          "warn",
    "trace":                  False,
}

# Environment variable → config key
ENV_OVERRIDES = {
    "APPLE_CALENDAR_NAME":       "calendar_name",
    "APPLEBRIDGE_OSASCRIPT":     "osascript_path",
    "APPLEBRIDGE_SCRIPT_TIMEOUT": "script_timeout_seconds",
    "APPLEBRIDGE_STDERR_POLICY": "stderr_policy",
    "APPLEBRIDGE_TRACE":         "trace",
}

_TRUTHY = {"1", "true", "yes", "on"}


# ─── Config Manager ───────────────────────────────────────────────────────────
class ConfigManager:
    """Persistent settings merged from defaults, the config file and the environment."""

    def __init__(self, config_file: Optional[Path] = None, use_dotenv: bool = True) -> None:
        if use_dotenv:
            load_dotenv()
        self.config_file = config_file or CONFIG_FILE
        self._data: dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        if self.config_file.exists():
            try:
                with open(self.config_file) as f:
                    self._data = json.load(f)
            except (json.JSONDecodeError, OSError):
                self._data = {}
        # Merge defaults (don't overwrite existing)
        for k, v in DEFAULT_CONFIG.items():
            self._data.setdefault(k, v)
        # Override from environment
        for env_key, key in ENV_OVERRIDES.items():
            val = os.getenv(env_key)
            if val:
                self._data[key] = val

    def save(self) -> None:
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w") as f:
            json.dump(self._data, f, indent=2)

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self.save()

    def all(self) -> dict[str, Any]:
        return dict(self._data)

    @property
    def calendar_name(self) -> str:
        return str(self._data.get("calendar_name") or "").strip()

    @property
    def osascript_path(self) -> str:
        return self._data.get("osascript_path") or "osascript"

    @property
    def script_timeout(self) -> float:
        try:
            timeout = float(self._data.get("script_timeout_seconds", 30))
        except (TypeError, ValueError):
            return float(DEFAULT_CONFIG["script_timeout_seconds"])
        return timeout if timeout > 0 else float(DEFAULT_CONFIG["script_timeout_seconds"])

    @property
    def stderr_policy(self) -> str:
        policy = str(self._data.get("stderr_policy", "warn")).strip().lower()
        return policy if policy in ("warn", "fail") else "warn"

    @property
    def trace_enabled(self) -> bool:
        val = self._data.get("trace", False)
        if isinstance(val, str):
            return val.strip().lower() in _TRUTHY
        return bool(val)

    def require_calendar_name(self) -> str:
        name = self.calendar_name
        if not name:
            raise ConfigError(
                "APPLE_CALENDAR_NAME is required. Set it in your .env file "
                "or run `applebridge config --set calendar_name <name>`.",
                key="calendar_name",
            )
        return name

    def is_configured(self) -> bool:
        return bool(self.calendar_name)
