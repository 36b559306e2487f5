"""
🧾 Bridge Trace Logging
One JSONL line per executor event, so a failed osascript call can be replayed
from disk. Argument values are never written; events carry operation names,
counts and failure details only.
"""

import json
import time
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Optional

from .config import TRACES_DIR

SCRIPT_EVENTS = ("script_started", "script_finished", "script_warning", "script_failed")


def _jsonable(value: Any) -> Any:
    # Round-trip through json so datetimes, enums and paths end up as text.
    return json.loads(json.dumps(value, default=str, ensure_ascii=False))


class BridgeTraceLogger:
    """Appends bridge events for one CLI invocation to a JSONL file."""

    def __init__(
        self,
        *,
        enabled: bool,
        session_id: str,
        traces_dir: Optional[Path] = None,
    ) -> None:
        self.enabled = enabled
        self.session_id = session_id
        self.start_time = time.time()
        self.file_path: Optional[Path] = None
        self.counts: Counter = Counter()

        if not self.enabled:
            return

        root = traces_dir or TRACES_DIR
        root.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        self.file_path = root / f"{stamp}_{session_id}.jsonl"
        self.log("trace_started", {"session_id": session_id, "trace_file": str(self.file_path)})

    def log(self, event: str, data: Optional[dict[str, Any]] = None) -> None:
        if not self.enabled or self.file_path is None:
            return
        self.counts[event] += 1
        line = json.dumps({
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "elapsed_ms": int((time.time() - self.start_time) * 1000),
            "event": event,
            "data": _jsonable(data or {}),
        }, ensure_ascii=False)
        try:
            with self.file_path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError:
            # A trace write failure never fails the bridge call.
            return

    def close(self, summary: Optional[dict[str, Any]] = None) -> None:
        """Write `trace_finished` with the script counters of this session."""
        totals = {
            "scripts": self.counts["script_started"],
            "failures": self.counts["script_failed"],
            "warnings": self.counts["script_warning"],
        }
        self.log("trace_finished", {**totals, **(summary or {})})


# ─── Reading Traces ───────────────────────────────────────────────────────────

def _parse_line(line: str) -> dict[str, Any]:
    try:
        event = json.loads(line)
    except json.JSONDecodeError:
        event = None
    if not isinstance(event, dict):
        return {"timestamp": "", "elapsed_ms": 0, "event": "malformed_line", "data": {"raw": line}}
    return event


def load_trace_events(path: Path) -> list[dict[str, Any]]:
    """Load JSONL trace events; unreadable lines become `malformed_line` events."""
    if not path.exists():
        return []
    with path.open(encoding="utf-8") as f:
        return [_parse_line(ln.strip()) for ln in f if ln.strip()]


def find_latest_trace_file(traces_dir: Optional[Path] = None) -> Optional[Path]:
    root = traces_dir or TRACES_DIR
    candidates = sorted(root.glob("*.jsonl"), key=lambda p: p.stat().st_mtime) if root.exists() else []
    return candidates[-1] if candidates else None


def summarize_trace(events: Iterable[dict[str, Any]]) -> dict[str, Any]:
    """Script counts per event, plus failure kinds per operation."""
    counts: Counter = Counter()
    failed: dict[str, list[str]] = {}
    for e in events:
        name = e.get("event", "")
        if name in SCRIPT_EVENTS:
            counts[name] += 1
        if name == "script_failed":
            data = e.get("data") or {}
            failed.setdefault(str(data.get("operation", "?")), []).append(str(data.get("kind", "?")))
    return {
        "scripts": counts["script_started"],
        "finished": counts["script_finished"],
        "warnings": counts["script_warning"],
        "failures": counts["script_failed"],
        "failed_operations": failed,
    }


def _describe(event: str, data: dict[str, Any]) -> str:
    if event == "script_started":
        return f"{data.get('operation', '?')} in {data.get('application', '?')} ({data.get('arg_count', 0)} args)"
    if event == "script_finished":
        return f"{data.get('operation', '?')}: {data.get('output_chars', 0)} chars in {data.get('elapsed_ms', 0)}ms"
    if event == "script_warning":
        return f"{data.get('operation', '?')}: " + "; ".join(data.get("warnings", []))
    if event == "script_failed":
        return f"{data.get('operation', '?')}: {data.get('kind', '?')}: {data.get('detail', '')}"
    if event == "tool_called":
        return str(data.get("tool", ""))
    return ""


def format_trace_text(events: list[dict[str, Any]], *, full: bool = False) -> str:
    """Plain text timeline; `full` adds each event's JSON payload."""
    summary = summarize_trace(events)
    lines = [
        f"trace: {len(events)} events, {summary['scripts']} scripts, "
        f"{summary['failures']} failed, {summary['warnings']} warned",
        "",
    ]
    for idx, e in enumerate(events, start=1):
        name = str(e.get("event", "unknown"))
        data = e.get("data") if isinstance(e.get("data"), dict) else {}
        head = f"[{idx}] +{e.get('elapsed_ms', 0)}ms  {name}"
        detail = _describe(name, data)
        lines.append(f"{head}  {detail}" if detail else head)
        if full and data:
            payload = json.dumps(data, indent=2, ensure_ascii=False)
            lines.extend(f"    {ln}" for ln in payload.splitlines())
    return "\n".join(lines)


def event_style(event: str) -> tuple[str, str]:
    """Return (icon, style) for an event name."""
    styles = {
        "script_started": ("🍎", "secondary"),
        "script_finished": ("✅", "success"),
        "script_warning": ("⚠️", "warning"),
        "script_failed": ("❌", "error"),
        "tool_called": ("🛠️", "tool"),
    }
    if event in styles:
        return styles[event]
    if event.startswith("trace_"):
        return "🧾", "primary"
    if "error" in event or event == "malformed_line":
        return "❌", "error"
    return "•", "muted"
