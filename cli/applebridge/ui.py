"""
💻 Terminal UI Layer
Rich-based rendering for the applebridge CLI.
"""

import json
from typing import Any, Optional

from rich import box
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from .theme import BANNER, BRIDGE_THEME, CATEGORY_STYLES, TOOL_ERROR_PREFIX
from .tracing import event_style, summarize_trace

# ─── Console Singleton ────────────────────────────────────────────────────────
console = Console(theme=BRIDGE_THEME, highlight=True)


def print_banner() -> None:
    console.print()
    console.print(BANNER)
    console.print()


def print_status(message: str, style: str = "muted") -> None:
    console.print(f"[{style}]{escape(message)}[/{style}]")


def render_tools_list(tools: list[dict]) -> None:
    """Render a table of all tools."""
    if not tools:
        console.print("[muted]No tools available.[/muted]")
        return

    table = Table(
        title="🛠️  Bridge Tools",
        box=box.ROUNDED,
        border_style="tool",
        header_style="tool",
        show_lines=True,
    )
    table.add_column("Category", width=10)
    table.add_column("Tool Name", style="highlight", width=26)
    table.add_column("Parameters", style="muted", width=28)
    table.add_column("Description", style="text")

    for t in sorted(tools, key=lambda x: (x["category"], x["function"]["name"])):
        func = t["function"]
        params = func["parameters"]
        required = set(params.get("required", []))
        names = [p if p in required else f"{p}?" for p in params.get("properties", {})]
        style = CATEGORY_STYLES.get(t["category"], "muted")
        table.add_row(
            f"[{style}]{t['category']}[/{style}]",
            func["name"],
            ", ".join(names) or "-",
            func["description"],
        )

    console.print(table)
    console.print(f"  [dim_text]Total {len(tools)} tools.[/dim_text]")


def render_tool_output(tool_name: str, output: str) -> None:
    """Pretty-print a tool result; JSON payloads get syntax highlighting."""
    if output.startswith(TOOL_ERROR_PREFIX):
        render_error(output)
        return
    try:
        json.loads(output)
        body: Any = Syntax(output, "json", theme="monokai", background_color="default")
    except ValueError:
        body = Text(output)
    console.print(Panel(body, title=f"[tool]🛠️ {tool_name}[/tool]", border_style="tool", padding=(0, 1)))


def render_config(config_data: dict) -> None:
    table = Table(title="⚙️  Configuration", box=box.SIMPLE, header_style="primary")
    table.add_column("Key", style="highlight")
    table.add_column("Value", style="text")
    for k, v in sorted(config_data.items()):
        table.add_row(k, str(v))
    console.print(table)


def render_error(message: str, hint: str = "") -> None:
    content = f"[error]{escape(message)}[/error]"
    if hint:
        content += f"\n\n[muted]💡 Hint: {hint}[/muted]"
    console.print(Panel(content, title="[error]❌ Error[/error]", border_style="error", padding=(0, 2)))


def render_success(message: str) -> None:
    console.print(Panel(f"[success]{escape(message)}[/success]", border_style="success", padding=(0, 2)))


def render_warning(message: str) -> None:
    console.print(Panel(f"[warning]{message}[/warning]", border_style="warning", padding=(0, 2)))


def render_trace_timeline(events: list[dict[str, Any]], trace_file: Optional[str] = None) -> Group:
    """Build a colorized trace timeline renderable."""
    summary = Table.grid(padding=(0, 2))
    summary.add_column(style="muted", justify="right")
    summary.add_column()
    summary.add_row("Events", f"[highlight]{len(events)}[/highlight]")
    totals = summarize_trace(events)
    summary.add_row("Scripts", str(totals["scripts"]))
    failures = totals["failures"]
    summary.add_row("Failures", f"[error]{failures}[/error]" if failures else "0")
    if totals["warnings"]:
        summary.add_row("Warnings", f"[warning]{totals['warnings']}[/warning]")
    if trace_file:
        summary.add_row("Trace File", f"[dim_text]{trace_file}[/dim_text]")
    header = Panel(summary, title="🧾 Trace Summary", border_style="primary", padding=(0, 1))

    rows = Table(box=box.MINIMAL, expand=True, header_style="bold")
    rows.add_column("#", justify="right", style="muted", width=4)
    rows.add_column("+ms", justify="right", style="muted", width=8)
    rows.add_column("Event", no_wrap=True)
    rows.add_column("Details", style="text")
    for idx, e in enumerate(events, start=1):
        name = str(e.get("event", "unknown"))
        icon, style = event_style(name)
        data = e.get("data", {})
        details = json.dumps(data, ensure_ascii=False) if data else ""
        if len(details) > 160:
            details = details[:160] + "…"
        rows.add_row(str(idx), str(e.get("elapsed_ms", 0)), f"{icon} [{style}]{name}[/{style}]", Text(details))

    return Group(header, rows)
