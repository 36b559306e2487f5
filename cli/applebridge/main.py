"""
🚀 applebridge CLI: Main Entry Point
Drive Apple Notes, Calendar and Contacts through the script bridge.

Usage:
    applebridge tools                               # List tools
    applebridge call notes_search -a query=groceries
    applebridge call calendar_list_events --json '{"days": 3}'
    applebridge config --set calendar_name Work     # Show/edit config
    applebridge trace                               # Show the latest trace
"""

import json
import sys
import uuid
from pathlib import Path
from typing import Callable, Optional

import click
from rich.syntax import Syntax

from .bridge import Bridge
from .config import ConfigManager
from .errors import ConfigError
from .tools import ALL_TOOLS, TOOL_BY_NAME, ToolExecutor
from .tracing import BridgeTraceLogger, find_latest_trace_file, format_trace_text, load_trace_events
from .ui import (
    console,
    print_banner,
    print_status,
    render_config,
    render_error,
    render_success,
    render_tool_output,
    render_tools_list,
    render_trace_timeline,
    render_warning,
)


def _parse_args(pairs: tuple, raw_json: Optional[str], tool_name: str) -> dict:
    """Merge --json and key=value pairs into one argument dict."""
    args: dict = {}
    if raw_json:
        try:
            loaded = json.loads(raw_json)
        except json.JSONDecodeError as e:
            raise click.BadParameter(f"invalid JSON: {e}", param_hint="--json")
        if not isinstance(loaded, dict):
            raise click.BadParameter("must be a JSON object", param_hint="--json")
        args.update(loaded)

    properties = TOOL_BY_NAME.get(tool_name, {}).get("function", {}).get("parameters", {}).get("properties", {})
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise click.BadParameter(f"expected key=value, got '{pair}'", param_hint="--arg")
        if properties.get(key, {}).get("type") == "integer":
            try:
                args[key] = int(value)
            except ValueError:
                raise click.BadParameter(f"'{key}' must be an integer", param_hint="--arg")
        else:
            args[key] = value
    return args


def _build_executor(
    config: ConfigManager,
    trace_logger: BridgeTraceLogger,
    status_callback: Optional[Callable[[str], None]],
) -> ToolExecutor:
    bridge = Bridge.from_config(config, trace_callback=trace_logger.log, status_callback=status_callback)
    return ToolExecutor(bridge, config=config, status_callback=status_callback)


# ─── CLI Commands ─────────────────────────────────────────────────────────────

@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """🍎 applebridge: Apple Notes, Calendar and Contacts over osascript."""
    if ctx.invoked_subcommand is None:
        print_banner()
        click.echo(ctx.get_help())


@cli.command()
def tools() -> None:
    """List all tools and their parameters."""
    render_tools_list(ALL_TOOLS)


@cli.command()
@click.argument("tool_name")
@click.option("--arg", "-a", "pairs", multiple=True, metavar="KEY=VALUE", help="Tool argument (repeatable)")
@click.option("--json", "raw_json", default=None, help="Tool arguments as a JSON object")
@click.option("--raw", is_flag=True, default=False, help="Print the plain text result")
@click.option("--trace/--no-trace", default=None, help="Write a JSONL trace of the script invocations")
def call(tool_name: str, pairs: tuple, raw_json: Optional[str], raw: bool, trace: Optional[bool]) -> None:
    """Run one tool and print its result."""
    config = ConfigManager()
    if tool_name not in TOOL_BY_NAME:
        render_error(f"Unknown tool '{tool_name}'.", hint="Run `applebridge tools` to see what is available.")
        sys.exit(2)

    args = _parse_args(pairs, raw_json, tool_name)
    trace_enabled = config.trace_enabled if trace is None else trace
    trace_logger = BridgeTraceLogger(enabled=trace_enabled, session_id=str(uuid.uuid4())[:8])

    try:
        executor = _build_executor(config, trace_logger, None if raw else print_status)
    except ConfigError as e:
        render_error(str(e), hint="APPLE_CALENDAR_NAME names the default calendar.")
        sys.exit(1)

    trace_logger.log("tool_called", {"tool": tool_name, "fields": sorted(args)})
    output = executor.execute(tool_name, args)
    trace_logger.close({"tool": tool_name, "error": output.startswith("Error:")})

    if raw:
        click.echo(output)
    else:
        render_tool_output(tool_name, output)
    if trace_logger.file_path:
        print_status(f"🧾 Trace written to {trace_logger.file_path}", "dim_text")
    if output.startswith("Error:"):
        sys.exit(1)


@cli.command()
@click.option("--set", "set_values", nargs=2, multiple=True, metavar="KEY VALUE", help="Set a config value")
def config(set_values: tuple) -> None:
    """Show or edit configuration."""
    cfg = ConfigManager()
    for key, value in set_values:
        cfg.set(key, value)
        render_success(f"Set {key} = {value}")
    render_config(cfg.all())
    if not cfg.is_configured():
        render_warning("No default calendar configured. Set APPLE_CALENDAR_NAME or `calendar_name`.")


@cli.command()
@click.option("--file", "trace_file", type=click.Path(exists=True, path_type=Path), default=None, help="Open a specific JSONL trace file")
@click.option("--raw", is_flag=True, default=False, help="Print raw JSON lines")
@click.option("--plain", is_flag=True, default=False, help="Print a plain text timeline")
@click.option("--full/--summary", default=False, help="Show full event payloads in the plain timeline")
def trace(trace_file: Optional[Path], raw: bool, plain: bool, full: bool) -> None:
    """Render the latest bridge trace as a timeline."""
    target = trace_file or find_latest_trace_file()
    if target is None:
        render_error("No trace file found.", hint="Run 'applebridge call <tool> --trace' or pass --file <path>.")
        return

    events = load_trace_events(target)
    if not events:
        render_error(f"Trace is empty or unreadable: {target}")
        return

    if raw:
        raw_jsonl = "\n".join(json.dumps(e, ensure_ascii=False) for e in events)
        console.print(Syntax(raw_jsonl, "json", theme="monokai", background_color="default"))
    elif plain:
        click.echo(format_trace_text(events, full=full))
    else:
        console.print(render_trace_timeline(events, trace_file=str(target)))


# ─── Entry Point ──────────────────────────────────────────────────────────────

def main() -> None:
    cli()


if __name__ == "__main__":
    main()
