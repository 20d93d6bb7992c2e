"""Operation-specific Rich renderers for ToolResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from snippetkit.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from snippetkit.result import ToolResult


def render_result(result: ToolResult, *, verbose: bool = False) -> str:
    """Render a ToolResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ToolResult) -> str:
    """Render only the produced value for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    value = result.value
    if value is None:
        return f"OK: {result.op}"
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ToolResult) -> None:
    console.print(Text.assemble(("OK", "kit.ok"), (f"  {result.op}", "kit.op")))


def _field(console: Console, key: str, value: Any) -> None:
    if isinstance(value, (dict, list)):
        value = json.dumps(value, separators=(",", ":"))
    style = "kit.value" if key == "value" else ""
    console.print(Text.assemble((f"  {key}: ", "kit.key"), (str(value), style)))


def _render_timings(console: Console, result: ToolResult) -> None:
    if not result.timings:
        return
    console.print(Text("  timings:", style="kit.key"))
    for label, ms in result.timings.items():
        console.print(Text.assemble(f"    {label}: ", (f"{ms} ms", "kit.timing")))


def _render_error(result: ToolResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text.assemble(("ERROR", "kit.error"), (f"  {result.op}", "kit.op"), ": ", msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Op renderers ──────────────────────────────────────────────────────


def _render_generic(result: ToolResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_timings(console, result)


def _render_color(result: ToolResult, console: Console, *, verbose: bool = False) -> None:
    """Show the hex value next to a swatch painted in that color."""
    _status_line(console, result)
    color = result.value
    swatch = ("      ", f"on {color}")
    console.print(Text.assemble(("  value: ", "kit.key"), (color, "kit.hex"), " ", swatch))
    _field(console, "text", result.data.get("text", ""))
    if verbose:
        _render_timings(console, result)


def _render_chunks(result: ToolResult, console: Console, *, verbose: bool = False) -> None:
    """One table row per chunk."""
    _status_line(console, result)
    table = Table(show_header=True, header_style="kit.key", box=None, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("items")
    for index, group in enumerate(result.value or []):
        table.add_row(str(index), ", ".join(str(item) for item in group))
    console.print(table)
    if verbose:
        _render_timings(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "string_to_color": _render_color,
    "chunk": _render_chunks,
}
