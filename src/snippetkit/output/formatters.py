"""Rich/JSON output helpers.

The CLI renders ToolResult for humans (Rich output) or machines (--json).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from snippetkit.result import ToolResult


class OutputSettings(BaseModel):
    """Output switches derived from the global CLI flags."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ToolResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ToolResult for display.

    JSON wins over quiet, quiet wins over the Rich renderer.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        from snippetkit.output.renderers import render_quiet

        return render_quiet(result)

    from snippetkit.output.renderers import render_result

    return render_result(result, verbose=settings.verbose)
