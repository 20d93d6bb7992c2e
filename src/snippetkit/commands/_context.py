"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Runs utilities under a collecting diagnostic sink and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import click

from snippetkit.diagnostics import CollectingSink, use_sink
from snippetkit.output.formatters import OutputSettings, format_result
from snippetkit.result import ToolResult
from snippetkit.validation import invalid

if TYPE_CHECKING:
    from snippetkit.config.settings import SnippetSettings


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: SnippetSettings) -> None:
        self.settings = settings

        from snippetkit.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def run(
        self,
        op: str,
        call: Callable[[], Any],
        *,
        data: dict[str, Any] | None = None,
    ) -> ToolResult:
        """Invoke *call* with diagnostics captured and wrap the outcome.

        A reported validation failure becomes the returned (failed) result.
        A ``ValueError`` is converted into an ``INVALID_ARGUMENT`` failure.
        """
        sink = CollectingSink()
        with use_sink(sink):
            try:
                value = call()
            except ValueError as exc:
                return invalid(op, str(exc))

        if sink.failures:
            return sink.failures[0]

        return ToolResult(
            ok=True,
            op=op,
            data={**(data or {}), "value": value},
            timings={label: round(ms, 3) for label, ms in sink.timings},
        )

    def emit(self, result: ToolResult) -> None:
        """Format and output a ToolResult with correct exit semantics.

        * Success: writes to stdout, returns normally. Warnings go to stderr
          so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
