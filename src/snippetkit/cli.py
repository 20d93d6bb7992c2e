"""Root CLI group for snippetkit with global flags and command registration."""

from __future__ import annotations

import click

from snippetkit import __version__
from snippetkit.commands import register_commands
from snippetkit.commands._context import AppContext
from snippetkit.config.settings import SnippetSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="snippetkit")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the value.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Small text, sequence, color, and time utilities."""
    settings = SnippetSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
