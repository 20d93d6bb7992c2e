"""Subcommand modules for snippetkit.

Provides register_commands() which uses deferred imports to keep
``snippetkit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``case`` group and all standalone commands on the root group."""
    # --- Groups ---
    from snippetkit.commands.text import case

    cli.add_command(case)

    # --- Standalone commands ---
    from snippetkit.commands.color import color
    from snippetkit.commands.random_cmd import random_cmd
    from snippetkit.commands.sequence import chunk_cmd, dedupe
    from snippetkit.commands.text import pad, shorten_cmd, slugify_cmd
    from snippetkit.commands.time_cmd import between, sleep_cmd

    cli.add_command(pad)
    cli.add_command(shorten_cmd)
    cli.add_command(slugify_cmd)
    cli.add_command(color)
    cli.add_command(dedupe)
    cli.add_command(chunk_cmd)
    cli.add_command(random_cmd)
    cli.add_command(between)
    cli.add_command(sleep_cmd)
