"""Command: deterministic text color."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from snippetkit.commands._base import KitCommand
from snippetkit.domain.colors import string_to_color

if TYPE_CHECKING:
    from snippetkit.commands._context import AppContext


@click.command(
    cls=KitCommand,
    examples="""\
  snippetkit color alice
  snippetkit -q color 'build 42'""",
)
@click.argument("text")
@click.pass_obj
def color(app: AppContext, text: str) -> None:
    """Hash TEXT to a stable #rrggbb color."""
    app.emit(app.run("string_to_color", lambda: string_to_color(text), data={"text": text}))
