"""Commands: deduplicate and chunk item lists."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from snippetkit.commands._base import KitCommand
from snippetkit.domain.sequences import chunk, remove_duplicates

if TYPE_CHECKING:
    from snippetkit.commands._context import AppContext


@click.command(
    cls=KitCommand,
    examples="""\
  snippetkit dedupe a b a c b
  snippetkit --json dedupe 1 2 2 3""",
)
@click.argument("items", nargs=-1)
@click.pass_obj
def dedupe(app: AppContext, items: tuple[str, ...]) -> None:
    """Drop repeated ITEMS, keeping first occurrences in order."""
    result = app.run("remove_duplicates", lambda: remove_duplicates(list(items)))
    removed = len(items) - len(result.data["value"])
    app.emit(result.model_copy(update={"data": {**result.data, "removed": removed}}))


@click.command(
    "chunk",
    cls=KitCommand,
    examples="""\
  snippetkit chunk 1 2 3 4 5 --size 2
  snippetkit -q chunk a b c --size 1""",
)
@click.argument("items", nargs=-1)
@click.option("--size", type=int, required=True, help="Items per chunk.")
@click.pass_obj
def chunk_cmd(app: AppContext, items: tuple[str, ...], size: int) -> None:
    """Split ITEMS into groups of SIZE."""
    app.emit(app.run("chunk", lambda: chunk(list(items), size), data={"size": size}))
