"""Commands: text formatting and case conversion."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from snippetkit.commands._base import KitCommand, KitGroup
from snippetkit.domain.text import (
    camel_to_snake_case,
    shorten,
    sized_decimal,
    slugify,
    snake_to_camel_case,
)

if TYPE_CHECKING:
    from snippetkit.commands._context import AppContext


@click.command(
    cls=KitCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  snippetkit pad 5 3
  snippetkit -q pad 42 6
  snippetkit -q pad -5 3
  snippetkit -q pad -- -5 3""",
)
@click.argument("number", type=int)
@click.argument("length", type=click.IntRange(min=0))
@click.pass_obj
def pad(app: AppContext, number: int, length: int) -> None:
    """Zero-pad NUMBER to LENGTH characters (extra digits are cut from the left)."""
    result = app.run(
        "sized_decimal",
        lambda: sized_decimal(number, length),
        data={"number": number, "length": length},
    )
    if result.ok and len(str(number)) > length:
        result = result.model_copy(
            update={"warnings": [f"{number} is wider than {length}; leading digits dropped"]}
        )
    app.emit(result)


@click.command(
    "shorten",
    cls=KitCommand,
    examples="""\
  snippetkit shorten "a rather long sentence"
  snippetkit shorten "abcdefghijk" --length 5 --ellipsis 3""",
)
@click.argument("text")
@click.option("--length", type=int, default=None, help="Maximum kept characters.")
@click.option("--ellipsis", "ellipsis_count", type=int, default=None, help="Dots to append.")
@click.pass_obj
def shorten_cmd(app: AppContext, text: str, length: int | None, ellipsis_count: int | None) -> None:
    """Cut TEXT down and append an ellipsis."""
    length = app.settings.text.shorten_length if length is None else length
    if ellipsis_count is None:
        ellipsis_count = app.settings.text.ellipsis_count
    app.emit(
        app.run(
            "shorten",
            lambda: shorten(text, length, ellipsis_count),
            data={"text": text, "length": length, "ellipsis_count": ellipsis_count},
        )
    )


@click.command(
    "slugify",
    cls=KitCommand,
    examples="""\
  snippetkit slugify "Hello World!"
  snippetkit --json slugify 'Release Notes 2.0'""",
)
@click.argument("text")
@click.pass_obj
def slugify_cmd(app: AppContext, text: str) -> None:
    """Turn TEXT into a URL slug."""
    app.emit(app.run("slugify", lambda: slugify(text), data={"text": text}))


@click.group(
    cls=KitGroup,
    examples="""\
  snippetkit case snake helloWorld
  snippetkit case camel hello_world""",
)
def case() -> None:
    """Convert between camelCase and snake_case."""


@case.command(examples="  snippetkit case snake helloWorld")
@click.argument("text")
@click.pass_obj
def snake(app: AppContext, text: str) -> None:
    """camelCase TEXT to snake_case."""
    app.emit(app.run("camel_to_snake_case", lambda: camel_to_snake_case(text), data={"text": text}))


@case.command(examples="  snippetkit case camel hello-world")
@click.argument("text")
@click.pass_obj
def camel(app: AppContext, text: str) -> None:
    """snake_case or kebab-case TEXT to camelCase."""
    app.emit(app.run("snake_to_camel_case", lambda: snake_to_camel_case(text), data={"text": text}))
