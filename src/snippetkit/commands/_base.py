"""Click command classes that carry sample invocations.

``--examples`` prints the sample invocations and exits, so ``--help``
only has to mention that they exist.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click

EXAMPLES_HINT = "Run with --examples for sample invocations."


def _attach_examples(cmd: click.Command, examples: str) -> None:
    text = textwrap.indent(textwrap.dedent(examples).strip("\n"), "  ")

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(text)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show sample invocations and exit.",
        )
    )
    if cmd.epilog is None:
        cmd.epilog = EXAMPLES_HINT


class KitCommand(click.Command):
    """Command accepting an ``examples=`` block of sample command lines."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _attach_examples(self, examples)


class KitGroup(click.Group):
    """Group whose subcommands are :class:`KitCommand` by default."""

    command_class = KitCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _attach_examples(self, examples)
