"""Command: bounded random integer."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

import click

from snippetkit.commands._base import KitCommand
from snippetkit.domain.randomness import get_random_number_in_range

if TYPE_CHECKING:
    from snippetkit.commands._context import AppContext


@click.command(
    "random",
    cls=KitCommand,
    examples="""\
  snippetkit random
  snippetkit random --lower 1 --upper 6
  snippetkit -q random --lower 1 --upper 100 --seed 7""",
)
@click.option("--lower", type=float, default=None, help="Lower bound (rounded up).")
@click.option("--upper", type=float, default=None, help="Upper bound (rounded down).")
@click.option("--seed", type=int, default=None, help="Seed for a reproducible draw.")
@click.pass_obj
def random_cmd(
    app: AppContext, lower: float | None, upper: float | None, seed: int | None
) -> None:
    """Pick an integer between two bounds, both included."""
    defaults = app.settings.random
    low = defaults.lower if lower is None else lower
    high = defaults.upper if upper is None else upper
    seed = defaults.seed if seed is None else seed
    rng = random.Random(seed) if seed is not None else None
    app.emit(
        app.run(
            "get_random_number_in_range",
            lambda: get_random_number_in_range(low, high, rng=rng),
            data={"lower": low, "upper": high},
        )
    )
