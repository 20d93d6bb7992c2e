"""Commands: time distance and measured sleep."""

from __future__ import annotations

import asyncio
from datetime import datetime
from typing import TYPE_CHECKING

import click

from snippetkit.commands._base import KitCommand
from snippetkit.domain.dates import get_time_between
from snippetkit.runtime.timing import measure_time, sleep

if TYPE_CHECKING:
    from snippetkit.commands._context import AppContext


class IsoDateTime(click.ParamType):
    """Click parameter accepting ISO 8601 timestamps."""

    name = "datetime"

    def convert(
        self, value: object, param: click.Parameter | None, ctx: click.Context | None
    ) -> datetime:
        if isinstance(value, datetime):
            return value
        try:
            return datetime.fromisoformat(str(value))
        except ValueError:
            self.fail(f"{value!r} is not an ISO 8601 datetime", param, ctx)


@click.command(
    cls=KitCommand,
    examples="""\
  snippetkit between 2024-01-01T00:00:00 2024-01-01T00:01:30
  snippetkit -q between 2020-01-01 2024-06-01""",
)
@click.argument("first", type=IsoDateTime())
@click.argument("second", type=IsoDateTime())
@click.pass_obj
def between(app: AppContext, first: datetime, second: datetime) -> None:
    """Describe the time between FIRST and SECOND in its largest unit."""
    app.emit(
        app.run(
            "get_time_between",
            lambda: get_time_between(first, second),
            data={"first": first.isoformat(), "second": second.isoformat()},
        )
    )


@click.command(
    "sleep",
    cls=KitCommand,
    examples="""\
  snippetkit sleep 250
  snippetkit --json sleep 100 --label warmup""",
)
@click.argument("ms", type=click.FloatRange(min=0))
@click.option("--label", default=None, help="Label for the timing report.")
@click.pass_obj
def sleep_cmd(app: AppContext, ms: float, label: str | None) -> None:
    """Sleep for MS milliseconds and report the measured time."""
    label = label or app.settings.timing.label
    result = app.run(
        "sleep",
        lambda: asyncio.run(measure_time(lambda: sleep(ms), label)),
        data={"ms": ms, "label": label},
    )
    if result.ok and label in result.timings:
        elapsed = result.timings[label]
        result = result.model_copy(update={"data": {**result.data, "value": elapsed}})
    app.emit(result)
