"""Async sleep and wall-clock measurement."""

from __future__ import annotations

import asyncio
import inspect
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from snippetkit.diagnostics import DiagnosticSink, report, resolve_sink
from snippetkit.validation import ArgKind, validate

DEFAULT_LABEL = "default"


async def sleep(ms: float) -> None:
    """Suspend the calling coroutine for *ms* milliseconds.

    Other tasks on the loop keep running in the meantime.
    """
    await asyncio.sleep(ms / 1000)


@dataclass
class TimingReport:
    """Start/stop markers for one labelled measurement."""

    label: str
    start_time: float = field(default_factory=time.perf_counter)
    end_time: float | None = None

    @property
    def duration_ms(self) -> float:
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time) * 1000

    def end(self) -> None:
        self.end_time = time.perf_counter()


async def measure_time(
    func: Callable[[], Any],
    label: str = DEFAULT_LABEL,
    *,
    sink: DiagnosticSink | None = None,
) -> None:
    """Run *func* and report how long it took under *label*.

    Awaitable results are awaited before the clock stops. The elapsed time
    goes to the diagnostic sink; nothing is returned. Exceptions raised by
    *func* propagate and no timing is reported for that run.
    """
    check = validate("measure_time", ("func", func, ArgKind.CALLABLE))
    if not check.ok:
        report(check, sink)
        return None

    timing = TimingReport(label=label)
    result = func()
    if inspect.isawaitable(result):
        await result

    timing.end()
    resolve_sink(sink).timing(label, timing.duration_ms)
    return None
