"""Repeated invocation."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from snippetkit.diagnostics import DiagnosticSink, report
from snippetkit.validation import ArgKind, invalid, validate


def times(n: int, func: Callable[[], Any], *, sink: DiagnosticSink | None = None) -> None:
    """Call *func* with no arguments *n* times, in sequence.

    Invalid input (non-number or negative/fractional *n*, non-callable
    *func*) is reported and nothing is called.
    """
    check = validate("times", ("n", n, ArgKind.NUMBER), ("func", func, ArgKind.CALLABLE))
    if check.ok and (n < 0 or int(n) != n):
        check = invalid(
            "times",
            f"n: non-negative whole number expected, got {n}",
            argument="n",
            received=n,
        )
    if not check.ok:
        report(check, sink)
        return

    for _ in range(int(n)):
        func()
