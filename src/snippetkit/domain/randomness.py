"""Bounded pseudo-random integers (not for security use)."""

from __future__ import annotations

import math
import random

from snippetkit.diagnostics import DiagnosticSink, report
from snippetkit.validation import EMPTY_RANGE, ArgKind, invalid, validate


def get_random_number_in_range(
    lower: int | float = 0,
    upper: int | float = 10,
    *,
    rng: random.Random | None = None,
    sink: DiagnosticSink | None = None,
) -> int | None:
    """Return a uniformly chosen integer in ``[ceil(lower), floor(upper)]``.

    Args:
        lower: Smallest acceptable value (rounded up).
        upper: Largest acceptable value (rounded down).
        rng: Optional ``random.Random`` instance; defaults to the module RNG.
        sink: Diagnostic sink for invalid bounds.
    """
    check = validate(
        "get_random_number_in_range",
        ("lower", lower, ArgKind.NUMBER),
        ("upper", upper, ArgKind.NUMBER),
    )
    if not check.ok:
        report(check, sink)
        return None

    low = math.ceil(lower)
    high = math.floor(upper)
    if low > high:
        report(
            invalid(
                "get_random_number_in_range",
                f"no integer between {lower} and {upper}",
                code=EMPTY_RANGE,
                lower=lower,
                upper=upper,
            ),
            sink,
        )
        return None
    return (rng or random).randint(low, high)
