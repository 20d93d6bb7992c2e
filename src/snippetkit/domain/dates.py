"""Human-readable distance between two points in time.

Months and years use average lengths (30.44 and 365.25 days), so results
near calendar boundaries can differ from exact calendar arithmetic.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from snippetkit.diagnostics import DiagnosticSink, report
from snippetkit.validation import ArgKind, invalid, validate

SECOND_MS = 1000
MINUTE_MS = 60 * SECOND_MS
HOUR_MS = 60 * MINUTE_MS
DAY_MS = 24 * HOUR_MS
MONTH_MS = 2_630_016_000  # 30.44 days
YEAR_MS = 31_557_600_000  # 365.25 days

UNITS: tuple[tuple[str, int], ...] = (
    ("year", YEAR_MS),
    ("month", MONTH_MS),
    ("day", DAY_MS),
    ("hour", HOUR_MS),
    ("minute", MINUTE_MS),
    ("second", SECOND_MS),
)

_ONE_MS = timedelta(milliseconds=1)


def format_count(count: int, unit: str) -> str:
    """``"1 minute"``, ``"2 minutes"``, ``"0 seconds"``."""
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def get_time_between(
    first_date: datetime,
    second_date: datetime,
    *,
    sink: DiagnosticSink | None = None,
) -> str | None:
    """Describe the distance between two datetimes in its largest whole unit.

    Order does not matter.

    Examples:
        >>> d = datetime(2024, 1, 1)
        >>> get_time_between(d, d + timedelta(seconds=90))
        '1 minute'
        >>> get_time_between(d, d)
        '0 seconds'
    """
    check = validate(
        "get_time_between",
        ("first_date", first_date, ArgKind.DATETIME),
        ("second_date", second_date, ArgKind.DATETIME),
    )
    if check.ok and (first_date.tzinfo is None) != (second_date.tzinfo is None):
        check = invalid(
            "get_time_between",
            "first_date and second_date must both be naive or both be timezone-aware",
        )
    if not check.ok:
        report(check, sink)
        return None

    elapsed_ms = abs(second_date - first_date) // _ONE_MS
    for unit, unit_ms in UNITS:
        count = elapsed_ms // unit_ms
        if count:
            return format_count(count, unit)
    return format_count(0, "second")
