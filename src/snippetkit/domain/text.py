"""Text formatting and case conversion."""

from __future__ import annotations

import math
import re
from collections import UserString
from decimal import Decimal

from snippetkit.diagnostics import DiagnosticSink, report
from snippetkit.validation import ArgKind, validate

_NON_SLUG = re.compile(r"[^\w-]+", re.ASCII)
_UPPER = re.compile(r"[A-Z]")
_SEPARATED_LOWER = re.compile(r"[-_][a-z]")


def _number_text(number: int | float) -> str:
    """Decimal text for *number* in the style of JavaScript's ``String(number)``.

    Floats use their shortest round-trip digits. Plain notation covers
    decimal exponents from -6 up to 21; anything else is written as
    ``d.ddde+N``. Integral floats carry no ``.0``.
    """
    if not isinstance(number, float):
        return str(number)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "-Infinity" if number < 0 else "Infinity"
    if number == 0:
        return "0"

    sign = "-" if number < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(number))).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    count = len(digits)
    point = count + exponent

    if count <= point <= 21:
        text = digits + "0" * (point - count)
    elif 0 < point <= 21:
        text = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        mantissa = digits[0] + (f".{digits[1:]}" if count > 1 else "")
        text = f"{mantissa}e{point - 1:+d}"
    return sign + text


def sized_decimal(number: int | float, length: int) -> str:
    """Zero-pad *number* to exactly *length* characters.

    Digits beyond *length* are dropped from the left.

    Examples:
        >>> sized_decimal(5, 3)
        '005'
        >>> sized_decimal(12345, 3)
        '345'
    """
    joined = "0" * length + _number_text(number)
    return joined[len(joined) - length :]


def shorten(
    text: str | UserString,
    length: int = 10,
    ellipsis_count: int = 3,
    *,
    sink: DiagnosticSink | None = None,
) -> str | None:
    """Cut *text* to *length* characters and append *ellipsis_count* dots.

    Text that already fits is returned unchanged.
    """
    check = validate(
        "shorten",
        ("text", text, ArgKind.TEXT),
        ("length", length, ArgKind.NUMBER),
        ("ellipsis_count", ellipsis_count, ArgKind.NUMBER),
    )
    if not check.ok:
        report(check, sink)
        return None

    value = str(text)
    if len(value) <= length:
        return value
    return value[: int(length)] + "." * int(ellipsis_count)


def slugify(text: str | UserString, *, sink: DiagnosticSink | None = None) -> str | None:
    """Lowercase, turn spaces into hyphens, drop anything but ``[A-Za-z0-9_-]``."""
    check = validate("slugify", ("text", text, ArgKind.TEXT))
    if not check.ok:
        report(check, sink)
        return None
    return _NON_SLUG.sub("", str(text).lower().replace(" ", "-"))


def camel_to_snake_case(
    text: str | UserString, *, sink: DiagnosticSink | None = None
) -> str | None:
    """Insert ``_`` before each uppercase ASCII letter and lowercase it.

    A leading capital also gets an underscore: ``"Hello"`` -> ``"_hello"``.
    """
    check = validate("camel_to_snake_case", ("text", text, ArgKind.TEXT))
    if not check.ok:
        report(check, sink)
        return None
    return _UPPER.sub(lambda m: f"_{m.group().lower()}", str(text))


def snake_to_camel_case(
    text: str | UserString, *, sink: DiagnosticSink | None = None
) -> str | None:
    """Lowercase *text*, then fold each ``-x`` / ``_x`` into ``X``."""
    check = validate("snake_to_camel_case", ("text", text, ArgKind.TEXT))
    if not check.ok:
        report(check, sink)
        return None
    return _SEPARATED_LOWER.sub(lambda m: m.group()[1].upper(), str(text).lower())
