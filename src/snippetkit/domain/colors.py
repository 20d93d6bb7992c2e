"""Deterministic string-to-color hashing.

The hash reproduces a browser-side recurrence bit for bit, so colors
stored elsewhere stay stable:

    hash = code_unit + ((hash << 5) - hash)

where ``<<`` applies 32-bit signed wraparound (ToInt32) to its operand and
its result, while the subtraction and addition are exact. Characters are
consumed as UTF-16 code units.
"""

from __future__ import annotations

from collections import UserString

from snippetkit.diagnostics import DiagnosticSink, report
from snippetkit.validation import ArgKind, validate

_INT32_SPAN = 1 << 32
_INT32_MIN = 1 << 31


def to_int32(value: int) -> int:
    """Wrap *value* into the signed 32-bit range.

    Examples:
        >>> to_int32(2**31)
        -2147483648
        >>> to_int32(-1)
        -1
    """
    return (value + _INT32_MIN) % _INT32_SPAN - _INT32_MIN


def utf16_code_units(text: str) -> list[int]:
    """Split *text* into UTF-16 code units (surrogate pairs for astral chars)."""
    raw = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(raw[i : i + 2], "little") for i in range(0, len(raw), 2)]


def string_hash(text: str) -> int:
    value = 0
    for unit in utf16_code_units(text):
        value = unit + (to_int32(to_int32(value) << 5) - value)
    return value


def string_to_color(text: str | UserString, *, sink: DiagnosticSink | None = None) -> str | None:
    """Map *text* to a ``#rrggbb`` color.

    Examples:
        >>> string_to_color("a")
        '#610000'
        >>> string_to_color("")
        '#000000'
    """
    check = validate("string_to_color", ("text", text, ArgKind.TEXT))
    if not check.ok:
        report(check, sink)
        return None

    value = to_int32(string_hash(str(text)))
    channels = ((value >> (i * 8)) & 0xFF for i in range(3))
    return "#" + "".join(f"{channel:02x}" for channel in channels)
