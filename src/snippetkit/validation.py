"""Argument validation for the public utilities.

Each check inspects one argument and either passes or describes the
problem. :func:`validate` folds a list of checks into a single
:class:`ToolResult`: ``ok`` when every argument conforms, otherwise the
first failure with code ``INVALID_ARGUMENT``.
"""

from __future__ import annotations

import math
from collections import UserString
from datetime import datetime
from enum import StrEnum
from typing import Any

from snippetkit.result import ToolError, ToolResult

INVALID_ARGUMENT = "INVALID_ARGUMENT"
EMPTY_RANGE = "EMPTY_RANGE"


class ArgKind(StrEnum):
    """Accepted argument shapes."""

    TEXT = "string"
    NUMBER = "number"
    CALLABLE = "function"
    SEQUENCE = "array"
    DATETIME = "datetime"


def is_text(value: Any) -> bool:
    return isinstance(value, (str, UserString))


def is_number(value: Any) -> bool:
    """True for finite ints and floats. Booleans, NaN and infinities are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


_PREDICATES = {
    ArgKind.TEXT: is_text,
    ArgKind.NUMBER: is_number,
    ArgKind.CALLABLE: callable,
    ArgKind.SEQUENCE: is_sequence,
    ArgKind.DATETIME: lambda value: isinstance(value, datetime),
}


def type_name(value: Any) -> str:
    """Short type label used in diagnostic messages."""
    if value is None:
        return "None"
    return type(value).__name__


def invalid(op: str, message: str, *, code: str = INVALID_ARGUMENT, **detail: Any) -> ToolResult:
    """Build a failed ToolResult for *op*."""
    return ToolResult(
        ok=False,
        op=op,
        error=ToolError(code=code, message=message, detail=detail),
    )


def validate(op: str, *checks: tuple[str, Any, ArgKind]) -> ToolResult:
    """Validate ``(name, value, kind)`` triples in order.

    Stops at the first argument that does not conform.

    Examples:
        >>> validate("slugify", ("text", "Hi", ArgKind.TEXT)).ok
        True
        >>> validate("slugify", ("text", 3, ArgKind.TEXT)).error.message
        'text: string expected, int provided'
    """
    for name, value, kind in checks:
        if not _PREDICATES[kind](value):
            return invalid(
                op,
                f"{name}: {kind.value} expected, {type_name(value)} provided",
                argument=name,
                expected=kind.value,
                received=type_name(value),
            )
    return ToolResult(ok=True, op=op)
