"""Sequence helpers: deduplication and chunking."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Any, TypeVar

from snippetkit.diagnostics import DiagnosticSink, report
from snippetkit.validation import ArgKind, validate

T = TypeVar("T")


def remove_duplicates(
    arr: Sequence[Any], *, sink: DiagnosticSink | None = None
) -> list[Any] | None:
    """Return a new list keeping only the first occurrence of each value.

    Hashable values compare by equality; unhashable ones (lists, dicts)
    by identity.

    Examples:
        >>> remove_duplicates([1, 2, 2, 3, 1])
        [1, 2, 3]
    """
    check = validate("remove_duplicates", ("arr", arr, ArgKind.SEQUENCE))
    if not check.ok:
        report(check, sink)
        return None

    seen_values: set[Hashable] = set()
    seen_ids: set[int] = set()
    return [item for item in arr if _first_sighting(item, seen_values, seen_ids)]


def _first_sighting(item: Any, seen_values: set[Hashable], seen_ids: set[int]) -> bool:
    try:
        if item in seen_values:
            return False
        seen_values.add(item)
    except TypeError:
        # Unhashable: fall back to identity.
        if id(item) in seen_ids:
            return False
        seen_ids.add(id(item))
    return True


def chunk(array: Sequence[T], size: int) -> list[list[T]]:
    """Split *array* into consecutive lists of *size* items.

    The last chunk may be shorter.

    Examples:
        >>> chunk([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]

    Raises:
        ValueError: If *size* is smaller than 1.
    """
    if size < 1:
        msg = f"chunk size must be at least 1, got {size}"
        raise ValueError(msg)
    return [list(array[i : i + size]) for i in range(0, len(array), size)]
