"""Aggregate object exposing every utility by name.

``snippetkit.toolkit.slugify is snippetkit.slugify``; the aggregate holds
the same function objects as the flat exports.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, fields
from typing import Any

from snippetkit.domain.colors import string_to_color
from snippetkit.domain.dates import get_time_between
from snippetkit.domain.randomness import get_random_number_in_range
from snippetkit.domain.sequences import chunk, remove_duplicates
from snippetkit.domain.text import (
    camel_to_snake_case,
    shorten,
    sized_decimal,
    slugify,
    snake_to_camel_case,
)
from snippetkit.runtime.debounce import debounce
from snippetkit.runtime.repeat import times
from snippetkit.runtime.timing import measure_time, sleep


@dataclass(frozen=True)
class Toolkit:
    """Frozen bundle of the public utility functions."""

    sized_decimal: Callable[..., Any]
    debounce: Callable[..., Any]
    sleep: Callable[..., Any]
    times: Callable[..., Any]
    get_random_number_in_range: Callable[..., Any]
    shorten: Callable[..., Any]
    remove_duplicates: Callable[..., Any]
    measure_time: Callable[..., Any]
    slugify: Callable[..., Any]
    camel_to_snake_case: Callable[..., Any]
    snake_to_camel_case: Callable[..., Any]
    string_to_color: Callable[..., Any]
    chunk: Callable[..., Any]
    get_time_between: Callable[..., Any]

    def as_dict(self) -> dict[str, Callable[..., Any]]:
        """Return ``{name: function}`` for every bundled utility."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


toolkit = Toolkit(
    sized_decimal=sized_decimal,
    debounce=debounce,
    sleep=sleep,
    times=times,
    get_random_number_in_range=get_random_number_in_range,
    shorten=shorten,
    remove_duplicates=remove_duplicates,
    measure_time=measure_time,
    slugify=slugify,
    camel_to_snake_case=camel_to_snake_case,
    snake_to_camel_case=snake_to_camel_case,
    string_to_color=string_to_color,
    chunk=chunk,
    get_time_between=get_time_between,
)
