"""snippetkit: small, independent utility functions.

Every utility is importable from the package root and also available on
the aggregate :data:`toolkit` object under the same name.
"""

from __future__ import annotations

from snippetkit.diagnostics import CollectingSink, DiagnosticSink, LoggingSink, use_sink
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
from snippetkit.result import ToolError, ToolResult
from snippetkit.runtime.debounce import Debounced, debounce
from snippetkit.runtime.repeat import times
from snippetkit.runtime.timing import measure_time, sleep
from snippetkit.aggregate import Toolkit, toolkit

__version__ = "0.1.0"

__all__ = [
    "CollectingSink",
    "Debounced",
    "DiagnosticSink",
    "LoggingSink",
    "ToolError",
    "ToolResult",
    "Toolkit",
    "__version__",
    "camel_to_snake_case",
    "chunk",
    "debounce",
    "get_random_number_in_range",
    "get_time_between",
    "measure_time",
    "remove_duplicates",
    "shorten",
    "sized_decimal",
    "sleep",
    "slugify",
    "snake_to_camel_case",
    "string_to_color",
    "times",
    "toolkit",
    "use_sink",
]
