"""Diagnostic sinks: where validation failures and timings go.

The active sink lives in a ContextVar so a caller (or a test) can swap it
for a block of code with :func:`use_sink`, or pass ``sink=`` directly to
any validated function.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

import structlog

from snippetkit.result import ToolResult


@runtime_checkable
class DiagnosticSink(Protocol):
    """Receiver for non-fatal diagnostics."""

    def invalid_argument(self, result: ToolResult) -> None: ...

    def timing(self, label: str, duration_ms: float) -> None: ...


class LoggingSink:
    """Default sink: emits structlog events on the ``snippetkit.diagnostics`` logger.

    The structlog logger wraps a stdlib logger rather than going through the
    configured factory, so events always end up in ``logging``. Before
    :func:`~snippetkit.config.logging.configure_logging` runs, warnings reach
    stderr through logging's last-resort handler and timings stay silent.
    """

    def __init__(self, logger_name: str = "snippetkit.diagnostics") -> None:
        self._log = structlog.wrap_logger(logging.getLogger(logger_name))

    def invalid_argument(self, result: ToolResult) -> None:
        error = result.error
        self._log.warning(
            "invalid_argument",
            op=result.op,
            code=error.code if error else None,
            message=error.message if error else None,
            **(error.detail if error else {}),
        )

    def timing(self, label: str, duration_ms: float) -> None:
        self._log.info("timing", label=label, duration_ms=round(duration_ms, 3))


@dataclass
class CollectingSink:
    """In-memory sink that records everything it receives."""

    failures: list[ToolResult] = field(default_factory=list)
    timings: list[tuple[str, float]] = field(default_factory=list)

    def invalid_argument(self, result: ToolResult) -> None:
        self.failures.append(result)

    def timing(self, label: str, duration_ms: float) -> None:
        self.timings.append((label, duration_ms))

    @property
    def last_failure(self) -> ToolResult | None:
        return self.failures[-1] if self.failures else None


_DEFAULT_SINK = LoggingSink()
_current_sink: ContextVar[DiagnosticSink] = ContextVar("_current_sink", default=_DEFAULT_SINK)


def get_sink() -> DiagnosticSink:
    """Return the sink active in the current context."""
    return _current_sink.get()


def resolve_sink(sink: DiagnosticSink | None) -> DiagnosticSink:
    return sink if sink is not None else _current_sink.get()


@contextmanager
def use_sink(sink: DiagnosticSink) -> Generator[DiagnosticSink]:
    """Route diagnostics to *sink* for the duration of the block."""
    token = _current_sink.set(sink)
    try:
        yield sink
    finally:
        _current_sink.reset(token)


def report(result: ToolResult, sink: DiagnosticSink | None = None) -> None:
    """Send a failed validation result to *sink* (or the active one)."""
    resolve_sink(sink).invalid_argument(result)
