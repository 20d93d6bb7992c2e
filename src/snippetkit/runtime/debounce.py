"""Trailing-edge debounce on the asyncio event loop.

INVARIANT: A Debounced wrapper owns exactly one timer slot. Every call
cancels the pending timer (if any) before scheduling a new one, so at most
one deferred invocation per wrapper is ever pending.
"""

from __future__ import annotations

import asyncio
import functools
import inspect
import logging
from collections.abc import Callable
from typing import Any, Generic, ParamSpec

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 300

_P = ParamSpec("_P")


class Debounced(Generic[_P]):
    """Callable wrapper that defers *func* until calls stop for *timeout_ms*.

    Only the arguments of the most recent call are used. Return values of
    the deferred call are discarded; coroutine results are scheduled as
    tasks. Calling the wrapper requires a running event loop.

    Invocation context is explicit: wrap a bound method or a
    ``functools.partial`` to carry a receiver.
    """

    def __init__(self, func: Callable[_P, Any], timeout_ms: float = DEFAULT_TIMEOUT_MS) -> None:
        functools.update_wrapper(self, func)
        self._func = func
        self.timeout_ms = timeout_ms
        self._timer: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task[Any]] = set()

    @property
    def pending(self) -> bool:
        """Whether a deferred invocation is scheduled."""
        return self._timer is not None

    def __call__(self, *args: _P.args, **kwargs: _P.kwargs) -> None:
        loop = asyncio.get_running_loop()
        self.cancel()
        self._timer = loop.call_later(self.timeout_ms / 1000, self._fire, args, kwargs)

    def cancel(self) -> None:
        """Drop the pending invocation, if any."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _fire(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        self._timer = None
        logger.debug("Debounced call fired: %s", getattr(self._func, "__qualname__", self._func))
        result = self._func(*args, **kwargs)
        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            # Hold a reference until done so the task is not garbage collected.
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)


def debounce(func: Callable[_P, Any], timeout_ms: float = DEFAULT_TIMEOUT_MS) -> Debounced[_P]:
    """Return a trailing debounce wrapper around *func*.

    Each call to ``debounce`` creates an independent timer slot.

    Usage::

        save_later = debounce(store.save, timeout_ms=500)
        save_later(draft)  # cancelled by the next call
        save_later(draft)  # fires 500 ms after this one
    """
    return Debounced(func, timeout_ms)
