"""Tests for the asyncio debounce wrapper."""

from __future__ import annotations

import asyncio
import functools

import pytest

from snippetkit.runtime.debounce import DEFAULT_TIMEOUT_MS, Debounced, debounce


class TestDebounce:
    async def test_rapid_calls_fire_once_with_last_arguments(self) -> None:
        calls: list[tuple[int, str]] = []
        wrapped = debounce(lambda n, tag="": calls.append((n, tag)), timeout_ms=20)

        wrapped(1)
        wrapped(2, tag="b")
        wrapped(3, tag="c")
        assert calls == []

        await asyncio.sleep(0.08)
        assert calls == [(3, "c")]

    async def test_separate_windows_fire_separately(self) -> None:
        calls: list[int] = []
        wrapped = debounce(calls.append, timeout_ms=10)

        wrapped(1)
        await asyncio.sleep(0.05)
        wrapped(2)
        await asyncio.sleep(0.05)
        assert calls == [1, 2]

    async def test_call_resets_the_window(self) -> None:
        calls: list[int] = []
        wrapped = debounce(calls.append, timeout_ms=50)

        wrapped(1)
        await asyncio.sleep(0.03)
        wrapped(2)
        await asyncio.sleep(0.03)
        assert calls == []  # 60ms since first call, only 30ms since last
        await asyncio.sleep(0.06)
        assert calls == [2]

    async def test_instances_have_independent_timers(self) -> None:
        calls: list[str] = []
        first = debounce(calls.append, timeout_ms=10)
        second = debounce(calls.append, timeout_ms=10)

        first("a")
        second("b")
        await asyncio.sleep(0.05)
        assert sorted(calls) == ["a", "b"]

    async def test_pending_and_cancel(self) -> None:
        calls: list[int] = []
        wrapped = debounce(calls.append, timeout_ms=10)
        assert not wrapped.pending

        wrapped(1)
        assert wrapped.pending
        wrapped.cancel()
        assert not wrapped.pending

        await asyncio.sleep(0.04)
        assert calls == []

    async def test_pending_clears_after_firing(self) -> None:
        wrapped = debounce(lambda: None, timeout_ms=5)
        wrapped()
        await asyncio.sleep(0.03)
        assert not wrapped.pending

    async def test_coroutine_function_is_awaited(self) -> None:
        done = asyncio.Event()
        seen: list[str] = []

        async def handler(value: str) -> None:
            await asyncio.sleep(0)
            seen.append(value)
            done.set()

        wrapped = debounce(handler, timeout_ms=5)
        wrapped("x")
        wrapped("y")
        await asyncio.wait_for(done.wait(), timeout=1)
        assert seen == ["y"]

    async def test_bound_method_keeps_receiver(self) -> None:
        class Counter:
            def __init__(self) -> None:
                self.total = 0

            def add(self, amount: int) -> None:
                self.total += amount

        counter = Counter()
        wrapped = debounce(counter.add, timeout_ms=5)
        wrapped(5)
        wrapped(7)
        await asyncio.sleep(0.03)
        assert counter.total == 7

    async def test_partial_supplies_context(self) -> None:
        calls: list[tuple[str, int]] = []
        wrapped = debounce(functools.partial(lambda ctx, n: calls.append((ctx, n)), "ctx"), 5)
        wrapped(1)
        await asyncio.sleep(0.03)
        assert calls == [("ctx", 1)]

    def test_defaults_and_metadata(self) -> None:
        def save() -> None:
            """Persist things."""

        wrapped = debounce(save)
        assert isinstance(wrapped, Debounced)
        assert wrapped.timeout_ms == DEFAULT_TIMEOUT_MS == 300
        assert wrapped.__name__ == "save"
        assert wrapped.__doc__ == "Persist things."
        assert wrapped.__wrapped__ is save

    def test_requires_running_loop(self) -> None:
        wrapped = debounce(lambda: None)
        with pytest.raises(RuntimeError):
            wrapped()
