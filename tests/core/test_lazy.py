# ABOUTME: Tests for the single-flight asynchronous lazy value
# ABOUTME: Covers shared loads, clearing, failures and waiter cancellation

import asyncio

import pytest

from bulbapedia_crawler.core.lazy import AsyncLazy, CacheState


class CountingSupplier:
    """Supplier that blocks until released and counts its invocations."""

    def __init__(self, result=None):
        self.calls = 0
        self.release = asyncio.Event()
        self.result = result if result is not None else [1, 2, 3]

    async def __call__(self):
        self.calls += 1
        await self.release.wait()
        return list(self.result)


class TestAsyncLazy:
    @pytest.mark.asyncio
    async def test_initial_state(self):
        lazy = AsyncLazy(CountingSupplier())
        assert lazy.state is CacheState.EMPTY

    @pytest.mark.asyncio
    async def test_concurrent_gets_share_one_load(self):
        supplier = CountingSupplier()
        lazy = AsyncLazy(supplier)

        waiters = [asyncio.create_task(lazy.get()) for _ in range(10)]
        await asyncio.sleep(0)
        assert lazy.state is CacheState.LOADING

        supplier.release.set()
        results = await asyncio.gather(*waiters)

        assert supplier.calls == 1
        assert all(result == [1, 2, 3] for result in results)
        assert all(result is results[0] for result in results)
        assert lazy.state is CacheState.POPULATED

    @pytest.mark.asyncio
    async def test_populated_value_is_reused(self):
        supplier = CountingSupplier()
        supplier.release.set()
        lazy = AsyncLazy(supplier)

        first = await lazy.get()
        second = await lazy.get()

        assert first is second
        assert supplier.calls == 1

    @pytest.mark.asyncio
    async def test_clear_then_reload(self):
        supplier = CountingSupplier()
        supplier.release.set()
        lazy = AsyncLazy(supplier)

        await lazy.get()
        assert await lazy.clear() is True
        assert lazy.state is CacheState.EMPTY

        await lazy.get()
        assert supplier.calls == 2

    @pytest.mark.asyncio
    async def test_clear_when_empty(self):
        lazy = AsyncLazy(CountingSupplier())
        assert await lazy.clear() is False

    @pytest.mark.asyncio
    async def test_clear_during_load_keeps_load(self):
        supplier = CountingSupplier()
        lazy = AsyncLazy(supplier)

        waiter = asyncio.create_task(lazy.get())
        await asyncio.sleep(0)

        assert await lazy.clear() is False
        supplier.release.set()

        assert await waiter == [1, 2, 3]
        assert lazy.state is CacheState.POPULATED

    @pytest.mark.asyncio
    async def test_empty_result_is_cached(self):
        calls = 0

        async def supplier():
            nonlocal calls
            calls += 1
            return []

        lazy = AsyncLazy(supplier)
        assert await lazy.get() == []
        assert await lazy.get() == []
        assert calls == 1

    @pytest.mark.asyncio
    async def test_failure_reaches_all_waiters_and_allows_retry(self):
        attempts = 0
        release = asyncio.Event()

        async def supplier():
            nonlocal attempts
            attempts += 1
            await release.wait()
            if attempts == 1:
                raise RuntimeError("wiki unavailable")
            return ["ok"]

        lazy = AsyncLazy(supplier)
        waiters = [asyncio.create_task(lazy.get()) for _ in range(3)]
        await asyncio.sleep(0)
        release.set()

        results = await asyncio.gather(*waiters, return_exceptions=True)
        assert all(isinstance(result, RuntimeError) for result in results)
        assert lazy.state is CacheState.EMPTY

        assert await lazy.get() == ["ok"]
        assert attempts == 2

    @pytest.mark.asyncio
    async def test_timed_out_waiter_does_not_cancel_load(self):
        supplier = CountingSupplier()
        lazy = AsyncLazy(supplier)

        patient = asyncio.create_task(lazy.get())
        with pytest.raises(TimeoutError):
            await lazy.get(timeout=0.01)

        assert lazy.state is CacheState.LOADING
        supplier.release.set()

        assert await patient == [1, 2, 3]
        assert supplier.calls == 1

    @pytest.mark.asyncio
    async def test_cancelled_waiter_does_not_affect_others(self):
        supplier = CountingSupplier()
        lazy = AsyncLazy(supplier)

        cancelled = asyncio.create_task(lazy.get())
        other = asyncio.create_task(lazy.get())
        await asyncio.sleep(0)

        cancelled.cancel()
        with pytest.raises(asyncio.CancelledError):
            await cancelled

        supplier.release.set()
        assert await other == [1, 2, 3]
        assert supplier.calls == 1
        assert lazy.state is CacheState.POPULATED
