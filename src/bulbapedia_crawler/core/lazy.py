# ABOUTME: Single-flight, clearable, asynchronously loaded value for asyncio code
# ABOUTME: Concurrent callers share one in-flight load; the populated path takes no lock

import asyncio
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Generic, TypeVar

from bulbapedia_crawler.utils.logging import get_logger

T = TypeVar("T")


class CacheState(str, Enum):
    """Lifecycle of a lazily loaded value."""

    EMPTY = "empty"
    LOADING = "loading"
    POPULATED = "populated"


class AsyncLazy(Generic[T]):
    """A light-weight asynchronous variant of a lazily initialized value.

    The supplier runs at most once per empty -> populated transition. Callers
    arriving while a load is in flight wait for that same load. A waiter that
    times out or is cancelled leaves the load and the other waiters untouched.
    If the load fails, every waiter sees the error and the value goes back to
    empty, so the next call starts a fresh load.
    """

    def __init__(self, supplier: Callable[[], Awaitable[T]], name: str = "value"):
        self._supplier = supplier
        self._name = name
        self._lock = asyncio.Lock()
        self._state = CacheState.EMPTY
        self._value: T | None = None
        self._task: asyncio.Task[T] | None = None
        self.logger = get_logger(__name__).bind(lazy=name)

    @property
    def state(self) -> CacheState:
        return self._state

    async def get(self, timeout: float | None = None) -> T:
        """Get the value, loading it if it was not loaded yet.

        Args:
            timeout: Seconds to wait for an in-flight load, None to wait indefinitely

        Returns:
            The loaded value

        Raises:
            TimeoutError: If this caller stopped waiting (the load keeps running)
        """
        if self._state is CacheState.POPULATED:
            return self._value  # type: ignore[return-value]

        async with self._lock:
            if self._state is CacheState.POPULATED:
                return self._value  # type: ignore[return-value]

            if self._task is None:
                self.logger.debug("Starting load")
                self._state = CacheState.LOADING
                self._task = asyncio.ensure_future(self._load())
                self._task.add_done_callback(_consume_exception)

            task = self._task

        if timeout is None:
            return await asyncio.shield(task)
        return await asyncio.wait_for(asyncio.shield(task), timeout)

    async def _load(self) -> T:
        try:
            value = await self._supplier()
        except BaseException as e:
            self.logger.warning("Load failed", error=str(e), error_type=type(e).__name__)
            self._state = CacheState.EMPTY
            self._task = None
            raise

        self._value = value
        self._state = CacheState.POPULATED
        self._task = None
        self.logger.info("Loaded", result_count=len(value) if hasattr(value, "__len__") else None)
        return value

    async def clear(self) -> bool:
        """Clear the value, if it is present.

        An in-flight load is not affected and will populate the value when done.

        Returns:
            True if the value was loaded and has been cleared, False otherwise
        """
        if self._state is not CacheState.POPULATED:
            return False

        async with self._lock:
            if self._state is not CacheState.POPULATED:
                return False
            self._value = None
            self._state = CacheState.EMPTY
            self.logger.info("Cleared")
            return True


def _consume_exception(task: asyncio.Task) -> None:
    # Waiters may all have gone away; mark the failure as retrieved
    if not task.cancelled():
        task.exception()
