# ABOUTME: Retry logic for wiki page requests using tenacity
# ABOUTME: Converts httpx failures into fetch errors and retries only the transient ones

from collections.abc import Awaitable, Callable
from typing import TypeVar

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from bulbapedia_crawler.extraction.base import (
    FetchConnectionError,
    FetchError,
    FetchStatusError,
    FetchTimeoutError,
)
from bulbapedia_crawler.utils.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


def convert_exception(e: Exception, path: str | None = None) -> FetchError:
    """Convert httpx exceptions to fetch errors for uniform handling."""
    if isinstance(e, FetchError):
        return e
    if isinstance(e, httpx.TimeoutException):
        return FetchTimeoutError(f"Request timed out: {e}", path=path)
    if isinstance(e, httpx.HTTPStatusError):
        status_code = e.response.status_code
        return FetchStatusError(f"Wiki returned HTTP {status_code}", path=path, status_code=status_code)
    if isinstance(e, httpx.TransportError):
        return FetchConnectionError(f"Connection failed: {e}", path=path)
    return FetchError(f"Request failed: {e}", path=path)


def is_transient(e: BaseException) -> bool:
    """Whether a fetch error is worth another attempt."""
    if isinstance(e, (FetchTimeoutError, FetchConnectionError)):
        return True
    if isinstance(e, FetchStatusError):
        return e.status_code in RETRYABLE_STATUS_CODES
    return False


def _log_retry(retry_state: RetryCallState) -> None:
    error = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Retrying wiki request",
        attempt=retry_state.attempt_number,
        error=str(error),
        error_type=type(error).__name__,
    )


async def fetch_with_retry(
    operation: Callable[[], Awaitable[T]],
    path: str | None = None,
    max_attempts: int = 3,
    min_wait: float = 1.0,
    max_wait: float = 10.0,
    multiplier: float = 2.0,
) -> T:
    """Run a request, retrying transient failures with exponential backoff.

    Args:
        operation: Zero-argument coroutine factory performing one attempt
        path: Requested page path, attached to raised errors
        max_attempts: Total attempts before giving up
        min_wait: Minimum wait between attempts in seconds
        max_wait: Maximum wait between attempts in seconds
        multiplier: Exponential backoff multiplier

    Returns:
        The operation's result

    Raises:
        FetchError: The converted error of the last attempt
    """
    async for attempt in AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=multiplier, min=min_wait, max=max_wait),
        retry=retry_if_exception(is_transient),
        before_sleep=_log_retry,
        reraise=True,
    ):
        with attempt:
            try:
                return await operation()
            except FetchError:
                raise
            except Exception as e:
                raise convert_exception(e, path) from e
