# ABOUTME: Logger utilities with context binding and operation tracking decorators
# ABOUTME: Provides get_logger function and decorators for consistent structured logging

import functools
import time
import uuid
from collections.abc import Callable
from typing import Any, TypeVar

import structlog

# Type variable for decorated functions
F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance with automatic module detection.

    Args:
        name: Logger name, auto-detected from caller if None

    Returns:
        Configured structlog logger instance
    """
    if name is None:
        import inspect

        frame = inspect.currentframe()
        if frame and frame.f_back:
            name = frame.f_back.f_globals.get("__name__", "unknown")

    return structlog.get_logger(name or "bulbapedia_crawler")


def generate_operation_id() -> str:
    """Generate a unique operation ID for tracking requests."""
    return str(uuid.uuid4())[:8]


def log_api_call(api_name: str, **context) -> Callable[[F], F]:
    """Decorator to log wiki requests with timing details.

    The first string argument is reported as the requested path.

    Args:
        api_name: Name of the API being called
        **context: Additional context for the API call

    Returns:
        Decorated function with API call logging
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            logger = get_logger(func.__module__)
            call_id = generate_operation_id()

            path = kwargs.get("path")
            if path is None:
                path = next((arg for arg in args if isinstance(arg, str)), None)

            bound_logger = logger.bind(api_name=api_name, call_id=call_id, path=path, **context)

            bound_logger.debug(f"API call to {api_name}")
            start_time = time.time()

            try:
                result = await func(*args, **kwargs)
                duration = time.time() - start_time
                bound_logger.info(
                    f"API call to {api_name} succeeded", duration_seconds=round(duration, 3), success=True
                )
                return result

            except Exception as e:
                duration = time.time() - start_time
                bound_logger.error(
                    f"API call to {api_name} failed",
                    duration_seconds=round(duration, 3),
                    error=str(e),
                    error_type=type(e).__name__,
                    success=False,
                )
                raise

        return wrapper  # type: ignore[return-value]

    return decorator


def log_extraction_step(step_name: str) -> Callable[[F], F]:
    """Decorator to log extraction pipeline steps.

    Args:
        step_name: Name of the extraction step

    Returns:
        Decorated function with extraction step logging
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            logger = get_logger(func.__module__)

            # Pick up the entry being processed when a reference is passed
            number = None
            for arg in [*args, *kwargs.values()]:
                if hasattr(arg, "number") and isinstance(arg.number, int):
                    number = arg.number
                    break

            bound_logger = logger.bind(step=step_name, number=number, pipeline="wiki_extraction")

            bound_logger.info(f"Starting extraction step: {step_name}")
            start_time = time.time()

            try:
                result = await func(*args, **kwargs)
                duration = time.time() - start_time

                result_info = {}
                if isinstance(result, list):
                    result_info["result_count"] = len(result)
                if hasattr(result, "name"):
                    result_info["name"] = result.name

                bound_logger.info(
                    f"Completed extraction step: {step_name}",
                    duration_seconds=round(duration, 3),
                    success=True,
                    **result_info,
                )
                return result

            except Exception as e:
                duration = time.time() - start_time
                bound_logger.error(
                    f"Failed extraction step: {step_name}",
                    duration_seconds=round(duration, 3),
                    error=str(e),
                    error_type=type(e).__name__,
                    success=False,
                )
                raise

        return wrapper  # type: ignore[return-value]

    return decorator


class LogContext:
    """Context manager for binding logger context."""

    def __init__(self, logger: structlog.stdlib.BoundLogger, **context):
        self.logger = logger
        self.context = context
        self.bound_logger = None

    def __enter__(self) -> structlog.stdlib.BoundLogger:
        self.bound_logger = self.logger.bind(**self.context)
        return self.bound_logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None and self.bound_logger is not None:
            self.bound_logger.error("Context operation failed", error=str(exc_val), error_type=exc_type.__name__)


def with_pokemon_context(number: int) -> LogContext:
    """Create a logging context for operations on one catalog entry.

    Args:
        number: Catalog number for context binding

    Returns:
        LogContext manager with entry context
    """
    logger = get_logger()
    return LogContext(logger, number=number, entity_type="pokemon")


def with_command_context(command: str, **context) -> LogContext:
    """Create a logging context for a CLI command.

    Args:
        command: Name of the command
        **context: Additional context to bind

    Returns:
        LogContext manager with command context
    """
    logger = get_logger()
    operation_id = generate_operation_id()
    return LogContext(logger, command=command, operation_id=operation_id, **context)
