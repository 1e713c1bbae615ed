# ABOUTME: Logging configuration and structured logging helpers
# ABOUTME: Re-exports the configuration entry points and logger utilities

from .config import LoggingMode, configure_logging, detect_logging_mode, get_logging_status
from .utils import get_logger, log_api_call, log_extraction_step, with_command_context, with_pokemon_context

__all__ = [
    # Configuration
    "LoggingMode",
    "configure_logging",
    "detect_logging_mode",
    "get_logging_status",
    # Utilities
    "get_logger",
    "log_api_call",
    "log_extraction_step",
    "with_command_context",
    "with_pokemon_context",
]
