# ABOUTME: Tolerant numeric and range parsing for values scraped from wiki markup
# ABOUTME: Malformed or missing input always falls back to the caller's default

import re

_RANGE_SEPARATOR = re.compile(r"[-–]")


def _try_parse_int(text: str | None) -> int | None:
    """Parse an integer ignoring surrounding whitespace and thousands separators."""
    if text is None:
        return None

    cleaned = text.strip().replace(",", "")
    if not cleaned:
        return None

    try:
        return int(cleaned)
    except ValueError:
        return None


def parse_int_or_default(text: str | None, default: int) -> int:
    """Parse an integer from scraped text, returning default when that is not possible.

    Args:
        text: Raw text, possibly None or blank
        default: Value returned for missing or non-numeric input

    Returns:
        The parsed integer or the default
    """
    value = _try_parse_int(text)
    return default if value is None else value


def parse_range_or_default(text: str | None, default: int) -> tuple[int, int]:
    """Parse a "low - high" range, defaulting each end independently.

    Text without a separator yields the single value as both ends.

    Args:
        text: Raw text such as "5140 - 5396", possibly None or blank
        default: Value used for any end that cannot be parsed

    Returns:
        A (low, high) tuple
    """
    if text is None or not text.strip():
        return default, default

    parts = _RANGE_SEPARATOR.split(text, maxsplit=1)
    if len(parts) == 1:
        value = parse_int_or_default(parts[0], default)
        return value, value

    low = _try_parse_int(parts[0])
    high = _try_parse_int(parts[1])

    if low is not None and high is not None:
        return min(low, high), max(low, high)

    return (
        default if low is None else low,
        default if high is None else high,
    )
