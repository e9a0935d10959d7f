"""
Relative Time Parsing.

Helpers for the compact duration syntax used throughout time-series queries,
e.g. `"15m"` or `"1h-ago"`. A relative time expression is a positive integer
count, a unit, and the `-ago` suffix:

| Unit | Meaning  | Milliseconds        |
| ---- | -------- | ------------------- |
| `ms` | millis   | 1                   |
| `s`  | seconds  | 1 000               |
| `m`  | minutes  | 60 000              |
| `h`  | hours    | 3 600 000           |
| `d`  | days     | 86 400 000          |
| `w`  | weeks    | 604 800 000         |
| `n`  | months   | 30 days             |
| `y`  | years    | 365 days            |
"""

import re
from typing import Dict

from ..models.query.errors import InvalidConfigurationError

_UNIT_MS: Dict[str, int] = {
    "ms": 1,
    "s": 1_000,
    "m": 60_000,
    "h": 3_600_000,
    "d": 86_400_000,
    "w": 7 * 86_400_000,
    "n": 30 * 86_400_000,
    "y": 365 * 86_400_000,
}

_DURATION_RE = re.compile(r"^(\d+)(ms|s|m|h|d|w|n|y)$")
_AGO_SUFFIX = "-ago"


def parse_duration(duration: str) -> int:
    """
    Converts a duration such as `"1h"` or `"250ms"` into milliseconds.

    Args:
        duration: The duration string. Case-insensitive.

    Returns:
        The duration in milliseconds.

    Raises:
        InvalidConfigurationError: If the string is empty, the unit is unknown
            or the count is not a positive integer.
    """
    if not duration or not duration.strip():
        raise InvalidConfigurationError("Duration cannot be null or empty")

    match = _DURATION_RE.match(duration.strip().lower())
    if match is None:
        raise InvalidConfigurationError(f"Invalid duration '{duration}'")

    count = int(match.group(1))
    if count < 1:
        raise InvalidConfigurationError(
            f"Duration must be a positive integer, got '{duration}'"
        )
    return count * _UNIT_MS[match.group(2)]


def parse_relative_time(expression: str) -> int:
    """
    Parses a relative time expression like `"1h-ago"` into its offset in milliseconds.

    Raises:
        InvalidConfigurationError: If the `-ago` suffix is missing or the
            duration part is malformed.
    """
    if expression is None:
        raise InvalidConfigurationError("Relative time cannot be null")
    normalized = expression.strip().lower()
    if not normalized.endswith(_AGO_SUFFIX):
        raise InvalidConfigurationError(
            f"Invalid relative time '{expression}': expected '<count><unit>-ago'"
        )
    return parse_duration(normalized[: -len(_AGO_SUFFIX)])


def is_relative_time(expression: str) -> bool:
    """Returns `True` when `expression` parses as a relative time."""
    try:
        parse_relative_time(expression)
    except InvalidConfigurationError:
        return False
    return True


def resolve_relative_time(expression: str, now_ms: int) -> int:
    """
    Resolves a relative time expression against a reference instant.

    Args:
        expression: The relative time, e.g. `"2d-ago"`.
        now_ms: The reference instant, in epoch milliseconds.

    Returns:
        The absolute instant, in epoch milliseconds.
    """
    return now_ms - parse_relative_time(expression)
