"""
Utility Functions
Helper functions for marshaling streaming request parameters.
"""

from enum import Enum
from typing import Iterable, Optional


def comma_separated(values: Iterable) -> str:
    """
    Render a sequence as the comma separated list the API expects.

    Args:
        values: Ids, keywords, coordinates or languages

    Returns:
        Comma separated string, empty when there is nothing to send
    """
    rendered = []
    for value in values:
        if isinstance(value, Enum):
            value = value.value
        rendered.append(str(value))
    return ",".join(rendered)


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def validate_count(count: Optional[int], max_count: int) -> None:
    """
    Check that a backfill count lies within [-max_count, +max_count].

    Args:
        count: Number of messages to backfill, None when not requested
        max_count: Largest magnitude the endpoint accepts

    Raises:
        ValueError: If the count is out of range
    """
    if abs(count or 0) > max_count:
        raise ValueError(f"count must be between -{max_count} and +{max_count}")


def as_items(values: Iterable) -> tuple:
    """
    Turn a sequence argument into a tuple of items.

    A bare string is a single item rather than a sequence of characters.
    """
    if isinstance(values, (str, bytes)):
        return (values,) if values else ()
    return tuple(values)
