"""Field validators shared by entity invariants."""

import re
from typing import Iterable, List, Optional, TypeVar

from domain.shared.errors import InvalidInputError

T = TypeVar("T")

TIME_OF_DAY_PATTERN = re.compile(r"^([01]?[0-9]|2[0-3]):[0-5][0-9]$")


def require_text(value: Optional[str], field: str) -> str:
    """Return value stripped, rejecting missing or blank strings."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(field, "must be a non-empty string")
    return value.strip()


def require_positive(value: Optional[float], field: str) -> None:
    if value is None or value <= 0:
        raise InvalidInputError(field, "must be greater than 0")


def require_non_negative(value: Optional[float], field: str) -> None:
    if value is None or value < 0:
        raise InvalidInputError(field, "must be greater than or equal to 0")


def validate_time_of_day(value: Optional[str], field: str) -> None:
    """Validate an optional ``HH:MM`` time string.

    Raises:
        InvalidInputError: If value is set and not a valid 24h time

    Examples:
        >>> validate_time_of_day("09:30", "start_time")
        >>> validate_time_of_day(None, "start_time")
    """
    if value is None:
        return
    if not isinstance(value, str) or not TIME_OF_DAY_PATTERN.match(value):
        raise InvalidInputError(field, f"'{value}' is not a valid time (HH:MM)")


def unique(values: Iterable[T]) -> List[T]:
    """Deduplicate while keeping first-seen order."""
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result
