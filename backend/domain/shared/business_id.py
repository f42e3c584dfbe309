"""Human readable business identifiers (``PREFIX-######``).

Identifiers are derived from the highest id already stored in the
collection. Two concurrent creations can compute the same next id; the
sequence is meant for a low-concurrency back office and is not atomic.
"""

from typing import Optional

ALLERGY_PREFIX = "ALG"
EQUIPMENT_PREFIX = "EQP"
INGREDIENT_PREFIX = "ING"
MENU_ITEM_PREFIX = "MID"
MENU_SECTION_PREFIX = "MSC"
MENU_PREFIX = "MNU"
RECIPE_PREFIX = "RCP"
RESTAURANT_PREFIX = "RST"

ID_DIGITS = 6


def format_business_id(prefix: str, number: int) -> str:
    """Format a business id.

    Examples:
        >>> format_business_id("ING", 42)
        'ING-000042'
    """
    return f"{prefix}-{number:0{ID_DIGITS}d}"


def next_business_id(prefix: str, last_id: Optional[str]) -> str:
    """Compute the id following the highest stored one.

    Args:
        prefix: Entity prefix (e.g. "ING")
        last_id: Highest existing id for the collection, None when empty

    Returns:
        Next business id, ``PREFIX-000001`` for an empty collection

    Raises:
        ValueError: If last_id has no numeric suffix

    Examples:
        >>> next_business_id("RST", None)
        'RST-000001'
        >>> next_business_id("RST", "RST-000009")
        'RST-000010'
    """
    if not last_id:
        return format_business_id(prefix, 1)

    _, _, suffix = last_id.partition("-")
    if not suffix.isdigit():
        raise ValueError(f"Malformed business id: {last_id}")

    return format_business_id(prefix, int(suffix) + 1)
