"""Tenancy rules shared by every restaurant-scoped resource."""

from typing import Optional

from domain.shared.errors import ForbiddenError

# Restaurant owning the shared catalog every tenant can read.
CORE_RESTAURANT_ID = "RST-000001"


def is_core(restaurant_id: Optional[str]) -> bool:
    """Check whether a restaurant id denotes the shared core catalog."""
    return restaurant_id == CORE_RESTAURANT_ID


def ensure_same_restaurant(current: str, requested: Optional[str]) -> None:
    """Reject attempts to move an entity to another restaurant.

    Args:
        current: Restaurant id stored on the entity
        requested: Restaurant id carried by an update payload (if any)

    Raises:
        ForbiddenError: If requested is set and differs from current

    Examples:
        >>> ensure_same_restaurant("RST-000002", None)
        >>> ensure_same_restaurant("RST-000002", "RST-000002")
    """
    if requested is not None and requested != current:
        raise ForbiddenError("Cannot change the restaurant of an existing resource")
