"""Restaurant aggregate."""

from dataclasses import dataclass, field
from typing import List, Optional

from domain.shared.errors import ForbiddenError
from domain.shared.validation import require_text, unique


@dataclass
class Restaurant:
    """Restaurant aggregate root, the unit of tenancy.

    Invariants:
    - created_by is always part of associated_users
    - created_by can never be removed from associated_users

    Examples:
        >>> restaurant = Restaurant(
        ...     restaurant_id="RST-000005",
        ...     name="Trattoria",
        ...     created_by="u1",
        ...     associated_users=["u1", "u2"],
        ... )
        >>> restaurant.remove_user("u2")
        True
        >>> restaurant.associated_users
        ['u1']
    """

    restaurant_id: str
    name: str
    created_by: str
    associated_users: List[str] = field(default_factory=list)
    description: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None

    def __post_init__(self) -> None:
        self.name = require_text(self.name, "name")
        self.created_by = require_text(self.created_by, "created_by")
        users = unique(self.associated_users)
        if self.created_by not in users:
            users.insert(0, self.created_by)
        self.associated_users = users

    def has_member(self, user_id: str) -> bool:
        return user_id in self.associated_users

    def add_user(self, user_id: str) -> bool:
        """Associate a user. Returns False when already associated."""
        if self.has_member(user_id):
            return False
        self.associated_users.append(user_id)
        return True

    def remove_user(self, user_id: str) -> bool:
        """Dissociate a user. Returns False when the user was not associated.

        Raises:
            ForbiddenError: If user_id is the restaurant creator
        """
        if user_id == self.created_by:
            raise ForbiddenError("Cannot remove the restaurant creator")
        if not self.has_member(user_id):
            return False
        self.associated_users.remove(user_id)
        return True
