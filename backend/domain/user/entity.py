"""User entity and roles."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List

from domain.shared.validation import require_text, unique


class Role(str, Enum):
    """Actor roles, from most to least privileged."""

    ADMIN = "admin"
    MANAGER = "manager"
    MEMBER = "member"

    @classmethod
    def from_claim(cls, value: Any) -> "Role":
        """Resolve a role from an identity-provider claim.

        The claim may be a single string or a list of strings; the most
        privileged known role wins and anything unknown maps to MEMBER.

        Examples:
            >>> Role.from_claim("admin")
            <Role.ADMIN: 'admin'>
            >>> Role.from_claim(["user", "manager"])
            <Role.MANAGER: 'manager'>
            >>> Role.from_claim(None)
            <Role.MEMBER: 'member'>
        """
        values = value if isinstance(value, (list, tuple)) else [value]
        names = {str(v).lower() for v in values if v is not None}
        for role in cls:
            if role.value in names:
                return role
        return cls.MEMBER


@dataclass
class User:
    """User known to the back office.

    Identified by the identity-provider subject. ``associated_restaurants``
    mirrors ``Restaurant.associated_users``; both sides are updated together
    by the membership service.

    Examples:
        >>> user = User(user_id="auth0|123", role=Role.MANAGER)
        >>> user.associate("RST-000002")
        True
        >>> user.associated_restaurants
        ['RST-000002']
    """

    user_id: str
    role: Role = Role.MEMBER
    associated_restaurants: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.user_id = require_text(self.user_id, "user_id")
        self.role = Role(self.role)
        self.associated_restaurants = unique(self.associated_restaurants)

    def is_associated_with(self, restaurant_id: str) -> bool:
        return restaurant_id in self.associated_restaurants

    def associate(self, restaurant_id: str) -> bool:
        """Add a restaurant. Returns False when already associated."""
        if self.is_associated_with(restaurant_id):
            return False
        self.associated_restaurants.append(restaurant_id)
        return True

    def dissociate(self, restaurant_id: str) -> bool:
        """Remove a restaurant. Returns False when it was not associated."""
        if not self.is_associated_with(restaurant_id):
            return False
        self.associated_restaurants.remove(restaurant_id)
        return True
