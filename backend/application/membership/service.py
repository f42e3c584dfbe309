"""Restaurant membership service.

Owns the user <-> restaurant association (both sides) and answers the
access questions every restaurant-scoped resource asks.
"""

from typing import Iterable, List, Optional

import structlog

from domain.shared.errors import ForbiddenError, NotFoundError
from domain.shared.ports.document_store import Equals, InSet, Predicate
from domain.shared.tenancy import CORE_RESTAURANT_ID, is_core
from domain.shared.validation import unique
from domain.user.actor import Actor
from domain.user.entity import Role, User
from infrastructure.persistence.repositories.restaurant import RestaurantRepository
from infrastructure.persistence.repositories.user import UserRepository

logger = structlog.get_logger(__name__)


class MembershipService:
    """Access policy and membership bookkeeping.

    Examples:
        >>> membership = MembershipService(restaurants, users)
        >>> await membership.has_access("u1", "RST-000002", Role.MEMBER)
        True
    """

    def __init__(self, restaurants: RestaurantRepository, users: UserRepository) -> None:
        self.restaurants = restaurants
        self.users = users

    async def find_user_by_id(self, user_id: str) -> Optional[User]:
        return await self.users.get(user_id)

    async def has_access(self, actor_id: str, restaurant_id: str, actor_role: Role) -> bool:
        """Check whether an actor may act on a restaurant.

        Admins always have access. Anyone else needs to be among the
        restaurant's associated users. A missing restaurant yields False,
        callers check existence first when they need to tell the cases apart.
        """
        if actor_role == Role.ADMIN:
            return True

        restaurant = await self.restaurants.get(restaurant_id)
        if restaurant is None:
            return False
        return restaurant.has_member(actor_id)

    async def require_access(self, actor: Actor, restaurant_id: str) -> None:
        """Raise ForbiddenError unless the actor has access to the restaurant."""
        if not await self.has_access(actor.id, restaurant_id, actor.role):
            logger.info(
                "Access denied",
                actor_id=actor.id,
                restaurant_id=restaurant_id,
            )
            raise ForbiddenError(f"You do not have access to restaurant {restaurant_id}")

    async def visible_restaurant_ids(self, actor: Actor, include_core: bool = False) -> List[str]:
        """Restaurants a non-admin actor may list, core appended on request."""
        user = await self.find_user_by_id(actor.id)
        restaurant_ids = list(user.associated_restaurants) if user else []
        if include_core:
            restaurant_ids.append(CORE_RESTAURANT_ID)
        return unique(restaurant_ids)

    async def restaurant_scope(
        self,
        actor: Actor,
        restaurant_id: Optional[str] = None,
        include_core: bool = False,
    ) -> List[Predicate]:
        """Build the restaurant predicate for a listing.

        Args:
            actor: Caller
            restaurant_id: Explicit restaurant filter, if any
            include_core: Whether core catalog entries are visible to everyone

        Returns:
            Predicates to AND with the resource filter; empty means unrestricted

        Raises:
            ForbiddenError: If a non-admin filters on a restaurant they cannot access
        """
        if restaurant_id is not None:
            if include_core and is_core(restaurant_id):
                return [Equals("restaurant_id", CORE_RESTAURANT_ID)]

            await self.require_access(actor, restaurant_id)
            if include_core:
                return [InSet("restaurant_id", (CORE_RESTAURANT_ID, restaurant_id))]
            return [Equals("restaurant_id", restaurant_id)]

        if actor.is_admin:
            return []

        visible = await self.visible_restaurant_ids(actor, include_core=include_core)
        return [InSet("restaurant_id", tuple(visible))]

    async def associate(self, user_id: str, restaurant_id: str) -> User:
        """Record the user side of a membership.

        Users are provisioned on first authentication; a user added to a
        restaurant before ever signing in gets a member record right away so
        both sides of the relation stay consistent.
        """
        user = await self.find_user_by_id(user_id)
        if user is None:
            user = User(user_id=user_id, role=Role.MEMBER, associated_restaurants=[restaurant_id])
            await self.users.add(user)
            logger.info("Provisioned user through membership", user_id=user_id)
            return user

        if user.associate(restaurant_id):
            await self.users.save(user)
        return user

    async def dissociate(self, user_id: str, restaurant_id: str) -> Optional[User]:
        """Drop the user side of a membership. Unknown users are ignored."""
        user = await self.find_user_by_id(user_id)
        if user is None:
            return None

        if user.dissociate(restaurant_id):
            await self.users.save(user)
        return user

    async def require_restaurant(self, restaurant_id: str) -> None:
        """Raise NotFoundError when the restaurant does not exist."""
        if await self.restaurants.get(restaurant_id) is None:
            raise NotFoundError("Restaurant", restaurant_id)

    async def find_users_by_ids(self, user_ids: Iterable[str]) -> List[User]:
        return await self.users.find_by_ids(user_ids)
