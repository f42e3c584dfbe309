"""Restaurant service.

Restaurants are the tenants themselves, so their access rules differ from
other resources:

- anyone authenticated can create one and becomes its creator and member
- members and admins can read and update it
- only admins can delete it; deletion first dissociates every member
- admins, or managers who are members, manage the member list; the
  creator can never be removed
"""

from typing import Any, List, Mapping, Optional

import structlog

from application.membership.service import MembershipService
from domain.restaurant.entity import Restaurant
from domain.restaurant.filters import RestaurantFilter
from domain.shared.errors import ForbiddenError, NotFoundError
from domain.shared.pagination import Pagination
from domain.shared.ports.document_store import InSet
from domain.user.actor import Actor
from domain.user.entity import User
from infrastructure.persistence.repositories.restaurant import RestaurantRepository

logger = structlog.get_logger(__name__)

# Membership and ownership are managed through dedicated operations.
_PROTECTED_FIELDS = ("restaurant_id", "created_by", "associated_users")


class RestaurantService:
    def __init__(self, repository: RestaurantRepository, membership: MembershipService) -> None:
        self.repository = repository
        self.membership = membership

    async def _get_or_raise(self, restaurant_id: str) -> Restaurant:
        restaurant = await self.repository.get(restaurant_id)
        if restaurant is None:
            raise NotFoundError("Restaurant", restaurant_id)
        return restaurant

    def _require_member_or_admin(self, actor: Actor, restaurant: Restaurant) -> None:
        if not actor.is_admin and not restaurant.has_member(actor.id):
            raise ForbiddenError(f"You do not have access to restaurant {restaurant.restaurant_id}")

    def _require_membership_manager(self, actor: Actor, restaurant: Restaurant, verb: str) -> None:
        if actor.is_admin:
            return
        if not (actor.is_manager and restaurant.has_member(actor.id)):
            raise ForbiddenError(
                f"Only admins or managers associated with this restaurant can {verb} users"
            )

    async def create(self, actor: Actor, data: Mapping[str, Any]) -> Restaurant:
        """Create a restaurant owned by the actor."""
        document = {k: v for k, v in data.items() if k not in _PROTECTED_FIELDS}
        document["restaurant_id"] = await self.repository.next_business_id()
        document["created_by"] = actor.id
        document["associated_users"] = [actor.id]
        restaurant = self.repository.from_document(document)

        await self.repository.add(restaurant)
        await self.membership.associate(actor.id, restaurant.restaurant_id)

        logger.info(
            "Restaurant created",
            restaurant_id=restaurant.restaurant_id,
            actor_id=actor.id,
        )
        return restaurant

    async def find_all(
        self,
        actor: Actor,
        filters: RestaurantFilter,
        pagination: Optional[Pagination] = None,
    ) -> List[Restaurant]:
        """List restaurants; non-admins only see the ones they belong to."""
        predicates = filters.to_predicates()
        if not actor.is_admin:
            visible = await self.membership.visible_restaurant_ids(actor)
            if not visible:
                return []
            predicates.append(InSet("restaurant_id", tuple(visible)))
        return await self.repository.find(predicates, pagination or Pagination())

    async def get(self, actor: Actor, restaurant_id: str) -> Restaurant:
        restaurant = await self._get_or_raise(restaurant_id)
        self._require_member_or_admin(actor, restaurant)
        return restaurant

    async def update(
        self, actor: Actor, restaurant_id: str, changes: Mapping[str, Any]
    ) -> Restaurant:
        """
        Apply a partial update to the restaurant profile.

        Raises:
            NotFoundError: If the restaurant does not exist
            ForbiddenError: If the actor is neither admin nor member, or
                changes target the id, creator or member list
        """
        restaurant = await self._get_or_raise(restaurant_id)
        self._require_member_or_admin(actor, restaurant)

        changes = dict(changes)
        requested_id = changes.pop("restaurant_id", None)
        if requested_id is not None and requested_id != restaurant_id:
            raise ForbiddenError("Cannot change the id of an existing restaurant")
        for field in ("created_by", "associated_users"):
            if field in changes:
                raise ForbiddenError(f"{field} cannot be changed through an update")

        document = self.repository.to_document(restaurant)
        document.update(changes)
        updated = self.repository.from_document(document)
        await self.repository.save(updated)

        logger.info("Restaurant updated", restaurant_id=restaurant_id, actor_id=actor.id)
        return updated

    async def delete(self, actor: Actor, restaurant_id: str) -> None:
        """Delete a restaurant after dissociating all of its members (admin only)."""
        restaurant = await self._get_or_raise(restaurant_id)
        if not actor.is_admin:
            raise ForbiddenError("Only admins can delete restaurants")

        for user_id in restaurant.associated_users:
            await self.membership.dissociate(user_id, restaurant_id)
        await self.repository.remove(restaurant_id)

        logger.info(
            "Restaurant deleted",
            restaurant_id=restaurant_id,
            actor_id=actor.id,
            dissociated_users=len(restaurant.associated_users),
        )

    async def add_user(self, actor: Actor, restaurant_id: str, user_id: str) -> Restaurant:
        """Associate a user with the restaurant (no-op when already associated)."""
        restaurant = await self._get_or_raise(restaurant_id)
        self._require_membership_manager(actor, restaurant, "add")

        if not restaurant.add_user(user_id):
            return restaurant

        await self.repository.save(restaurant)
        await self.membership.associate(user_id, restaurant_id)

        logger.info(
            "User added to restaurant",
            restaurant_id=restaurant_id,
            user_id=user_id,
            actor_id=actor.id,
        )
        return restaurant

    async def remove_user(self, actor: Actor, restaurant_id: str, user_id: str) -> Restaurant:
        """
        Dissociate a user from the restaurant.

        Raises:
            NotFoundError: If the restaurant does not exist
            ForbiddenError: If the actor may not manage members, or user_id
                is the restaurant creator
        """
        restaurant = await self._get_or_raise(restaurant_id)
        self._require_membership_manager(actor, restaurant, "remove")

        if not restaurant.remove_user(user_id):
            return restaurant

        await self.repository.save(restaurant)
        await self.membership.dissociate(user_id, restaurant_id)

        logger.info(
            "User removed from restaurant",
            restaurant_id=restaurant_id,
            user_id=user_id,
            actor_id=actor.id,
        )
        return restaurant

    async def list_users(self, actor: Actor, restaurant_id: str) -> List[User]:
        """Users associated with the restaurant, in association order."""
        restaurant = await self._get_or_raise(restaurant_id)
        self._require_member_or_admin(actor, restaurant)

        users = await self.membership.find_users_by_ids(restaurant.associated_users)
        by_id = {user.user_id: user for user in users}
        return [by_id[u] for u in restaurant.associated_users if u in by_id]
