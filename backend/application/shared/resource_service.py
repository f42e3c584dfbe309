"""Generic CRUD orchestration for back-office resources.

Two shapes exist:

- ``TenantResourceService``: entities owned by a restaurant. Reads and
  writes are gated by the membership service; the owning restaurant is
  immutable after creation. With ``shares_core`` set, entities owned by the
  core restaurant are readable by everyone and writable by admins only.
- ``GlobalResourceService``: catalogs shared by every restaurant, with an
  optional admin-only restriction on writes.

Subclasses override ``present`` to enrich what they return.
"""

from typing import Any, Generic, List, Mapping, Optional, Protocol, Sequence, TypeVar

import structlog

from application.membership.service import MembershipService
from domain.shared.errors import ForbiddenError, NotFoundError
from domain.shared.pagination import Pagination
from domain.shared.ports.document_store import Predicate
from domain.shared.tenancy import ensure_same_restaurant, is_core
from domain.user.actor import Actor
from infrastructure.persistence.repositories.base import DocumentRepository

logger = structlog.get_logger(__name__)

TEntity = TypeVar("TEntity")
TView = TypeVar("TView")


class ResourceFilter(Protocol):
    def to_predicates(self) -> List[Predicate]:
        ...


class TenantFilter(ResourceFilter, Protocol):
    restaurant_id: Optional[str]


class _ResourceService(Generic[TEntity, TView]):
    resource_name = "Resource"

    def __init__(self, repository: DocumentRepository[TEntity]) -> None:
        self.repository = repository

    async def present(self, entities: Sequence[TEntity]) -> List[TView]:
        """Turn entities into the representation returned to callers."""
        return list(entities)  # type: ignore[arg-type]

    async def _present_one(self, entity: TEntity) -> TView:
        return (await self.present([entity]))[0]

    async def _get_or_raise(self, business_id: str) -> TEntity:
        entity = await self.repository.get(business_id)
        if entity is None:
            raise NotFoundError(self.resource_name, business_id)
        return entity

    async def _build_new(self, data: Mapping[str, Any]) -> TEntity:
        business_id = await self.repository.next_business_id()
        document = dict(data)
        document[self.repository.id_field] = business_id
        return self.repository.from_document(document)

    def _apply_changes(self, entity: TEntity, changes: Mapping[str, Any]) -> TEntity:
        document = self.repository.to_document(entity)
        document.update(changes)
        document[self.repository.id_field] = self.repository.business_id_of(entity)
        return self.repository.from_document(document)

    def _log(self, event: str, actor: Actor, business_id: str) -> None:
        logger.info(
            event,
            resource=self.resource_name,
            business_id=business_id,
            actor_id=actor.id,
        )


class TenantResourceService(_ResourceService[TEntity, TView]):
    """CRUD for restaurant-owned entities."""

    shares_core = False

    def __init__(
        self,
        repository: DocumentRepository[TEntity],
        membership: MembershipService,
    ) -> None:
        super().__init__(repository)
        self.membership = membership

    def _is_shared(self, restaurant_id: str) -> bool:
        return self.shares_core and is_core(restaurant_id)

    async def _require_read_access(self, actor: Actor, restaurant_id: str) -> None:
        if self._is_shared(restaurant_id):
            return
        await self.membership.require_access(actor, restaurant_id)

    async def _require_write_access(self, actor: Actor, restaurant_id: str) -> None:
        if self._is_shared(restaurant_id):
            if not actor.is_admin:
                raise ForbiddenError(
                    f"Only admins can modify core {self.resource_name.lower()}s"
                )
            return
        await self.membership.require_access(actor, restaurant_id)

    async def create(self, actor: Actor, data: Mapping[str, Any]) -> TView:
        """
        Create an entity owned by data["restaurant_id"].

        Raises:
            ForbiddenError: If the actor cannot write to that restaurant
            NotFoundError: If the owning restaurant does not exist
            InvalidInputError: If the data violates entity invariants
        """
        restaurant_id = data.get("restaurant_id")
        if restaurant_id and not self._is_shared(restaurant_id):
            await self.membership.require_restaurant(restaurant_id)
        if restaurant_id:
            await self._require_write_access(actor, restaurant_id)

        entity = await self._build_new(data)
        await self.repository.add(entity)
        self._log("Resource created", actor, self.repository.business_id_of(entity))
        return await self._present_one(entity)

    async def find_all(
        self,
        actor: Actor,
        filters: TenantFilter,
        pagination: Optional[Pagination] = None,
    ) -> List[TView]:
        """List entities visible to the actor, ordered by business id."""
        scope = await self.membership.restaurant_scope(
            actor, filters.restaurant_id, include_core=self.shares_core
        )
        entities = await self.repository.find(
            filters.to_predicates() + scope, pagination or Pagination()
        )
        return await self.present(entities)

    async def get(self, actor: Actor, business_id: str) -> TView:
        entity = await self._get_or_raise(business_id)
        await self._require_read_access(actor, getattr(entity, "restaurant_id"))
        return await self._present_one(entity)

    async def update(self, actor: Actor, business_id: str, changes: Mapping[str, Any]) -> TView:
        """
        Apply a partial update.

        Raises:
            NotFoundError: If the entity does not exist
            ForbiddenError: If the actor cannot write, or changes carry
                another restaurant_id
            InvalidInputError: If the result violates entity invariants
        """
        entity = await self._get_or_raise(business_id)
        restaurant_id = getattr(entity, "restaurant_id")
        await self._require_write_access(actor, restaurant_id)

        changes = dict(changes)
        ensure_same_restaurant(restaurant_id, changes.pop("restaurant_id", None))

        updated = self._apply_changes(entity, changes)
        await self.repository.save(updated)
        self._log("Resource updated", actor, business_id)
        return await self._present_one(updated)

    async def delete(self, actor: Actor, business_id: str) -> None:
        entity = await self._get_or_raise(business_id)
        await self._require_write_access(actor, getattr(entity, "restaurant_id"))
        await self.repository.remove(business_id)
        self._log("Resource deleted", actor, business_id)


class GlobalResourceService(_ResourceService[TEntity, TView]):
    """CRUD for catalogs shared by every restaurant."""

    admin_only_writes = False

    def _require_write_access(self, actor: Actor) -> None:
        if self.admin_only_writes and not actor.is_admin:
            raise ForbiddenError(f"Only admins can modify {self.resource_name.lower()}")

    async def create(self, actor: Actor, data: Mapping[str, Any]) -> TView:
        self._require_write_access(actor)
        entity = await self._build_new(data)
        await self.repository.add(entity)
        self._log("Resource created", actor, self.repository.business_id_of(entity))
        return await self._present_one(entity)

    async def find_all(
        self,
        actor: Actor,
        filters: ResourceFilter,
        pagination: Optional[Pagination] = None,
    ) -> List[TView]:
        entities = await self.repository.find(filters.to_predicates(), pagination or Pagination())
        return await self.present(entities)

    async def get(self, actor: Actor, business_id: str) -> TView:
        return await self._present_one(await self._get_or_raise(business_id))

    async def update(self, actor: Actor, business_id: str, changes: Mapping[str, Any]) -> TView:
        entity = await self._get_or_raise(business_id)
        self._require_write_access(actor)
        updated = self._apply_changes(entity, changes)
        await self.repository.save(updated)
        self._log("Resource updated", actor, business_id)
        return await self._present_one(updated)

    async def delete(self, actor: Actor, business_id: str) -> None:
        await self._get_or_raise(business_id)
        self._require_write_access(actor)
        await self.repository.remove(business_id)
        self._log("Resource deleted", actor, business_id)
