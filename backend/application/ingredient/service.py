"""Ingredient service.

Ingredients owned by the core restaurant form a catalog shared with every
tenant: anyone can read them, only admins can create, change or delete
them. Listings always include the core catalog.
"""

from typing import List, Sequence

from application.enrichment.service import EnrichmentService
from application.enrichment.views import IngredientView, NamedRef
from application.membership.service import MembershipService
from application.shared.resource_service import TenantResourceService
from domain.ingredient.entity import Ingredient
from domain.user.actor import Actor
from infrastructure.persistence.repositories.ingredient import IngredientRepository


class IngredientService(TenantResourceService[Ingredient, IngredientView]):
    resource_name = "Ingredient"
    shares_core = True

    def __init__(
        self,
        repository: IngredientRepository,
        membership: MembershipService,
        enrichment: EnrichmentService,
    ) -> None:
        super().__init__(repository, membership)
        self.enrichment = enrichment

    async def present(self, entities: Sequence[Ingredient]) -> List[IngredientView]:
        return await self.enrichment.enrich_ingredients(entities)

    async def list_allergies(self, actor: Actor, ingredient_id: str) -> List[NamedRef]:
        """Every allergy of an ingredient, inherited ones included.

        Raises:
            NotFoundError: If the ingredient does not exist
            ForbiddenError: If the actor cannot read it
        """
        ingredient = await self._get_or_raise(ingredient_id)
        await self._require_read_access(actor, ingredient.restaurant_id)
        return await self.enrichment.allergies_of(ingredient)
