"""Recipe service."""

from typing import List, Sequence

from application.enrichment.service import EnrichmentService
from application.enrichment.views import RecipeView
from application.membership.service import MembershipService
from application.shared.resource_service import TenantResourceService
from domain.recipe.entity import Recipe
from infrastructure.persistence.repositories.recipe import RecipeRepository


class RecipeService(TenantResourceService[Recipe, RecipeView]):
    """Recipes are returned with ingredient names on every step item."""

    resource_name = "Recipe"

    def __init__(
        self,
        repository: RecipeRepository,
        membership: MembershipService,
        enrichment: EnrichmentService,
    ) -> None:
        super().__init__(repository, membership)
        self.enrichment = enrichment

    async def present(self, entities: Sequence[Recipe]) -> List[RecipeView]:
        return await self.enrichment.enrich_recipes(entities)
