"""
Enrichment Service.

Attaches cross-referenced fields (ingredient names, allergy rollups) to a
batch of entities without querying storage per item or per ingredient:

1. Collect the ingredient ids referenced by the whole batch
2. Load them, then their sub-ingredients, one batched lookup per depth level
3. Run the allergy derivation against the in-memory graph with one memo
4. Resolve allergy names with one batched lookup

Dangling references degrade to the raw id (names) or contribute nothing
(allergies); they never fail the batch.
"""

from typing import Dict, Iterable, List, Sequence

import structlog

from application.enrichment.views import (
    IngredientView,
    MenuItemView,
    NamedRef,
    RecipeStepView,
    RecipeView,
    StepIngredientView,
)
from domain.ingredient.allergy_graph import (
    AllergyMemo,
    IngredientNode,
    all_allergies,
    derived_only,
)
from domain.ingredient.entity import Ingredient
from domain.menu_item.entity import MenuItem
from domain.recipe.entity import Recipe
from domain.shared.validation import unique
from infrastructure.persistence.repositories.allergy import AllergyRepository
from infrastructure.persistence.repositories.ingredient import IngredientRepository

logger = structlog.get_logger(__name__)


class EnrichmentService:
    """Batched cross-reference resolution.

    Example:
        >>> service = EnrichmentService(ingredients, allergies)
        >>> views = await service.enrich_menu_items(menu_items)
        >>> views[0].allergies
        [NamedRef(id='ALG-000001', name='Gluten')]
    """

    def __init__(self, ingredients: IngredientRepository, allergies: AllergyRepository) -> None:
        self.ingredients = ingredients
        self.allergies = allergies

    async def load_graph(
        self,
        ingredient_ids: Iterable[str],
        known: Sequence[Ingredient] = (),
    ) -> Dict[str, IngredientNode]:
        """Load every ingredient reachable from the given ids.

        One batched lookup is issued per depth level of the sub-ingredient
        graph; ids already requested are never requested again, so cycles
        and shared sub-ingredients cost nothing extra.

        Args:
            ingredient_ids: Roots of the walk
            known: Ingredients already in hand (not fetched again)

        Returns:
            Reachable ingredients keyed by id (dangling ids are absent)
        """
        graph: Dict[str, IngredientNode] = {
            ingredient.ingredient_id: IngredientNode.from_ingredient(ingredient)
            for ingredient in known
        }
        requested = set(graph)

        frontier = [i for i in unique(ingredient_ids) if i not in requested]
        for node in list(graph.values()):
            frontier.extend(s for s in node.sub_ingredient_ids if s not in requested)
        frontier = unique(frontier)

        lookups = 0
        while frontier:
            requested.update(frontier)
            fetched = await self.ingredients.find_by_ids(frontier)
            lookups += 1

            next_frontier: List[str] = []
            for ingredient in fetched:
                node = IngredientNode.from_ingredient(ingredient)
                graph[node.ingredient_id] = node
                next_frontier.extend(
                    s for s in node.sub_ingredient_ids if s not in requested
                )
            frontier = unique(next_frontier)

        logger.debug("Ingredient graph loaded", nodes=len(graph), lookups=lookups)
        return graph

    async def _allergy_names(self, allergy_ids: Iterable[str]) -> Dict[str, str]:
        allergies = await self.allergies.find_by_ids(allergy_ids)
        return {allergy.allergy_id: allergy.name for allergy in allergies}

    async def enrich_ingredients(self, ingredients: Sequence[Ingredient]) -> List[IngredientView]:
        """Attach derived allergies, sub-ingredient names and the core flag."""
        if not ingredients:
            return []

        graph = await self.load_graph([], known=ingredients)
        memo: AllergyMemo = {}

        views = []
        for ingredient in ingredients:
            details = [
                NamedRef(id=sub_id, name=graph[sub_id].name)
                for sub_id in ingredient.sub_ingredient_ids
                if sub_id in graph
            ]
            views.append(
                IngredientView(
                    ingredient_id=ingredient.ingredient_id,
                    name=ingredient.name,
                    restaurant_id=ingredient.restaurant_id,
                    allergy_ids=list(ingredient.allergy_ids),
                    sub_ingredient_ids=list(ingredient.sub_ingredient_ids),
                    categories=list(ingredient.categories),
                    image_url=ingredient.image_url,
                    derived_allergy_ids=derived_only(ingredient.ingredient_id, graph, memo),
                    sub_ingredient_details=details,
                    is_core_ingredient=ingredient.is_core,
                )
            )
        return views

    async def allergies_of(self, ingredient: Ingredient) -> List[NamedRef]:
        """Full allergy set of one ingredient, with names."""
        graph = await self.load_graph([], known=[ingredient])
        allergy_ids = all_allergies(ingredient.ingredient_id, graph)
        names = await self._allergy_names(allergy_ids)
        return [NamedRef(id=a, name=names[a]) for a in allergy_ids if names.get(a)]

    async def enrich_menu_items(self, menu_items: Sequence[MenuItem]) -> List[MenuItemView]:
        """Attach ingredient names and the transitive allergy rollup."""
        if not menu_items:
            return []

        graph = await self.load_graph(i for item in menu_items for i in item.ingredient_ids)
        memo: AllergyMemo = {}

        rollups: List[List[str]] = []
        for item in menu_items:
            rollup: List[str] = []
            for ingredient_id in item.ingredient_ids:
                rollup.extend(all_allergies(ingredient_id, graph, memo))
            rollups.append(unique(rollup))

        names = await self._allergy_names(a for rollup in rollups for a in rollup)

        views = []
        for item, rollup in zip(menu_items, rollups):
            views.append(
                MenuItemView(
                    menu_item_id=item.menu_item_id,
                    name=item.name,
                    restaurant_id=item.restaurant_id,
                    description=item.description,
                    ingredient_ids=list(item.ingredient_ids),
                    image_url=item.image_url,
                    ingredient_names=[
                        graph[i].name if i in graph else i for i in item.ingredient_ids
                    ],
                    # Allergies without a resolvable name are not displayed.
                    allergies=[NamedRef(id=a, name=names[a]) for a in rollup if names.get(a)],
                )
            )

        logger.info(
            "Menu items enriched",
            items=len(menu_items),
            ingredients=len(graph),
            allergies=len(names),
        )
        return views

    async def enrich_recipes(self, recipes: Sequence[Recipe]) -> List[RecipeView]:
        """Attach the ingredient name to every step ingredient item."""
        if not recipes:
            return []

        ingredient_ids = unique(i for recipe in recipes for i in recipe.ingredient_ids())
        found = await self.ingredients.find_by_ids(ingredient_ids)
        names = {ingredient.ingredient_id: ingredient.name for ingredient in found}

        views = []
        for recipe in recipes:
            steps = [
                RecipeStepView(
                    text=step.text,
                    order=step.order if step.order is not None else index,
                    equipment_ids=list(step.equipment_ids),
                    ingredient_items=[
                        StepIngredientView(
                            ingredient_id=item.ingredient_id,
                            units=item.units,
                            measure=item.measure,
                            ingredient_name=names.get(item.ingredient_id, item.ingredient_id),
                        )
                        for item in step.ingredient_items
                    ],
                    image_url=step.image_url,
                )
                for index, step in enumerate(recipe.steps)
            ]
            views.append(
                RecipeView(
                    recipe_id=recipe.recipe_id,
                    name=recipe.name,
                    restaurant_id=recipe.restaurant_id,
                    servings=recipe.servings,
                    prep_time=recipe.prep_time,
                    total_time=recipe.total_time,
                    description=recipe.description,
                    image_url=recipe.image_url,
                    steps=steps,
                )
            )
        return views
