"""Tests for batched enrichment."""

import pytest
import pytest_asyncio

from application.enrichment.views import NamedRef
from domain.allergy.entity import Allergy
from domain.ingredient.entity import Ingredient
from domain.menu_item.entity import MenuItem
from domain.recipe.entity import Recipe, RecipeStep, StepIngredientItem


class LookupCounter:
    """Wraps a repository and counts batched id lookups."""

    def __init__(self, repository):
        self.repository = repository
        self.calls = []

    async def find_by_ids(self, ids):
        ids = list(ids)
        self.calls.append(ids)
        return await self.repository.find_by_ids(ids)


def ingredient(ingredient_id, name, allergies=(), subs=(), restaurant_id="RST-000002"):
    return Ingredient(
        ingredient_id=ingredient_id,
        name=name,
        restaurant_id=restaurant_id,
        allergy_ids=list(allergies),
        sub_ingredient_ids=list(subs),
    )


@pytest_asyncio.fixture
async def catalog(ingredient_repository, allergy_repository):
    for allergy in (
        Allergy(allergy_id="ALG-000001", name="Gluten"),
        Allergy(allergy_id="ALG-000002", name="Sesame"),
        Allergy(allergy_id="ALG-000003", name="Milk"),
    ):
        await allergy_repository.add(allergy)

    for item in (
        ingredient("ING-000001", "Bun", ["ALG-000001"], ["ING-000002"]),
        ingredient("ING-000002", "Sesame Seeds", ["ALG-000002"]),
        ingredient("ING-000003", "Cheese", ["ALG-000003"]),
        ingredient("ING-000004", "Patty", [], ["ING-000005"]),
        ingredient("ING-000005", "Spice Mix", [], ["ING-000004"]),
    ):
        await ingredient_repository.add(item)


def burger(menu_item_id="MID-000001", ingredient_ids=("ING-000001", "ING-000003")):
    return MenuItem(
        menu_item_id=menu_item_id,
        name="Burger",
        restaurant_id="RST-000002",
        ingredient_ids=list(ingredient_ids),
    )


class TestMenuItems:
    @pytest.mark.asyncio
    async def test_rollup_with_names(self, enrichment, catalog):
        [view] = await enrichment.enrich_menu_items([burger()])

        assert view.ingredient_names == ["Bun", "Cheese"]
        assert view.allergies == [
            NamedRef(id="ALG-000001", name="Gluten"),
            NamedRef(id="ALG-000002", name="Sesame"),
            NamedRef(id="ALG-000003", name="Milk"),
        ]

    @pytest.mark.asyncio
    async def test_dangling_ingredient_falls_back_to_id(self, enrichment, catalog):
        [view] = await enrichment.enrich_menu_items([burger(ingredient_ids=["ING-000404"])])

        assert view.ingredient_names == ["ING-000404"]
        assert view.allergies == []

    @pytest.mark.asyncio
    async def test_unnamed_allergies_are_dropped(
        self, enrichment, catalog, ingredient_repository
    ):
        await ingredient_repository.add(ingredient("ING-000006", "Mystery", ["ALG-000404"]))

        [view] = await enrichment.enrich_menu_items([burger(ingredient_ids=["ING-000006"])])

        assert view.allergies == []

    @pytest.mark.asyncio
    async def test_cyclic_ingredients_terminate(self, enrichment, catalog):
        [view] = await enrichment.enrich_menu_items([burger(ingredient_ids=["ING-000004"])])

        assert view.ingredient_names == ["Patty"]
        assert view.allergies == []

    @pytest.mark.asyncio
    async def test_batch_matches_one_by_one(self, enrichment, catalog):
        items = [
            burger("MID-000001", ["ING-000001"]),
            burger("MID-000002", ["ING-000003", "ING-000002"]),
            burger("MID-000003", ["ING-000004", "ING-000001"]),
        ]

        batched = await enrichment.enrich_menu_items(items)
        single = [(await enrichment.enrich_menu_items([item]))[0] for item in items]

        assert batched == single

    @pytest.mark.asyncio
    async def test_one_lookup_per_depth_level(
        self, ingredient_repository, allergy_repository, catalog
    ):
        from application.enrichment.service import EnrichmentService

        counter = LookupCounter(ingredient_repository)
        service = EnrichmentService(counter, allergy_repository)
        items = [burger(f"MID-00000{n}") for n in range(1, 6)]

        await service.enrich_menu_items(items)

        assert counter.calls == [["ING-000001", "ING-000003"], ["ING-000002"]]

    @pytest.mark.asyncio
    async def test_empty_batch(self, enrichment):
        assert await enrichment.enrich_menu_items([]) == []


class TestIngredients:
    @pytest.mark.asyncio
    async def test_derived_allergies_and_sub_ingredient_names(
        self, enrichment, catalog, ingredient_repository
    ):
        bun = await ingredient_repository.get("ING-000001")

        [view] = await enrichment.enrich_ingredients([bun])

        assert view.derived_allergy_ids == ["ALG-000002"]
        assert view.sub_ingredient_details == [NamedRef(id="ING-000002", name="Sesame Seeds")]
        assert view.is_core_ingredient is False

    @pytest.mark.asyncio
    async def test_allergies_of(self, enrichment, catalog, ingredient_repository):
        bun = await ingredient_repository.get("ING-000001")

        assert await enrichment.allergies_of(bun) == [
            NamedRef(id="ALG-000001", name="Gluten"),
            NamedRef(id="ALG-000002", name="Sesame"),
        ]


class TestRecipes:
    @pytest.mark.asyncio
    async def test_step_items_carry_ingredient_names(self, enrichment, catalog):
        recipe = Recipe(
            recipe_id="RCP-000001",
            name="Burger",
            restaurant_id="RST-000002",
            servings=1,
            prep_time=5,
            total_time=15,
            steps=[
                RecipeStep(
                    text="Assemble",
                    ingredient_items=[
                        StepIngredientItem("ING-000001", 1, "piece"),
                        StepIngredientItem("ING-000404", 2),
                    ],
                )
            ],
        )

        [view] = await enrichment.enrich_recipes([recipe])

        names = [item.ingredient_name for item in view.steps[0].ingredient_items]
        assert names == ["Bun", "ING-000404"]
        assert view.steps[0].order == 0
