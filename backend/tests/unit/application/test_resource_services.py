"""Tests for the generic tenant and global resource services."""

import pytest

from domain.allergy.filters import AllergyFilter
from domain.equipment.filters import EquipmentFilter
from domain.menu.entity import Weekday
from domain.menu.filters import MenuFilter
from domain.menu_item.filters import MenuItemFilter
from domain.menu_section.filters import MenuSectionFilter
from domain.recipe.filters import RecipeFilter
from domain.shared.errors import ForbiddenError, InvalidInputError, NotFoundError


def burger_recipe(restaurant_id="RST-000002", **overrides):
    data = {
        "name": "Classic Burger",
        "restaurant_id": restaurant_id,
        "servings": 2,
        "prep_time": 10,
        "total_time": 25,
        "steps": [
            {
                "text": "Grill the patty",
                "equipment_ids": ["EQP-000001"],
                "ingredient_items": [{"ingredient_id": "ING-000001", "units": 150, "measure": "g"}],
            },
            {"text": "Assemble", "order": 7},
        ],
    }
    data.update(overrides)
    return data


class TestGlobalCatalogs:
    @pytest.mark.asyncio
    async def test_anyone_manages_allergies(self, allergy_service, member):
        created = await allergy_service.create(member, {"name": "Gluten"})
        updated = await allergy_service.update(member, created.allergy_id, {"logo_url": "https://x/g.png"})

        assert created.allergy_id == "ALG-000001"
        assert updated.logo_url == "https://x/g.png"
        assert [a.name for a in await allergy_service.find_all(member, AllergyFilter(name="glu"))] == [
            "Gluten"
        ]

        await allergy_service.delete(member, created.allergy_id)
        with pytest.raises(NotFoundError):
            await allergy_service.get(member, created.allergy_id)

    @pytest.mark.asyncio
    async def test_equipment_writes_are_admin_only(self, equipment_service, admin, manager):
        with pytest.raises(ForbiddenError):
            await equipment_service.create(manager, {"name": "Grill"})

        grill = await equipment_service.create(admin, {"name": "Grill"})

        assert (await equipment_service.get(manager, grill.equipment_id)).name == "Grill"
        assert len(await equipment_service.find_all(manager, EquipmentFilter())) == 1
        with pytest.raises(ForbiddenError):
            await equipment_service.update(manager, grill.equipment_id, {"name": "Oven"})
        with pytest.raises(ForbiddenError):
            await equipment_service.delete(manager, grill.equipment_id)

    @pytest.mark.asyncio
    async def test_missing_entity_is_not_found_before_forbidden(self, equipment_service, manager):
        with pytest.raises(NotFoundError):
            await equipment_service.delete(manager, "EQP-000404")


class TestRecipes:
    @pytest.mark.asyncio
    async def test_create_and_filter(self, recipe_service, tenants, member, admin):
        created = await recipe_service.create(member, burger_recipe())
        await recipe_service.create(admin, burger_recipe("RST-000003", name="Salad", prep_time=45))

        assert created.recipe_id == "RCP-000001"
        assert [s.order for s in created.steps] == [0, 7]

        by_equipment = await recipe_service.find_all(member, RecipeFilter(equipment_id="EQP-000001"))
        by_ingredient = await recipe_service.find_all(
            admin, RecipeFilter(ingredient_id="ING-000001")
        )
        quick = await recipe_service.find_all(admin, RecipeFilter(max_prep_time=30))

        assert [r.recipe_id for r in by_equipment] == ["RCP-000001"]
        assert [r.recipe_id for r in by_ingredient] == ["RCP-000001", "RCP-000002"]
        assert [r.recipe_id for r in quick] == ["RCP-000001"]

    @pytest.mark.asyncio
    async def test_invalid_servings(self, recipe_service, tenants, member):
        with pytest.raises(InvalidInputError, match="servings"):
            await recipe_service.create(member, burger_recipe(servings=0))

    @pytest.mark.asyncio
    async def test_update_replaces_steps(self, recipe_service, tenants, member):
        created = await recipe_service.create(member, burger_recipe())

        updated = await recipe_service.update(
            member, created.recipe_id, {"steps": [{"text": "Serve"}], "total_time": 30}
        )

        assert [s.text for s in updated.steps] == ["Serve"]
        assert updated.total_time == 30
        assert updated.prep_time == 10


class TestMenuItems:
    @pytest.mark.asyncio
    async def test_scoped_listing(self, menu_item_service, tenants, manager, outsider):
        await menu_item_service.create(manager, {"name": "Burger", "restaurant_id": "RST-000002"})
        await menu_item_service.create(outsider, {"name": "Quiche", "restaurant_id": "RST-000003"})

        mine = await menu_item_service.find_all(manager, MenuItemFilter())
        theirs = await menu_item_service.find_all(outsider, MenuItemFilter(name="QUI"))

        assert [i.name for i in mine] == ["Burger"]
        assert [i.menu_item_id for i in theirs] == ["MID-000002"]

    @pytest.mark.asyncio
    async def test_member_cannot_touch_other_restaurant(self, menu_item_service, tenants, outsider, member):
        item = await menu_item_service.create(outsider, {"name": "Quiche", "restaurant_id": "RST-000003"})

        with pytest.raises(ForbiddenError):
            await menu_item_service.get(member, item.menu_item_id)
        with pytest.raises(ForbiddenError):
            await menu_item_service.delete(member, item.menu_item_id)

    @pytest.mark.asyncio
    async def test_restaurant_cannot_change(self, menu_item_service, tenants, admin, manager):
        item = await menu_item_service.create(manager, {"name": "Burger", "restaurant_id": "RST-000002"})

        with pytest.raises(ForbiddenError):
            await menu_item_service.update(
                admin, item.menu_item_id, {"name": "Moved", "restaurant_id": "RST-000003"}
            )

        stored = await menu_item_service.get(manager, item.menu_item_id)
        assert stored.restaurant_id == "RST-000002"
        assert stored.name == "Burger"

    @pytest.mark.asyncio
    async def test_core_is_not_shared_for_menu_items(self, menu_item_service, tenants, admin, member):
        item = await menu_item_service.create(admin, {"name": "Water", "restaurant_id": "RST-000001"})

        with pytest.raises(ForbiddenError):
            await menu_item_service.get(member, item.menu_item_id)


class TestMenusAndSections:
    @pytest.mark.asyncio
    async def test_menu_day_filter(self, menu_service, tenants, manager):
        await menu_service.create(
            manager,
            {"name": "Lunch", "restaurant_id": "RST-000002", "active_days": ["monday", "tuesday"]},
        )
        await menu_service.create(
            manager, {"name": "Brunch", "restaurant_id": "RST-000002", "active_days": ["sunday"]}
        )

        found = await menu_service.find_all(manager, MenuFilter(active_day=Weekday.SUNDAY))

        assert [m.name for m in found] == ["Brunch"]

    @pytest.mark.asyncio
    async def test_menu_rejects_bad_time(self, menu_service, tenants, manager):
        with pytest.raises(InvalidInputError, match="end_time"):
            await menu_service.create(
                manager, {"name": "Dinner", "restaurant_id": "RST-000002", "end_time": "25:00"}
            )

    @pytest.mark.asyncio
    async def test_section_items_keep_order(self, menu_section_service, tenants, member):
        section = await menu_section_service.create(
            member,
            {
                "title": "Starters",
                "restaurant_id": "RST-000002",
                "start_time": "12:00",
                "items": [
                    {"menu_item_id": "MID-000001", "name": "Bruschetta", "price": 6.5},
                    {"menu_item_id": "MID-000002", "name": "Olives", "price": 3},
                ],
            },
        )

        assert section.menu_section_id == "MSC-000001"
        assert [i.order for i in section.items] == [0, 1]
        found = await menu_section_service.find_all(member, MenuSectionFilter(title="start"))
        assert [s.menu_section_id for s in found] == ["MSC-000001"]
