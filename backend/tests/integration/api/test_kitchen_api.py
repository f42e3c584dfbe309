"""Recipes, menu sections and menus over HTTP."""

import pytest


@pytest.mark.asyncio
async def test_recipe_lifecycle(client, headers, seeded):
    member = headers["member"]
    await client.post(
        "/api/v1/ingredients",
        json={"name": "Beef", "restaurant_id": "RST-000002"},
        headers=member,
    )

    created = await client.post(
        "/api/v1/recipes",
        json={
            "name": "Burger",
            "restaurant_id": "RST-000002",
            "servings": 2,
            "prep_time": 10,
            "total_time": 20,
            "steps": [
                {
                    "text": "Grill",
                    "equipment_ids": ["EQP-000001"],
                    "ingredient_items": [{"ingredient_id": "ING-000001", "units": 300, "measure": "g"}],
                }
            ],
        },
        headers=member,
    )
    assert created.status_code == 201
    step = created.json()["steps"][0]
    assert step["order"] == 0
    assert step["ingredient_items"][0]["ingredient_name"] == "Beef"

    quick = await client.get("/api/v1/recipes", params={"max_prep_time": 5}, headers=member)
    by_equipment = await client.get(
        "/api/v1/recipes", params={"equipment_id": "EQP-000001"}, headers=member
    )
    assert quick.json() == []
    assert [r["recipe_id"] for r in by_equipment.json()] == ["RCP-000001"]

    updated = await client.patch("/api/v1/recipes/RCP-000001", json={"servings": 4}, headers=member)
    assert updated.json()["servings"] == 4
    assert updated.json()["steps"][0]["text"] == "Grill"


@pytest.mark.asyncio
async def test_recipe_rejects_zero_servings(client, headers, seeded):
    response = await client.post(
        "/api/v1/recipes",
        json={"name": "Burger", "restaurant_id": "RST-000002", "servings": 0, "prep_time": 1, "total_time": 1},
        headers=headers["member"],
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_recipe_for_unknown_restaurant(client, headers, seeded):
    response = await client.post(
        "/api/v1/recipes",
        json={"name": "Burger", "restaurant_id": "RST-000404", "servings": 1, "prep_time": 1, "total_time": 1},
        headers=headers["admin"],
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_menu_sections_and_menus(client, headers, seeded):
    manager = headers["manager"]

    section = await client.post(
        "/api/v1/menu-sections",
        json={
            "title": "Mains",
            "restaurant_id": "RST-000002",
            "start_time": "12:00",
            "end_time": "15:00",
            "items": [{"menu_item_id": "MID-000001", "name": "Burger", "price": 12.5}],
        },
        headers=manager,
    )
    assert section.status_code == 201
    assert section.json()["items"][0]["order"] == 0

    menu = await client.post(
        "/api/v1/menus",
        json={
            "name": "Weekend",
            "restaurant_id": "RST-000002",
            "active_days": ["saturday", "sunday"],
            "menu_section_ids": [section.json()["menu_section_id"]],
        },
        headers=manager,
    )
    assert menu.status_code == 201
    assert menu.json()["menu_id"] == "MNU-000001"

    sunday = await client.get("/api/v1/menus", params={"active_day": "sunday"}, headers=manager)
    monday = await client.get("/api/v1/menus", params={"active_day": "monday"}, headers=manager)
    assert [m["name"] for m in sunday.json()] == ["Weekend"]
    assert monday.json() == []

    outsider = await client.get("/api/v1/menus/MNU-000001", headers=headers["outsider"])
    assert outsider.status_code == 403


@pytest.mark.asyncio
async def test_unknown_weekday_is_bad_request(client, headers, seeded):
    response = await client.post(
        "/api/v1/menus",
        json={"name": "Weekend", "restaurant_id": "RST-000002", "active_days": ["funday"]},
        headers=headers["manager"],
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_menu_section_time_window_is_validated(client, headers, seeded):
    response = await client.patch(
        "/api/v1/menu-sections/MSC-000404",
        json={"title": "Mains"},
        headers=headers["manager"],
    )
    invalid = await client.post(
        "/api/v1/menu-sections",
        json={"title": "Late", "restaurant_id": "RST-000002", "end_time": "24:30"},
        headers=headers["manager"],
    )

    assert response.status_code == 404
    assert invalid.status_code == 400
