"""Restaurant endpoints and membership management."""

import pytest


@pytest.mark.asyncio
async def test_create_returns_creator_as_member(client, headers):
    response = await client.post(
        "/api/v1/restaurants",
        json={"name": "Trattoria", "email": "info@trattoria.test"},
        headers=headers["manager"],
    )

    assert response.status_code == 201
    body = response.json()
    assert body["restaurant_id"] == "RST-000001"
    assert body["created_by"] == "auth0|manager"
    assert body["associated_users"] == ["auth0|manager"]


@pytest.mark.asyncio
async def test_listing_is_scoped(client, headers, seeded):
    member = await client.get("/api/v1/restaurants", headers=headers["member"])
    admin = await client.get("/api/v1/restaurants", headers=headers["admin"])

    assert [r["restaurant_id"] for r in member.json()] == ["RST-000002"]
    assert [r["restaurant_id"] for r in admin.json()] == ["RST-000001", "RST-000002", "RST-000003"]


@pytest.mark.asyncio
async def test_pagination(client, headers, seeded):
    response = await client.get("/api/v1/restaurants?page=2&limit=2", headers=headers["admin"])

    assert [r["restaurant_id"] for r in response.json()] == ["RST-000003"]


@pytest.mark.asyncio
async def test_update_profile(client, headers, seeded):
    response = await client.patch(
        "/api/v1/restaurants/RST-000002",
        json={"address": "Via Roma 1"},
        headers=headers["member"],
    )

    assert response.status_code == 200
    assert response.json()["address"] == "Via Roma 1"


@pytest.mark.asyncio
async def test_outsider_cannot_read(client, headers, seeded):
    response = await client.get("/api/v1/restaurants/RST-000002", headers=headers["outsider"])

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_members_listing(client, headers, seeded):
    response = await client.get("/api/v1/restaurants/RST-000002/users", headers=headers["member"])

    assert response.status_code == 200
    assert response.json() == [
        {"user_id": "auth0|manager", "role": "manager", "associated_restaurants": ["RST-000002"]},
        {"user_id": "auth0|member", "role": "member", "associated_restaurants": ["RST-000002"]},
    ]


@pytest.mark.asyncio
async def test_creator_cannot_be_removed(client, headers, seeded):
    response = await client.delete(
        "/api/v1/restaurants/RST-000002/users/auth0|manager", headers=headers["admin"]
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_member_cannot_manage_members(client, headers, seeded):
    response = await client.post(
        "/api/v1/restaurants/RST-000002/users",
        json={"user_id": "auth0|outsider"},
        headers=headers["member"],
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_removed_member_loses_access(client, headers, seeded):
    removed = await client.delete(
        "/api/v1/restaurants/RST-000002/users/auth0|member", headers=headers["manager"]
    )
    after = await client.get("/api/v1/restaurants/RST-000002", headers=headers["member"])

    assert removed.status_code == 200
    assert removed.json()["associated_users"] == ["auth0|manager"]
    assert after.status_code == 403


@pytest.mark.asyncio
async def test_delete_is_admin_only(client, headers, seeded):
    denied = await client.delete("/api/v1/restaurants/RST-000002", headers=headers["manager"])
    deleted = await client.delete("/api/v1/restaurants/RST-000002", headers=headers["admin"])
    gone = await client.get("/api/v1/restaurants/RST-000002", headers=headers["admin"])

    assert denied.status_code == 403
    assert deleted.status_code == 204
    assert gone.status_code == 404
