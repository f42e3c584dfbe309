"""HTTP-level fixtures: auth headers per role and seeded tenants."""

from typing import Dict

import pytest
import pytest_asyncio

ROLE_TOKENS = {
    "admin": "admin-token",
    "manager": "manager-token",
    "member": "member-token",
    "outsider": "outsider-token",
}


@pytest.fixture
def headers() -> Dict[str, Dict[str, str]]:
    """Authorization headers keyed by role name."""
    return {role: {"Authorization": f"Bearer {token}"} for role, token in ROLE_TOKENS.items()}


@pytest_asyncio.fixture
async def seeded(client, headers) -> None:
    """Create the tenants through the API.

    RST-000001 core (admin), RST-000002 (manager, with member added),
    RST-000003 (outsider).
    """
    for role, name in (("admin", "Core Catalog"), ("manager", "Trattoria"), ("outsider", "Bistro")):
        response = await client.post("/api/v1/restaurants", json={"name": name}, headers=headers[role])
        assert response.status_code == 201, response.text

    response = await client.post(
        "/api/v1/restaurants/RST-000002/users",
        json={"user_id": "auth0|member"},
        headers=headers["manager"],
    )
    assert response.status_code == 200, response.text
