"""Shared test fixtures.

Loads .env / .env.test, forces the in-memory backend and exposes an HTTP
client bound to a fresh application per test. Tokens are resolved by a
static provider so no identity provider is contacted.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, AsyncIterator, Dict, cast

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

# Load .env first (default environment variables)
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

# Load .env.test (overrides .env values)
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)

os.environ["REPOSITORY_BACKEND"] = "inmemory"
os.environ.setdefault("AUTH_REQUIRED", "true")

from app import create_app  # noqa: E402
from domain.user.auth_provider import IAuthProvider, InvalidTokenError  # noqa: E402
from infrastructure.persistence.in_memory.document_store import (  # noqa: E402
    InMemoryDocumentStore,
)

ADMIN_ID = "auth0|admin"
MANAGER_ID = "auth0|manager"
MEMBER_ID = "auth0|member"
OUTSIDER_ID = "auth0|outsider"

TOKENS: Dict[str, Dict[str, Any]] = {
    "admin-token": {"sub": ADMIN_ID, "role": "admin"},
    "manager-token": {"sub": MANAGER_ID, "role": "manager"},
    "member-token": {"sub": MEMBER_ID, "role": "member"},
    "outsider-token": {"sub": OUTSIDER_ID},
}


class StaticTokenProvider(IAuthProvider):
    """Resolves a fixed set of opaque tokens to claims."""

    def __init__(self, tokens: Dict[str, Dict[str, Any]]) -> None:
        self.tokens = tokens

    async def verify_token(self, token: str) -> Dict[str, Any]:
        claims = self.tokens.get(token)
        if claims is None:
            raise InvalidTokenError("unknown token")
        return dict(claims)


def auth(token: str) -> Dict[str, str]:
    """Authorization header for one of the static tokens."""
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def document_store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest_asyncio.fixture
async def client(document_store: InMemoryDocumentStore) -> AsyncIterator[AsyncClient]:
    """Client HTTP asincrono per test REST.

    Usa httpx.AsyncClient con ASGITransport esplicito e base_url fittizia
    per coerenza nelle richieste relative.
    """
    application = create_app(
        store=document_store,
        auth_provider=StaticTokenProvider(TOKENS),
    )
    transport = ASGITransport(app=cast(Any, application))
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
