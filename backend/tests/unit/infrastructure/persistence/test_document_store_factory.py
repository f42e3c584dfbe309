"""Unit tests for the document store factory.

Tests environment-based backend selection.
"""

import pytest

from infrastructure.persistence.factory import (
    create_document_store,
    get_document_store,
    reset_document_store,
)
from infrastructure.persistence.in_memory.document_store import InMemoryDocumentStore


class TestCreateDocumentStore:
    def test_default_to_inmemory_when_env_not_set(self, monkeypatch):
        monkeypatch.delenv("REPOSITORY_BACKEND", raising=False)

        assert isinstance(create_document_store(), InMemoryDocumentStore)

    def test_case_insensitive_selection(self, monkeypatch):
        monkeypatch.setenv("REPOSITORY_BACKEND", "InMemory")

        assert isinstance(create_document_store(), InMemoryDocumentStore)

    def test_mongodb_creates_mongo_store(self, monkeypatch):
        from infrastructure.persistence.mongodb.document_store import MongoDocumentStore

        monkeypatch.setenv("REPOSITORY_BACKEND", "mongodb")
        monkeypatch.setenv("MONGODB_URI", "mongodb://localhost:27017")

        assert isinstance(create_document_store(), MongoDocumentStore)

    def test_mongodb_without_uri_raises(self, monkeypatch):
        monkeypatch.setenv("REPOSITORY_BACKEND", "mongodb")
        monkeypatch.delenv("MONGODB_URI", raising=False)

        with pytest.raises(ValueError, match="MONGODB_URI not set"):
            create_document_store()

    def test_unknown_backend_raises(self, monkeypatch):
        monkeypatch.setenv("REPOSITORY_BACKEND", "postgres")

        with pytest.raises(ValueError, match="Unknown REPOSITORY_BACKEND"):
            create_document_store()


def test_singleton_until_reset(monkeypatch):
    monkeypatch.setenv("REPOSITORY_BACKEND", "inmemory")
    reset_document_store()

    first = get_document_store()
    assert get_document_store() is first

    reset_document_store()
    assert get_document_store() is not first
    reset_document_store()
