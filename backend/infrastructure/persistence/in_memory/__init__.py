"""In-memory persistence implementations."""

from infrastructure.persistence.in_memory.document_store import (
    InMemoryDocumentCollection,
    InMemoryDocumentStore,
)

__all__ = [
    "InMemoryDocumentCollection",
    "InMemoryDocumentStore",
]
