"""Domain ports (interfaces for infrastructure adapters)."""

from domain.shared.ports.document_store import (
    AtMost,
    ContainsText,
    Equals,
    IDocumentCollection,
    IDocumentStore,
    InSet,
    Predicate,
)

__all__ = [
    "AtMost",
    "ContainsText",
    "Equals",
    "IDocumentCollection",
    "IDocumentStore",
    "InSet",
    "Predicate",
]
