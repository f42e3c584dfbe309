"""In-memory document store implementation.

Provides an in-memory implementation of the IDocumentStore port for tests
and local development. Predicates follow the same array semantics as
MongoDB so both backends return the same results.
"""

from copy import deepcopy
from typing import Any, Dict, List, Optional, Sequence

from domain.shared.ports.document_store import (
    DESCENDING,
    AtMost,
    ContainsText,
    Document,
    Equals,
    InSet,
    Predicate,
    SortSpec,
)

_MISSING = object()


def resolve_path(document: Any, path: str) -> List[Any]:
    """
    Collect every value reachable through a dotted path.

    Lists met along the path (including the final value) are flattened,
    mirroring how MongoDB matches queries against array fields.

    Examples:
        >>> resolve_path({"steps": [{"ids": ["a"]}, {"ids": ["b", "c"]}]}, "steps.ids")
        ['a', 'b', 'c']
        >>> resolve_path({"name": "Bun"}, "missing")
        []
    """
    current: List[Any] = [document]
    for part in path.split("."):
        next_values: List[Any] = []
        for value in current:
            if isinstance(value, list):
                candidates = value
            else:
                candidates = [value]
            for candidate in candidates:
                if isinstance(candidate, dict):
                    child = candidate.get(part, _MISSING)
                    if child is not _MISSING:
                        next_values.append(child)
        current = next_values

    flattened: List[Any] = []
    for value in current:
        if isinstance(value, list):
            flattened.extend(value)
        else:
            flattened.append(value)
    return flattened


def _matches(document: Document, predicate: Predicate) -> bool:
    values = resolve_path(document, predicate.field)

    if isinstance(predicate, Equals):
        return predicate.value in values
    if isinstance(predicate, ContainsText):
        needle = predicate.text.lower()
        return any(isinstance(v, str) and needle in v.lower() for v in values)
    if isinstance(predicate, InSet):
        return any(v in predicate.values for v in values)
    if isinstance(predicate, AtMost):
        return any(v is not None and not isinstance(v, str) and v <= predicate.value for v in values)

    raise TypeError(f"Unsupported predicate: {predicate!r}")


def matches_all(document: Document, predicates: Sequence[Predicate]) -> bool:
    return all(_matches(document, predicate) for predicate in predicates)


class InMemoryDocumentCollection:
    """
    List-backed storage for one collection.

    Thread safety: NOT thread-safe (single event loop only)
    Persistence: Data lost on process restart (in-memory only)

    Example:
        >>> collection = InMemoryDocumentCollection("allergies")
        >>> await collection.insert_one({"allergy_id": "ALG-000001", "name": "Gluten"})
        >>> await collection.count([])
        1
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._documents: List[Document] = []

    @property
    def name(self) -> str:
        return self._name

    async def find_one(self, predicates: Sequence[Predicate]) -> Optional[Document]:
        for document in self._documents:
            if matches_all(document, predicates):
                return deepcopy(document)
        return None

    async def find_many(
        self,
        predicates: Sequence[Predicate],
        sort: Optional[SortSpec] = None,
        skip: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[Document]:
        documents = [d for d in self._documents if matches_all(d, predicates)]

        # Stable sorts applied from the least significant key.
        for field, direction in reversed(sort or []):
            documents.sort(
                key=lambda d: _sort_key(d.get(field)),
                reverse=direction == DESCENDING,
            )

        start = skip or 0
        end = start + limit if limit else None
        return [deepcopy(d) for d in documents[start:end]]

    async def insert_one(self, document: Document) -> None:
        self._documents.append(deepcopy(document))

    async def replace_one(self, predicates: Sequence[Predicate], document: Document) -> int:
        for index, existing in enumerate(self._documents):
            if matches_all(existing, predicates):
                self._documents[index] = deepcopy(document)
                return 1
        return 0

    async def delete_one(self, predicates: Sequence[Predicate]) -> int:
        for index, existing in enumerate(self._documents):
            if matches_all(existing, predicates):
                del self._documents[index]
                return 1
        return 0

    async def count(self, predicates: Sequence[Predicate]) -> int:
        return sum(1 for d in self._documents if matches_all(d, predicates))

    def clear(self) -> None:
        """Clear all documents (for testing)."""
        self._documents.clear()


def _sort_key(value: Any) -> Any:
    # Missing values sort first, as in MongoDB.
    return (value is not None, value)


class InMemoryDocumentStore:
    """In-memory implementation of the IDocumentStore port."""

    def __init__(self) -> None:
        self._collections: Dict[str, InMemoryDocumentCollection] = {}

    def collection(self, name: str) -> InMemoryDocumentCollection:
        if name not in self._collections:
            self._collections[name] = InMemoryDocumentCollection(name)
        return self._collections[name]

    def clear(self) -> None:
        """Clear all collections (for testing)."""
        for collection in self._collections.values():
            collection.clear()

    async def close(self) -> None:
        return None
