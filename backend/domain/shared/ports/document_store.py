"""Document store port (interface).

Services express queries as typed predicates; adapters translate them to
their native query language. Field paths use dot notation and follow
document-database array semantics: a predicate on ``a.b`` matches when any
value reached through lists along the path satisfies it.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple, Union

ASCENDING = 1
DESCENDING = -1

Document = Dict[str, Any]
SortSpec = List[Tuple[str, int]]


@dataclass(frozen=True)
class Equals:
    """Exact match (array fields match when they contain the value)."""

    field: str
    value: Any


@dataclass(frozen=True)
class ContainsText:
    """Case-insensitive substring match on a string field."""

    field: str
    text: str


@dataclass(frozen=True)
class InSet:
    """Match when the field equals any of the given values."""

    field: str
    values: Tuple[Any, ...]


@dataclass(frozen=True)
class AtMost:
    """Match when the field is less than or equal to value."""

    field: str
    value: Any


Predicate = Union[Equals, ContainsText, InSet, AtMost]


class IDocumentCollection(Protocol):
    """
    Interface for one named collection of documents.

    All predicates passed to a call are combined with logical AND; an empty
    sequence matches every document.

    Example usage (infrastructure layer):
        >>> docs = await collection.find_many(
        ...     [ContainsText("name", "bun")],
        ...     sort=[("ingredient_id", ASCENDING)],
        ...     skip=10,
        ...     limit=10,
        ... )
    """

    @property
    def name(self) -> str:
        """Collection name."""
        ...

    async def find_one(self, predicates: Sequence[Predicate]) -> Optional[Document]:
        """Return the first matching document, or None."""
        ...

    async def find_many(
        self,
        predicates: Sequence[Predicate],
        sort: Optional[SortSpec] = None,
        skip: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[Document]:
        """
        Return matching documents.

        Args:
            predicates: Conditions combined with AND
            sort: Sort specification [(field, ASCENDING | DESCENDING), ...]
            skip: Documents to skip
            limit: Max documents to return

        Returns:
            List of documents (copies; mutating them does not touch storage)
        """
        ...

    async def insert_one(self, document: Document) -> None:
        ...

    async def replace_one(self, predicates: Sequence[Predicate], document: Document) -> int:
        """Replace the first matching document. Returns the number replaced (0 or 1)."""
        ...

    async def delete_one(self, predicates: Sequence[Predicate]) -> int:
        """Delete the first matching document. Returns the number deleted (0 or 1)."""
        ...

    async def count(self, predicates: Sequence[Predicate]) -> int:
        ...


class IDocumentStore(Protocol):
    """Factory of named collections backed by one database."""

    def collection(self, name: str) -> IDocumentCollection:
        ...

    async def close(self) -> None:
        ...
