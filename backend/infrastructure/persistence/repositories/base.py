"""Base repository with reusable patterns.

Provides common functionality for all entity repositories:
- Document mapping (domain <-> document)
- Lookup by business id, single and batched
- Deterministic pagination (ascending business id)
- Business id sequence

All concrete repositories should inherit from DocumentRepository.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Iterable, List, Optional, Sequence, TypeVar

from domain.shared.business_id import next_business_id
from domain.shared.pagination import Pagination
from domain.shared.ports.document_store import (
    ASCENDING,
    DESCENDING,
    Equals,
    IDocumentCollection,
    IDocumentStore,
    InSet,
    Predicate,
)
from domain.shared.validation import unique

TEntity = TypeVar("TEntity")


class DocumentRepository(ABC, Generic[TEntity]):
    """
    Abstract base class for entity repositories.

    Subclasses must implement:
    - collection_name: Name of the document collection
    - id_field: Document field holding the business id
    - to_document(): Convert domain entity to document
    - from_document(): Convert document to domain entity

    Subclasses with generated ids also set ``id_prefix``.

    Example:
        class AllergyRepository(DocumentRepository[Allergy]):
            collection_name = "allergies"
            id_field = "allergy_id"
            id_prefix = ALLERGY_PREFIX

            def to_document(self, allergy: Allergy) -> Dict[str, Any]:
                ...

            def from_document(self, doc: Dict[str, Any]) -> Allergy:
                ...
    """

    collection_name: str
    id_field: str
    id_prefix: Optional[str] = None

    def __init__(self, store: IDocumentStore) -> None:
        self._collection: IDocumentCollection = store.collection(self.collection_name)

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        """
        Convert domain entity to document.

        Args:
            entity: Domain entity

        Returns:
            Document (dict)
        """
        pass

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Convert document to domain entity.

        Also used to build entities from validated input, so entity
        invariants run on every write.

        Args:
            doc: Document

        Returns:
            Domain entity

        Raises:
            InvalidInputError: If the document violates entity invariants
        """
        pass

    @property
    def collection(self) -> IDocumentCollection:
        return self._collection

    def business_id_of(self, entity: TEntity) -> str:
        return str(getattr(entity, self.id_field))

    def _by_id(self, business_id: str) -> List[Predicate]:
        return [Equals(self.id_field, business_id)]

    async def get(self, business_id: str) -> Optional[TEntity]:
        doc = await self._collection.find_one(self._by_id(business_id))
        return self.from_document(doc) if doc is not None else None

    async def find(
        self,
        predicates: Sequence[Predicate],
        pagination: Optional[Pagination] = None,
    ) -> List[TEntity]:
        """
        Find entities ordered by ascending business id.

        Args:
            predicates: Conditions combined with AND
            pagination: Page to return (all matches when None)
        """
        docs = await self._collection.find_many(
            predicates,
            sort=[(self.id_field, ASCENDING)],
            skip=pagination.skip if pagination else None,
            limit=pagination.limit if pagination else None,
        )
        return [self.from_document(doc) for doc in docs]

    async def find_by_ids(self, business_ids: Iterable[str]) -> List[TEntity]:
        """Fetch many entities in one lookup. Unknown ids are skipped."""
        ids = unique(business_ids)
        if not ids:
            return []
        return await self.find([InSet(self.id_field, tuple(ids))])

    async def count(self, predicates: Sequence[Predicate]) -> int:
        return await self._collection.count(predicates)

    async def add(self, entity: TEntity) -> None:
        await self._collection.insert_one(self.to_document(entity))

    async def save(self, entity: TEntity) -> bool:
        """Replace the stored entity. Returns False when it does not exist."""
        replaced = await self._collection.replace_one(
            self._by_id(self.business_id_of(entity)), self.to_document(entity)
        )
        return replaced > 0

    async def remove(self, business_id: str) -> bool:
        deleted = await self._collection.delete_one(self._by_id(business_id))
        return deleted > 0

    async def next_business_id(self) -> str:
        """
        Compute the next business id from the highest stored one.

        Not atomic: concurrent creations may compute the same id.

        Raises:
            TypeError: If the repository has no id_prefix
        """
        if not self.id_prefix:
            raise TypeError(f"{self.__class__.__name__} does not generate business ids")

        docs = await self._collection.find_many([], sort=[(self.id_field, DESCENDING)], limit=1)
        last_id = docs[0].get(self.id_field) if docs else None
        return next_business_id(self.id_prefix, last_id)
