"""MongoDB document store with reusable patterns.

Provides the motor-backed implementation of the IDocumentStore port:
- Connection management
- Predicate translation (typed predicates -> MongoDB filter)
- Error handling
- Logging

Every operation logs the failing collection and filter before re-raising.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional, Sequence

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from domain.shared.ports.document_store import (
    AtMost,
    ContainsText,
    Document,
    Equals,
    InSet,
    Predicate,
    SortSpec,
)
from infrastructure.config import get_mongodb_database, get_mongodb_uri

logger = logging.getLogger(__name__)

# Documents are keyed by business id; the storage key never leaves the adapter.
_PROJECTION = {"_id": 0}


def to_mongo_filter(predicates: Sequence[Predicate]) -> Dict[str, Any]:
    """
    Translate typed predicates into a MongoDB filter document.

    Args:
        predicates: Conditions combined with AND

    Returns:
        MongoDB filter ({} when there is no predicate)

    Examples:
        >>> to_mongo_filter([ContainsText("name", "bun")])
        {'name': {'$regex': 'bun', '$options': 'i'}}
        >>> to_mongo_filter([Equals("a", 1), AtMost("b", 5)])
        {'$and': [{'a': 1}, {'b': {'$lte': 5}}]}
    """
    clauses = [_to_clause(predicate) for predicate in predicates]
    if not clauses:
        return {}
    if len(clauses) == 1:
        return clauses[0]
    return {"$and": clauses}


def _to_clause(predicate: Predicate) -> Dict[str, Any]:
    if isinstance(predicate, Equals):
        return {predicate.field: predicate.value}
    if isinstance(predicate, ContainsText):
        return {predicate.field: {"$regex": re.escape(predicate.text), "$options": "i"}}
    if isinstance(predicate, InSet):
        return {predicate.field: {"$in": list(predicate.values)}}
    if isinstance(predicate, AtMost):
        return {predicate.field: {"$lte": predicate.value}}
    raise TypeError(f"Unsupported predicate: {predicate!r}")


class MongoDocumentCollection:
    """
    One MongoDB collection behind the IDocumentCollection port.

    Example:
        >>> store = MongoDocumentStore()
        >>> ingredients = store.collection("ingredients")
        >>> docs = await ingredients.find_many([InSet("ingredient_id", ("ING-000001",))])
    """

    def __init__(self, collection: AsyncIOMotorCollection[Dict[str, Any]]) -> None:
        self._collection = collection

    @property
    def name(self) -> str:
        return str(self._collection.name)

    async def find_one(self, predicates: Sequence[Predicate]) -> Optional[Document]:
        """
        Find single document with error handling.

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        filter_dict = to_mongo_filter(predicates)
        try:
            doc: Optional[Document] = await self._collection.find_one(filter_dict, _PROJECTION)
            return doc
        except Exception as e:
            logger.error(
                f"Error in find_one: collection={self.name}, " f"filter={filter_dict}, error={e}"
            )
            raise

    async def find_many(
        self,
        predicates: Sequence[Predicate],
        sort: Optional[SortSpec] = None,
        skip: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[Document]:
        """
        Find multiple documents with error handling.

        Args:
            predicates: Conditions combined with AND
            sort: Sort specification [(field, direction), ...]
            skip: Documents to skip
            limit: Max documents to return

        Returns:
            List of document dicts

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        filter_dict = to_mongo_filter(predicates)
        try:
            cursor = self._collection.find(filter_dict, _PROJECTION)

            if sort:
                cursor = cursor.sort(sort)
            if skip:
                cursor = cursor.skip(skip)
            if limit:
                cursor = cursor.limit(limit)

            documents: List[Document] = await cursor.to_list(length=limit)
            return documents
        except Exception as e:
            logger.error(
                f"Error in find_many: collection={self.name}, " f"filter={filter_dict}, error={e}"
            )
            raise

    async def insert_one(self, document: Document) -> None:
        """
        Insert single document with error handling.

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            # insert_one adds _id to the dict it receives
            await self._collection.insert_one(dict(document))
        except Exception as e:
            logger.error(f"Error in insert_one: collection={self.name}, error={e}")
            raise

    async def replace_one(self, predicates: Sequence[Predicate], document: Document) -> int:
        """
        Replace single document with error handling.

        Returns:
            Number of documents matched (0 or 1)

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        filter_dict = to_mongo_filter(predicates)
        try:
            result = await self._collection.replace_one(filter_dict, dict(document))
            return int(result.matched_count)
        except Exception as e:
            logger.error(
                f"Error in replace_one: collection={self.name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def delete_one(self, predicates: Sequence[Predicate]) -> int:
        """
        Delete single document with error handling.

        Returns:
            Number of documents deleted (0 or 1)

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        filter_dict = to_mongo_filter(predicates)
        try:
            result = await self._collection.delete_one(filter_dict)
            return int(result.deleted_count)
        except Exception as e:
            logger.error(
                f"Error in delete_one: collection={self.name}, " f"filter={filter_dict}, error={e}"
            )
            raise

    async def count(self, predicates: Sequence[Predicate]) -> int:
        """
        Count documents with error handling.

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        filter_dict = to_mongo_filter(predicates)
        try:
            count: int = await self._collection.count_documents(filter_dict)
            return count
        except Exception as e:
            logger.error(
                f"Error in count: collection={self.name}, " f"filter={filter_dict}, error={e}"
            )
            raise


class MongoDocumentStore:
    """
    MongoDB implementation of the IDocumentStore port.

    Connection pooling is handled by motor; one client serves every
    collection.
    """

    def __init__(self, client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None):
        """
        Initialize store with optional client.

        Args:
            client: Motor client (if None, creates new one from config)

        Raises:
            ValueError: If no client is given and MONGODB_URI is not configured
        """
        if client is None:
            uri = get_mongodb_uri()
            if not uri:
                raise ValueError(
                    "MONGODB_URI not configured. "
                    "Set MONGODB_URI, MONGODB_USER, "
                    "and MONGODB_PASSWORD environment variables."
                )
            self._client: AsyncIOMotorClient[Dict[str, Any]] = AsyncIOMotorClient(uri)
        else:
            self._client = client

        database_name = get_mongodb_database()
        self._db = self._client[database_name]

        logger.info(f"Initialized {self.__class__.__name__} for database '{database_name}'")

    def collection(self, name: str) -> MongoDocumentCollection:
        return MongoDocumentCollection(self._db[name])

    async def close(self) -> None:
        """Close MongoDB connection."""
        self._client.close()
        logger.info(f"Closed connection for {self.__class__.__name__}")
