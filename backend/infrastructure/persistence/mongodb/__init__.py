"""MongoDB persistence implementations."""

from .document_store import MongoDocumentCollection, MongoDocumentStore, to_mongo_filter

__all__ = [
    "MongoDocumentCollection",
    "MongoDocumentStore",
    "to_mongo_filter",
]
