"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union
from abc import ABC

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from app.exceptions import ConflictError, ServiceValidationError

Document = Dict[str, Any]
IdLike = Union[str, ObjectId]


def parse_object_id(value: IdLike) -> Optional[ObjectId]:
    """Return an ObjectId for `value`, or None when it is not a valid id."""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


def require_object_id(value: IdLike, label: str) -> ObjectId:
    """Like parse_object_id but raises ServiceValidationError("Invalid <label> ID")."""
    oid = parse_object_id(value)
    if oid is None:
        raise ServiceValidationError(f"Invalid {label} ID")
    return oid


class BaseRepository(ABC):
    """
    Base repository providing common CRUD operations on one collection.
    All repositories should inherit from this class and set `collection_name`.
    """

    collection_name: str = ""
    duplicate_message: str = "Resource already exists"

    def __init__(self, db: Database):
        if not self.collection_name:
            raise NotImplementedError(
                f"{self.__class__.__name__} must define collection_name"
            )
        self.db = db
        self.collection: Collection = db[self.collection_name]

    def get_by_id(self, entity_id: IdLike) -> Optional[Document]:
        """Get document by id; invalid ids behave like missing documents."""
        oid = parse_object_id(entity_id)
        if oid is None:
            return None
        return self.collection.find_one({"_id": oid})

    def get_many_by_ids(self, entity_ids: List[ObjectId]) -> Dict[ObjectId, Document]:
        if not entity_ids:
            return {}
        cursor = self.collection.find({"_id": {"$in": list(set(entity_ids))}})
        return {doc["_id"]: doc for doc in cursor}

    def find_one(self, query: Document) -> Optional[Document]:
        return self.collection.find_one(query)

    def find_all(self, query: Optional[Document] = None, sort=None) -> List[Document]:
        cursor = self.collection.find(query or {})
        if sort:
            cursor = cursor.sort(sort)
        return list(cursor)

    def find_page(
        self,
        query: Optional[Document] = None,
        skip: int = 0,
        limit: int = 10,
        sort=None,
    ) -> List[Document]:
        """Get documents with pagination"""
        cursor = self.collection.find(query or {})
        if sort:
            cursor = cursor.sort(sort)
        return list(cursor.skip(max(skip, 0)).limit(max(limit, 1)))

    def count(self, query: Optional[Document] = None) -> int:
        return self.collection.count_documents(query or {})

    def create(self, document: Document) -> Document:
        """Insert a new document, stamping createdAt/updatedAt"""
        now = datetime.utcnow()
        document = dict(document)
        document.setdefault("createdAt", now)
        document.setdefault("updatedAt", now)
        try:
            result = self.collection.insert_one(document)
        except DuplicateKeyError as exc:
            raise ConflictError(self.duplicate_message) from exc
        document["_id"] = result.inserted_id
        return document

    def update(self, entity_id: IdLike, fields: Document) -> Optional[Document]:
        """Apply `$set` of `fields` and return the updated document (None if missing)"""
        oid = parse_object_id(entity_id)
        if oid is None:
            return None
        changes = dict(fields)
        changes["updatedAt"] = datetime.utcnow()
        try:
            return self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as exc:
            raise ConflictError(self.duplicate_message) from exc

    def delete(self, entity_id: IdLike) -> bool:
        """Delete document by id"""
        oid = parse_object_id(entity_id)
        if oid is None:
            return False
        return self.collection.delete_one({"_id": oid}).deleted_count == 1

    def exists(self, entity_id: IdLike) -> bool:
        """Check if document exists"""
        return self.get_by_id(entity_id) is not None
