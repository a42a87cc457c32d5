"""
XMood Repositories - content collections backing the XMood mobile app
"""

from datetime import datetime
from typing import Optional

from pymongo import ReturnDocument

from adapters import mongo_adapter
from repositories.base import BaseRepository, Document


class XMCategoryRepository(BaseRepository):
    collection_name = mongo_adapter.XM_CATEGORIES
    duplicate_message = "Category already exists"

    def get_by_name(self, name: str) -> Optional[Document]:
        return self.collection.find_one({"name": name})


class XMPhotoRepository(BaseRepository):
    collection_name = mongo_adapter.XM_PHOTOS


class XMStoryRepository(BaseRepository):
    collection_name = mongo_adapter.XM_STORIES


class XMOnboardRepository(BaseRepository):
    collection_name = mongo_adapter.XM_ONBOARDS


class XMUserRepository(BaseRepository):
    collection_name = mongo_adapter.XM_USERS

    def increment_registration(self, email: str) -> Optional[Document]:
        """Bump registrationCount of an existing user; None when unknown.

        Emails are stored lower-cased, so the exact match is case-insensitive.
        """
        return self.collection.find_one_and_update(
            {"email": email},
            {"$inc": {"registrationCount": 1}, "$set": {"updatedAt": datetime.utcnow()}},
            return_document=ReturnDocument.AFTER,
        )


class XMAppOpenRepository(BaseRepository):
    collection_name = mongo_adapter.XM_APP_OPENS

    def record_open(self, device_info: str, agent_key: str) -> Document:
        """Atomically count one open for the device class and the agent"""
        now = datetime.utcnow()
        return self.collection.find_one_and_update(
            {"deviceInfo": device_info},
            {
                "$inc": {"totalOpens": 1, f"deviceVisits.{agent_key}": 1},
                "$set": {"updatedAt": now},
                "$setOnInsert": {"createdAt": now},
            },
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )


class XMReelRepository(BaseRepository):
    collection_name = mongo_adapter.XM_REELS

    def get_or_create(self, defaults: Document) -> Document:
        now = datetime.utcnow()
        return self.collection.find_one_and_update(
            {},
            {"$setOnInsert": {**defaults, "createdAt": now, "updatedAt": now}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )


class XMServiceStatusRepository(BaseRepository):
    collection_name = mongo_adapter.XM_SERVICE_STATUS

    def get_current(self) -> Optional[Document]:
        return self.collection.find_one({})

    def upsert_number(self, number) -> Document:
        now = datetime.utcnow()
        return self.collection.find_one_and_update(
            {},
            {"$set": {"number": number, "updatedAt": now}, "$setOnInsert": {"createdAt": now}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )

    def update_number(self, number) -> Optional[Document]:
        return self.collection.find_one_and_update(
            {},
            {"$set": {"number": number, "updatedAt": datetime.utcnow()}},
            return_document=ReturnDocument.AFTER,
        )
