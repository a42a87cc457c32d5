"""
Address Repository - Data access for user addresses and the primary flag
"""

from typing import List

from bson import ObjectId
from pymongo import ASCENDING

from adapters import mongo_adapter
from repositories.base import BaseRepository, Document


class AddressRepository(BaseRepository):
    """Repository for the `useraddresses` collection"""

    collection_name = mongo_adapter.ADDRESSES
    duplicate_message = "User already has a primary address"

    def find_by_user(self, user_id: ObjectId) -> List[Document]:
        return list(
            self.collection.find({"userId": user_id}).sort("createdAt", ASCENDING)
        )

    def demote_others(self, user_id: ObjectId, keep_id: ObjectId = None) -> int:
        """Clear isPrimary on every address of `user_id` except `keep_id`.

        Must run before the promoting write, so the partial unique index
        never sees two primaries for the same user.
        """
        query: Document = {"userId": user_id, "isPrimary": True}
        if keep_id is not None:
            query["_id"] = {"$ne": keep_id}
        result = self.collection.update_many(query, {"$set": {"isPrimary": False}})
        return result.modified_count

