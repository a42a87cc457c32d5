"""
User Repository - Data access layer for user-related operations
"""

from datetime import datetime
from typing import Optional

from adapters import mongo_adapter
from repositories.base import BaseRepository, Document, IdLike, parse_object_id


class UserRepository(BaseRepository):
    """Repository for user data access"""

    collection_name = mongo_adapter.USERS
    duplicate_message = "User with this username or email already exists"

    def get_by_email(self, email: str) -> Optional[Document]:
        """Get user by email"""
        return self.collection.find_one({"email": email})

    def find_conflict(
        self, username: Optional[str], email: Optional[str], exclude_id: IdLike = None
    ) -> Optional[Document]:
        """Return another user holding `username` or `email`, if any."""
        clauses = []
        if username:
            clauses.append({"username": username})
        if email:
            clauses.append({"email": email})
        if not clauses:
            return None
        query: Document = {"$or": clauses}
        oid = parse_object_id(exclude_id) if exclude_id is not None else None
        if oid is not None:
            query["_id"] = {"$ne": oid}
        return self.collection.find_one(query)

    def get_by_reset_token(self, token: str, now: datetime) -> Optional[Document]:
        """Get the user holding an unexpired password reset token"""
        return self.collection.find_one(
            {"resetPasswordToken": token, "resetPasswordExpire": {"$gt": now}}
        )

    def set_reset_token(self, user_id: IdLike, token: str, expires_at: datetime):
        return self.update(
            user_id,
            {"resetPasswordToken": token, "resetPasswordExpire": expires_at},
        )

    def replace_password(self, user_id: IdLike, password_hash: str) -> Optional[Document]:
        """Store a new hash and clear the reset token fields"""
        oid = parse_object_id(user_id)
        if oid is None:
            return None
        self.collection.update_one(
            {"_id": oid},
            {
                "$set": {"password": password_hash, "updatedAt": datetime.utcnow()},
                "$unset": {"resetPasswordToken": "", "resetPasswordExpire": ""},
            },
        )
        return self.get_by_id(oid)
