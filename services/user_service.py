"""
User Service - registration, profile CRUD and password handling
"""

import logging
from typing import List, Tuple

from pymongo import DESCENDING
from pymongo.database import Database

from app.exceptions import ConflictError, NotFoundError
from core.helpers import page_bounds
from core.security import PasswordHasher
from domain.schemas import UserCreate, UserUpdate
from repositories import UserRepository

logger = logging.getLogger("foodorder.users")


class UserService:
    """Business logic for user accounts"""

    @staticmethod
    def create_user(db: Database, payload: UserCreate, hasher: PasswordHasher) -> dict:
        """
        Register a new user.

        Raises:
            ConflictError: username or email already taken
        """
        repo = UserRepository(db)
        if repo.find_conflict(payload.username, payload.email):
            raise ConflictError("User with this username or email already exists")

        document = payload.to_document()
        document["password"] = hasher.hash(payload.password)
        user = repo.create(document)
        logger.info(f"user_created user_id={user['_id']} username={user['username']}")
        return user

    @staticmethod
    def list_users(db: Database, page: int = 1, limit: int = 10) -> Tuple[List[dict], int]:
        repo = UserRepository(db)
        skip, limit = page_bounds(page, limit)
        users = repo.find_page({}, skip=skip, limit=limit, sort=[("createdAt", DESCENDING)])
        return users, repo.count()

    @staticmethod
    def get_user(db: Database, user_id: str) -> dict:
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    @staticmethod
    def update_user(
        db: Database, user_id: str, payload: UserUpdate, hasher: PasswordHasher
    ) -> dict:
        repo = UserRepository(db)
        if not repo.exists(user_id):
            raise NotFoundError("User not found")

        fields = payload.to_document(exclude_unset=True)
        if repo.find_conflict(fields.get("username"), fields.get("email"), exclude_id=user_id):
            raise ConflictError("User with this username or email already exists")
        if payload.password is not None:
            fields["password"] = hasher.hash(payload.password)

        user = repo.update(user_id, fields)
        if user is None:
            raise NotFoundError("User not found")
        logger.info(f"user_updated user_id={user_id} fields={sorted(fields)}")
        return user

    @staticmethod
    def delete_user(db: Database, user_id: str) -> None:
        if not UserRepository(db).delete(user_id):
            raise NotFoundError("User not found")
        logger.info(f"user_deleted user_id={user_id}")
