"""
API dependencies for dependency injection
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, Query, Request
from pymongo.database import Database

from adapters.mongo_adapter import get_database
from app.config import settings
from core.security import PasswordHasher, TokenService


@lru_cache
def get_token_service() -> TokenService:
    """Token service built from settings; override in tests for another secret."""
    return TokenService(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        expire_hours=settings.jwt_expire_hours,
    )


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=settings.bcrypt_rounds)


def get_current_user_id(
    request: Request,
    authorization: Optional[str] = Header(None),
    tokens: TokenService = Depends(get_token_service),
) -> str:
    """
    Require a valid bearer token and return its subject (a user id).

    The subject is also left on `request.state.user_id` for logging.

    Usage:
        @router.get("/example")
        def example(user_id: str = Depends(get_current_user_id)):
            ...
    """
    user_id = tokens.verify_bearer(authorization)
    request.state.user_id = user_id
    return user_id


class Pagination:
    """`page` / `limit` query parameters shared by listing endpoints"""

    def __init__(
        self,
        page: int = Query(1, ge=1, description="1-based page number"),
        limit: int = Query(10, ge=1, description="Items per page"),
    ):
        self.page = page
        self.limit = limit


__all__ = [
    "Database",
    "get_database",
    "get_token_service",
    "get_password_hasher",
    "get_current_user_id",
    "Pagination",
]
