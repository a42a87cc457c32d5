"""
GraphQL endpoint for users.

A thin adapter over UserService; the REST and GraphQL paths share validation,
hashing and storage.
"""

from typing import List, Optional

import strawberry
from fastapi import Depends, Request
from pydantic import ValidationError
from pymongo.database import Database
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from api.dependencies import get_database, get_password_hasher, get_token_service
from api.middleware import validation_message
from app.exceptions import ServiceValidationError
from core.helpers import total_pages
from core.security import PasswordHasher, TokenService
from domain.schemas import UserCreate
from services import UserService


@strawberry.type
class User:
    id: strawberry.ID
    username: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_pic: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_document(cls, doc: dict) -> "User":
        created = doc.get("createdAt")
        return cls(
            id=strawberry.ID(str(doc["_id"])),
            username=doc.get("username", ""),
            email=doc.get("email", ""),
            first_name=doc.get("firstName"),
            last_name=doc.get("lastName"),
            profile_pic=doc.get("profilePic"),
            created_at=created.isoformat() if created else None,
        )


@strawberry.type
class Pagination:
    current_page: int
    total_pages: int
    total_count: int


@strawberry.type
class UsersResponse:
    users: List[User]
    pagination: Pagination


def _require_token(info: Info) -> str:
    request: Request = info.context["request"]
    tokens: TokenService = info.context["tokens"]
    return tokens.verify_bearer(request.headers.get("authorization"))


@strawberry.type
class Query:
    @strawberry.field
    def users(self, info: Info, page: int = 1, limit: int = 10) -> UsersResponse:
        _require_token(info)
        page, limit = max(page, 1), max(limit, 1)
        docs, total = UserService.list_users(info.context["db"], page, limit)
        return UsersResponse(
            users=[User.from_document(d) for d in docs],
            pagination=Pagination(
                current_page=page,
                total_pages=total_pages(total, limit),
                total_count=total,
            ),
        )

    @strawberry.field
    def user_by_id(self, info: Info, id: strawberry.ID) -> User:
        _require_token(info)
        return User.from_document(UserService.get_user(info.context["db"], str(id)))


@strawberry.type
class Mutation:
    @strawberry.mutation
    def create_user(
        self,
        info: Info,
        username: str,
        email: str,
        password: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        profile_pic: Optional[str] = None,
    ) -> User:
        try:
            payload = UserCreate(
                username=username,
                email=email,
                password=password,
                first_name=first_name,
                last_name=last_name,
                profile_pic=profile_pic,
            )
        except ValidationError as exc:
            raise ServiceValidationError(validation_message(exc.errors())) from exc
        doc = UserService.create_user(info.context["db"], payload, info.context["hasher"])
        return User.from_document(doc)


schema = strawberry.Schema(query=Query, mutation=Mutation)


def get_context(
    db: Database = Depends(get_database),
    tokens: TokenService = Depends(get_token_service),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> dict:
    return {"db": db, "tokens": tokens, "hasher": hasher}


router = GraphQLRouter(schema, context_getter=get_context)
