"""User management routes"""

import logging

from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from api.dependencies import (
    Pagination,
    get_current_user_id,
    get_database,
    get_password_hasher,
)
from api.responses import paginated_response
from core.security import PasswordHasher
from domain.mappers import UserMapper
from domain.schemas import UserCreate, UserUpdate
from services import UserService

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger("foodorder.api.users")


@router.post("", status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreate,
    db: Database = Depends(get_database),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """Register a new user"""
    user = UserService.create_user(db, payload, hasher)
    return {"message": "User created successfully", "user": UserMapper.to_response(user)}


@router.get("")
def get_all_users(
    paging: Pagination = Depends(),
    db: Database = Depends(get_database),
    _: str = Depends(get_current_user_id),
):
    users, total = UserService.list_users(db, paging.page, paging.limit)
    return paginated_response(
        [UserMapper.to_response(u) for u in users], total, paging.page, paging.limit
    )


@router.get("/{user_id}")
def get_user(
    user_id: str,
    db: Database = Depends(get_database),
    _: str = Depends(get_current_user_id),
):
    return UserMapper.to_response(UserService.get_user(db, user_id))


@router.put("/{user_id}")
def update_user(
    user_id: str,
    payload: UserUpdate,
    db: Database = Depends(get_database),
    hasher: PasswordHasher = Depends(get_password_hasher),
    _: str = Depends(get_current_user_id),
):
    """Partial update; a new password is hashed before storage."""
    user = UserService.update_user(db, user_id, payload, hasher)
    return {"message": "User updated successfully", "user": UserMapper.to_response(user)}


@router.delete("/{user_id}")
def delete_user(
    user_id: str,
    db: Database = Depends(get_database),
    _: str = Depends(get_current_user_id),
):
    UserService.delete_user(db, user_id)
    return {"message": "User deleted successfully"}
