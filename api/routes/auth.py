"""Login and password reset routes"""

from fastapi import APIRouter, Depends
from pymongo.database import Database

from api.dependencies import get_database, get_password_hasher, get_token_service
from app.config import settings
from core.security import PasswordHasher, TokenService
from domain.schemas import ForgotPasswordRequest, LoginRequest, ResetPasswordRequest
from services import AuthService

router = APIRouter(tags=["Auth"])


@router.post("/login")
def login(
    payload: LoginRequest,
    db: Database = Depends(get_database),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
):
    return AuthService.login(db, payload.email, payload.password, hasher, tokens)


@router.post("/forgot-password")
def forgot_password(payload: ForgotPasswordRequest, db: Database = Depends(get_database)):
    """Mail a one-time reset link to the account owner"""
    reset_base = f"{settings.public_base_url.rstrip('/')}{settings.api_prefix}"
    AuthService.forgot_password(db, payload.email, reset_base)
    return {"message": "Password reset email sent successfully"}


@router.post("/reset-password/{token}")
def reset_password(
    token: str,
    payload: ResetPasswordRequest,
    db: Database = Depends(get_database),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    return AuthService.reset_password(db, token, payload.password, hasher)
