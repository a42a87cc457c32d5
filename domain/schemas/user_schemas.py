from pydantic import BaseModel, Field
from typing import ClassVar, FrozenSet, Optional

from domain.schemas.base import CamelModel, PartialUpdate

EMAIL_PATTERN = r"^[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z0-9]{2,4}$"


class UserCreate(CamelModel):
    """Registration payload (REST and GraphQL)"""

    username: str = Field(..., min_length=3, max_length=30)
    email: str = Field(..., pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=6)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_pic: Optional[str] = None


class UserUpdate(PartialUpdate):
    """Partial user update; a supplied password is re-hashed"""

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"first_name", "last_name", "profile_pic"})

    username: Optional[str] = Field(None, min_length=3, max_length=30)
    email: Optional[str] = Field(None, pattern=EMAIL_PATTERN)
    password: Optional[str] = Field(None, min_length=6)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_pic: Optional[str] = None


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class ForgotPasswordRequest(BaseModel):
    email: str = Field(..., min_length=1)


class ResetPasswordRequest(BaseModel):
    password: str = Field(..., min_length=6)
