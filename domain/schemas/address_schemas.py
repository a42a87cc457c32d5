from pydantic import Field
from typing import ClassVar, FrozenSet, Optional

from domain.schemas.base import CamelModel, ObjectIdStr, PartialUpdate


class AddressCreate(CamelModel):
    """Schema for POST /addresses"""

    user_id: ObjectIdStr
    street: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)
    is_primary: bool = False


class AddressUpdate(PartialUpdate):
    """Schema for PUT /addresses/{id}.

    `is_primary` is tri-state: True promotes, False demotes this address only,
    None leaves the flag untouched.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"is_primary"})

    user_id: Optional[ObjectIdStr] = None
    street: Optional[str] = Field(None, min_length=1)
    city: Optional[str] = Field(None, min_length=1)
    state: Optional[str] = Field(None, min_length=1)
    zip_code: Optional[str] = Field(None, min_length=1)
    country: Optional[str] = Field(None, min_length=1)
    is_primary: Optional[bool] = None
