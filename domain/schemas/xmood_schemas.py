from pydantic import Field, StrictFloat, StrictInt, field_validator
from typing import ClassVar, FrozenSet, Optional, Union

from domain.enums import MediaType, PhotoShape
from domain.schemas.base import CamelModel, ObjectIdStr, PartialUpdate

XM_EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class XMCategoryCreate(CamelModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    creator_name: Optional[str] = Field(None, pattern=XM_EMAIL_PATTERN)


class XMCategoryUpdate(PartialUpdate):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"creator_name"})

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    creator_name: Optional[str] = Field(None, pattern=XM_EMAIL_PATTERN)


class XMPhotoCreate(CamelModel):
    uri: str = Field(..., min_length=1)
    shape: PhotoShape = PhotoShape.SQUARE
    media_type: MediaType = Field(..., alias="type")
    category_id: ObjectIdStr


class XMPhotoUpdate(PartialUpdate):
    uri: Optional[str] = Field(None, min_length=1)
    shape: Optional[PhotoShape] = None
    media_type: Optional[MediaType] = Field(None, alias="type")
    category_id: Optional[ObjectIdStr] = None


class XMStoryCreate(CamelModel):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    summary: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)


class XMStoryUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)
    summary: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1)


class XMUserRegister(CamelModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., pattern=XM_EMAIL_PATTERN)

    @field_validator("email")
    def normalize_email(cls, v):
        return v.lower()


class XMOnboardImage(CamelModel):
    url: str = Field(..., min_length=1)


class XMOnboardCreate(CamelModel):
    title: str = Field(..., min_length=1)
    sub_title: str = Field(..., min_length=1, alias="sub_title")
    image: XMOnboardImage


class XMSwitchServiceRequest(CamelModel):
    number: Union[StrictInt, StrictFloat]
