"""Shared pieces for request schemas."""

from typing import Annotated, ClassVar, FrozenSet

from bson import ObjectId
from pydantic import AfterValidator, BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


def _check_object_id(value: str) -> str:
    if not ObjectId.is_valid(value):
        raise ValueError("must be a 24-character hex object id")
    return value


# String form of a MongoDB ObjectId, validated at the boundary.
ObjectIdStr = Annotated[str, AfterValidator(_check_object_id)]


class CamelModel(BaseModel):
    """Request body with camelCase wire names and snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    def to_document(self, exclude_unset: bool = False) -> dict:
        """Dump to the camelCase shape stored in MongoDB."""
        return self.model_dump(by_alias=True, exclude_unset=exclude_unset, mode="json")


class PartialUpdate(CamelModel):
    """
    Body of a partial update (PUT).

    Omitted fields are left untouched. An explicit null is refused unless the
    field is listed in `nullable_fields`, so required document fields can
    never be cleared.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value, info: ValidationInfo):
        if value is None and info.field_name not in cls.nullable_fields:
            raise PydanticCustomError("not_null", "cannot be null")
        return value
