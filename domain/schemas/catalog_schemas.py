from pydantic import Field
from typing import ClassVar, FrozenSet, List, Optional

from domain.enums import FoodKind
from domain.schemas.base import CamelModel, ObjectIdStr, PartialUpdate


class Coordinates(CamelModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class FoodCreate(CamelModel):
    """Schema for POST /food"""

    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    price: float = Field(..., gt=0)
    image: str = Field(..., min_length=1)
    category: FoodKind
    category_id: ObjectIdStr = Field(..., description="Food category reference")
    ingredients: List[str] = Field(..., min_length=1)
    is_available: bool = True
    rating: float = Field(..., ge=1, le=5)
    servings: int = Field(..., ge=1)
    coords: List[Coordinates] = Field(default_factory=list)


class FoodUpdate(PartialUpdate):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"description"})

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(None, gt=0)
    image: Optional[str] = Field(None, min_length=1)
    category: Optional[FoodKind] = None
    category_id: Optional[ObjectIdStr] = None
    ingredients: Optional[List[str]] = Field(None, min_length=1)
    is_available: Optional[bool] = None
    rating: Optional[float] = Field(None, ge=1, le=5)
    servings: Optional[int] = Field(None, ge=1)
    coords: Optional[List[Coordinates]] = None


class ItemCreate(CamelModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    quantity: Optional[int] = Field(None, ge=0)
    category_id: ObjectIdStr


class ItemUpdate(PartialUpdate):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"description", "quantity"})

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    quantity: Optional[int] = Field(None, ge=0)
    category_id: Optional[ObjectIdStr] = None
