"""Food catalogue routes (all require a bearer token)"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pymongo.database import Database

from api.dependencies import Pagination, get_current_user_id, get_database
from api.responses import document_page, message_response
from domain.enums import FoodKind
from domain.mappers import DocumentMapper
from domain.schemas import FoodCreate, FoodUpdate
from services import FoodService

router = APIRouter(prefix="/food", tags=["Food"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_food(
    payload: FoodCreate,
    db: Database = Depends(get_database),
    _: str = Depends(get_current_user_id),
):
    food = FoodService.create_food(db, payload)
    return message_response("Food item created successfully", "food", food)


@router.get("")
def list_foods(
    category: Optional[FoodKind] = None,
    is_available: Optional[bool] = Query(None, alias="isAvailable"),
    min_price: Optional[float] = Query(None, alias="minPrice", ge=0),
    max_price: Optional[float] = Query(None, alias="maxPrice", ge=0),
    paging: Pagination = Depends(),
    db: Database = Depends(get_database),
    _: str = Depends(get_current_user_id),
):
    foods, total = FoodService.list_foods(
        db,
        category=category.value if category else None,
        is_available=is_available,
        min_price=min_price,
        max_price=max_price,
        page=paging.page,
        limit=paging.limit,
    )
    return document_page(foods, total, paging.page, paging.limit)


@router.get("/{food_id}")
def get_food(
    food_id: str,
    db: Database = Depends(get_database),
    _: str = Depends(get_current_user_id),
):
    return DocumentMapper.to_response(FoodService.get_food(db, food_id))


@router.put("/{food_id}")
def update_food(
    food_id: str,
    payload: FoodUpdate,
    db: Database = Depends(get_database),
    _: str = Depends(get_current_user_id),
):
    food = FoodService.update_food(db, food_id, payload)
    return message_response("Food item updated successfully", "food", food)


@router.delete("/{food_id}")
def delete_food(
    food_id: str,
    db: Database = Depends(get_database),
    _: str = Depends(get_current_user_id),
):
    FoodService.delete_food(db, food_id)
    return {"message": "Food item deleted successfully"}
