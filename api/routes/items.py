"""Inventory item routes"""

from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from api.dependencies import Pagination, get_current_user_id, get_database
from api.responses import document_page, message_response
from domain.mappers import DocumentMapper
from domain.schemas import ItemCreate, ItemUpdate
from services import ItemService

router = APIRouter(tags=["Items"])


@router.post("/item", status_code=status.HTTP_201_CREATED)
def create_item(
    payload: ItemCreate,
    db: Database = Depends(get_database),
    _: str = Depends(get_current_user_id),
):
    item = ItemService.create_item(db, payload)
    return message_response("Item created successfully", "item", item)


@router.get("/items")
def list_items(
    paging: Pagination = Depends(),
    db: Database = Depends(get_database),
    _: str = Depends(get_current_user_id),
):
    items, total = ItemService.list_items(db, paging.page, paging.limit)
    return document_page(items, total, paging.page, paging.limit)


@router.get("/item/{item_id}")
def get_item(item_id: str, db: Database = Depends(get_database)):
    """Public: item details are embedded in shared links"""
    return DocumentMapper.to_response(ItemService.get_item(db, item_id))


@router.get("/items/category/{category_id}")
def list_items_by_category(
    category_id: str,
    db: Database = Depends(get_database),
    _: str = Depends(get_current_user_id),
):
    return DocumentMapper.to_response_list(ItemService.list_by_category(db, category_id))


@router.put("/item/{item_id}")
def update_item(
    item_id: str,
    payload: ItemUpdate,
    db: Database = Depends(get_database),
    _: str = Depends(get_current_user_id),
):
    item = ItemService.update_item(db, item_id, payload)
    return message_response("Item updated successfully", "item", item)


@router.delete("/item/{item_id}")
def delete_item(
    item_id: str,
    db: Database = Depends(get_database),
    _: str = Depends(get_current_user_id),
):
    ItemService.delete_item(db, item_id)
    return {"message": "Item deleted successfully"}
