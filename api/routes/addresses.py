"""User address routes (all require a bearer token)"""

from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from api.dependencies import Pagination, get_current_user_id, get_database
from api.responses import document_page, message_response
from domain.mappers import DocumentMapper
from domain.schemas import AddressCreate, AddressUpdate
from services import AddressService

router = APIRouter(prefix="/addresses", tags=["Addresses"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_address(
    payload: AddressCreate,
    db: Database = Depends(get_database),
    subject_id: str = Depends(get_current_user_id),
):
    address = AddressService.create_address(db, payload, subject_id)
    return message_response("Address added successfully", "address", address)


@router.get("")
def list_addresses(
    paging: Pagination = Depends(),
    db: Database = Depends(get_database),
    _: str = Depends(get_current_user_id),
):
    items, total = AddressService.list_addresses(db, paging.page, paging.limit)
    return document_page(items, total, paging.page, paging.limit)


@router.get("/user/{user_id}")
def list_user_addresses(
    user_id: str,
    db: Database = Depends(get_database),
    _: str = Depends(get_current_user_id),
):
    return DocumentMapper.to_response_list(AddressService.list_for_user(db, user_id))


@router.get("/{address_id}")
def get_address(
    address_id: str,
    db: Database = Depends(get_database),
    _: str = Depends(get_current_user_id),
):
    return DocumentMapper.to_response(AddressService.get_address(db, address_id))


@router.put("/{address_id}")
def update_address(
    address_id: str,
    payload: AddressUpdate,
    db: Database = Depends(get_database),
    subject_id: str = Depends(get_current_user_id),
):
    address = AddressService.update_address(db, address_id, payload, subject_id)
    return message_response("Address updated successfully", "address", address)


@router.delete("/{address_id}")
def delete_address(
    address_id: str,
    db: Database = Depends(get_database),
    subject_id: str = Depends(get_current_user_id),
):
    AddressService.delete_address(db, address_id, subject_id)
    return {"message": "Address deleted successfully"}
