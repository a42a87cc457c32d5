"""
Address Service - user addresses with a single primary address per user
"""

import logging
from typing import List, Tuple

from bson import ObjectId
from pymongo import DESCENDING
from pymongo.database import Database

from app.exceptions import ForbiddenError, NotFoundError
from core.helpers import page_bounds
from domain.schemas import AddressCreate, AddressUpdate
from repositories import AddressRepository, parse_object_id
from services import address_guard

logger = logging.getLogger("foodorder.addresses")


class AddressService:
    """Business logic for addresses.

    Every write that sets `isPrimary` to true goes through `_promote`, which
    holds the per-user lock while it demotes the old primary and writes the
    new one.
    """

    @staticmethod
    def _check_owner(owner_id, subject_id: str) -> None:
        if str(owner_id) != str(subject_id):
            raise ForbiddenError("You are not authorized to modify this address")

    @staticmethod
    def create_address(db: Database, payload: AddressCreate, subject_id: str) -> dict:
        AddressService._check_owner(payload.user_id, subject_id)
        repo = AddressRepository(db)

        document = payload.to_document()
        user_oid = ObjectId(payload.user_id)
        document["userId"] = user_oid

        if payload.is_primary:
            with address_guard.user_lock(user_oid):
                repo.demote_others(user_oid)
                address = repo.create(document)
        else:
            address = repo.create(document)

        logger.info(
            f"address_created address_id={address['_id']} user_id={user_oid} "
            f"primary={address['isPrimary']}"
        )
        return address

    @staticmethod
    def list_addresses(db: Database, page: int = 1, limit: int = 10) -> Tuple[List[dict], int]:
        repo = AddressRepository(db)
        skip, limit = page_bounds(page, limit)
        items = repo.find_page({}, skip=skip, limit=limit, sort=[("createdAt", DESCENDING)])
        return items, repo.count()

    @staticmethod
    def list_for_user(db: Database, user_id: str) -> List[dict]:
        user_oid = parse_object_id(user_id)
        addresses = AddressRepository(db).find_by_user(user_oid) if user_oid else []
        if not addresses:
            raise NotFoundError("No addresses found for this user")
        return addresses

    @staticmethod
    def get_address(db: Database, address_id: str) -> dict:
        address = AddressRepository(db).get_by_id(address_id)
        if not address:
            raise NotFoundError("Address not found")
        return address

    @staticmethod
    def update_address(
        db: Database, address_id: str, payload: AddressUpdate, subject_id: str
    ) -> dict:
        """
        Partial update of an address owned by `subject_id`.

        `isPrimary: true` promotes this address and demotes the user's other
        primary; `isPrimary: false` clears the flag on this address only.
        """
        repo = AddressRepository(db)
        address = repo.get_by_id(address_id)
        if not address:
            raise NotFoundError("Address not found")
        AddressService._check_owner(address["userId"], subject_id)
        if payload.user_id is not None:
            AddressService._check_owner(payload.user_id, subject_id)

        fields = payload.to_document(exclude_unset=True)
        # ownership never moves between users
        fields.pop("userId", None)
        if fields.get("isPrimary") is None:
            fields.pop("isPrimary", None)

        if fields.get("isPrimary"):
            user_oid = address["userId"]
            with address_guard.user_lock(user_oid):
                repo.demote_others(user_oid, keep_id=address["_id"])
                updated = repo.update(address["_id"], fields)
        else:
            updated = repo.update(address["_id"], fields)

        if updated is None:
            raise NotFoundError("Address not found")
        logger.info(f"address_updated address_id={address_id} fields={sorted(fields)}")
        return updated

    @staticmethod
    def delete_address(db: Database, address_id: str, subject_id: str) -> None:
        repo = AddressRepository(db)
        address = repo.get_by_id(address_id)
        if not address:
            raise NotFoundError("Address not found")
        AddressService._check_owner(address["userId"], subject_id)
        repo.delete(address["_id"])
        logger.info(f"address_deleted address_id={address_id}")
