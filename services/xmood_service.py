"""
XMood Service - content and usage counters for the XMood mobile app.
"""

import logging
from typing import List, Optional, Tuple

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING
from pymongo.database import Database

from app.exceptions import ConflictError, NotFoundError, ServiceValidationError
from core.helpers import classify_device, page_bounds, safe_field_name
from domain.schemas import (
    XMCategoryCreate,
    XMCategoryUpdate,
    XMOnboardCreate,
    XMPhotoCreate,
    XMPhotoUpdate,
    XMStoryCreate,
    XMStoryUpdate,
    XMUserRegister,
)
from repositories import (
    XMAppOpenRepository,
    XMCategoryRepository,
    XMOnboardRepository,
    XMPhotoRepository,
    XMReelRepository,
    XMServiceStatusRepository,
    XMStoryRepository,
    XMUserRepository,
)

logger = logging.getLogger("foodorder.xmood")

DEFAULT_REEL = {"message": "Success", "statusCode": 200, "url": "https://www.google.com"}


class XMCategoryService:
    @staticmethod
    def create(db: Database, payload: XMCategoryCreate) -> dict:
        repo = XMCategoryRepository(db)
        if repo.get_by_name(payload.name):
            raise ConflictError("Category already exists")
        category = repo.create(payload.to_document())
        logger.info(f"xm_category_created category_id={category['_id']}")
        return category

    @staticmethod
    def list_all(db: Database) -> List[dict]:
        return XMCategoryRepository(db).find_all(sort=[("createdAt", ASCENDING)])

    @staticmethod
    def get(db: Database, category_id: str) -> dict:
        category = XMCategoryRepository(db).get_by_id(category_id)
        if not category:
            raise NotFoundError("Category not found")
        return category

    @staticmethod
    def update(db: Database, category_id: str, payload: XMCategoryUpdate) -> dict:
        repo = XMCategoryRepository(db)
        if payload.name:
            existing = repo.get_by_name(payload.name)
            if existing and str(existing["_id"]) != category_id:
                raise ConflictError("Category already exists")
        category = repo.update(category_id, payload.to_document(exclude_unset=True))
        if not category:
            raise NotFoundError("Category not found")
        return category

    @staticmethod
    def delete(db: Database, category_id: str) -> None:
        if not XMCategoryRepository(db).delete(category_id):
            raise NotFoundError("Category not found")
        logger.info(f"xm_category_deleted category_id={category_id}")


class XMPhotoService:
    @staticmethod
    def _require_category(db: Database, category_id: str) -> dict:
        category = XMCategoryRepository(db).get_by_id(category_id)
        if not category:
            raise ServiceValidationError("Category not found")
        return category

    @staticmethod
    def _populate(db: Database, photos: List[dict]) -> List[dict]:
        refs = [p["categoryId"] for p in photos if isinstance(p.get("categoryId"), ObjectId)]
        categories = XMCategoryRepository(db).get_many_by_ids(refs)
        for photo in photos:
            ref = photo.get("categoryId")
            photo["categoryId"] = categories.get(ref, ref)
        return photos

    @staticmethod
    def create(db: Database, payload: XMPhotoCreate) -> dict:
        category = XMPhotoService._require_category(db, payload.category_id)
        document = payload.to_document()
        document["categoryId"] = category["_id"]
        document["category"] = category["name"]
        photo = XMPhotoRepository(db).create(document)
        logger.info(f"xm_photo_created photo_id={photo['_id']} category_id={category['_id']}")
        return photo

    @staticmethod
    def list_page(db: Database, page: int = 1, limit: int = 10) -> Tuple[List[dict], int]:
        repo = XMPhotoRepository(db)
        skip, limit = page_bounds(page, limit)
        photos = repo.find_page({}, skip=skip, limit=limit, sort=[("createdAt", DESCENDING)])
        return XMPhotoService._populate(db, photos), repo.count()

    @staticmethod
    def get(db: Database, photo_id: str) -> dict:
        photo = XMPhotoRepository(db).get_by_id(photo_id)
        if not photo:
            raise NotFoundError("Photo not found")
        return XMPhotoService._populate(db, [photo])[0]

    @staticmethod
    def update(db: Database, photo_id: str, payload: XMPhotoUpdate) -> dict:
        fields = payload.to_document(exclude_unset=True)
        if payload.category_id is not None:
            category = XMPhotoService._require_category(db, payload.category_id)
            fields["categoryId"] = category["_id"]
            fields["category"] = category["name"]
        else:
            fields.pop("categoryId", None)
        photo = XMPhotoRepository(db).update(photo_id, fields)
        if not photo:
            raise NotFoundError("Photo not found")
        return photo

    @staticmethod
    def delete(db: Database, photo_id: str) -> None:
        if not XMPhotoRepository(db).delete(photo_id):
            raise NotFoundError("Photo not found")


class XMStoryService:
    @staticmethod
    def create(db: Database, payload: XMStoryCreate) -> dict:
        story = XMStoryRepository(db).create(payload.to_document())
        logger.info(f"xm_story_created story_id={story['_id']}")
        return story

    @staticmethod
    def list_all(db: Database) -> List[dict]:
        return XMStoryRepository(db).find_all(sort=[("createdAt", DESCENDING)])

    @staticmethod
    def get(db: Database, story_id: str) -> dict:
        story = XMStoryRepository(db).get_by_id(story_id)
        if not story:
            raise NotFoundError("Story not found")
        return story

    @staticmethod
    def update(db: Database, story_id: str, payload: XMStoryUpdate) -> dict:
        # empty values keep the stored text
        fields = {k: v for k, v in payload.to_document(exclude_unset=True).items() if v}
        story = XMStoryRepository(db).update(story_id, fields)
        if not story:
            raise NotFoundError("Story not found")
        return story

    @staticmethod
    def delete(db: Database, story_id: str) -> None:
        if not XMStoryRepository(db).delete(story_id):
            raise NotFoundError("Story not found")


class XMUserService:
    @staticmethod
    def register(db: Database, payload: XMUserRegister) -> Tuple[dict, bool]:
        """
        Count a registration for `payload.email`.

        Returns:
            (user, created) - created is False when the email was already known
        """
        repo = XMUserRepository(db)
        user = repo.increment_registration(payload.email)
        if user:
            logger.info(f"xm_user_registered_again user_id={user['_id']} count={user['registrationCount']}")
            return user, False
        user = repo.create({"name": payload.name, "email": payload.email, "registrationCount": 1})
        logger.info(f"xm_user_registered user_id={user['_id']}")
        return user, True


class XMAppOpenService:
    @staticmethod
    def record_open(db: Database, user_agent: Optional[str]) -> dict:
        device_info = classify_device(user_agent)
        agent_key = safe_field_name(user_agent)
        doc = XMAppOpenRepository(db).record_open(device_info, agent_key)
        return {
            "message": f"App has been opened on a {device_info}",
            "totalOpens": doc["totalOpens"],
            "deviceOpens": doc["deviceVisits"][agent_key],
            "statusCode": 200,
        }


class XMOnboardService:
    @staticmethod
    def create(db: Database, payload: XMOnboardCreate) -> dict:
        return XMOnboardRepository(db).create(payload.to_document())

    @staticmethod
    def list_all(db: Database) -> List[dict]:
        return XMOnboardRepository(db).find_all(sort=[("createdAt", ASCENDING)])


class XMReelService:
    @staticmethod
    def get_reel(db: Database) -> dict:
        reel = XMReelRepository(db).get_or_create(DEFAULT_REEL)
        return {
            "message": reel.get("message"),
            "statusCode": reel.get("statusCode", 200),
            "url": reel.get("url"),
        }


class XMSwitchService:
    @staticmethod
    def set_number(db: Database, number) -> dict:
        XMServiceStatusRepository(db).upsert_number(number)
        logger.info(f"xm_switch_set number={number}")
        return {"status": "success", "statusCode": 200, "data": 0 if number == 0 else 1}

    @staticmethod
    def get_number(db: Database) -> dict:
        current = XMServiceStatusRepository(db).get_current()
        if not current:
            raise NotFoundError("No data found.")
        return {"status": "success", "statusCode": 200, "data": current["number"]}

    @staticmethod
    def update_number(db: Database, number) -> dict:
        updated = XMServiceStatusRepository(db).update_number(number)
        if not updated:
            raise NotFoundError("No data found to update.")
        logger.info(f"xm_switch_updated number={number}")
        return {"status": "success", "statusCode": 200, "data": updated["number"]}
