"""XMood mobile app routes (public)"""

from typing import Optional

from fastapi import APIRouter, Depends, Header, Response, status
from fastapi.responses import JSONResponse
from pymongo.database import Database

from api.dependencies import Pagination, get_database
from domain.mappers import DocumentMapper
from domain.schemas import (
    XMCategoryCreate,
    XMCategoryUpdate,
    XMOnboardCreate,
    XMPhotoCreate,
    XMPhotoUpdate,
    XMStoryCreate,
    XMStoryUpdate,
    XMSwitchServiceRequest,
    XMUserRegister,
)
from services import (
    XMAppOpenService,
    XMCategoryService,
    XMOnboardService,
    XMPhotoService,
    XMReelService,
    XMStoryService,
    XMSwitchService,
    XMUserService,
)

router = APIRouter(tags=["XMood"])


# ============================================================================
# Categories
# ============================================================================


@router.post("/XMCategory", status_code=status.HTTP_201_CREATED)
def create_xm_category(payload: XMCategoryCreate, db: Database = Depends(get_database)):
    return DocumentMapper.to_response(XMCategoryService.create(db, payload))


@router.get("/XMCategory")
def list_xm_categories(db: Database = Depends(get_database)):
    return DocumentMapper.to_response_list(XMCategoryService.list_all(db))


@router.get("/XMCategory/{category_id}")
def get_xm_category(category_id: str, db: Database = Depends(get_database)):
    return DocumentMapper.to_response(XMCategoryService.get(db, category_id))


@router.put("/XMCategory/{category_id}")
def update_xm_category(
    category_id: str, payload: XMCategoryUpdate, db: Database = Depends(get_database)
):
    return DocumentMapper.to_response(XMCategoryService.update(db, category_id, payload))


@router.delete("/XMCategory/{category_id}")
def delete_xm_category(category_id: str, db: Database = Depends(get_database)):
    XMCategoryService.delete(db, category_id)
    return {"message": "Category deleted successfully"}


# ============================================================================
# Photos
# ============================================================================


@router.post("/XMItem", status_code=status.HTTP_201_CREATED)
def create_xm_photo(payload: XMPhotoCreate, db: Database = Depends(get_database)):
    return DocumentMapper.to_response(XMPhotoService.create(db, payload))


@router.get("/XMItem")
def list_xm_photos(paging: Pagination = Depends(), db: Database = Depends(get_database)):
    photos, _ = XMPhotoService.list_page(db, paging.page, paging.limit)
    return DocumentMapper.to_response_list(photos)


@router.get("/XMItem/{photo_id}")
def get_xm_photo(photo_id: str, db: Database = Depends(get_database)):
    return DocumentMapper.to_response(XMPhotoService.get(db, photo_id))


@router.put("/XMItem/{photo_id}")
def update_xm_photo(photo_id: str, payload: XMPhotoUpdate, db: Database = Depends(get_database)):
    return DocumentMapper.to_response(XMPhotoService.update(db, photo_id, payload))


@router.delete("/XMItem/{photo_id}")
def delete_xm_photo(photo_id: str, db: Database = Depends(get_database)):
    XMPhotoService.delete(db, photo_id)
    return {"message": "Photo deleted successfully"}


# ============================================================================
# Stories
# ============================================================================


@router.get("/XMStory")
def list_xm_stories(db: Database = Depends(get_database)):
    return DocumentMapper.to_response_list(XMStoryService.list_all(db))


@router.get("/XMStory/{story_id}")
def get_xm_story(story_id: str, db: Database = Depends(get_database)):
    return DocumentMapper.to_response(XMStoryService.get(db, story_id))


@router.post("/XMStory", status_code=status.HTTP_201_CREATED)
def create_xm_story(payload: XMStoryCreate, db: Database = Depends(get_database)):
    return DocumentMapper.to_response(XMStoryService.create(db, payload))


@router.put("/XMStory/{story_id}")
def update_xm_story(story_id: str, payload: XMStoryUpdate, db: Database = Depends(get_database)):
    return DocumentMapper.to_response(XMStoryService.update(db, story_id, payload))


@router.delete("/XMStory/{story_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_xm_story(story_id: str, db: Database = Depends(get_database)):
    XMStoryService.delete(db, story_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================================
# Users, app opens, onboarding, reel, service switch
# ============================================================================


@router.post("/XMUser")
def register_xm_user(payload: XMUserRegister, db: Database = Depends(get_database)):
    user, created = XMUserService.register(db, payload)
    status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return JSONResponse(
        status_code=status_code,
        content={
            "message": "User registered successfully" if created else "User registered again successfully",
            "statusCode": status_code,
            "user": {
                "name": user["name"],
                "email": user["email"],
                "registrationCount": user["registrationCount"],
            },
        },
    )


@router.get("/XMAppOpen")
def record_app_open(
    user_agent: Optional[str] = Header(None),
    db: Database = Depends(get_database),
):
    return XMAppOpenService.record_open(db, user_agent)


@router.post("/XMOnboard", status_code=status.HTTP_201_CREATED)
def create_onboard(payload: XMOnboardCreate, db: Database = Depends(get_database)):
    entry = XMOnboardService.create(db, payload)
    return {"message": "Data added successfully", "data": DocumentMapper.to_response(entry)}


@router.get("/XMOnboard")
def list_onboard(db: Database = Depends(get_database)):
    return DocumentMapper.to_response_list(XMOnboardService.list_all(db))


@router.get("/XMReel")
def get_reel(db: Database = Depends(get_database)):
    reel = XMReelService.get_reel(db)
    return JSONResponse(status_code=reel["statusCode"], content=reel)


@router.post("/XMSwitchService")
def set_switch(payload: XMSwitchServiceRequest, db: Database = Depends(get_database)):
    return XMSwitchService.set_number(db, payload.number)


@router.get("/XMSwitchService")
def get_switch(db: Database = Depends(get_database)):
    return XMSwitchService.get_number(db)


@router.put("/XMSwitchService")
def update_switch(payload: XMSwitchServiceRequest, db: Database = Depends(get_database)):
    return XMSwitchService.update_number(db, payload.number)
