"""Health check routes"""

from fastapi import APIRouter, Depends
from pymongo.database import Database

from adapters import mongo_adapter
from api.dependencies import get_database
from app.config import settings

router = APIRouter(tags=["Health"])


@router.get("/health-check")
def health_check(db: Database = Depends(get_database)):
    """Basic health check endpoint, including a database ping"""
    database = "ok" if mongo_adapter.ping(db) else "unavailable"
    return {"status": "ok", "service": settings.app_name, "database": database}
