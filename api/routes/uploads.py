"""Image upload route"""

from typing import Optional

from fastapi import APIRouter, File, UploadFile

from adapters import file_storage
from app.exceptions import ServiceValidationError

router = APIRouter(tags=["Upload"])


@router.post("/upload")
def upload_image(image: Optional[UploadFile] = File(None)):
    """Store one image (jpeg, jpg, png or gif) sent in the `image` field"""
    if image is None or not image.filename:
        raise ServiceValidationError("No file uploaded")
    stored = file_storage.save_image(image.file, image.filename, image.content_type)
    return {
        "message": "File uploaded successfully",
        "filename": stored.filename,
        "file": stored.path,
        "url": stored.url,
    }
