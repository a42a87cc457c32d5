"""
File storage adapter - image uploads written to the local upload directory.

Uploads are checked three ways before they touch the disk: the declared name
and content type, the byte size, and the decoded image itself through Pillow.
"""

import logging
import os
import time
import uuid
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Optional

from PIL import Image, UnidentifiedImageError

from app.config import settings
from app.exceptions import ServiceValidationError

logger = logging.getLogger("foodorder.storage")

# Pillow format names accepted for stored images
ALLOWED_FORMATS = {"JPEG", "PNG", "GIF"}

# Decoded size limit (decompression bombs)
MAX_WIDTH = 4096
MAX_HEIGHT = 4096

NOT_AN_IMAGE_MESSAGE = "Error: Only images are allowed!"


@dataclass(frozen=True)
class StoredFile:
    filename: str
    path: str
    url: str


def upload_root() -> Path:
    root = Path(settings.upload_dir)
    root.mkdir(parents=True, exist_ok=True)
    return root


def _is_allowed(filename: str, content_type: Optional[str]) -> bool:
    allowed = {ext.lower() for ext in settings.upload_allowed_extensions}
    ext = os.path.splitext(filename or "")[1].lower().lstrip(".")
    subtype = (content_type or "").lower().partition("/")[2]
    return ext in allowed and subtype in allowed


def _read_limited(fileobj: BinaryIO) -> bytes:
    content = fileobj.read(settings.upload_max_bytes + 1)
    if len(content) > settings.upload_max_bytes:
        raise ServiceValidationError(
            "File too large",
            details={"max_bytes": settings.upload_max_bytes},
        )
    return content


def verify_image(content: bytes) -> str:
    """
    Decode `content` with Pillow and return its format name.

    Raises:
        ServiceValidationError: not a decodable JPEG/PNG/GIF, or too large once decoded
    """
    try:
        with Image.open(BytesIO(content)) as img:
            img.verify()
        # verify() leaves the image unusable; reopen for format and size
        with Image.open(BytesIO(content)) as img:
            image_format = img.format
            width, height = img.size
    except Image.DecompressionBombError as exc:
        raise ServiceValidationError("Image dimensions too large") from exc
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as exc:
        raise ServiceValidationError(NOT_AN_IMAGE_MESSAGE) from exc

    if image_format not in ALLOWED_FORMATS:
        raise ServiceValidationError(NOT_AN_IMAGE_MESSAGE)
    if width > MAX_WIDTH or height > MAX_HEIGHT:
        raise ServiceValidationError(
            "Image dimensions too large",
            details={"max_width": MAX_WIDTH, "max_height": MAX_HEIGHT},
        )
    return image_format


def save_image(fileobj: BinaryIO, original_name: str, content_type: Optional[str]) -> StoredFile:
    """
    Persist an uploaded image.

    The stored name is a millisecond timestamp plus a short random suffix,
    keeping the original extension.

    Raises:
        ServiceValidationError: unsupported type, undecodable content or file
            larger than the limit
    """
    if not _is_allowed(original_name, content_type):
        raise ServiceValidationError(NOT_AN_IMAGE_MESSAGE)

    content = _read_limited(fileobj)
    image_format = verify_image(content)

    ext = os.path.splitext(original_name)[1].lower()
    filename = f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}{ext}"
    target = upload_root() / filename
    target.write_bytes(content)

    url = f"{settings.public_base_url.rstrip('/')}/uploads/{filename}"
    logger.info(f"file_stored filename={filename} format={image_format} bytes={len(content)}")
    return StoredFile(filename=filename, path=str(target), url=url)
