# travel_admin/services/uploads.py
from __future__ import annotations

import logging
import mimetypes
import os
import secrets
import string
import time
from io import BytesIO
from pathlib import Path
from typing import Callable, Collection

from fastapi import UploadFile
from PIL import Image, UnidentifiedImageError

from travel_admin.core.config import Settings
from travel_admin.core.errors import InvalidMediaType, PayloadTooLarge
from travel_admin.services.asset_url import resolve

logger = logging.getLogger(__name__)

PACKAGE_IMAGES_URL_DIR = "/assets/images/packages"
TOKEN_ALPHABET = string.ascii_lowercase + string.digits
TOKEN_LEN = 11


def _now_millis() -> int:
    return time.time_ns() // 1_000_000


def random_token(n: int = TOKEN_LEN) -> str:
    return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(n))


def _extension(filename: str, mime_type: str) -> str:
    ext = os.path.splitext(filename or "")[1].lower()
    if ext:
        return ext
    return mimetypes.guess_extension(mime_type) or ""


def allocate(
    filename: str,
    mime_type: str,
    size: int,
    max_size: int,
    allowed_mime_types: Collection[str],
    *,
    clock: Callable[[], int] | None = None,
    token: Callable[[], str] | None = None,
) -> str:
    """
    Check an upload against the policy and pick its public path:
    /assets/images/packages/{epoch_millis}-{random}{.ext}
    Raises InvalidMediaType or PayloadTooLarge.
    """
    if mime_type not in allowed_mime_types:
        raise InvalidMediaType("Invalid file type. Only images are allowed.")
    if size > max_size:
        raise PayloadTooLarge(f"File size too large. Maximum size is {max_size // (1024 * 1024)}MB.")

    millis = (clock or _now_millis)()
    rand = (token or random_token)()
    return f"{PACKAGE_IMAGES_URL_DIR}/{millis}-{rand}{_extension(filename, mime_type)}"


def store_upload(public_dir: str | Path, stored_path: str, payload: bytes) -> Path:
    """
    Write the payload under public_dir at stored_path. The file only appears
    under its final name once fully written.
    """
    final_path = Path(public_dir) / stored_path.lstrip("/")
    final_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = final_path.with_name(final_path.name + ".tmp")

    try:
        with open(tmp_path, "wb") as f:
            f.write(payload)
        os.replace(tmp_path, final_path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise
    return final_path


def _read_limited(upload: UploadFile, limit: int) -> bytes:
    # one byte past the limit is enough to know it is too big
    return upload.file.read(limit + 1)


def _verify_image(raw: bytes) -> None:
    try:
        with Image.open(BytesIO(raw)) as im:
            im.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise InvalidMediaType("Unsupported or corrupted image") from e


def save_package_image(upload: UploadFile, settings: Settings) -> dict[str, str]:
    """Validate, store and describe an uploaded package image."""
    raw = _read_limited(upload, settings.UPLOAD_MAX_BYTES)
    try:
        stored_path = allocate(
            upload.filename or "",
            upload.content_type or "",
            len(raw),
            settings.UPLOAD_MAX_BYTES,
            settings.UPLOAD_ALLOWED_TYPES,
        )
        _verify_image(raw)
    except (InvalidMediaType, PayloadTooLarge) as e:
        logger.warning("Rejected upload %r (%s): %s", upload.filename, upload.content_type, e.message)
        raise

    store_upload(settings.PUBLIC_DIR, stored_path, raw)
    logger.info("Stored package image %s (%d bytes)", stored_path, len(raw))
    return {
        "path": stored_path,
        "url": resolve(stored_path, settings.public_base_url),
        "filename": stored_path.rsplit("/", 1)[-1],
    }
