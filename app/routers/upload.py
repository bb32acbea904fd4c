# =============================================================================
# app/routers/upload.py - Image Upload Endpoints
# =============================================================================
# Uploads an image for a todo/item and returns the URL it is served from.
# Validation and disk access live in StorageService.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, File, Query, Request, UploadFile

from app.dependencies import CurrentUserDep
from app.exceptions import EmptyFileError
from core.services.storage_service import StorageService

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Endpoints
# =============================================================================

@router.post("")
def upload_image(
    request: Request,
    user: CurrentUserDep,
    file: Annotated[UploadFile | None, File(description="Image to upload")] = None,
) -> dict:
    """
    Upload an image.

    Allowed types are .jpg, .jpeg, .png, .gif and .webp, up to
    MAX_UPLOAD_SIZE_MB. The stored file gets a new unique name; the
    original name is only used for its extension.

    Returns:
        {"url": absolute URL of the stored image}

    Raises:
        400: If the file is missing, empty, too large or not an allowed type
    """
    if file is None:
        raise EmptyFileError()

    content = file.file.read()
    logger.info(f"Processing image upload from user {user.id}: {file.filename} ({len(content)} bytes)")

    stored_name = StorageService.save_image(file.filename, content)

    return {"url": f"{request.base_url}uploads/{stored_name}"}


@router.delete("")
def delete_image(
    user: CurrentUserDep,
    file_name: Annotated[str | None, Query(alias="fileName", description="Stored file name")] = None,
) -> dict:
    """
    Delete a stored image by name.

    Raises:
        400: If the name is empty or looks like a path
        404: If no such file exists
    """
    StorageService.delete_image(file_name)
    logger.info(f"User {user.id} deleted image {file_name}")
    return {"message": "File deleted", "fileName": file_name}
