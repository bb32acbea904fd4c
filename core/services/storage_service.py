# =============================================================================
# core/services/storage_service.py - Local Image Storage
# =============================================================================
# Handles saving and deleting uploaded images in UPLOAD_DIR.
# Stored files are served as static files under /uploads/ (see app/main.py).
#
# Files are not tied to a user: any authenticated user can delete any file
# by name, and deleting a todo/item does not delete its image.
# =============================================================================

import logging
import os
from pathlib import Path

from app.config import settings
from app.exceptions import (
    EmptyFileError,
    FileTooLargeError,
    InvalidFileNameError,
    InvalidFileTypeError,
    StorageError,
    StoredFileNotFoundError,
)
from lib.utils import file_extension, generate_unique_filename, is_safe_filename

logger = logging.getLogger(__name__)


class StorageService:
    """
    Service for image file operations.

    Handles validating, writing and removing images on local disk.
    """

    @staticmethod
    def upload_dir() -> Path:
        """Upload directory, created on first use."""
        path = settings.upload_path
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def validate_image(filename: str | None, content: bytes) -> str:
        """
        Check an upload before anything is written.

        Args:
            filename: Client-supplied file name
            content: File bytes

        Returns:
            Lower-cased extension of the file (e.g. ".png")

        Raises:
            EmptyFileError: If there is no content
            FileTooLargeError: If content exceeds MAX_UPLOAD_SIZE_MB
            InvalidFileTypeError: If the extension isn't allowed
        """
        if not content:
            raise EmptyFileError()

        size_bytes = len(content)
        if size_bytes > settings.max_upload_size_bytes:
            raise FileTooLargeError(size_bytes / (1024 * 1024), settings.MAX_UPLOAD_SIZE_MB)

        extension = file_extension(filename or "")
        if extension not in settings.allowed_extensions_list:
            raise InvalidFileTypeError(filename or "", settings.allowed_extensions_list)

        return extension

    @staticmethod
    def save_image(filename: str | None, content: bytes) -> str:
        """
        Validate and store an image under a generated unique name.

        Args:
            filename: Client-supplied file name (only its extension is kept)
            content: File bytes

        Returns:
            Stored file name

        Raises:
            EmptyFileError, FileTooLargeError, InvalidFileTypeError: If validation fails
            StorageError: If the file can't be written
        """
        extension = StorageService.validate_image(filename, content)
        stored_name = generate_unique_filename(extension)
        path = StorageService.upload_dir() / stored_name

        try:
            # "xb" never overwrites an existing file
            with open(path, "xb") as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Image upload failed: {e}")
            raise StorageError("upload")

        logger.info(f"Stored image: {stored_name} ({len(content)} bytes)")
        return stored_name

    @staticmethod
    def delete_image(filename: str | None) -> None:
        """
        Delete a stored image by name.

        Raises:
            InvalidFileNameError: If the name is empty or contains a path
            StoredFileNotFoundError: If no such file exists
            StorageError: If the file can't be removed
        """
        if not is_safe_filename(filename):
            logger.warning(f"Rejected image delete with unsafe name: {filename!r}")
            raise InvalidFileNameError(filename)

        upload_dir = StorageService.upload_dir()
        path = (upload_dir / filename).resolve()

        if path.parent != upload_dir or not path.is_file():
            raise StoredFileNotFoundError(filename)

        try:
            path.unlink()
        except FileNotFoundError:
            raise StoredFileNotFoundError(filename)
        except OSError as e:
            logger.error(f"Image delete failed: {e}")
            raise StorageError("delete")

        logger.info(f"Deleted image: {filename}")

    @staticmethod
    def is_writable() -> bool:
        """Check that the upload directory exists (or can be created) and is writable."""
        try:
            return os.access(StorageService.upload_dir(), os.W_OK)
        except OSError as e:
            logger.warning(f"Upload directory check failed: {e}")
            return False
