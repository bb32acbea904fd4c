# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

import uuid
from datetime import datetime, timezone
from pathlib import PurePath


# =============================================================================
# Time Utilities
# =============================================================================

def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


# =============================================================================
# File Name Utilities
# =============================================================================

def file_extension(filename: str) -> str:
    """
    Lower-cased extension of a file name, including the dot.

    Example:
        file_extension("Photo.JPG")  # ".jpg"
        file_extension("README")     # ""
    """
    return PurePath(filename).suffix.lower()


def generate_unique_filename(extension: str) -> str:
    """
    Build a collision-resistant file name: UTC timestamp plus a random UUID.

    Example:
        generate_unique_filename(".png")  # "20240115103000_3f2b...9c.png"
    """
    timestamp = utcnow().strftime("%Y%m%d%H%M%S")
    return f"{timestamp}_{uuid.uuid4().hex}{extension}"


def is_safe_filename(filename: str | None) -> bool:
    """
    Check that a name refers to a single file inside a directory.

    Rejects empty names, parent references and any path separator.
    """
    if not filename or not filename.strip():
        return False
    if ".." in filename or "/" in filename or "\\" in filename:
        return False
    return filename != "."
