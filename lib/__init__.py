# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - database.py: SQLAlchemy engine, sessions and table creation
# - lifelog_client.py: httpx client for the LifeLog REST API
# - utils.py: Shared utilities (UTC time, upload file names)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.lifelog_client import LifeLogClient, LifeLogClientError
from lib.utils import file_extension, generate_unique_filename, is_safe_filename, utcnow

__all__ = [
    # Client
    "LifeLogClient",
    "LifeLogClientError",
    # Utils
    "file_extension",
    "generate_unique_filename",
    "is_safe_filename",
    "utcnow",
]
