# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - todos.py: Todo CRUD and toggle endpoints
# - items.py: Item CRUD, category filter and toggle endpoints
# - memos.py: Memo CRUD endpoints
# - upload.py: Image upload and delete endpoints
#
# Authentication routes live in app/auth/routes.py.
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import todos
from . import items
from . import memos
from . import upload

__all__ = [
    "health",
    "todos",
    "items",
    "memos",
    "upload",
]
