# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .auth_service import AuthService, hash_password, verify_password
from .owned_resource_service import CompletableResourceService, OwnedResourceService
from .resources import item_service, memo_service, todo_service
from .storage_service import StorageService

__all__ = [
    "AuthService",
    "hash_password",
    "verify_password",
    "OwnedResourceService",
    "CompletableResourceService",
    "todo_service",
    "item_service",
    "memo_service",
    "StorageService",
]
