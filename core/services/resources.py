# =============================================================================
# core/services/resources.py - Per-Table Service Instances
# =============================================================================
# Todo and Item support toggling `completed`; Item lists can be filtered
# by category. Memo is plain CRUD.
# =============================================================================

from core.services.owned_resource_service import (
    CompletableResourceService,
    OwnedResourceService,
)
from core.tables import Item, Memo, Todo

todo_service = CompletableResourceService(Todo, "Todo")

item_service = CompletableResourceService(Item, "Item", filterable_fields=("category",))

memo_service = OwnedResourceService(Memo, "Memo")
