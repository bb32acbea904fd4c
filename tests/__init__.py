# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the LifeLog API:
# - test_models.py: Unit tests for Pydantic model validation
# - test_auth.py: Registration, login, tokens and account deletion
# - test_todos.py / test_items.py / test_memos.py: Resource endpoints
# - test_ownership.py: Cross-user isolation
# - test_upload.py: Image upload, serving and deletion
# - test_health.py: Health checks and generic error handling
# - test_client.py: The httpx API client
#
# Run tests with: pytest
# =============================================================================
