# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the application's business logic:
# - models/: Pydantic schemas for request validation and responses
# - tables.py: SQLAlchemy ORM tables (users, todos, items, memos)
# - services/: auth, ownership-scoped CRUD and image storage
#
# Services take a database session and the caller's user id explicitly;
# they never read request state. This keeps the logic testable without HTTP.
# =============================================================================
