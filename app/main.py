# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the LifeLog API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.auth import routes as auth_routes
from app.config import settings
from app.exceptions import (
    LifeLogException,
    lifelog_exception_handler,
    unexpected_exception_handler,
    validation_exception_handler,
)
from app.routers import health, items, memos, todos, upload
from core.services.storage_service import StorageService
from lib.database import init_db

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs on startup and shutdown:
    - Startup: Create missing tables and the upload directory
    - Shutdown: Nothing to release; sessions are per request
    """
    logger.info(f"Starting LifeLog API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    init_db()
    upload_dir = StorageService.upload_dir()
    logger.info(f"Serving uploads from {upload_dir}")

    yield

    logger.info("Shutting down LifeLog API")


# Create FastAPI application
app = FastAPI(
    title="LifeLog API",
    description="""
## Personal Productivity API

LifeLog keeps each user's todos, lists and memos.

### Resources

| Resource | Description |
|----------|-------------|
| **Todos** | Tasks with deadline, priority and reminder lead time |
| **Items** | Shopping, movie, drama, manga, place and goal lists |
| **Memos** | Free-form notes |
| **Upload** | Images attached to todos and items |

### Quick Start

```bash
# 1. Register
curl -X POST http://localhost:8080/api/auth/register \\
  -H "Content-Type: application/json" \\
  -d '{"email": "me@example.com", "password": "secret1", "username": "me"}'

# 2. Use the returned token
curl http://localhost:8080/api/todos -H "Authorization: Bearer <token>"
```
""",
    version=health.VERSION,
    # API docs are not published in production
    docs_url=None if settings.is_production else "/docs",
    redoc_url=None if settings.is_production else "/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Auth",
            "description": "Register, log in and manage the current account",
        },
        {
            "name": "Todos",
            "description": "Tasks with deadlines and priorities",
        },
        {
            "name": "Items",
            "description": "Categorized lists",
        },
        {
            "name": "Memos",
            "description": "Notes",
        },
        {
            "name": "Upload",
            "description": "Image upload and removal",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests from configured origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(LifeLogException)
async def handle_lifelog_exception(request: Request, exc: LifeLogException):
    """Handle custom LifeLog exceptions."""
    return await lifelog_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle request body/query validation failures."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    return await unexpected_exception_handler(request, exc)


# =============================================================================
# Routers
# =============================================================================

# Authentication endpoints
app.include_router(
    auth_routes.router,
    prefix="/api/auth",
    tags=["Auth"]
)

# Todo endpoints
app.include_router(
    todos.router,
    prefix="/api/todos",
    tags=["Todos"]
)

# Item endpoints
app.include_router(
    items.router,
    prefix="/api/items",
    tags=["Items"]
)

# Memo endpoints
app.include_router(
    memos.router,
    prefix="/api/memos",
    tags=["Memos"]
)

# Image upload endpoints
app.include_router(
    upload.router,
    prefix="/api/upload",
    tags=["Upload"]
)

# Health check endpoints
app.include_router(
    health.router,
    tags=["Health"]
)

# Stored images, served without authentication
app.mount(
    "/uploads",
    StaticFiles(directory=str(settings.upload_path), check_dir=False),
    name="uploads",
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "LifeLog API",
        "version": health.VERSION,
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development,
    )
