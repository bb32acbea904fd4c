# =============================================================================
# lib/database.py - SQLAlchemy Engine and Session Management
# =============================================================================
# This module owns the database connection for the whole application:
# - engine: one shared SQLAlchemy engine (connection pool)
# - SessionLocal: factory for short-lived per-request sessions
# - Base: declarative base for ORM tables (see core/tables.py)
# - get_db: FastAPI dependency yielding a session per request
# - init_db: create missing tables at startup
#
# Usage:
#   from lib.database import get_db
#
#   @router.get("/things")
#   def list_things(db: Session = Depends(get_db)):
#       ...
# =============================================================================

import logging
from collections.abc import Iterator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import settings

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores REFERENCES and ON DELETE CASCADE unless enabled per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create the SQLAlchemy engine for a database URL.

    SQLite connections are shared across FastAPI's threadpool, so the
    same-thread check is disabled. In-memory SQLite uses a single static
    connection, otherwise every new connection would see an empty database.
    Foreign key enforcement is switched on for every SQLite connection.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool
        sqlite_engine = create_engine(database_url, echo=echo, **kwargs)
        event.listen(sqlite_engine, "connect", _enable_sqlite_foreign_keys)
        return sqlite_engine

    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=10,       # connections kept open
        max_overflow=20,    # extra connections under load
        pool_timeout=30,    # seconds to wait for a free connection
        pool_recycle=1800,  # recycle connections every 30 minutes
    )


engine = _build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db() -> Iterator[Session]:
    """
    Yield a database session for one request.

    The session is rolled back if the request fails and always closed.
    """
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db() -> None:
    """Create any missing tables."""
    # Import tables so they are registered on Base.metadata
    import core.tables  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables are ready")


def check_connection() -> bool:
    """Run a trivial query to check that the database is reachable."""
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.warning(f"Database health check failed: {e}")
        return False
