# =============================================================================
# core/tables.py - SQLAlchemy ORM Tables
# =============================================================================
# Persistent entities:
# - User: credential store (email, bcrypt hash, display name)
# - Todo / Item / Memo: user-owned records
#
# Every owned row carries user_id. Deleting a user deletes its rows
# (ORM cascade, plus ON DELETE CASCADE at the database level).
# Ids are never reused, so a stale id can't point at a newer row.
# =============================================================================

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from lib.database import Base
from lib.utils import utcnow


class User(Base):
    """A registered account."""

    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(500), nullable=False)
    username = Column(String(100), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    todos = relationship("Todo", back_populates="user", cascade="all, delete-orphan")
    items = relationship("Item", back_populates="user", cascade="all, delete-orphan")
    memos = relationship("Memo", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, username={self.username})>"


class Todo(Base):
    """
    A task with an optional deadline.

    priority: 0 = normal, 1 = important, 2 = urgent.
    notify_before_minutes is stored for clients; nothing on the server acts on it.
    """

    __tablename__ = "todos"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    deadline = Column(DateTime(timezone=True), nullable=True)
    notify_before_minutes = Column(Integer, default=30, nullable=False)
    priority = Column(Integer, default=0, nullable=False)
    completed = Column(Boolean, default=False, nullable=False)
    image_url = Column(String(500), nullable=True)
    link_url = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    user = relationship("User", back_populates="todos")

    def __repr__(self):
        return f"<Todo(id={self.id}, user_id={self.user_id}, title={self.title!r})>"


class Item(Base):
    """Something to buy, watch, read, visit or achieve."""

    __tablename__ = "items"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    title = Column(String(200), nullable=False)
    category = Column(String(50), index=True, nullable=False)
    description = Column(Text, nullable=True)
    completed = Column(Boolean, default=False, nullable=False)
    image_url = Column(String(500), nullable=True)
    link_url = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    user = relationship("User", back_populates="items")

    def __repr__(self):
        return f"<Item(id={self.id}, user_id={self.user_id}, category={self.category})>"


class Memo(Base):
    """A free-form note."""

    __tablename__ = "memos"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    title = Column(String(100), nullable=False)
    content = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    user = relationship("User", back_populates="memos")

    def __repr__(self):
        return f"<Memo(id={self.id}, user_id={self.user_id}, title={self.title!r})>"
