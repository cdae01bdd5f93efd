"""Shared SQLAlchemy base and common mixins for the backend tables."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Timezone-aware UTC timestamp helper."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Create a UUID4 row identifier."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Declarative base class for backend-owned tables."""


class AuditMixin:
    """Standard audit fields shared by the catalog and profile tables."""

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
