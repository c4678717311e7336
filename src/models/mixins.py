"""Mixins for SQLAlchemy models."""

from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import Column, DateTime, String, func


def generate_id() -> str:
    """Return a new opaque record id."""
    return uuid4().hex


def utc_now() -> datetime:
    return datetime.now(UTC)


class IdMixin:
    """Mixin for an opaque string primary key generated on insert."""

    id = Column(String(32), primary_key=True, default=generate_id)


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamp columns."""

    created_at = Column(
        DateTime(timezone=True), default=utc_now, server_default=func.now(), nullable=False
    )
    updated_at = Column(
        DateTime(timezone=True),
        default=utc_now,
        server_default=func.now(),
        onupdate=utc_now,
        nullable=False,
    )
