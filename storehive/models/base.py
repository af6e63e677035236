"""Base model infrastructure for SQLAlchemy models."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


class AuditMixin:
    """Mixin recording who created and last touched a row, and when."""

    created_by: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_updated_by: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
        nullable=False,
    )


class SoftDeleteMixin:
    """Mixin providing the soft-delete flag.

    A row with ``is_deleted`` set stays in the table until it is purged.
    """

    is_deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
