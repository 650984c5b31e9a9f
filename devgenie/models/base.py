"""Base database model."""

from datetime import datetime
from typing import Any
import uuid

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


def new_id() -> str:
    """Server-assigned row id."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Base class for all models."""

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    def to_dict(self) -> dict[str, Any]:
        """Convert model instance to dictionary."""
        return {c.name: getattr(self, c.name) for c in self.__table__.columns}
