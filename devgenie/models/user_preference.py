"""User preference model."""

from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from .base import Base


class UserPreference(Base):
    """Settings page values, one row per user."""

    __tablename__ = "user_preferences"

    owner_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    preferred_providers: Mapped[list] = mapped_column(JSON, default=list)
    default_difficulty: Mapped[str] = mapped_column(String(20), default="Intermediate")
    language: Mapped[str] = mapped_column(String(10), default="en")
    timezone: Mapped[str] = mapped_column(String(64), default="UTC")
    email_notifications: Mapped[bool] = mapped_column(Boolean, default=True)
    project_updates: Mapped[bool] = mapped_column(Boolean, default=True)
    weekly_digest: Mapped[bool] = mapped_column(Boolean, default=False)
    theme: Mapped[str] = mapped_column(String(20), default="light")
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )
