"""Project and project detail models."""

from sqlalchemy import JSON, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, new_id

FALLBACK_SOURCE = "fallback"

# Column bounds for model-written free text
TITLE_LENGTH = 255
CATEGORY_LENGTH = 100
ESTIMATED_TIME_LENGTH = 50


class Project(Base):
    """Generated project idea owned by one user. Never updated after insert."""

    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(String(TITLE_LENGTH))
    description: Mapped[str] = mapped_column(Text, default="")
    difficulty: Mapped[str] = mapped_column(String(20))
    tags: Mapped[list] = mapped_column(JSON, default=list)
    category: Mapped[str] = mapped_column(String(CATEGORY_LENGTH))
    estimated_time: Mapped[str] = mapped_column(String(ESTIMATED_TIME_LENGTH))
    market_demand: Mapped[str] = mapped_column(String(20))

    # openai | claude | gemini | fallback
    source_provider: Mapped[str] = mapped_column(String(20))

    # Auth service user id (JWT "sub")
    owner_id: Mapped[str] = mapped_column(String(64), index=True)


class ProjectDetail(Base):
    """Lazily generated detail record; at most one per project."""

    __tablename__ = "project_details"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    project_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("projects.id", ondelete="CASCADE"), unique=True, index=True
    )
    structure: Mapped[str] = mapped_column(Text, default="")
    flow: Mapped[str] = mapped_column(Text, default="")
    roadmap: Mapped[str] = mapped_column(Text, default="")
    pseudo_code: Mapped[str] = mapped_column(Text, default="")
    resources: Mapped[list] = mapped_column(JSON, default=list)
    github_links: Mapped[list] = mapped_column(JSON, default=list)
    source_provider: Mapped[str] = mapped_column(String(20))
