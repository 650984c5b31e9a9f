"""Request schemas for the generation endpoints."""

from enum import Enum
from typing import Any

from pydantic import Field, field_validator, model_validator

from .base import CamelModel


class Difficulty(str, Enum):
    """Project difficulty levels."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class ProviderName(str, Enum):
    """LLM providers a request can select."""

    OPENAI = "openai"
    CLAUDE = "claude"
    GEMINI = "gemini"


class DocumentType(str, Enum):
    """Kinds of documentation the generator produces."""

    SRS = "srs"
    DESIGN = "design"
    API = "api"
    USER = "user"


def _strip_not_blank(v: str) -> str:
    if not v.strip():
        raise ValueError("must not be blank")
    return v.strip()


def _fold_selected_api(data: Any) -> Any:
    """Accept the legacy single ``selectedApi`` field as a one-item ``providers`` list."""
    if isinstance(data, dict) and data.get("selectedApi") and not data.get("providers"):
        data = {**data, "providers": [data["selectedApi"]]}
    return data


class ProviderSelection(CamelModel):
    """Mixin for requests that choose providers. Empty means every configured one."""

    providers: list[ProviderName] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def fold_selected_api(cls, data: Any) -> Any:
        return _fold_selected_api(data)


class GenerationRequest(ProviderSelection):
    """Project preferences for idea generation."""

    project_type: str = Field(..., min_length=1, description="e.g. Web App, Mobile App")
    interests: str = Field(..., min_length=1)
    skills: str = Field(..., min_length=1)
    difficulty: Difficulty | None = Field(
        default=None, description="Falls back to the caller's default difficulty"
    )

    @field_validator("project_type", "interests", "skills")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _strip_not_blank(v)


class ProjectRef(CamelModel):
    """Project as sent back by the client; only ``id`` is authoritative."""

    id: str = Field(..., min_length=1)
    title: str | None = None
    description: str | None = None
    category: str | None = None


class DetailRequest(ProviderSelection):
    """Request for one project's detail record."""

    project: ProjectRef


class DocumentationRequest(ProviderSelection):
    """Input for the documentation generator."""

    project_title: str = Field(..., min_length=1)
    project_description: str = Field(..., min_length=1)
    requirements: str | None = None
    features: str | None = None
    tech_stack: str | None = None
    document_type: DocumentType

    @field_validator("project_title", "project_description")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _strip_not_blank(v)


class ResourceSearchRequest(ProviderSelection):
    """Category (and optional search term) to find learning resources for."""

    category: str = Field(..., min_length=1)
    search_term: str | None = None

    @field_validator("category")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _strip_not_blank(v)

    @property
    def query(self) -> str:
        return (self.search_term or "").strip() or self.category
