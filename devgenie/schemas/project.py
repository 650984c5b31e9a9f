"""Project and project detail response schemas."""

from datetime import datetime

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

from .base import CamelModel


class ProjectRead(CamelModel):
    """Stored project as returned to the client."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: str
    title: str
    description: str
    difficulty: str
    tags: list[str]
    category: str
    estimated_time: str
    market_demand: str
    source_provider: str
    owner_id: str
    created_at: datetime | None = None


class ProjectDetailRead(CamelModel):
    """Project detail; ``id`` is empty for an unsaved fallback detail."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: str | None = None
    project_id: str
    structure: str
    flow: str
    roadmap: str
    pseudo_code: str
    resources: list[str]
    github_links: list[str]
    source_provider: str
    created_at: datetime | None = None


class GenerationResponse(CamelModel):
    """Result of one generation call."""

    projects: list[ProjectRead]
    sources: list[str]
    fallback: bool


class DetailResponse(CamelModel):
    """Detail lookup result; ``created`` is false when served from the store.

    ``fallback`` marks demo content that was not saved.
    """

    details: ProjectDetailRead
    created: bool
    fallback: bool = False
