"""Resource search schemas.

``RepositorySummary`` is the trimmed view of a GitHub search hit; see
https://docs.github.com/en/rest/search/search#search-repositories
"""

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from .base import CamelModel


class RepositorySummary(CamelModel):
    """One code-repository search result."""

    name: str
    description: str | None = None
    url: str
    stars: int = 0
    language: str | None = None
    topics: list[str] = Field(default_factory=list)


class LearningResource(CamelModel):
    """AI-suggested learning resource. Unknown fields from the model are kept."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    title: str
    description: str = ""
    url: str = ""
    type: str = "tutorial"
    difficulty: str | None = None
    rating: float | None = None
    is_free: bool | None = None
    source: str


class ResourceSearchResponse(CamelModel):
    """Repositories plus deduplicated learning resources."""

    github_repos: list[RepositorySummary]
    ai_resources: list[LearningResource]
    category: str
    search_term: str | None = None
    sources: list[str]
    fallback: bool
