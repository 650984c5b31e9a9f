"""API schemas."""

from .documentation import DocumentationResponse
from .generation import (
    DetailRequest,
    Difficulty,
    DocumentationRequest,
    DocumentType,
    GenerationRequest,
    ProjectRef,
    ProviderName,
    ResourceSearchRequest,
)
from .preferences import PreferencesRead, PreferencesUpdate
from .project import DetailResponse, GenerationResponse, ProjectDetailRead, ProjectRead
from .resources import LearningResource, RepositorySummary, ResourceSearchResponse

__all__ = [
    "DetailRequest",
    "DetailResponse",
    "Difficulty",
    "DocumentType",
    "DocumentationRequest",
    "DocumentationResponse",
    "GenerationRequest",
    "GenerationResponse",
    "LearningResource",
    "PreferencesRead",
    "PreferencesUpdate",
    "ProjectDetailRead",
    "ProjectRead",
    "ProjectRef",
    "ProviderName",
    "RepositorySummary",
    "ResourceSearchRequest",
    "ResourceSearchResponse",
]
