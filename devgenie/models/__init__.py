"""Database models package."""

from .base import Base
from .project import FALLBACK_SOURCE, Project, ProjectDetail
from .user_preference import UserPreference

__all__ = [
    "FALLBACK_SOURCE",
    "Base",
    "Project",
    "ProjectDetail",
    "UserPreference",
]
