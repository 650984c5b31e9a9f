"""Routers package."""

from . import documentation, health, preferences, projects, resources

__all__ = [
    "documentation",
    "health",
    "preferences",
    "projects",
    "resources",
]
