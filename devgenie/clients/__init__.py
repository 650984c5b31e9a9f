"""Clients for external services."""

from .github import GitHubSearchClient

__all__ = ["GitHubSearchClient"]
