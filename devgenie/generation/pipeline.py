"""End-to-end request flows.

prompt -> fan-out -> normalize -> dedupe -> (fallback) -> store. Provider and
parse failures are absorbed along the way; only persistence errors escape.
"""

import asyncio
from dataclasses import dataclass
from typing import Any

import httpx
import structlog

from ..clients.github import GitHubSearchClient
from ..gateway import PersistenceGateway
from ..models import Project, ProjectDetail
from ..providers.base import ProviderAdapter
from ..schemas.generation import (
    Difficulty,
    DocumentationRequest,
    GenerationRequest,
    ResourceSearchRequest,
)
from ..schemas.resources import RepositorySummary
from .dedupe import dedupe, title_key, url_key
from .fallbacks import fallback_detail, fallback_document, fallback_projects, fallback_resources
from .fanout import FanOutCoordinator
from .normalizer import normalize_detail, normalize_projects, normalize_resources
from .prompts import (
    build_detail_prompt,
    build_documentation_prompt,
    build_project_prompt,
    build_resource_prompt,
)

logger = structlog.get_logger()


@dataclass
class GenerationOutcome:
    projects: list[Project]
    sources: list[str]
    fallback: bool


@dataclass
class DetailOutcome:
    detail: ProjectDetail
    created: bool
    fallback: bool = False


@dataclass
class DocumentationOutcome:
    documentation: str
    sources: list[str]
    fallback: bool


@dataclass
class ResourceOutcome:
    github_repos: list[RepositorySummary]
    ai_resources: list[dict[str, Any]]
    sources: list[str]
    fallback: bool


async def generate_projects(
    request: GenerationRequest,
    owner_id: str,
    adapters: list[ProviderAdapter],
    gateway: PersistenceGateway,
    difficulty: Difficulty = Difficulty.BEGINNER,
) -> GenerationOutcome:
    """Generate, pool, dedupe and store project ideas for one user.

    ``difficulty`` applies when the request itself does not name one.
    """
    level = request.difficulty or difficulty
    prompt = build_project_prompt(request, difficulty=level)
    replies = await FanOutCoordinator(adapters).generate(prompt)

    pooled: list[dict[str, Any]] = []
    sources: list[str] = []
    for reply in replies:
        records = normalize_projects(reply, default_difficulty=level.value)
        if records:
            pooled.extend(records)
            sources.append(reply.source)

    records = dedupe(pooled, keys=(title_key,))
    fallback = not records
    if fallback:
        logger.warning(
            "generation_fallback_used",
            kind="projects",
            providers=[a.name for a in adapters],
            replies=len(replies),
        )
        records = fallback_projects(level.value)

    projects = await gateway.store_projects(records, owner_id)
    return GenerationOutcome(projects=projects, sources=sources, fallback=fallback)


async def get_project_details(
    project: Project,
    adapters: list[ProviderAdapter],
    gateway: PersistenceGateway,
) -> DetailOutcome:
    """Detail for a stored project; providers are only called until one delivers.

    A fallback detail is returned unsaved, so the next request asks the providers again.
    """

    async def generate() -> dict[str, Any] | None:
        prompt = build_detail_prompt(
            project.title,
            description=project.description,
            category=project.category,
            tags=project.tags,
        )
        for reply in await FanOutCoordinator(adapters).generate(prompt):
            detail = normalize_detail(reply)
            if detail is not None:
                return detail
        return None

    detail, created = await gateway.get_or_create_detail(project.id, generate)
    if detail is None:
        logger.warning("generation_fallback_used", kind="project_detail", project_id=project.id)
        detail = ProjectDetail(project_id=project.id, **fallback_detail(project.category))
        return DetailOutcome(detail=detail, created=False, fallback=True)
    return DetailOutcome(detail=detail, created=created)


async def generate_documentation(
    request: DocumentationRequest,
    adapters: list[ProviderAdapter],
) -> DocumentationOutcome:
    """One markdown document combining every provider's reply as its own section."""
    prompt = build_documentation_prompt(request)
    replies = await FanOutCoordinator(adapters).generate(prompt)

    if not replies:
        logger.warning("generation_fallback_used", kind="documentation")
        return DocumentationOutcome(
            documentation=fallback_document(request.document_type, request.project_title),
            sources=[],
            fallback=True,
        )

    display_names = {a.name: a.display_name for a in adapters}
    parts = [
        f"# {request.project_title} - {request.document_type.value.upper()} Documentation\n",
        "*Generated using multiple AI models for comprehensive coverage*\n",
    ]
    for index, reply in enumerate(replies, start=1):
        source = display_names.get(reply.source, reply.source)
        parts.append(f"## Section {index} (Generated by {source})\n")
        parts.append(f"{(reply.text or '').strip()}\n")
        parts.append("---\n")

    return DocumentationOutcome(
        documentation="\n".join(parts),
        sources=[r.source for r in replies],
        fallback=False,
    )


async def _search_repositories(
    client: GitHubSearchClient, query: str
) -> list[RepositorySummary]:
    try:
        return await client.search_repositories(query)
    except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
        # Non-JSON bodies and items missing required keys count as a failed search
        logger.warning("github_search_failed", query=query, error_type=type(e).__name__)
        return []


async def search_resources(
    request: ResourceSearchRequest,
    adapters: list[ProviderAdapter],
    github: GitHubSearchClient,
) -> ResourceOutcome:
    """Repository search and AI resource generation, run side by side."""
    prompt = build_resource_prompt(request.category, request.search_term)
    repos, replies = await asyncio.gather(
        _search_repositories(github, request.query),
        FanOutCoordinator(adapters).generate(prompt),
    )

    pooled: list[dict[str, Any]] = []
    sources: list[str] = []
    for reply in replies:
        records = normalize_resources(reply)
        if records:
            pooled.extend(records)
            sources.append(reply.source)

    resources = dedupe(pooled, keys=(url_key, title_key))
    fallback = not resources
    if fallback:
        logger.warning("generation_fallback_used", kind="resources", category=request.category)
        resources = fallback_resources()

    return ResourceOutcome(
        github_repos=repos,
        ai_resources=resources,
        sources=sources,
        fallback=fallback,
    )
