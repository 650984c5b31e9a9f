"""Projects router: generation, saved projects and project details."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import PlainTextResponse
import structlog

from ..dependencies import get_current_owner_id, get_gateway, get_provider_registry
from ..gateway import PersistenceGateway
from ..generation import pipeline
from ..generation.paper import paper_filename, render_research_paper
from ..models import Project
from ..providers.registry import ProviderRegistry
from ..schemas import (
    DetailRequest,
    DetailResponse,
    Difficulty,
    GenerationRequest,
    GenerationResponse,
    ProjectDetailRead,
    ProjectRead,
)

logger = structlog.get_logger()

router = APIRouter(prefix="/projects", tags=["projects"])


@router.post("/generate", response_model=GenerationResponse)
async def generate_projects(
    request: GenerationRequest,
    owner_id: str = Depends(get_current_owner_id),
    gateway: PersistenceGateway = Depends(get_gateway),
    registry: ProviderRegistry = Depends(get_provider_registry),
) -> GenerationResponse:
    """Generate project ideas from preferences and store them for the caller."""
    preferences = await gateway.get_preferences(owner_id)
    providers = request.providers or (preferences.preferred_providers if preferences else [])
    default_difficulty = (
        Difficulty(preferences.default_difficulty) if preferences else Difficulty.BEGINNER
    )

    logger.info(
        "generating_projects",
        project_type=request.project_type,
        difficulty=(request.difficulty or default_difficulty).value,
        providers=[getattr(p, "value", p) for p in providers],
    )

    outcome = await pipeline.generate_projects(
        request,
        owner_id,
        registry.select(providers),
        gateway,
        difficulty=default_difficulty,
    )
    return GenerationResponse(
        projects=[ProjectRead.model_validate(p) for p in outcome.projects],
        sources=outcome.sources,
        fallback=outcome.fallback,
    )


@router.get("/", response_model=list[ProjectRead])
async def list_projects(
    category: str | None = None,
    search: str | None = None,
    owner_id: str = Depends(get_current_owner_id),
    gateway: PersistenceGateway = Depends(get_gateway),
) -> list[Project]:
    """List the caller's projects, optionally filtered by category or search text."""
    return await gateway.list_projects(owner_id, category=category, search=search)


@router.get("/{project_id}", response_model=ProjectRead)
async def get_project(
    project_id: str,
    owner_id: str = Depends(get_current_owner_id),
    gateway: PersistenceGateway = Depends(get_gateway),
) -> Project:
    """Get one of the caller's projects."""
    project = await gateway.get_project(owner_id, project_id)
    if not project:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return project


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: str,
    owner_id: str = Depends(get_current_owner_id),
    gateway: PersistenceGateway = Depends(get_gateway),
) -> Response:
    """Delete one of the caller's projects together with its details."""
    if not await gateway.delete_project(owner_id, project_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/details", response_model=DetailResponse)
async def get_project_details(
    request: DetailRequest,
    owner_id: str = Depends(get_current_owner_id),
    gateway: PersistenceGateway = Depends(get_gateway),
    registry: ProviderRegistry = Depends(get_provider_registry),
) -> DetailResponse:
    """Detail record for a project, generated on first request and reused afterwards."""
    project = await gateway.get_project(owner_id, request.project.id)
    if not project:
        logger.warning("project_details_unknown_project", project_id=request.project.id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")

    outcome = await pipeline.get_project_details(
        project, registry.select(request.providers), gateway
    )
    return DetailResponse(
        details=ProjectDetailRead.model_validate(outcome.detail),
        created=outcome.created,
        fallback=outcome.fallback,
    )


@router.get("/{project_id}/paper", response_class=PlainTextResponse)
async def download_research_paper(
    project_id: str,
    owner_id: str = Depends(get_current_owner_id),
    gateway: PersistenceGateway = Depends(get_gateway),
) -> PlainTextResponse:
    """Research paper outline for a project whose details have been generated."""
    project = await gateway.get_project(owner_id, project_id)
    if not project:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")

    detail = await gateway.find_detail(project_id)
    if detail is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Project details not generated yet"
        )

    return PlainTextResponse(
        render_research_paper(project, detail),
        headers={
            "Content-Disposition": f'attachment; filename="{paper_filename(project.title)}"'
        },
    )
