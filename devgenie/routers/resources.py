"""Learning resources router."""

from fastapi import APIRouter, Depends

from ..clients.github import GitHubSearchClient
from ..dependencies import get_current_owner_id, get_github_client, get_provider_registry
from ..generation import pipeline
from ..providers.registry import ProviderRegistry
from ..schemas import LearningResource, ResourceSearchRequest, ResourceSearchResponse

router = APIRouter(prefix="/resources", tags=["resources"])


@router.post("/search", response_model=ResourceSearchResponse)
async def search_resources(
    request: ResourceSearchRequest,
    owner_id: str = Depends(get_current_owner_id),
    registry: ProviderRegistry = Depends(get_provider_registry),
    github: GitHubSearchClient = Depends(get_github_client),
) -> ResourceSearchResponse:
    """GitHub repositories plus AI-suggested learning resources for a topic."""
    outcome = await pipeline.search_resources(
        request, registry.select(request.providers), github
    )
    return ResourceSearchResponse(
        github_repos=outcome.github_repos,
        ai_resources=[LearningResource.model_validate(r) for r in outcome.ai_resources],
        category=request.category,
        search_term=request.search_term,
        sources=outcome.sources,
        fallback=outcome.fallback,
    )
