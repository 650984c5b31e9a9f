"""Documentation generator router."""

from fastapi import APIRouter, Depends
import structlog

from ..dependencies import get_current_owner_id, get_provider_registry
from ..generation import pipeline
from ..providers.registry import ProviderRegistry
from ..schemas import DocumentationRequest, DocumentationResponse

logger = structlog.get_logger()

router = APIRouter(prefix="/documentation", tags=["documentation"])


@router.post("/generate", response_model=DocumentationResponse)
async def generate_documentation(
    request: DocumentationRequest,
    owner_id: str = Depends(get_current_owner_id),
    registry: ProviderRegistry = Depends(get_provider_registry),
) -> DocumentationResponse:
    """Generate an SRS, design document, API reference or user manual."""
    logger.info(
        "generating_documentation",
        document_type=request.document_type.value,
        project_title=request.project_title,
    )
    outcome = await pipeline.generate_documentation(request, registry.select(request.providers))
    return DocumentationResponse(
        documentation=outcome.documentation,
        document_type=request.document_type,
        project_title=request.project_title,
        sources=outcome.sources,
        fallback=outcome.fallback,
    )
