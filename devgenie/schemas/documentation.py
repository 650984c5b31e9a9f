"""Documentation generator response schema."""

from .base import CamelModel
from .generation import DocumentType


class DocumentationResponse(CamelModel):
    """Combined markdown document and the providers that contributed."""

    documentation: str
    document_type: DocumentType
    project_title: str
    sources: list[str]
    fallback: bool
