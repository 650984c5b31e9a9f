"""Prompt templates.

Each builder turns a typed request into one natural-language prompt. Mandatory
fields must be non-empty; optional fields that are absent are left out of the
prompt text entirely.
"""

from ..schemas.generation import Difficulty, DocumentationRequest, DocumentType, GenerationRequest

PROJECT_COUNT = 3

PROJECT_PROMPT = """Generate {count} unique software project ideas for a student.

Preferences:
{preferences}

Return ONLY a JSON array (no markdown, no commentary) of {count} objects with these fields:
- "title": short, specific project title
- "description": 2-3 sentence description
- "difficulty": one of "Beginner", "Intermediate", "Advanced"
- "tags": array of technology/skill strings
- "category": e.g. "Web Development", "AI/ML", "Mobile Apps"
- "estimatedTime": e.g. "3-4 weeks"
- "marketDemand": one of "Low", "Medium", "High"
"""

DETAIL_PROMPT = """Provide detailed implementation guidance for the software project "{title}".
{context}
Return ONLY a JSON object (no markdown, no commentary) with these fields:
- "structure": project architecture (frontend, backend, database, services)
- "flow": user flow / workflow as numbered steps
- "roadmap": development phases with rough durations
- "pseudoCode": pseudo code for the key algorithms
- "resources": array of helpful documentation/tutorial URLs
- "githubLinks": array of relevant GitHub repository URLs
"""

RESOURCE_PROMPT = """Generate a comprehensive list of learning resources for {subject}.

Include:
- Official documentation links
- Best tutorial websites
- Online courses (free and paid)
- YouTube channels
- Books and ebooks
- Community forums
- Practice platforms

Return ONLY a JSON array of objects with these fields: "title", "description", "url",
"type" (one of tutorial, course, documentation, book, community), "difficulty",
"rating" (1-5) and "isFree" (boolean).
"""

# Document type -> (heading, request fields to embed, sections to include)
DOCUMENT_TEMPLATES: dict[DocumentType, tuple[str, tuple[str, ...], str]] = {
    DocumentType.SRS: (
        "a comprehensive Software Requirements Specification (SRS) document",
        ("project_title", "project_description", "requirements", "features", "tech_stack"),
        "Introduction, Overall Description, System Features, External Interface "
        "Requirements, Other Nonfunctional Requirements, and Appendices",
    ),
    DocumentType.DESIGN: (
        "a detailed System Design Document",
        ("project_title", "project_description", "tech_stack"),
        "Architecture Overview, Database Design, API Design, UI/UX Specifications, "
        "Security Considerations, and Deployment Strategy",
    ),
    DocumentType.API: (
        "comprehensive API Documentation",
        ("project_title", "project_description", "features", "tech_stack"),
        "API Overview, Authentication, Endpoints, Request/Response Examples, "
        "Error Codes, and Rate Limiting",
    ),
    DocumentType.USER: (
        "a User Manual",
        ("project_title", "project_description", "features"),
        "Getting Started, Feature Explanations, Step-by-step Guides, Troubleshooting, and FAQ",
    ),
}

_FIELD_LABELS = {
    "project_title": "Project",
    "project_description": "Description",
    "requirements": "Requirements",
    "features": "Features",
    "tech_stack": "Tech Stack",
}


def _require(**fields: str | None) -> None:
    missing = [name for name, value in fields.items() if not (value or "").strip()]
    if missing:
        raise ValueError(f"Missing required prompt fields: {', '.join(missing)}")


def _lines(pairs: list[tuple[str, str | None]]) -> str:
    return "\n".join(f"{label}: {value.strip()}" for label, value in pairs if (value or "").strip())


def build_project_prompt(request: GenerationRequest, difficulty: Difficulty | None = None) -> str:
    """Prompt asking for ``PROJECT_COUNT`` ideas as a JSON array."""
    _require(
        project_type=request.project_type,
        interests=request.interests,
        skills=request.skills,
    )
    level = difficulty or request.difficulty
    preferences = _lines(
        [
            ("Project Type", request.project_type),
            ("Interests", request.interests),
            ("Skills", request.skills),
            ("Difficulty", level.value if level else None),
        ]
    )
    return PROJECT_PROMPT.format(count=PROJECT_COUNT, preferences=preferences)


def build_detail_prompt(
    title: str,
    description: str | None = None,
    category: str | None = None,
    tags: list[str] | None = None,
) -> str:
    """Prompt asking for one project's detail object."""
    _require(title=title)
    context = _lines(
        [
            ("Description", description),
            ("Category", category),
            ("Technologies", ", ".join(tags) if tags else None),
        ]
    )
    return DETAIL_PROMPT.format(title=title.strip(), context=f"{context}\n" if context else "")


def build_resource_prompt(category: str, search_term: str | None = None) -> str:
    """Prompt asking for learning resources as a JSON array."""
    _require(category=category)
    subject = category.strip()
    if search_term and search_term.strip():
        subject = f"{subject} focusing on {search_term.strip()}"
    return RESOURCE_PROMPT.format(subject=subject)


def build_documentation_prompt(request: DocumentationRequest) -> str:
    """Free-form markdown prompt for the requested document type."""
    _require(
        project_title=request.project_title,
        project_description=request.project_description,
    )
    heading, field_names, sections = DOCUMENT_TEMPLATES[request.document_type]
    details = _lines([(_FIELD_LABELS[name], getattr(request, name)) for name in field_names])
    return (
        f"Create {heading} for:\n{details}\n\n"
        f"Include: {sections}.\nFormat the document as markdown."
    )
