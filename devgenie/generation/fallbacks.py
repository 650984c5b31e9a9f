"""Fixed demo content returned when no provider produced usable output.

Every fallback record is tagged with source ``fallback`` so clients can label it.
"""

from typing import Any

from ..models import FALLBACK_SOURCE
from ..schemas.generation import DocumentType

FALLBACK_PROJECTS: tuple[dict[str, Any], ...] = (
    {
        "title": "Personal Finance Tracker",
        "description": (
            "A web application to track expenses, income, and budget planning "
            "with data visualization."
        ),
        "tags": ["React", "Chart.js", "Local Storage"],
        "category": "Web Development",
        "estimated_time": "3-4 weeks",
        "market_demand": "High",
    },
    {
        "title": "Weather Forecast App",
        "description": (
            "Real-time weather application with location-based forecasts and weather alerts."
        ),
        "tags": ["JavaScript", "API Integration", "Geolocation"],
        "category": "Web Development",
        "estimated_time": "2-3 weeks",
        "market_demand": "Medium",
    },
    {
        "title": "Task Management System",
        "description": (
            "Collaborative task management with team features, deadlines, and progress tracking."
        ),
        "tags": ["CRUD Operations", "Database", "User Authentication"],
        "category": "Full Stack",
        "estimated_time": "4-6 weeks",
        "market_demand": "High",
    },
)

FALLBACK_RESOURCES: tuple[dict[str, Any], ...] = (
    {
        "title": "MDN Web Docs",
        "description": "Reference documentation and guides for web technologies.",
        "url": "https://developer.mozilla.org/",
        "type": "documentation",
        "difficulty": "Beginner",
        "rating": 5.0,
        "is_free": True,
    },
    {
        "title": "freeCodeCamp",
        "description": "Free interactive curriculum with certifications and projects.",
        "url": "https://www.freecodecamp.org/",
        "type": "course",
        "difficulty": "Beginner",
        "rating": 4.8,
        "is_free": True,
    },
    {
        "title": "Stack Overflow",
        "description": "Community Q&A for programming problems.",
        "url": "https://stackoverflow.com/",
        "type": "community",
        "difficulty": "Intermediate",
        "rating": 4.7,
        "is_free": True,
    },
)

FALLBACK_DOCUMENT_SECTIONS: dict[DocumentType, tuple[str, ...]] = {
    DocumentType.SRS: (
        "Introduction",
        "Overall Description",
        "System Features",
        "External Interface Requirements",
        "Other Nonfunctional Requirements",
        "Appendices",
    ),
    DocumentType.DESIGN: (
        "Architecture Overview",
        "Database Design",
        "API Design",
        "UI/UX Specifications",
        "Security Considerations",
        "Deployment Strategy",
    ),
    DocumentType.API: (
        "API Overview",
        "Authentication",
        "Endpoints",
        "Request/Response Examples",
        "Error Codes",
        "Rate Limiting",
    ),
    DocumentType.USER: (
        "Getting Started",
        "Feature Explanations",
        "Step-by-step Guides",
        "Troubleshooting",
        "FAQ",
    ),
}


def fallback_projects(difficulty: str) -> list[dict[str, Any]]:
    """The three sample projects at the requested difficulty."""
    return [
        {
            **project,
            "tags": list(project["tags"]),
            "difficulty": difficulty,
            "source_provider": FALLBACK_SOURCE,
        }
        for project in FALLBACK_PROJECTS
    ]


def fallback_detail(category: str | None = None) -> dict[str, Any]:
    """Generic detail record for a project whose detail generation failed."""
    topic = (category or "web development").lower().replace(" ", "-")
    return {
        "structure": (
            "Frontend: React.js with TypeScript\n"
            "Backend: Node.js with Express\n"
            "Database: MongoDB\n"
            "Authentication: JWT"
        ),
        "flow": (
            "1. User Registration/Login\n"
            "2. Dashboard Overview\n"
            "3. Core Functionality\n"
            "4. Data Management\n"
            "5. Settings & Profile"
        ),
        "roadmap": (
            "Phase 1: Setup & Authentication (Week 1)\n"
            "Phase 2: Core Features (Week 2-3)\n"
            "Phase 3: UI/UX Polish (Week 4)\n"
            "Phase 4: Testing & Deployment (Week 5)"
        ),
        "pseudo_code": (
            "// Main Application Logic\n"
            "function initializeApp() {\n"
            "  authenticateUser();\n"
            "  loadUserData();\n"
            "  renderDashboard();\n"
            "}"
        ),
        "resources": [
            "https://react.dev/",
            "https://nodejs.org/en/docs",
            "https://developer.mozilla.org/",
            "https://stackoverflow.com/",
        ],
        "github_links": [
            "https://github.com/topics/react",
            "https://github.com/topics/nodejs",
            f"https://github.com/topics/{topic}",
        ],
        "source_provider": FALLBACK_SOURCE,
    }


def fallback_resources() -> list[dict[str, Any]]:
    return [{**resource, "source": FALLBACK_SOURCE} for resource in FALLBACK_RESOURCES]


def fallback_document(document_type: DocumentType, project_title: str) -> str:
    """Markdown outline of the requested document with placeholder sections."""
    lines = [
        f"# {project_title} - {document_type.value.upper()} Documentation",
        "",
        "*Outline only: no AI provider was available to write this document.*",
        "",
    ]
    for section in FALLBACK_DOCUMENT_SECTIONS[document_type]:
        lines += [f"## {section}", "", "_To be written._", ""]
    return "\n".join(lines)
