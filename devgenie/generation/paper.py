"""Research paper template rendered from a project and its stored detail."""

import re

from ..models import Project, ProjectDetail

_UNSAFE_FILENAME = re.compile(r"[^A-Za-z0-9]+")

PAPER_TEMPLATE = """{heading}
Author Name
Your Institution/College/Organization Name
your.email@example.com

ABSTRACT
This paper presents the development and implementation of {title}, a {category_lower} solution \
designed to address specific challenges in the domain. The project utilizes modern {tags} \
technologies to create an efficient and user-friendly system. The methodology involves \
systematic analysis, design, and implementation phases, resulting in a robust application that \
demonstrates practical utility and scalability.

KEYWORDS
{keywords}

I. INTRODUCTION
This paper introduces {title}, a comprehensive {category_lower} application that addresses the \
growing need for efficient and user-friendly systems in the digital landscape.

{description}

1.1 Project Aims and Objectives
• Developing a functional and intuitive {category_lower} application
• Implementing modern development practices and technologies
• Creating a scalable and maintainable system architecture
• Demonstrating practical problem-solving through technology
• Providing a foundation for future enhancements and features

II. METHODOLOGY
The development of {title} follows a systematic approach combining traditional software \
development methodologies with modern agile practices.

2.1 System Analysis / Research Design
The proposed solution leverages {lead_tags} to create an efficient and scalable system.

2.1.1 Software Requirements
{structure}

2.2 System Implementation
{flow}

2.3 Development Roadmap
{roadmap}

III. MODULE DESCRIPTION / SYSTEM ARCHITECTURE
3.1 Frontend Module
Responsible for user interface and user experience.
3.2 Backend Module
Handles business logic, data processing, and API integrations.
3.3 Database Module
Manages data storage, retrieval, and integrity.

3.4 Core Algorithms
{pseudo_code}

IV. FUTURE SCOPE
• Integration with additional third-party services
• Implementation of advanced analytics and reporting
• Mobile application development
• Machine learning integration for enhanced functionality
• Scalability improvements for enterprise deployment

V. CONCLUSION
The development of {title} demonstrates the effective application of modern {category_lower} \
development practices, resulting in a functional, scalable, and user-friendly system.

VI. REFERENCES
{references}
"""


def render_research_paper(project: Project, detail: ProjectDetail) -> str:
    """Plain-text paper outline; detail sections are embedded verbatim."""
    tags = list(project.tags or [])
    category = project.category or "software"
    links = list(detail.resources or []) + list(detail.github_links or [])
    references = [
        f"[{i}] {ref}"
        for i, ref in enumerate(
            links or [f"Documentation and Official Guides for {tags[0] if tags else category}"],
            start=1,
        )
    ]

    return PAPER_TEMPLATE.format(
        heading=project.title.upper(),
        title=project.title,
        category_lower=category.lower(),
        tags=", ".join(tags) or category,
        keywords=", ".join([*tags, "Software Development", category, "System Design"]),
        lead_tags=", ".join(tags[:3]) or category,
        description=project.description or "",
        structure=detail.structure,
        flow=detail.flow,
        roadmap=detail.roadmap,
        pseudo_code=detail.pseudo_code,
        references="\n".join(references),
    ).strip()


def paper_filename(title: str) -> str:
    """ASCII-only download name, safe for a Content-Disposition header."""
    stem = _UNSAFE_FILENAME.sub("_", title).strip("_") or "project"
    return f"{stem}_Research_Paper.txt"
