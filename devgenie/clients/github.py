"""GitHub repository search client."""

import httpx
import structlog

from ..schemas.resources import RepositorySummary

logger = structlog.get_logger()

GITHUB_API_URL = "https://api.github.com"
DEFAULT_PER_PAGE = 20


class GitHubSearchClient:
    """Searches public repositories, ranked by stars.

    Works anonymously; a token only raises the rate limit.
    """

    def __init__(
        self,
        token: str | None = None,
        base_url: str = GITHUB_API_URL,
        timeout: float = 15.0,
    ) -> None:
        self.token = token
        self.base_url = base_url
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers

    async def search_repositories(
        self, query: str, per_page: int = DEFAULT_PER_PAGE
    ) -> list[RepositorySummary]:
        """Top repositories for a free-text query.

        Raises:
            httpx.HTTPError: On network errors or non-2xx responses.
            ValueError: When the body is not JSON.
            KeyError: When a result lacks ``name`` or ``html_url``.
        """
        params = {"q": query, "sort": "stars", "order": "desc", "per_page": per_page}

        async with httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout) as client:
            resp = await client.get("/search/repositories", params=params, headers=self._headers())
            resp.raise_for_status()
            data = resp.json()

        repos = [
            RepositorySummary(
                name=item["name"],
                description=item.get("description"),
                url=item["html_url"],
                stars=item.get("stargazers_count") or 0,
                language=item.get("language"),
                topics=item.get("topics") or [],
            )
            for item in data.get("items", [])
        ]
        logger.info("github_search_completed", query=query, results=len(repos))
        return repos
