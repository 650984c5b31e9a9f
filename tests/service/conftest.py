"""API fixtures: the app over ASGITransport with its store and providers swapped out."""

from httpx import ASGITransport, AsyncClient
import jwt
import pytest

from devgenie.config import Settings, get_settings
from devgenie.database import get_async_session
from devgenie.dependencies import AUTH_AUDIENCE, get_github_client, get_provider_registry
from devgenie.main import app
from devgenie.providers.registry import ProviderRegistry

JWT_SECRET = "test-secret-with-at-least-32-bytes!!"  # noqa: S105


class StubGitHubClient:
    def __init__(self):
        self.repos = []
        self.queries = []

    async def search_repositories(self, query, per_page=20):
        self.queries.append(query)
        return self.repos


def make_token(owner_id: str = "user-1") -> str:
    return jwt.encode({"sub": owner_id, "aud": AUTH_AUDIENCE}, JWT_SECRET, algorithm="HS256")


def auth_headers(owner_id: str = "user-1") -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(owner_id)}"}


@pytest.fixture
def adapters():
    """Provider name -> adapter; tests fill it before calling the API."""
    return {}


@pytest.fixture
def github():
    return StubGitHubClient()


@pytest.fixture
async def client(session_maker, adapters, github):
    async def override_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_session
    app.dependency_overrides[get_settings] = lambda: Settings(
        database_url="sqlite+aiosqlite://", auth_jwt_secret=JWT_SECRET
    )
    app.dependency_overrides[get_provider_registry] = lambda: ProviderRegistry(adapters)
    app.dependency_overrides[get_github_client] = lambda: github

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def headers():
    return auth_headers()


@pytest.fixture
def headers_for():
    """Bearer headers for an arbitrary user."""
    return auth_headers
