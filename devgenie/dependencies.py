"""FastAPI dependencies: caller identity, store access, provider and GitHub clients."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
import jwt
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from .clients.github import GitHubSearchClient
from .config import Settings, get_settings
from .database import get_async_session
from .gateway import PersistenceGateway
from .providers.registry import ProviderRegistry

logger = structlog.get_logger()

AUTH_AUDIENCE = "authenticated"

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_owner_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> str:
    """User id from the auth service's bearer token (``sub`` claim).

    The signature is verified when AUTH_JWT_SECRET is set; otherwise the
    identity is trusted as given. Raises 401 if the token is missing or invalid.
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Not authenticated")

    token = credentials.credentials
    try:
        if settings.auth_jwt_secret:
            claims = jwt.decode(
                token,
                settings.auth_jwt_secret,
                algorithms=["HS256"],
                audience=AUTH_AUDIENCE,
            )
        else:
            claims = jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError as e:
        logger.warning("auth_token_rejected", error_type=type(e).__name__)
        raise _unauthorized("Invalid authentication token") from e

    owner_id = claims.get("sub")
    if not owner_id:
        raise _unauthorized("Token has no subject")

    structlog.contextvars.bind_contextvars(owner_id=str(owner_id))
    return str(owner_id)


async def get_gateway(db: AsyncSession = Depends(get_async_session)) -> PersistenceGateway:
    return PersistenceGateway(db)


def get_provider_registry(settings: Settings = Depends(get_settings)) -> ProviderRegistry:
    """Adapters for the providers that have a credential configured."""
    return ProviderRegistry.from_credentials(
        settings.provider_credentials(),
        timeout=settings.provider_timeout_seconds,
    )


def get_github_client(settings: Settings = Depends(get_settings)) -> GitHubSearchClient:
    return GitHubSearchClient(token=settings.github_api_key)
