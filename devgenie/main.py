"""Dev Genie API - FastAPI with SQLAlchemy."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import structlog

from . import __version__, routers
from .config import get_settings
from .database import dispose_engine, init_models
from .logging_config import setup_logging

CORS_ALLOWED_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    settings = get_settings()
    setup_logging(
        service_name=settings.service_name,
        log_format=settings.log_format,
        log_level=settings.log_level,
    )
    await init_models()
    structlog.get_logger().info(
        "providers_configured",
        providers=list(settings.provider_credentials().configured()),
    )
    yield
    await dispose_engine()


app = FastAPI(
    title="Dev Genie API",
    description="Project ideas, details, documentation and learning resources from several LLMs",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=CORS_ALLOWED_HEADERS,
)


@app.middleware("http")
async def correlation_middleware(request: Request, call_next):
    correlation_id = request.headers.get("X-Correlation-ID", f"req_{uuid.uuid4().hex[:8]}")
    start = time.time()
    logger = structlog.get_logger()

    with structlog.contextvars.bound_contextvars(
        correlation_id=correlation_id, method=request.method, path=request.url.path
    ):
        try:
            response = await call_next(request)
            duration_ms = (time.time() - start) * 1000

            if response.status_code >= 500:  # noqa: PLR2004
                logger.error(
                    "http_request_failed",
                    status_code=response.status_code,
                    duration_ms=round(duration_ms, 2),
                )
            else:
                logger.info(
                    "http_request",
                    status_code=response.status_code,
                    duration_ms=round(duration_ms, 2),
                )

            response.headers["X-Correlation-ID"] = correlation_id
            return response
        except Exception as e:
            duration_ms = (time.time() - start) * 1000
            logger.error(
                "http_request_exception",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=round(duration_ms, 2),
                exc_info=True,
            )
            raise


@app.exception_handler(SQLAlchemyError)
async def persistence_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    structlog.get_logger().error(
        "persistence_error",
        path=request.url.path,
        error_type=type(exc).__name__,
    )
    return JSONResponse(status_code=500, content={"detail": "Failed to access the project store"})


@app.get("/")
async def root():
    """Root endpoint - API information."""
    return {
        "name": "Dev Genie API",
        "version": __version__,
        "description": "Project ideas, details, documentation and learning resources",
    }


app.include_router(routers.health.router)
app.include_router(routers.projects.router, prefix="/api")
app.include_router(routers.documentation.router, prefix="/api")
app.include_router(routers.resources.router, prefix="/api")
app.include_router(routers.preferences.router, prefix="/api")
