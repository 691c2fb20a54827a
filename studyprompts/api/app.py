"""FastAPI application factory and configuration.

Application setup with lifespan management, middleware, error rendering,
and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from studyprompts import __version__
from studyprompts.api.routes import router as upload_router
from studyprompts.config import AppSettings, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log application startup and shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info("Starting study prompts API...")
    yield
    logger.info("Shutting down study prompts API...")


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as ``{"error": message}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings used by the upload routes; read from the
            environment per request when omitted.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Study Prompts API",
        description=(
            "Extracts text from uploaded PDF documents and derives short "
            "review prompts from it."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(StarletteHTTPException, http_error_handler)
    application.include_router(upload_router)

    if settings is not None:
        application.dependency_overrides[get_settings] = lambda: settings

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "studyprompts"}

    return application


app = create_app()
