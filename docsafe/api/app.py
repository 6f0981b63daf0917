"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docsafe import __version__
from docsafe.api.config import ApiConfig, get_api_config
from docsafe.api.routes import router as documents_router
from docsafe.models import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    # Startup
    logger.info("Starting DocSafe API...")
    yield
    # Shutdown
    logger.info("Shutting down DocSafe API...")


def create_app(config: ApiConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Optional server configuration.
                Loads from environment if not provided.

    Returns:
        Configured FastAPI application instance.
    """
    config = config or get_api_config()

    application = FastAPI(
        title="DocSafe API",
        description=(
            "Removes identifying metadata from PDF and DOCX documents. "
            "Optionally runs the extracted text through a LanguageTool-compatible "
            "service and returns the cleaned file with a JSON/HTML report in a ZIP."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.config = config

    # Empty allowlist accepts any origin (CLI tools, local tests)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition"],
    )

    application.include_router(documents_router)

    @application.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Check service health status."""
        return HealthResponse(status="healthy", service="docsafe")

    return application


app = create_app()
