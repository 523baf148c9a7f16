"""FastAPI application entry point.

Main application setup with middleware, routing, and lifecycle management.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware

from app.api.raised_total import (
    UNEXPECTED_ERROR,
    envelope_response,
    router as raised_total_router,
)
from app.api.schemas import HealthResponse, RaisedTotalResponse
from app.core.config import Settings, get_settings
from app.core.factory import get_factory
from app.core.logging_config import setup_logging

# Initialize logging before importing other modules
setup_logging()
logger = logging.getLogger(__name__)

SERVICE_NAME = "score-total-api"
VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    Logs the configured strategies on startup and drops cached
    components on shutdown.
    """
    settings: Settings = app.state.settings

    logger.info(
        f"Starting {SERVICE_NAME}: target={settings.target_url} "
        f"source={settings.source_type} selector={settings.selector_type}"
    )

    yield

    logger.info(f"Shutting down {SERVICE_NAME}...")
    get_factory().clear_cache()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional settings. If None, loads from environment.

    Returns:
        Configured FastAPI application instance.
    """
    try:
        settings = settings or get_settings()

        app = FastAPI(
            title="Score Total",
            description="Scrapes a fundraising campaign page for its amount raised",
            version=VERSION,
            lifespan=lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        # Store settings in app state
        app.state.settings = settings

        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )

        app.include_router(raised_total_router)
        logger.info("Registered score-total router")

        @app.get("/health", tags=["health"], response_model=HealthResponse)
        async def health_check():
            """Health check endpoint for load balancers and monitoring."""
            return HealthResponse(service=SERVICE_NAME, version=VERSION)

        @app.exception_handler(Exception)
        async def general_exception_handler(request, exc):
            """Handle uncaught exceptions with the standard failure envelope."""
            logger.error(f"Unhandled exception: {exc}", exc_info=True)
            return envelope_response(
                RaisedTotalResponse(ok=False, error=str(exc) or UNEXPECTED_ERROR),
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                request.app.state.settings,
            )

        logger.info("FastAPI application created successfully")
        return app

    except Exception as e:
        logger.error(f"Failed to create FastAPI app: {e}", exc_info=True)
        raise


# Create the app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info("Starting uvicorn server on port 8000...")
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.log_level.lower(),
    )
