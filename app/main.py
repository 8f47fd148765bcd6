# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Solar System planet API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload --port 3000
#   poetry run python -m app.main
# =============================================================================

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from app.config import Settings, get_settings
from app.exceptions import SolarSystemException, solar_system_exception_handler
from app.routers import docs, health, planets
from core.services.planet_service import PlanetRepository
from lib.mongo_client import create_mongo_client, ping_database

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    # pymongo logs heartbeats and topology events at DEBUG
    logging.getLogger("pymongo").setLevel(logging.INFO)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs on startup and shutdown:
    - Startup: Create the MongoDB client and planet repository, start a
      background ping of the server
    - Shutdown: Stop the ping if still pending, close the MongoDB client
    """
    settings: Settings = app.state.settings

    # Startup
    logger.info(f"Starting planet API in {settings.ENVIRONMENT} mode")

    client = create_mongo_client(settings)
    collection = client[settings.MONGO_DB_NAME][settings.MONGO_COLLECTION]
    app.state.planet_repository = PlanetRepository(collection)

    # Startup does not wait on server selection; the ping result is only logged
    ping_task = asyncio.create_task(ping_database(client))

    yield

    # Shutdown
    logger.info("Shutting down planet API")

    if not ping_task.done():
        ping_task.cancel()
        try:
            await ping_task
        except asyncio.CancelledError:
            pass

    client.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use; defaults to the cached environment settings

    Returns:
        Configured FastAPI app. The planet repository is attached by the
        lifespan handler when the server starts.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Solar System API",
        description="Planet facts for the Solar System, backed by MongoDB.",
        version="1.0.0",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Planets",
                "description": "Planet lookup by id",
            },
            {
                "name": "Health",
                "description": "Host info, liveness and readiness checks",
            },
            {
                "name": "Docs",
                "description": "Root page and OpenAPI description file",
            },
        ],
    )
    app.state.settings = settings

    # =========================================================================
    # Middleware
    # =========================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(SolarSystemException, solar_system_exception_handler)

    @app.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")
        return PlainTextResponse("An unexpected error occurred", status_code=500)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(docs.router, tags=["Docs"])
    app.include_router(health.router, tags=["Health"])
    app.include_router(planets.router, tags=["Planets"])

    # Everything else under static/ (images, css) is served from the site root.
    # Mounted last so the routes above take precedence.
    if settings.STATIC_DIR.is_dir():
        app.mount("/", StaticFiles(directory=settings.STATIC_DIR), name="static")
    else:
        logger.warning(f"Static directory not found: {settings.STATIC_DIR}")

    return app


configure_logging(get_settings())
app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(app, host=_settings.APP_HOST, port=_settings.APP_PORT)
