# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# Both resources live on app.state and are set up by create_app() and the
# lifespan handler. Tests replace them with app.dependency_overrides.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from core.services.planet_service import PlanetRepository


def get_app_settings(request: Request) -> Settings:
    """Return the Settings the running app was created with."""
    return request.app.state.settings


def get_planet_repository(request: Request) -> PlanetRepository:
    """
    Get the planet repository.

    Returns the repository built on the process-wide MongoDB client.
    """
    return request.app.state.planet_repository


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
PlanetRepositoryDep = Annotated[PlanetRepository, Depends(get_planet_repository)]
