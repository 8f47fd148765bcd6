# =============================================================================
# app/routers/docs.py - Static Page and API Description
# =============================================================================
# GET /          serves static/index.html
# GET /api-docs  returns the parsed OpenAPI description file
# =============================================================================

import json
import logging

from fastapi import APIRouter
from fastapi.responses import FileResponse

from app.dependencies import SettingsDep
from app.exceptions import DocumentReadError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", include_in_schema=False)
async def index(settings: SettingsDep):
    """Serve the root HTML page."""
    return FileResponse(path=settings.index_file, media_type="text/html")


@router.get("/api-docs")
def api_docs(settings: SettingsDep):
    """
    Return the OpenAPI description shipped with the service.

    The file is read on every request, so edits show up without a restart.
    Plain def: the blocking read runs in the threadpool.
    """
    try:
        with open(settings.OPENAPI_FILE, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Error reading file {settings.OPENAPI_FILE}: {e}")
        raise DocumentReadError() from e
