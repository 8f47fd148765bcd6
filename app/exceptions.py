# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors are logged with their cause where they happen; clients only ever see
# a fixed plain-text message and a 500 status.
# =============================================================================

from fastapi import Request
from fastapi.responses import PlainTextResponse


class SolarSystemException(Exception):
    """
    Base exception for the planet service.

    All custom exceptions inherit from this class. The message is what the
    client receives, so it must not carry the underlying cause.
    """

    def __init__(
        self,
        message: str,
        code: str = "SOLAR_SYSTEM_ERROR",
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


# =============================================================================
# Store Exceptions
# =============================================================================

class PlanetStoreError(SolarSystemException):
    """Raised when a query against the planet collection fails."""

    def __init__(self):
        super().__init__(
            message="Error in Planet Data",
            code="PLANET_STORE_ERROR",
            status_code=500,
        )


# =============================================================================
# Local File Exceptions
# =============================================================================

class DocumentReadError(SolarSystemException):
    """Raised when the OpenAPI description file cannot be read or parsed."""

    def __init__(self):
        super().__init__(
            message="Error reading file",
            code="DOCUMENT_READ_ERROR",
            status_code=500,
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def solar_system_exception_handler(
    request: Request,
    exc: SolarSystemException
) -> PlainTextResponse:
    """Convert SolarSystemException to a plain-text response."""
    return PlainTextResponse(exc.message, status_code=exc.status_code)
