"""
Global error handling for the gateway application.

Catches VoiceScribeError subclasses and unhandled exceptions, converting
them into the ``{"error": <message>}`` envelope the recorder expects.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from voicescribe.core.exceptions import VoiceScribeError
from voicescribe.core.models import ErrorResponse

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application.

    Registers two handlers in priority order:
    1. ``VoiceScribeError``: maps domain errors to their status code.
    2. ``Exception``: catch-all for unexpected server errors (500).

    Args:
        app: The FastAPI application instance to register handlers on.
    """

    @app.exception_handler(VoiceScribeError)
    async def voicescribe_error_handler(_request: Request, exc: VoiceScribeError) -> JSONResponse:
        """Convert domain-specific errors into the error envelope."""
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=exc.detail).model_dump(),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all handler; prevents stack traces from leaking to clients."""
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Internal server error").model_dump(),
        )
