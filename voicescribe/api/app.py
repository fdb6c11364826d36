"""
FastAPI application factory.

``create_app()`` assembles the gateway with CORS, error handlers, the
transcription relay route, and the health endpoint. The module-level
``app`` instance allows ``uvicorn voicescribe.api.app:app --reload``.
"""

from datetime import UTC, datetime

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from voicescribe.api.middleware.error_handler import register_error_handlers
from voicescribe.api.routes import transcription
from voicescribe.core.config import Settings, get_settings
from voicescribe.core.models import HealthResponse
from voicescribe.core.utils import configure_logging
from voicescribe.services.transcription import BaseGateway, create_gateway


def create_app(
    settings: Settings | None = None,
    gateway: BaseGateway | None = None,
) -> FastAPI:
    """Build and return a fully configured FastAPI application.

    The transcription credential is read from ``settings`` once, here, and
    handed to the gateway on every request.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="VoiceScribe",
        description="Voice recorder gateway relaying audio to Deepgram speech-to-text.",
        version="0.1.0",
    )
    app.state.gateway = gateway or create_gateway("deepgram", settings=settings)
    app.state.deepgram_api_key = settings.deepgram_api_key

    # -- CORS --
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -- Error handlers --
    register_error_handlers(app)

    # -- Health check --
    @app.get("/health", response_model=HealthResponse, tags=["system"])
    async def health() -> HealthResponse:
        return HealthResponse(timestamp=datetime.now(UTC))

    # -- REST routes --
    app.include_router(transcription.router, prefix="/api")

    return app


app = create_app()


def main() -> None:
    """Console entry point: run the gateway with uvicorn."""
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "voicescribe.api.app:app",
        host=settings.app_host,
        port=settings.app_port,
        log_level=settings.log_level.lower(),
    )
