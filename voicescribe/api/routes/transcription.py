"""
Transcription relay endpoint.

``POST /api/deepgram`` takes the raw request body as the audio payload and
delegates to the configured gateway. No business logic here.
"""

import logging

from fastapi import APIRouter, Request

from voicescribe.core.models import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["transcription"])


@router.post(
    "/deepgram",
    responses={500: {"model": ErrorResponse}},
)
async def transcribe(request: Request) -> dict:
    """Forward the request body to the transcription service and relay its JSON."""
    audio = await request.body()
    gateway = request.app.state.gateway
    api_key = request.app.state.deepgram_api_key
    logger.info("Received %d audio bytes (%s)", len(audio), request.headers.get("content-type"))
    return await gateway.transcribe(audio, api_key)
