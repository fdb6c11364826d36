"""
Desktop recorder: toggles the local microphone with Enter and prints the transcript.

Run with: ``voicescribe-record`` (the gateway must be running, e.g.
``voicescribe-server``).
"""

import argparse
import asyncio
import logging
import sys
from collections.abc import Callable

from voicescribe.core.config import get_settings
from voicescribe.core.models import RecorderStatus
from voicescribe.core.utils import configure_logging
from voicescribe.services.audio import RecorderStateMachine, create_microphone
from voicescribe.ui.api_client import GatewayClient

logger = logging.getLogger(__name__)

_HELP = "Enter: start/stop recording | c + Enter: clear transcript | q + Enter: quit"


async def run(
    recorder: RecorderStateMachine,
    prompt: Callable[[str], str] | None = None,
    echo: Callable[[str], None] = print,
) -> int:
    """Drive ``recorder`` from line input until the user quits."""
    prompt = prompt or input
    echo(_HELP)

    while True:
        try:
            line = await asyncio.to_thread(prompt, "> ")
        except EOFError:
            break
        command = line.strip().lower()

        if command == "q":
            break
        if command == "c":
            recorder.clear_transcript()
            echo("Transcript cleared.")
            continue

        await recorder.toggle()
        if recorder.error:
            echo(f"Error: {recorder.error}")
        elif recorder.status is RecorderStatus.recording:
            echo("Recording... press Enter to stop.")
        else:
            snap = recorder.snapshot()
            echo(snap.transcript)
            echo(f"Words: {snap.word_count}  Characters: {snap.character_count}")

    # Never leave the device open on exit
    if recorder.status is RecorderStatus.recording:
        await recorder.stop()
    return 0


def _device_arg(value: str) -> int | str:
    return int(value) if value.isdigit() else value


async def _record(base_url: str, device: int | str | None) -> int:
    async with GatewayClient(base_url=base_url) as client:
        recorder = RecorderStateMachine(
            device=create_microphone(device),
            transcribe=client.transcribe,
        )
        return await run(recorder)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Record from the local microphone and transcribe through the gateway"
    )
    parser.add_argument(
        "--url",
        default=settings.api_base_url,
        help=f"Gateway base URL (default: {settings.api_base_url})",
    )
    parser.add_argument(
        "--device",
        type=_device_arg,
        default=None,
        help="Input device index or name (default: system input)",
    )
    args = parser.parse_args(argv)

    configure_logging(settings.log_level)
    return asyncio.run(_record(args.url, args.device))


if __name__ == "__main__":
    sys.exit(main())
