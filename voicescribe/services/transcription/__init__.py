"""
Transcription module - Speech-to-text gateway abstraction layer.

Factory function for creating gateway instances based on provider name.
"""

from .base import BaseGateway

__all__ = ["BaseGateway", "create_gateway"]


def create_gateway(provider: str = "deepgram", **kwargs) -> BaseGateway:
    """
    Factory function to create a gateway instance based on provider.

    Args:
        provider: Gateway provider name ("deepgram")
        **kwargs: Provider-specific configuration

    Returns:
        BaseGateway implementation instance

    Raises:
        ValueError: If provider is unknown
    """
    if provider == "deepgram":
        from .deepgram import DeepgramGateway
        return DeepgramGateway(**kwargs)
    else:
        raise ValueError(f"Unknown transcription provider: {provider}")
