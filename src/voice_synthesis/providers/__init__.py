"""Remote speech synthesis providers."""

from .elevenlabs_provider import ElevenLabsProvider

__all__ = ["ElevenLabsProvider"]
