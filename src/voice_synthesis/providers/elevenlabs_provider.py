"""ElevenLabs voice synthesis provider."""

from typing import Any, List, Optional

from structlog import get_logger

from ...core.error_handling import ConfigurationError, UpstreamError
from ..abstract_synthesis_client import AbstractSynthesisClient
from ..models import SynthesisOptions, Voice

logger = get_logger(__name__)

# Lazy import so tests and tooling do not need the SDK
ElevenLabs = None
VoiceSettings = None


def _ensure_elevenlabs_import():
    """Lazy import ElevenLabs SDK."""
    global ElevenLabs, VoiceSettings
    if ElevenLabs is None:
        try:
            from elevenlabs import VoiceSettings as VS
            from elevenlabs.client import ElevenLabs as EL
        except ImportError as e:
            raise ImportError(
                "ElevenLabs SDK not installed. "
                "Install with: pip install elevenlabs"
            ) from e
        ElevenLabs = EL
        VoiceSettings = VS


class ElevenLabsProvider(AbstractSynthesisClient):
    """ElevenLabs cloud voice synthesis provider.

    Thin wrapper over the official SDK: lists the account's voices and
    converts text to a single MP3 payload.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model_id: str = "eleven_multilingual_v2",
        output_format: str = "mp3_44100_128",
        client: Any = None,
    ):
        """Initialize ElevenLabs provider.

        Args:
            api_key: ElevenLabs API key
            model_id: Default synthesis model
            output_format: ElevenLabs output format name
            client: Pre-built SDK client, mainly for tests
        """
        if not api_key and client is None:
            raise ConfigurationError(
                "XI_API_KEY environment variable is required",
                config_key="XI_API_KEY",
            )

        self._model_id = model_id
        self._output_format = output_format

        if client is None:
            _ensure_elevenlabs_import()
            client = ElevenLabs(api_key=api_key)
        self._client = client

        logger.info("ElevenLabs client initialized", model_id=model_id)

    def list_voices(self) -> List[Voice]:
        """Load available voices from ElevenLabs."""
        try:
            response = self._client.voices.get_all()
        except Exception as e:
            logger.error("Failed to load ElevenLabs voices", error=str(e))
            raise UpstreamError(f"failed to get voices: {e}", operation="list_voices") from e

        voices = [
            Voice(
                voice_id=v.voice_id,
                name=v.name or "",
                category=str(v.category or ""),
            )
            for v in response.voices
        ]
        logger.debug("Loaded ElevenLabs voices", count=len(voices))
        return voices

    def synthesize(
        self,
        text: str,
        voice_id: str,
        options: SynthesisOptions,
        style_id: Optional[str] = None,
    ) -> bytes:
        """Synthesize speech using ElevenLabs."""
        _ensure_elevenlabs_import()

        voice_settings = VoiceSettings(
            stability=options.stability,
            similarity_boost=options.similarity_boost,
        )

        try:
            audio_stream = self._client.text_to_speech.convert(
                voice_id=voice_id,
                text=text,
                model_id=style_id or self._model_id,
                output_format=self._output_format,
                voice_settings=voice_settings,
            )
            # The SDK yields chunks; collect the whole payload
            audio_bytes = b"".join(audio_stream)
        except Exception as e:
            logger.error("ElevenLabs synthesis failed", voice_id=voice_id, error=str(e))
            raise UpstreamError(
                f"failed to generate speech: {e}", operation="synthesize"
            ) from e

        logger.debug(
            "ElevenLabs synthesis complete",
            voice_id=voice_id,
            characters=len(text),
            bytes=len(audio_bytes),
        )
        return audio_bytes
