"""Tests for the ElevenLabs provider with a mocked SDK client."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from src.core.error_handling import ConfigurationError, UpstreamError
from src.voice_synthesis.models import SynthesisOptions, Voice
from src.voice_synthesis.providers.elevenlabs_provider import ElevenLabsProvider


@pytest.fixture
def sdk_client():
    client = MagicMock()
    client.voices.get_all.return_value = SimpleNamespace(
        voices=[
            SimpleNamespace(voice_id="V1", name="Rachel", category="premade"),
            SimpleNamespace(voice_id="V2", name="Clone", category="cloned"),
        ]
    )
    client.text_to_speech.convert.return_value = iter([b"abc", b"def"])
    return client


@pytest.fixture
def provider(sdk_client):
    return ElevenLabsProvider(api_key="test-key", client=sdk_client)


class TestElevenLabsProvider:
    """Test voice listing and synthesis through the SDK."""

    def test_requires_api_key(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ElevenLabsProvider(api_key=None)

        assert exc_info.value.context["config_key"] == "XI_API_KEY"

    def test_list_voices(self, provider):
        voices = provider.list_voices()

        assert voices == [
            Voice(voice_id="V1", name="Rachel", category="premade"),
            Voice(voice_id="V2", name="Clone", category="cloned"),
        ]

    def test_list_voices_failure(self, provider, sdk_client):
        sdk_client.voices.get_all.side_effect = RuntimeError("401 unauthorized")

        with pytest.raises(UpstreamError) as exc_info:
            provider.list_voices()

        assert exc_info.value.context["operation"] == "list_voices"
        assert "401 unauthorized" in str(exc_info.value)

    def test_synthesize_joins_stream(self, provider, sdk_client):
        audio = provider.synthesize(
            "hello", "V1", SynthesisOptions(stability=0.3, similarity_boost=0.8)
        )

        assert audio == b"abcdef"
        kwargs = sdk_client.text_to_speech.convert.call_args.kwargs
        assert kwargs["voice_id"] == "V1"
        assert kwargs["text"] == "hello"
        assert kwargs["model_id"] == "eleven_multilingual_v2"
        assert kwargs["output_format"] == "mp3_44100_128"
        assert kwargs["voice_settings"].stability == 0.3
        assert kwargs["voice_settings"].similarity_boost == 0.8

    def test_style_id_overrides_model(self, provider, sdk_client):
        provider.synthesize("hi", "V1", SynthesisOptions(), style_id="eleven_turbo_v2")

        assert sdk_client.text_to_speech.convert.call_args.kwargs["model_id"] == "eleven_turbo_v2"

    def test_synthesize_failure(self, provider, sdk_client):
        sdk_client.text_to_speech.convert.side_effect = RuntimeError("quota exceeded")

        with pytest.raises(UpstreamError) as exc_info:
            provider.synthesize("hi", "V1", SynthesisOptions())

        assert exc_info.value.context["operation"] == "synthesize"
        assert exc_info.value.context["service_name"] == "elevenlabs"


class TestSynthesisOptions:
    """Test option validation."""

    def test_rejects_out_of_range(self):
        with pytest.raises(ValueError):
            SynthesisOptions(stability=1.5)
        with pytest.raises(ValueError):
            SynthesisOptions(similarity_boost=-0.1)
