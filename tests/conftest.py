"""Shared fixtures for the voice synthesis tests."""

import pytest

from fakes import FakeOutput, FakeSynthesisClient
from src.voice_synthesis.artifact_store import ArtifactStore
from src.voice_synthesis.audio_manager import AudioLifecycleManager
from src.voice_synthesis.history import HistoryReader
from src.voice_synthesis.models import SynthesisOptions, Voice
from src.voice_synthesis.playback import PlaybackEngine
from src.voice_synthesis.voice_registry import VoiceRegistry


@pytest.fixture
def voices():
    return [
        Voice(voice_id="V1", name="Rachel", category="premade"),
        Voice(voice_id="V2", name="Adam", category="premade"),
        Voice(voice_id="V3", name="My Clone", category="cloned"),
    ]


@pytest.fixture
def client(voices):
    return FakeSynthesisClient(voices)


@pytest.fixture
def registry(client):
    registry = VoiceRegistry(client)
    registry.refresh()
    return registry


@pytest.fixture
def audio_dir(tmp_path):
    return tmp_path / ".xi"


@pytest.fixture
def store(audio_dir):
    return ArtifactStore(audio_dir=audio_dir)


@pytest.fixture
def history_reader(audio_dir):
    return HistoryReader(audio_dir=audio_dir)


@pytest.fixture
def output():
    return FakeOutput()


@pytest.fixture
def playback(output):
    engine = PlaybackEngine(output, max_workers=2)
    yield engine
    engine.shutdown(wait=True)


@pytest.fixture
def manager(registry, client, store, playback, history_reader):
    return AudioLifecycleManager(
        registry=registry,
        client=client,
        store=store,
        playback=playback,
        history=history_reader,
        options=SynthesisOptions(stability=0.5, similarity_boost=0.5),
    )
