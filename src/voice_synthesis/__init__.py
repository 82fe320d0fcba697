"""Voice Synthesis module for the ElevenLabs MCP Server.

This module provides the audio lifecycle:
- Voice registry refreshed from the remote API, with a selected voice
- Artifact store writing ``<timestamp>-<hex>.mp3`` / ``.txt`` pairs
- Serialized playback on the system audio output
- History rebuilt from the artifact directory

Usage:
    from src.voice_synthesis import AudioLifecycleManager

    manager = AudioLifecycleManager(registry, client, store, playback, history)
    path = manager.generate("Welcome back!")
"""

from .models import HistoryEntry, SynthesisOptions, Voice, VoiceSnapshot
from .abstract_synthesis_client import AbstractSynthesisClient
from .artifact_store import ArtifactStore
from .history import HistoryReader, create_summary
from .playback import PlaybackEngine, SoundDeviceOutput
from .voice_registry import VoiceRegistry
from .audio_manager import AudioLifecycleManager
from .mcp_tools import initialize_voice_tools, register_voice_tools

__all__ = [
    # Data classes
    "HistoryEntry",
    "SynthesisOptions",
    "Voice",
    "VoiceSnapshot",
    # Core classes
    "AbstractSynthesisClient",
    "ArtifactStore",
    "AudioLifecycleManager",
    "HistoryReader",
    "PlaybackEngine",
    "SoundDeviceOutput",
    "VoiceRegistry",
    # Functions
    "create_summary",
    "initialize_voice_tools",
    "register_voice_tools",
]
