"""Audio lifecycle manager - turns text into saved and played audio."""

from pathlib import Path
from typing import Optional, Union

from structlog import get_logger

from ..core.error_handling import AudioIOError, NoVoiceSelectedError
from .abstract_synthesis_client import AbstractSynthesisClient
from .artifact_store import ArtifactStore
from .history import HistoryReader
from .models import SynthesisOptions
from .playback import PlaybackEngine
from .voice_registry import VoiceRegistry

logger = get_logger(__name__)

DEFAULT_STABILITY = 0.5
DEFAULT_SIMILARITY_BOOST = 0.5


class AudioLifecycleManager:
    """Main orchestrator for text-to-speech generation.

    Synthesizes text with the registry's selected voice, persists the
    result through the artifact store and optionally hands it to the
    playback engine. Independent generations are not serialized against
    each other; unique artifact names keep them apart.

    Usage:
        manager = AudioLifecycleManager(registry, client, store, playback, history)
        path = manager.generate_and_play("Hello there")
    """

    def __init__(
        self,
        registry: VoiceRegistry,
        client: AbstractSynthesisClient,
        store: ArtifactStore,
        playback: PlaybackEngine,
        history: HistoryReader,
        options: Optional[SynthesisOptions] = None,
    ):
        self.registry = registry
        self.client = client
        self.store = store
        self.playback = playback
        self.history = history
        self.options = options or SynthesisOptions(
            stability=DEFAULT_STABILITY,
            similarity_boost=DEFAULT_SIMILARITY_BOOST,
        )

    def generate(self, text: str) -> Path:
        """Synthesize ``text`` with the selected voice and save it.

        Returns:
            Path of the saved audio file

        Raises:
            NoVoiceSelectedError: No voice is selected
            UpstreamError: The synthesis call failed
            AudioIOError: The artifact could not be written
        """
        voice = self.registry.current()
        if voice is None:
            raise NoVoiceSelectedError()

        logger.info("Generating audio", voice_id=voice.voice_id, characters=len(text))
        audio_data = self.client.synthesize(text, voice.voice_id, self.options)
        return self.store.persist(text, audio_data)

    def generate_and_play(self, text: str) -> Path:
        """Generate audio and start playing it in the background.

        Playback failures are logged by the playback worker only; they never
        undo or fail the generation reported here.
        """
        path = self.generate(text)
        self.playback.play_async(path)
        return path

    def read_file_and_generate(self, file_path: Union[str, Path]) -> Path:
        """Generate audio from the full contents of a text file.

        Raises:
            AudioIOError: The file could not be read
        """
        try:
            with open(file_path, encoding="utf-8", newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise AudioIOError(f"failed to read file: {e}", path=file_path) from e

        return self.generate(text)
