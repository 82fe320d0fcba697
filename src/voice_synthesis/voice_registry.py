"""Registry of available voices and the currently selected voice."""

from typing import Dict, List, Optional

from structlog import get_logger

from ..core.concurrency import ReadWriteLock
from ..core.error_handling import NotFoundError
from .abstract_synthesis_client import AbstractSynthesisClient
from .models import Voice, VoiceSnapshot

logger = get_logger(__name__)


class VoiceRegistry:
    """Holds the voice set fetched from the remote API and the active voice.

    The voice set is replaced wholesale on every successful refresh. The
    selection starts unset, is filled with the first fetched voice when
    nothing is selected yet, and afterwards only changes through
    :meth:`select`. All state sits behind a single read/write lock.
    """

    def __init__(self, client: AbstractSynthesisClient):
        self._client = client
        self._lock = ReadWriteLock("voice_registry")
        self._voices: List[Voice] = []
        self._by_id: Dict[str, Voice] = {}
        self._selected: Optional[Voice] = None

    def refresh(self) -> VoiceSnapshot:
        """Replace the voice set with a fresh listing from the remote API.

        Raises:
            UpstreamError: The remote listing failed; state is left untouched.
        """
        voices = list(self._client.list_voices())
        by_id = {voice.voice_id: voice for voice in voices}

        with self._lock.write_lock():
            self._voices = voices
            self._by_id = by_id

            if self._selected is not None:
                # Point at the fresh record; a vanished id keeps the stale one
                self._selected = by_id.get(self._selected.voice_id, self._selected)
            elif voices:
                self._selected = voices[0]
                logger.info(
                    "Default voice selected",
                    voice_id=self._selected.voice_id,
                    name=self._selected.name,
                )

            snapshot = VoiceSnapshot(voices=list(self._voices), selected=self._selected)

        logger.info("Voice registry refreshed", count=len(voices))
        return snapshot

    def list(self) -> VoiceSnapshot:
        """Return the current voices and selection without refreshing."""
        with self._lock.read_lock():
            return VoiceSnapshot(voices=list(self._voices), selected=self._selected)

    def current(self) -> Optional[Voice]:
        """Return the selected voice, or None when nothing is selected."""
        with self._lock.read_lock():
            return self._selected

    def select(self, voice_id: str) -> Voice:
        """Select the voice whose identifier matches ``voice_id`` exactly.

        Raises:
            NotFoundError: No such voice; the previous selection is kept.
        """
        with self._lock.write_lock():
            voice = self._by_id.get(voice_id)
            if voice is None:
                raise NotFoundError(voice_id)
            self._selected = voice

        logger.info("Voice selected", voice_id=voice.voice_id, name=voice.name)
        return voice
