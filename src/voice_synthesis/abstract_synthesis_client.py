"""Abstract base class for remote speech synthesis clients."""

from abc import ABC, abstractmethod
from typing import List, Optional

from .models import SynthesisOptions, Voice


class AbstractSynthesisClient(ABC):
    """Interface the audio lifecycle consumes from a synthesis backend.

    Implementations must raise ``UpstreamError`` for any failure of the
    remote call and must not retry on their own beyond what the
    underlying SDK does.
    """

    @abstractmethod
    def list_voices(self) -> List[Voice]:
        """Fetch every voice available to the account, in provider order."""

    @abstractmethod
    def synthesize(
        self,
        text: str,
        voice_id: str,
        options: SynthesisOptions,
        style_id: Optional[str] = None,
    ) -> bytes:
        """Synthesize ``text`` with ``voice_id`` and return the encoded audio.

        Args:
            text: Text to speak
            voice_id: Provider voice identifier
            options: Stability and similarity settings
            style_id: Optional provider style/model override

        Returns:
            Encoded audio bytes
        """
