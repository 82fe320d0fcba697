"""Persistence of generated audio and transcript pairs."""

import secrets
import time
from pathlib import Path
from typing import Optional, Union

from structlog import get_logger

from ..core.error_handling import AudioIOError

logger = get_logger(__name__)

DEFAULT_AUDIO_DIR = Path(".xi")
DEFAULT_AUDIO_EXTENSION = "mp3"
TRANSCRIPT_EXTENSION = "txt"
RANDOM_HEX_LENGTH = 5


def generate_random_hex(length: int = RANDOM_HEX_LENGTH) -> str:
    """Return ``length`` lowercase hex characters from a strong random source."""
    return secrets.token_hex((length + 1) // 2)[:length]


def generate_base_name(random_hex_length: int = RANDOM_HEX_LENGTH) -> str:
    """Millisecond timestamp and random hex suffix, e.g. ``1718000000000-3fa9c``.

    Collisions are not checked for; the random suffix makes them negligible.
    """
    timestamp = time.time_ns() // 1_000_000
    return f"{timestamp}-{generate_random_hex(random_hex_length)}"


class ArtifactStore:
    """Writes each generation as ``<base>.<ext>`` plus ``<base>.txt``.

    Artifacts are never modified or deleted once written.
    """

    def __init__(
        self,
        audio_dir: Optional[Union[str, Path]] = None,
        audio_extension: str = DEFAULT_AUDIO_EXTENSION,
        random_hex_length: int = RANDOM_HEX_LENGTH,
    ):
        """Initialize the artifact store.

        Args:
            audio_dir: Directory that receives artifacts (created lazily)
            audio_extension: Extension of the audio payload, without dot
            random_hex_length: Length of the random base name suffix
        """
        self.audio_dir = Path(audio_dir) if audio_dir is not None else DEFAULT_AUDIO_DIR
        self.audio_extension = audio_extension.lstrip(".")
        self.random_hex_length = random_hex_length

    def audio_path_for(self, base_name: str) -> Path:
        return self.audio_dir / f"{base_name}.{self.audio_extension}"

    def transcript_path_for(self, audio_path: Union[str, Path]) -> Path:
        """Path of the transcript that accompanies ``audio_path``."""
        return Path(audio_path).with_suffix(f".{TRANSCRIPT_EXTENSION}")

    def persist(self, text: str, audio_data: bytes) -> Path:
        """Write the audio payload and its transcript.

        The audio file is written first. If the transcript write fails
        afterwards the audio file stays behind without a transcript.

        Args:
            text: Transcript of the audio
            audio_data: Encoded audio bytes

        Returns:
            Path of the written audio file

        Raises:
            AudioIOError: Directory creation or either write failed
        """
        audio_path = self.audio_path_for(generate_base_name(self.random_hex_length))

        try:
            self.audio_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise AudioIOError(f"failed to create directory: {e}", path=self.audio_dir) from e

        try:
            audio_path.write_bytes(audio_data)
        except OSError as e:
            raise AudioIOError(f"failed to write audio file: {e}", path=audio_path) from e

        transcript_path = self.transcript_path_for(audio_path)
        try:
            # newline="" keeps the transcript byte-identical to the input
            with open(transcript_path, "w", encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as e:
            raise AudioIOError(f"failed to write text file: {e}", path=transcript_path) from e

        logger.info(
            "Audio artifact saved",
            path=str(audio_path),
            size_bytes=len(audio_data),
            characters=len(text),
        )
        return audio_path
