"""Browse previously generated audio by scanning the artifact directory."""

import os
from pathlib import Path
from typing import List, Optional, Union

from structlog import get_logger

from ..core.error_handling import AudioIOError
from .artifact_store import DEFAULT_AUDIO_DIR, DEFAULT_AUDIO_EXTENSION, TRANSCRIPT_EXTENSION
from .models import HistoryEntry

logger = get_logger(__name__)

MAX_SUMMARY_WORDS = 10
SUMMARY_ELLIPSIS = "..."
NO_SUMMARY_PLACEHOLDER = "(no text summary available)"


def create_summary(text: str, max_words: int = MAX_SUMMARY_WORDS) -> str:
    """Shorten a transcript to its first ``max_words`` words.

    Transcripts with at most ``max_words`` words come back whole (stripped
    of surrounding whitespace); longer ones are cut and get ``...``.
    """
    text = text.strip()
    words = text.split()
    if len(words) > max_words:
        return " ".join(words[:max_words]) + SUMMARY_ELLIPSIS
    return text


class HistoryReader:
    """Rebuilds the artifact history from the directory on every call.

    There is no index or cache: the directory listing is the only source
    of truth. Entries come back in filesystem enumeration order.
    """

    def __init__(
        self,
        audio_dir: Optional[Union[str, Path]] = None,
        audio_extension: str = DEFAULT_AUDIO_EXTENSION,
        max_summary_words: int = MAX_SUMMARY_WORDS,
    ):
        self.audio_dir = Path(audio_dir) if audio_dir is not None else DEFAULT_AUDIO_DIR
        self.audio_extension = audio_extension.lstrip(".")
        self.max_summary_words = max_summary_words

    def list_history(self) -> List[HistoryEntry]:
        """List generated audio files with transcript summaries.

        Returns:
            One entry per audio file; empty when the directory does not exist

        Raises:
            AudioIOError: The directory exists but could not be read
        """
        try:
            with os.scandir(self.audio_dir) as it:
                names = [entry.name for entry in it]
        except FileNotFoundError:
            return []
        except OSError as e:
            raise AudioIOError(
                f"failed to read {self.audio_dir} directory: {e}", path=self.audio_dir
            ) from e

        suffix = f".{self.audio_extension}"
        entries = [
            HistoryEntry(name=name, summary=self.get_summary(name))
            for name in names
            if name.endswith(suffix)
        ]

        logger.debug("Audio history scanned", directory=str(self.audio_dir), count=len(entries))
        return entries

    def get_summary(self, audio_name: str) -> str:
        """Summary of the transcript that sits next to ``audio_name``."""
        base = audio_name[: -(len(self.audio_extension) + 1)]
        transcript_path = self.audio_dir / f"{base}.{TRANSCRIPT_EXTENSION}"

        try:
            content = transcript_path.read_text(encoding="utf-8", errors="replace")
        except OSError:
            return NO_SUMMARY_PLACEHOLDER

        return create_summary(content, self.max_summary_words)
