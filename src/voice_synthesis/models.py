"""Data models for Voice Synthesis."""

from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class Voice:
    """A synthesis voice as returned by the remote API."""

    voice_id: str
    name: str
    category: str = ""


@dataclass(frozen=True)
class VoiceSnapshot:
    """Read-only view of the registry at one point in time."""

    voices: List[Voice]
    selected: Optional[Voice] = None


class SynthesisOptions(BaseModel):
    """Voice settings sent with every synthesis request."""

    model_config = {"frozen": True}

    stability: float = Field(default=0.5, ge=0.0, le=1.0)
    similarity_boost: float = Field(default=0.5, ge=0.0, le=1.0)


@dataclass(frozen=True)
class HistoryEntry:
    """A generated audio file paired with a summary of its transcript."""

    name: str
    summary: str
