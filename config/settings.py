"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    mcp_server_name: str = Field(default="ElevenLabs MCP Server")

    # Logging
    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(default=None)

    # ElevenLabs
    xi_api_key: Optional[str] = Field(default=None)
    xi_model_id: str = Field(default="eleven_multilingual_v2")
    xi_output_format: str = Field(default="mp3_44100_128")
    xi_stability: float = Field(default=0.5, ge=0.0, le=1.0)
    xi_similarity_boost: float = Field(default=0.5, ge=0.0, le=1.0)

    # Artifacts
    xi_audio_dir: Path = Field(default=Path(".xi"))
    xi_audio_extension: str = Field(default="mp3")
    xi_random_hex_length: int = Field(default=5, ge=1, le=32)
    xi_max_summary_words: int = Field(default=10, ge=1)

    # Playback
    xi_sample_rate: int = Field(default=44100, gt=0)
    xi_buffer_ms: int = Field(default=100, gt=0)
    xi_playback_workers: int = Field(default=2, ge=1)

    @property
    def buffer_frames(self) -> int:
        """Output device buffer size in frames."""
        return self.xi_sample_rate * self.xi_buffer_ms // 1000


# Global settings instance
settings = Settings()
