"""Main entry point for the ElevenLabs MCP Server."""

import atexit
import sys
from typing import Optional

from mcp.server.fastmcp import FastMCP

from config.logging_config import get_logger, setup_logging
from config.settings import settings
from src import __version__
from src.core.error_handling import BaseError, ConfigurationError
from src.voice_synthesis import (
    ArtifactStore,
    AudioLifecycleManager,
    HistoryReader,
    PlaybackEngine,
    SoundDeviceOutput,
    SynthesisOptions,
    VoiceRegistry,
    initialize_voice_tools,
    register_voice_tools,
)
from src.voice_synthesis.providers import ElevenLabsProvider

# Set up logging
setup_logging(level=settings.log_level, log_file=settings.log_file)
logger = get_logger(__name__)

# Initialize FastMCP server
mcp = FastMCP(settings.mcp_server_name)

# Voice components (initialized in main())
audio_manager: Optional[AudioLifecycleManager] = None


def build_audio_manager() -> AudioLifecycleManager:
    """Create every voice component from settings.

    Raises:
        ConfigurationError: XI_API_KEY is missing
        UpstreamError: The initial voice listing failed
    """
    if not settings.xi_api_key:
        raise ConfigurationError(
            "XI_API_KEY environment variable is required", config_key="XI_API_KEY"
        )

    client = ElevenLabsProvider(
        api_key=settings.xi_api_key,
        model_id=settings.xi_model_id,
        output_format=settings.xi_output_format,
    )

    registry = VoiceRegistry(client)
    registry.refresh()

    output = SoundDeviceOutput(
        sample_rate=settings.xi_sample_rate,
        buffer_frames=settings.buffer_frames,
    )
    playback = PlaybackEngine(output, max_workers=settings.xi_playback_workers)

    store = ArtifactStore(
        audio_dir=settings.xi_audio_dir,
        audio_extension=settings.xi_audio_extension,
        random_hex_length=settings.xi_random_hex_length,
    )
    history = HistoryReader(
        audio_dir=settings.xi_audio_dir,
        audio_extension=settings.xi_audio_extension,
        max_summary_words=settings.xi_max_summary_words,
    )

    return AudioLifecycleManager(
        registry=registry,
        client=client,
        store=store,
        playback=playback,
        history=history,
        options=SynthesisOptions(
            stability=settings.xi_stability,
            similarity_boost=settings.xi_similarity_boost,
        ),
    )


def main():
    """Main entry point for the MCP server."""
    global audio_manager

    try:
        audio_manager = build_audio_manager()

        def cleanup_resources():
            if audio_manager:
                audio_manager.playback.shutdown(wait=False)

        atexit.register(cleanup_resources)

        initialize_voice_tools(audio_manager)
        register_voice_tools(mcp)

        logger.info(
            "Starting ElevenLabs MCP Server",
            version=__version__,
            audio_dir=str(settings.xi_audio_dir),
        )

        mcp.run(transport="stdio")

    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
        sys.exit(0)
    except BaseError as e:
        logger.error("Server failed to start", error=e.message, error_code=e.error_code)
        sys.exit(1)
    except Exception as e:
        logger.error("Server failed to start", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
