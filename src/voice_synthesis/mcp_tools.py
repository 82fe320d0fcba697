"""MCP tool definitions for voice synthesis."""

import asyncio
from typing import List, Optional

from mcp.server.fastmcp.exceptions import ToolError
from structlog import get_logger

from ..core.error_handling import BaseError
from .audio_manager import AudioLifecycleManager
from .models import HistoryEntry, Voice

logger = get_logger(__name__)

# Global reference initialized by main.py
_audio_manager: Optional[AudioLifecycleManager] = None


def initialize_voice_tools(audio_manager: AudioLifecycleManager) -> None:
    """Initialize voice synthesis tools with the lifecycle manager.

    Args:
        audio_manager: AudioLifecycleManager instance
    """
    global _audio_manager
    _audio_manager = audio_manager
    logger.info("Voice synthesis MCP tools initialized")


def register_voice_tools(mcp_server) -> None:
    """Register voice synthesis tools with MCP server.

    Args:
        mcp_server: FastMCP server instance
    """
    mcp_server.tool(
        name="say",
        description="Convert text to speech, save as MP3 file, and play the audio",
    )(say)
    mcp_server.tool(
        name="read",
        description="Read a text file and convert it to speech, saving as MP3",
    )(read)
    mcp_server.tool(name="play", description="Play an audio file")(play)
    mcp_server.tool(
        name="set_voice",
        description="Set the voice to use for text-to-speech generation",
    )(set_voice)
    mcp_server.tool(
        name="get_voices",
        description="Get list of available voices and show the currently selected one",
    )(get_voices)
    mcp_server.tool(
        name="history",
        description="List available audio files with text summaries",
    )(history)

    logger.info("Voice synthesis MCP tools registered")


def _require_manager() -> AudioLifecycleManager:
    if _audio_manager is None:
        raise ToolError("Voice manager not initialized")
    return _audio_manager


def _tool_error(tool: str, error: BaseError) -> ToolError:
    logger.error("Voice tool failed", tool=tool, **error.to_dict())
    return ToolError(error.message)


def format_voice_list(voices: List[Voice], current_voice: Optional[Voice]) -> str:
    """Render the voice listing, marking the selected voice with ``*``."""
    lines = ["Available voices:"]
    for voice in voices:
        marker = "  "
        if current_voice is not None and voice.voice_id == current_voice.voice_id:
            marker = "* "
        lines.append(f"{marker}{voice.name} ({voice.voice_id}) - {voice.category}")

    text = "\n".join(lines) + "\n"
    if current_voice is not None:
        text += f"\nCurrently selected: {current_voice.name} ({current_voice.voice_id})"
    else:
        text += "\nNo voice currently selected"
    return text


def format_history_list(entries: List[HistoryEntry]) -> str:
    """Render history entries, oldest first by file name."""
    parts = ["Available audio files:\n\n"]
    for entry in sorted(entries, key=lambda e: e.name):
        parts.append(f"• {entry.name}\n  {entry.summary}\n\n")
    return "".join(parts)


async def say(text: str) -> str:
    """
    Convert text to speech, save it, and play it.

    Args:
        text: Text to convert to speech

    Returns:
        Confirmation with the saved audio path
    """
    manager = _require_manager()
    try:
        path = await asyncio.to_thread(manager.generate_and_play, text)
    except BaseError as e:
        raise _tool_error("say", e) from e

    return f"Audio generated, saved to {path}, and playing"


async def read(file_path: str) -> str:
    """
    Read a text file and convert it to speech.

    Args:
        file_path: Path to the text file to read and convert to speech

    Returns:
        Confirmation with the saved audio path
    """
    manager = _require_manager()
    try:
        path = await asyncio.to_thread(manager.read_file_and_generate, file_path)
    except BaseError as e:
        raise _tool_error("read", e) from e

    return f"File '{file_path}' converted to speech and saved to: {path}"


async def play(file_path: str) -> str:
    """
    Play an audio file in the background.

    Args:
        file_path: Path to the audio file to play
    """
    manager = _require_manager()
    # Fire and forget: failures are logged by the playback worker only
    manager.playback.play_async(file_path)
    return f"Playing audio file: {file_path}"


async def set_voice(voice_id: str) -> str:
    """
    Set the voice used for text-to-speech generation.

    Args:
        voice_id: ID of the voice to use
    """
    manager = _require_manager()
    try:
        voice = await asyncio.to_thread(manager.registry.select, voice_id)
    except BaseError as e:
        raise _tool_error("set_voice", e) from e

    return f"Voice set to: {voice.name} ({voice.voice_id})"


async def get_voices() -> str:
    """
    Refresh and list available voices, showing the selected one.
    """
    manager = _require_manager()
    try:
        await asyncio.to_thread(manager.registry.refresh)
    except BaseError as e:
        raise _tool_error("get_voices", e) from e

    snapshot = manager.registry.list()
    return format_voice_list(snapshot.voices, snapshot.selected)


async def history() -> str:
    """
    List generated audio files with short transcript summaries.
    """
    manager = _require_manager()
    try:
        entries = await asyncio.to_thread(manager.history.list_history)
    except BaseError as e:
        raise _tool_error("history", e) from e

    if not entries:
        return "No audio files found"
    return format_history_list(entries)
