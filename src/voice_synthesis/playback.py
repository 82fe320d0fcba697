"""Serialized playback of audio artifacts on the system output device."""

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from math import gcd
from pathlib import Path
from typing import Any, Optional, Union

import numpy as np
import soundfile as sf
from scipy.signal import resample_poly
from structlog import get_logger

from ..core.error_handling import AudioIOError, BaseError, DecodeError

logger = get_logger(__name__)

DEFAULT_SAMPLE_RATE = 44100
DEFAULT_BUFFER_FRAMES = DEFAULT_SAMPLE_RATE // 10
OUTPUT_CHANNELS = 2


class SoundDeviceOutput:
    """The process-wide output stream, opened once and never reconfigured.

    ``write`` blocks until every frame has been handed to the device.
    """

    def __init__(
        self,
        sample_rate: int = DEFAULT_SAMPLE_RATE,
        buffer_frames: int = DEFAULT_BUFFER_FRAMES,
        channels: int = OUTPUT_CHANNELS,
    ):
        # PortAudio is loaded here so importing this module never needs it
        import sounddevice as sd

        self.sample_rate = sample_rate
        self.channels = channels
        self._stream = sd.OutputStream(
            samplerate=sample_rate,
            blocksize=buffer_frames,
            channels=channels,
            dtype="float32",
        )
        self._stream.start()

        logger.info(
            "Audio output initialized",
            sample_rate=sample_rate,
            buffer_frames=buffer_frames,
            channels=channels,
        )

    def write(self, frames: np.ndarray) -> None:
        self._stream.write(frames)

    def close(self) -> None:
        self._stream.stop()
        self._stream.close()


class PlaybackEngine:
    """Decodes audio files and renders them one at a time.

    Only one playback renders at any moment; concurrent callers block on a
    mutex until the active playback finishes. There is no queue ordering,
    no priority and no way to cancel a playback in flight.
    """

    def __init__(
        self,
        output: Any,
        max_workers: int = 2,
        executor: Optional[ThreadPoolExecutor] = None,
    ):
        """Initialize the playback engine.

        Args:
            output: Device with ``sample_rate``, ``channels`` and a blocking ``write``
            max_workers: Threads for fire-and-forget playback
            executor: Executor to use instead of creating one
        """
        self._output = output
        self._play_lock = threading.Lock()
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="playback"
        )

    @property
    def sample_rate(self) -> int:
        return self._output.sample_rate

    def play(self, path: Union[str, Path]) -> None:
        """Play ``path`` to completion, blocking the calling thread.

        Raises:
            AudioIOError: The file could not be opened
            DecodeError: The file is not a decodable audio stream
        """
        with self._play_lock:
            frames = self.load(path)
            logger.info("Playing audio", path=str(path), frames=len(frames))
            self._output.write(frames)
            logger.debug("Playback finished", path=str(path))

    def play_async(self, path: Union[str, Path]) -> Future:
        """Schedule :meth:`play` on the worker pool and return immediately.

        Errors are logged by the worker and never reach the caller; the
        returned future always resolves to ``None``.
        """
        return self._executor.submit(self._play_and_log, path)

    def _play_and_log(self, path: Union[str, Path]) -> None:
        try:
            self.play(path)
        except BaseError as e:
            logger.error("Error playing audio", path=str(path), error=str(e), error_code=e.error_code)
        except Exception:
            logger.exception("Unexpected error playing audio", path=str(path))

    def load(self, path: Union[str, Path]) -> np.ndarray:
        """Decode ``path`` into float32 frames shaped for the output device."""
        try:
            f = open(path, "rb")
        except OSError as e:
            raise AudioIOError(f"failed to open audio file: {e}", path=path) from e

        with f:
            try:
                data, sample_rate = sf.read(f, dtype="float32", always_2d=True)
            except (sf.SoundFileError, RuntimeError, TypeError) as e:
                raise DecodeError(f"failed to decode audio: {e}", path=path) from e

        if len(data) == 0:
            raise DecodeError("failed to decode audio: no frames", path=path)

        data = self._resample(data, sample_rate)
        return self._match_channels(data)

    def _resample(self, data: np.ndarray, sample_rate: int) -> np.ndarray:
        target = self._output.sample_rate
        if sample_rate == target:
            return data
        g = gcd(int(sample_rate), int(target))
        resampled = resample_poly(data, target // g, int(sample_rate) // g, axis=0)
        return resampled.astype(np.float32, copy=False)

    def _match_channels(self, data: np.ndarray) -> np.ndarray:
        channels = self._output.channels
        if data.shape[1] == channels:
            return np.ascontiguousarray(data)
        if data.shape[1] == 1:
            return np.ascontiguousarray(np.repeat(data, channels, axis=1))
        if data.shape[1] > channels:
            return np.ascontiguousarray(data[:, :channels])
        # Fewer channels than the device but more than mono: pad with the last one
        pad = np.repeat(data[:, -1:], channels - data.shape[1], axis=1)
        return np.ascontiguousarray(np.hstack([data, pad]))

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting async playback; optionally wait for pending ones."""
        self._executor.shutdown(wait=wait)
