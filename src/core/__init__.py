"""Core infrastructure components."""

from .concurrency import ReadWriteLock
from .error_handling import (
    AudioIOError,
    BaseError,
    ConfigurationError,
    DecodeError,
    ErrorCategory,
    ErrorSeverity,
    NoVoiceSelectedError,
    NotFoundError,
    ServiceError,
    UpstreamError,
)

__all__ = [
    "AudioIOError",
    "BaseError",
    "ConfigurationError",
    "DecodeError",
    "ErrorCategory",
    "ErrorSeverity",
    "NoVoiceSelectedError",
    "NotFoundError",
    "ReadWriteLock",
    "ServiceError",
    "UpstreamError",
]
