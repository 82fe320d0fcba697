"""
Error taxonomy for the ElevenLabs MCP Server.

Every core operation raises one of these errors to its direct caller. The
tool layer converts them into MCP error results; nothing here retries.
"""

import time
from datetime import datetime, timezone
from enum import Enum, auto
from typing import Any, Dict, Optional


class ErrorSeverity(Enum):
    """Error severity levels for classification and handling."""

    CRITICAL = auto()  # Startup cannot continue
    HIGH = auto()  # Service failures that impact functionality
    MEDIUM = auto()  # Recoverable errors, the caller may try again
    LOW = auto()  # Bad input from the caller


class ErrorCategory(Enum):
    """Error categories for classification and routing."""

    SERVICE = auto()  # Remote synthesis API errors
    VALIDATION = auto()  # Lookup and input errors
    CONFIGURATION = auto()  # Configuration errors
    RESOURCE = auto()  # Filesystem and audio resource errors
    BUSINESS_LOGIC = auto()  # Application state errors


class BaseError(Exception):
    """Base exception class with enhanced error information."""

    def __init__(
        self,
        message: str,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.BUSINESS_LOGIC,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        recoverable: bool = True,
    ) -> None:
        """
        Initialize base error with comprehensive metadata.

        Args:
            message: Human-readable error message
            severity: Error severity level
            category: Error category for classification
            error_code: Unique error code for tracking
            context: Additional context information
            recoverable: Whether error is recoverable
        """
        super().__init__(message)
        self.message = message
        self.severity = severity
        self.category = category
        self.error_code = error_code or self._generate_error_code()
        self.context = context or {}
        self.recoverable = recoverable
        self.timestamp = datetime.now(timezone.utc)

    def _generate_error_code(self) -> str:
        """Generate unique error code based on category and timestamp."""
        timestamp = int(time.time() * 1000) % 100000
        return f"{self.category.name[:3]}-{self.severity.name[:3]}-{timestamp}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "severity": self.severity.name,
            "category": self.category.name,
            "context": self.context,
            "recoverable": self.recoverable,
            "timestamp": self.timestamp.isoformat(),
        }


class ServiceError(BaseError):
    """External service errors."""

    def __init__(self, message: str, service_name: str, **kwargs: Any) -> None:
        context = kwargs.pop("context", {})
        context["service_name"] = service_name
        super().__init__(
            message,
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.SERVICE,
            context=context,
            **kwargs,
        )


class UpstreamError(ServiceError):
    """The remote synthesis or voice listing call failed."""

    def __init__(
        self, message: str, operation: str, service_name: str = "elevenlabs", **kwargs: Any
    ) -> None:
        context = kwargs.pop("context", {})
        context["operation"] = operation
        super().__init__(message, service_name=service_name, context=context, **kwargs)


class ConfigurationError(BaseError):
    """Configuration errors."""

    def __init__(self, message: str, config_key: str, **kwargs: Any) -> None:
        context = kwargs.pop("context", {})
        context["config_key"] = config_key
        super().__init__(
            message,
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.CONFIGURATION,
            context=context,
            recoverable=False,
            **kwargs,
        )


class NoVoiceSelectedError(BaseError):
    """Generation was attempted before any voice was selected."""

    def __init__(self, message: str = "no voice selected", **kwargs: Any) -> None:
        super().__init__(
            message,
            severity=ErrorSeverity.MEDIUM,
            category=ErrorCategory.BUSINESS_LOGIC,
            **kwargs,
        )


class NotFoundError(BaseError):
    """A voice id did not match any voice in the registry."""

    def __init__(self, voice_id: str, **kwargs: Any) -> None:
        context = kwargs.pop("context", {})
        context["voice_id"] = voice_id
        super().__init__(
            f"voice with ID '{voice_id}' not found",
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
            context=context,
            **kwargs,
        )
        self.voice_id = voice_id


class AudioIOError(BaseError):
    """A file or directory operation on audio artifacts failed."""

    def __init__(self, message: str, path: Any, **kwargs: Any) -> None:
        context = kwargs.pop("context", {})
        context["path"] = str(path)
        super().__init__(
            message,
            severity=ErrorSeverity.MEDIUM,
            category=ErrorCategory.RESOURCE,
            context=context,
            **kwargs,
        )
        self.path = str(path)


class DecodeError(BaseError):
    """An audio payload could not be decoded."""

    def __init__(self, message: str, path: Any, **kwargs: Any) -> None:
        context = kwargs.pop("context", {})
        context["path"] = str(path)
        super().__init__(
            message,
            severity=ErrorSeverity.MEDIUM,
            category=ErrorCategory.RESOURCE,
            context=context,
            recoverable=False,
            **kwargs,
        )
        self.path = str(path)
