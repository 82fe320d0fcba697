"""Logging configuration for the ElevenLabs MCP Server."""

import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import structlog

LOG_DIR = Path(__file__).parent.parent / "logs"

# The server speaks JSON-RPC over stdout unless told otherwise
MCP_STDIO_MODE = os.environ.get("MCP_STDIO_MODE", "true").lower() in ("true", "1", "yes")

# Configure structlog at import time so early log lines never reach stdout
if MCP_STDIO_MODE:
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,  # Allow reconfiguration later
    )


def _console_handler(level: str) -> Dict[str, Any]:
    if MCP_STDIO_MODE:
        return {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "default",
            "stream": "ext://sys.stderr",
        }
    return {
        "class": "rich.logging.RichHandler",
        "level": level,
        "formatter": "default",
        "rich_tracebacks": True,
        "markup": True,
    }


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure structured logging with rich console output.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file name, created under ``logs/``
    """
    level = level.upper()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer() if sys.stderr.isatty() and not MCP_STDIO_MODE else structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging_config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": _console_handler(level),
        },
        "root": {
            "level": level,
            "handlers": ["console"],
        },
        "loggers": {
            "src": {
                "level": level,
                "handlers": ["console"],
                "propagate": False,
            },
            "httpx": {
                "level": "WARNING",
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }

    if log_file:
        LOG_DIR.mkdir(exist_ok=True)
        logging_config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": level,
            "formatter": "detailed",
            "filename": str(LOG_DIR / log_file),
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
        }
        logging_config["root"]["handlers"].append("file")
        logging_config["loggers"]["src"]["handlers"].append("file")

    logging.config.dictConfig(logging_config)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structured logger
    """
    return structlog.get_logger(name)
