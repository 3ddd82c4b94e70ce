"""Shared utilities and infrastructure.

This module contains common utilities used throughout the application.
"""

from __future__ import annotations

from torrentview.utils.exceptions import (
    ConfigurationError,
    RecordDecodeError,
    SerializationError,
    SessionError,
    SessionUnavailableError,
    TagError,
    TorrentError,
    TorrentRemovedError,
    TorrentViewError,
    ValidationError,
)
from torrentview.utils.logging_config import get_logger, setup_logging
from torrentview.utils.time import Clock, FixedClock

__all__ = [
    # Clock
    "Clock",
    # Exceptions
    "ConfigurationError",
    "FixedClock",
    "RecordDecodeError",
    "SerializationError",
    "SessionError",
    "SessionUnavailableError",
    "TagError",
    "TorrentError",
    "TorrentRemovedError",
    "TorrentViewError",
    "ValidationError",
    # Logging
    "get_logger",
    "setup_logging",
]
