"""Exception hierarchy for torrentview.

Provides the error types raised by the projection, export and transport
layers so callers can tell recoverable conditions from fatal ones.
"""

from __future__ import annotations

from typing import Any


class TorrentViewError(Exception):
    """Base exception for all torrentview errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize torrentview error."""
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class ValidationError(TorrentViewError):
    """Data validation errors."""


class ConfigurationError(ValidationError):
    """Configuration validation errors."""


class TagError(ValidationError):
    """Invalid torrent tag."""


class SessionError(TorrentViewError):
    """Resource manager errors."""


class SessionUnavailableError(SessionError):
    """The resource manager cannot enumerate its torrents."""


class TorrentError(TorrentViewError):
    """Torrent access errors."""


class TorrentRemovedError(TorrentError):
    """The torrent disappeared after it was enumerated."""


class SerializationError(TorrentViewError):
    """Record encoding/decoding errors."""


class RecordDecodeError(SerializationError):
    """A binary record stream could not be decoded."""
