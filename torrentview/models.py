"""Data models for torrentview.

Enums shared across the package and the Pydantic configuration models.
"""

from __future__ import annotations

from enum import Enum, IntEnum

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class TorrentState(IntEnum):
    """Torrent lifecycle state as reported by the resource manager.

    Exactly one state applies at any time. ``UNKNOWN`` is the sentinel for
    torrents whose state could not be determined.
    """

    UNKNOWN = -1

    ERROR = 0
    MISSING_FILES = 1

    UPLOADING = 2
    STOPPED_UPLOADING = 3
    QUEUED_UPLOADING = 4
    STALLED_UPLOADING = 5
    CHECKING_UPLOADING = 6
    FORCED_UPLOADING = 7

    DOWNLOADING_METADATA = 8
    FORCED_DOWNLOADING_METADATA = 9

    DOWNLOADING = 10
    STOPPED_DOWNLOADING = 11
    QUEUED_DOWNLOADING = 12
    STALLED_DOWNLOADING = 13
    CHECKING_DOWNLOADING = 14
    FORCED_DOWNLOADING = 15

    CHECKING_RESUME_DATA = 16
    MOVING = 17


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: LogLevel = Field(default=LogLevel.INFO, description="Log level")
    log_file: str | None = Field(None, description="Log file path")
    structured_logging: bool = Field(
        default=False,
        description="Use structured (JSON) logging for the log file",
    )
    log_correlation_id: bool = Field(
        default=True,
        description="Include correlation IDs",
    )


class ApiConfig(BaseModel):
    """HTTP API configuration."""

    host: str = Field(default="127.0.0.1", description="Host to bind to")
    port: int = Field(default=8080, ge=0, le=65535, description="Port to bind to")
    dump_filename: str = Field(
        default="raw.dat",
        min_length=1,
        description="Suggested filename for the bulk dump response",
    )


class ExportConfig(BaseModel):
    """Export configuration."""

    default_fields: list[str] = Field(
        default_factory=list,
        description="Fields returned when a request names none (empty means all)",
    )

    @field_validator("default_fields", mode="before")
    @classmethod
    def _split_fields(cls, value: object) -> object:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


class Config(BaseModel):
    """Main configuration model."""

    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )
    api: ApiConfig = Field(
        default_factory=ApiConfig,
        description="HTTP API configuration",
    )
    export: ExportConfig = Field(
        default_factory=ExportConfig,
        description="Export configuration",
    )
