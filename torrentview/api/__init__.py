"""HTTP transport for torrent status exports."""

from __future__ import annotations

from torrentview.api.controllers import (
    APIController,
    APIResult,
    BinaryController,
    TorrentsController,
)
from torrentview.api.protocol import API_BASE_PATH, ErrorResponse
from torrentview.api.server import ApiServer

__all__ = [
    "API_BASE_PATH",
    "APIController",
    "APIResult",
    "ApiServer",
    "BinaryController",
    "ErrorResponse",
    "TorrentsController",
]
