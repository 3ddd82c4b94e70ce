"""Bulk export of session torrents."""

from __future__ import annotations

from torrentview.export.collection import (
    CollectionExporter,
    dump_torrents,
    export_torrents,
)

__all__ = ["CollectionExporter", "dump_torrents", "export_torrents"]
