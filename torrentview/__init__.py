"""torrentview - torrent status projection and bulk export."""

from __future__ import annotations

__version__ = "0.1.0"

from torrentview.core.torrent import MAX_RATIO, Torrent, TorrentSnapshot
from torrentview.export.collection import (
    CollectionExporter,
    dump_torrents,
    export_torrents,
)
from torrentview.models import TorrentState
from torrentview.serialize import (
    CANONICAL_FIELDS,
    SCHEMA_VERSION,
    iter_records,
    serialize,
    serialize_binary,
)
from torrentview.session.session import Session, TorrentRegistry

__all__ = [
    "CANONICAL_FIELDS",
    "MAX_RATIO",
    "SCHEMA_VERSION",
    "CollectionExporter",
    "Session",
    "Torrent",
    "TorrentRegistry",
    "TorrentSnapshot",
    "TorrentState",
    "__version__",
    "dump_torrents",
    "export_torrents",
    "iter_records",
    "serialize",
    "serialize_binary",
]
