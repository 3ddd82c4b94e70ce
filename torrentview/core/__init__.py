"""Torrent domain types."""

from __future__ import annotations

from torrentview.core.infohash import InfoHash
from torrentview.core.magnet import generate_magnet_link
from torrentview.core.tagset import TagSet
from torrentview.core.torrent import MAX_RATIO, Torrent, TorrentSnapshot

__all__ = [
    "MAX_RATIO",
    "InfoHash",
    "TagSet",
    "Torrent",
    "TorrentSnapshot",
    "generate_magnet_link",
]
