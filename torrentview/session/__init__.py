"""Resource manager abstractions."""

from __future__ import annotations

from torrentview.session.session import Session, TorrentRegistry

__all__ = ["Session", "TorrentRegistry"]
