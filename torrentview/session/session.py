"""Resource manager contract and an in-memory implementation."""

from __future__ import annotations

import threading
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from torrentview.core.torrent import Torrent
from torrentview.utils.exceptions import SessionUnavailableError, TorrentError
from torrentview.utils.logging_config import get_logger

logger = get_logger(__name__)


@runtime_checkable
class Session(Protocol):
    """Owner of all torrents; the only way exporters reach them."""

    def torrents(self) -> Sequence[Torrent]:
        """Return every currently known torrent as a point-in-time list."""
        ...


class TorrentRegistry:
    """Thread-safe in-memory resource manager.

    Torrents are kept in registration order. Background threads may add,
    replace or remove torrents while exports run; readers only ever see
    the list copy taken by :meth:`torrents`.
    """

    def __init__(self, torrents: Sequence[Torrent] = ()):
        self._lock = threading.RLock()
        self._torrents: dict[str, Torrent] = {}
        self._closed = False
        for torrent in torrents:
            self.add_torrent(torrent)

    def add_torrent(self, torrent: Torrent) -> None:
        """Register a torrent; raises if its ID is already known."""
        with self._lock:
            self._ensure_open()
            torrent_id = torrent.id
            if torrent_id in self._torrents:
                msg = "Torrent already registered"
                raise TorrentError(msg, {"id": torrent_id})
            self._torrents[torrent_id] = torrent
        logger.debug("Registered torrent %s", torrent_id)

    def update_torrent(self, torrent: Torrent) -> None:
        """Replace the stored torrent with the same ID, keeping its position."""
        with self._lock:
            self._ensure_open()
            torrent_id = torrent.id
            if torrent_id not in self._torrents:
                msg = "Torrent not registered"
                raise TorrentError(msg, {"id": torrent_id})
            self._torrents[torrent_id] = torrent

    def remove_torrent(self, torrent_id: str) -> Torrent | None:
        """Forget a torrent; returns it, or None if it was unknown."""
        with self._lock:
            removed = self._torrents.pop(torrent_id, None)
        if removed is not None:
            logger.debug("Removed torrent %s", torrent_id)
        return removed

    def get_torrent(self, torrent_id: str) -> Torrent | None:
        with self._lock:
            return self._torrents.get(torrent_id)

    def torrents(self) -> list[Torrent]:
        with self._lock:
            self._ensure_open()
            return list(self._torrents.values())

    def close(self) -> None:
        """Stop serving torrents; later enumeration fails."""
        with self._lock:
            self._closed = True
            self._torrents.clear()
        logger.debug("Torrent registry closed")

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        with self._lock:
            return len(self._torrents)

    def __contains__(self, torrent_id: object) -> bool:
        with self._lock:
            return torrent_id in self._torrents

    def _ensure_open(self) -> None:
        if self._closed:
            msg = "Torrent registry is closed"
            raise SessionUnavailableError(msg)
