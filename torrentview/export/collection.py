"""Collection export over every torrent known to a session.

An export reads the session's torrent list exactly once and then works on
that snapshot only. Torrents removed after the snapshot are skipped;
failures of the session itself abort the whole export.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from torrentview.core.torrent import Torrent
from torrentview.serialize.serialize_binary import serialize_binary
from torrentview.serialize.serialize_torrent import normalize_fields, serialize
from torrentview.session.session import Session
from torrentview.utils.exceptions import TorrentRemovedError
from torrentview.utils.logging_config import LoggingContext, get_logger
from torrentview.utils.time import Clock

logger = get_logger(__name__)

_T = TypeVar("_T")


class CollectionExporter:
    """Projects every torrent of a session, in the session's order."""

    def __init__(self, session: Session, *, clock: Clock | None = None):
        """Initialize exporter.

        Args:
            session: Resource manager to read torrents from
            clock: Source of the current time shared by all projections

        """
        self.session = session
        self.clock = clock or Clock()

    def export(self, fields: Iterable[str] | None = None) -> list[dict[str, Any]]:
        """Project every torrent, keeping only ``fields`` (all when empty)."""
        selector = normalize_fields(fields)
        with LoggingContext("torrent_export", logger=logger):
            return self._collect(lambda t: serialize(t, selector, clock=self.clock))

    def dump(self) -> bytes:
        """Concatenate the full binary record of every torrent."""
        with LoggingContext("torrent_dump", logger=logger):
            records = self._collect(lambda t: serialize_binary(t, clock=self.clock))
            result = b"".join(records)
        logger.info("wrote %d bytes to output", len(result))
        return result

    def _collect(self, project: Callable[[Torrent], _T]) -> list[_T]:
        torrents = list(self.session.torrents())
        results: list[_T] = []
        skipped = 0
        for torrent in torrents:
            try:
                results.append(project(torrent))
            except TorrentRemovedError as e:
                skipped += 1
                logger.debug("Skipping torrent removed during export: %s", e)

        if skipped and logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Exported %d of %d torrents (%d removed)",
                len(results),
                len(torrents),
                skipped,
            )
        return results


def export_torrents(
    session: Session,
    fields: Iterable[str] | None = None,
    *,
    clock: Clock | None = None,
) -> list[dict[str, Any]]:
    """Project every torrent of ``session``; see :meth:`CollectionExporter.export`."""
    return CollectionExporter(session, clock=clock).export(fields)


def dump_torrents(session: Session, *, clock: Clock | None = None) -> bytes:
    """Binary dump of ``session``; see :meth:`CollectionExporter.dump`."""
    return CollectionExporter(session, clock=clock).dump()
