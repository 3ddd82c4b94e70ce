"""Read-only torrent contract and its point-in-time snapshot.

The resource manager owns and mutates torrents. Everything in this package
only reads them through the :class:`Torrent` protocol, whose attributes must
each return a consistent point-in-time value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import PurePath
from typing import Protocol, runtime_checkable

from torrentview.core.infohash import InfoHash
from torrentview.core.magnet import generate_magnet_link
from torrentview.core.tagset import TagSet
from torrentview.models import TorrentState

# Ratios at or above this are reported as "unlimited"
MAX_RATIO = 9999.0
# Seconds; used as "infinite" ETA
MAX_ETA = 8640000

USE_GLOBAL_RATIO = -2.0
NO_RATIO_LIMIT = -1.0
USE_GLOBAL_SEEDING_TIME = -2
NO_SEEDING_TIME_LIMIT = -1
USE_GLOBAL_INACTIVE_SEEDING_TIME = -2
NO_INACTIVE_SEEDING_TIME_LIMIT = -1


@runtime_checkable
class Torrent(Protocol):
    """Read accessors the projection relies on.

    Metadata-dependent attributes (creator, comment, creation date, piece
    geometry, privacy) must return safe defaults while ``has_metadata`` is
    false. Accessors on a torrent that vanished after enumeration raise
    :class:`~torrentview.utils.exceptions.TorrentRemovedError`.
    """

    id: str
    info_hash: InfoHash
    name: str

    has_metadata: bool
    creator: str
    creation_date: datetime | None
    comment: str
    is_private: bool

    total_size: int
    wanted_size: int
    progress: float
    pieces_count: int
    piece_length: int
    pieces_have: int
    wasted_size: int
    remaining_size: int
    completed_size: int

    download_payload_rate: int
    upload_payload_rate: int
    download_limit: int
    upload_limit: int
    total_download: int
    total_upload: int
    total_payload_download: int
    total_payload_upload: int

    queue_position: int
    seeds_count: int
    total_seeds_count: int
    leechs_count: int
    total_leechers_count: int
    connections_count: int
    connections_limit: int
    distributed_copies: float
    popularity: float

    state: TorrentState
    eta: int
    is_sequential_download: bool
    has_first_last_piece_priority: bool
    category: str
    tags: TagSet
    super_seeding: bool
    is_forced: bool
    is_auto_tmm_enabled: bool

    save_path: PurePath | None
    download_path: PurePath | None
    content_path: PurePath | None
    root_path: PurePath | None

    added_time: datetime | None
    completed_time: datetime | None
    last_seen_complete: datetime | None
    time_since_activity: int
    active_time: int
    finished_time: int
    next_announce: int

    current_tracker: str
    trackers: tuple[str, ...]

    real_ratio: float
    ratio_limit: float
    max_ratio: float
    seeding_time_limit: int
    max_seeding_time: int
    inactive_seeding_time_limit: int
    max_inactive_seeding_time: int

    def create_magnet_uri(self) -> str: ...


@dataclass(frozen=True)
class TorrentSnapshot:
    """Immutable point-in-time view of a torrent.

    Every attribute has a safe default so a torrent that is still fetching
    metadata, or has just been added, can be described without faulting.
    """

    info_hash: InfoHash = field(default_factory=InfoHash)
    name: str = ""

    has_metadata: bool = False
    creator: str = ""
    creation_date: datetime | None = None
    comment: str = ""
    is_private: bool = False

    total_size: int = 0
    wanted_size: int = 0
    progress: float = 0.0
    pieces_count: int = 0
    piece_length: int = 0
    pieces_have: int = 0
    wasted_size: int = 0
    remaining_size: int = 0
    completed_size: int = 0

    download_payload_rate: int = 0
    upload_payload_rate: int = 0
    download_limit: int = -1
    upload_limit: int = -1
    total_download: int = 0
    total_upload: int = 0
    total_payload_download: int = 0
    total_payload_upload: int = 0

    queue_position: int = -1
    seeds_count: int = 0
    total_seeds_count: int = 0
    leechs_count: int = 0
    total_leechers_count: int = 0
    connections_count: int = 0
    connections_limit: int = -1
    distributed_copies: float = 0.0
    popularity: float = 0.0

    state: TorrentState = TorrentState.UNKNOWN
    eta: int = MAX_ETA
    is_sequential_download: bool = False
    has_first_last_piece_priority: bool = False
    category: str = ""
    tags: TagSet = field(default_factory=TagSet)
    super_seeding: bool = False
    is_forced: bool = False
    is_auto_tmm_enabled: bool = False

    save_path: PurePath | None = None
    download_path: PurePath | None = None
    content_path: PurePath | None = None
    root_path: PurePath | None = None

    added_time: datetime | None = None
    completed_time: datetime | None = None
    last_seen_complete: datetime | None = None
    time_since_activity: int = -1
    active_time: int = 0
    finished_time: int = 0
    next_announce: int = 0

    current_tracker: str = ""
    trackers: tuple[str, ...] = ()

    real_ratio: float = 0.0
    ratio_limit: float = USE_GLOBAL_RATIO
    max_ratio: float = NO_RATIO_LIMIT
    seeding_time_limit: int = USE_GLOBAL_SEEDING_TIME
    max_seeding_time: int = NO_SEEDING_TIME_LIMIT
    inactive_seeding_time_limit: int = USE_GLOBAL_INACTIVE_SEEDING_TIME
    max_inactive_seeding_time: int = NO_INACTIVE_SEEDING_TIME_LIMIT

    @property
    def id(self) -> str:
        return self.info_hash.to_torrent_id()

    def create_magnet_uri(self) -> str:
        return generate_magnet_link(
            self.info_hash,
            display_name=self.name or None,
            trackers=list(self.trackers),
        )
