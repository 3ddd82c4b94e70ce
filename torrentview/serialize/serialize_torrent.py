"""Projection of a torrent onto the external status schema.

The schema is the ordered :data:`FIELD_TABLE`. A projection walks the table
once and keeps the entries selected by the caller, so the output always
follows canonical order no matter how the selector is ordered.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Any

from torrentview.core.torrent import MAX_RATIO, Torrent
from torrentview.models import TorrentState
from torrentview.serialize import fields as f
from torrentview.utils.datetime import to_secs_since_epoch
from torrentview.utils.string import join_into_string
from torrentview.utils.time import Clock

TAG_SEPARATOR = ", "
UNKNOWN_STATE = "unknown"

_STATE_TOKENS: dict[TorrentState, str] = {
    TorrentState.ERROR: "error",
    TorrentState.MISSING_FILES: "missingFiles",
    TorrentState.UPLOADING: "uploading",
    TorrentState.STOPPED_UPLOADING: "stoppedUP",
    TorrentState.QUEUED_UPLOADING: "queuedUP",
    TorrentState.STALLED_UPLOADING: "stalledUP",
    TorrentState.CHECKING_UPLOADING: "checkingUP",
    TorrentState.FORCED_UPLOADING: "forcedUP",
    TorrentState.DOWNLOADING: "downloading",
    TorrentState.DOWNLOADING_METADATA: "metaDL",
    TorrentState.FORCED_DOWNLOADING_METADATA: "forcedMetaDL",
    TorrentState.STOPPED_DOWNLOADING: "stoppedDL",
    TorrentState.QUEUED_DOWNLOADING: "queuedDL",
    TorrentState.STALLED_DOWNLOADING: "stalledDL",
    TorrentState.CHECKING_DOWNLOADING: "checkingDL",
    TorrentState.FORCED_DOWNLOADING: "forcedDL",
    TorrentState.CHECKING_RESUME_DATA: "checkingResumeData",
    TorrentState.MOVING: "moving",
}

_default_clock = Clock()


def torrent_state_to_string(state: object) -> str:
    """Map a lifecycle state to its external token; anything else is ``unknown``."""
    try:
        return _STATE_TOKENS.get(state, UNKNOWN_STATE)  # type: ignore[call-overload]
    except TypeError:
        return UNKNOWN_STATE


def adjust_queue_position(position: int) -> int:
    """Make queue positions 1-based; negative means "not queued" and maps to 0."""
    return 0 if position < 0 else position + 1


def adjust_ratio(ratio: float) -> float:
    """Report ratios at or above ``MAX_RATIO`` as ``-1`` (unlimited)."""
    return -1 if ratio >= MAX_RATIO else ratio


def last_activity_time(torrent: Torrent, now: int) -> int:
    """Epoch seconds of the last transfer, or the added time if never active."""
    time_since_activity = torrent.time_since_activity
    if time_since_activity < 0:
        return to_secs_since_epoch(torrent.added_time)
    return now - time_since_activity


def _path_to_string(path: PurePath | None) -> str:
    return str(path) if path is not None else ""


@dataclass
class _Projection:
    """Per-call state shared by the field accessors."""

    torrent: Torrent
    clock: Clock
    has_metadata: bool = field(init=False)

    def __post_init__(self) -> None:
        self.has_metadata = self.torrent.has_metadata

    def now(self) -> int:
        return self.clock.now_secs()


@dataclass(frozen=True)
class FieldSpec:
    """One schema entry: the external name and how to compute its value."""

    name: str
    accessor: Callable[[_Projection], Any]


def _field(name: str, accessor: Callable[[_Projection], Any]) -> FieldSpec:
    return FieldSpec(name, accessor)


FIELD_TABLE: tuple[FieldSpec, ...] = (
    _field(f.KEY_TORRENT_ID, lambda p: p.torrent.id),
    _field(f.KEY_TORRENT_INFOHASHV1, lambda p: p.torrent.info_hash.v1_hex()),
    _field(f.KEY_TORRENT_INFOHASHV2, lambda p: p.torrent.info_hash.v2_hex()),
    _field(f.KEY_TORRENT_NAME, lambda p: p.torrent.name),

    _field(f.KEY_TORRENT_HAS_METADATA, lambda p: p.has_metadata),
    _field(f.KEY_TORRENT_CREATED_BY, lambda p: p.torrent.creator),
    _field(f.KEY_TORRENT_CREATION_DATE, lambda p: to_secs_since_epoch(p.torrent.creation_date)),
    _field(f.KEY_TORRENT_PRIVATE, lambda p: p.torrent.is_private if p.has_metadata else None),
    _field(f.KEY_TORRENT_TOTAL_SIZE, lambda p: p.torrent.total_size),
    _field(f.KEY_TORRENT_PIECES_NUM, lambda p: p.torrent.pieces_count),
    _field(f.KEY_TORRENT_PIECE_SIZE, lambda p: p.torrent.piece_length),

    _field(f.KEY_TORRENT_MAGNET_URI, lambda p: p.torrent.create_magnet_uri()),
    _field(f.KEY_TORRENT_SIZE, lambda p: p.torrent.wanted_size),
    _field(f.KEY_TORRENT_PROGRESS, lambda p: p.torrent.progress),
    _field(f.KEY_TORRENT_TOTAL_WASTED, lambda p: p.torrent.wasted_size),
    _field(f.KEY_TORRENT_PIECES_HAVE, lambda p: p.torrent.pieces_have),
    _field(f.KEY_TORRENT_DLSPEED, lambda p: p.torrent.download_payload_rate),
    _field(f.KEY_TORRENT_UPSPEED, lambda p: p.torrent.upload_payload_rate),
    _field(f.KEY_TORRENT_QUEUE_POSITION, lambda p: adjust_queue_position(p.torrent.queue_position)),
    _field(f.KEY_TORRENT_SEEDS, lambda p: p.torrent.seeds_count),
    _field(f.KEY_TORRENT_NUM_COMPLETE, lambda p: p.torrent.total_seeds_count),
    _field(f.KEY_TORRENT_LEECHS, lambda p: p.torrent.leechs_count),
    _field(f.KEY_TORRENT_NUM_INCOMPLETE, lambda p: p.torrent.total_leechers_count),

    _field(f.KEY_TORRENT_STATE, lambda p: torrent_state_to_string(p.torrent.state)),
    _field(f.KEY_TORRENT_ETA, lambda p: p.torrent.eta),
    _field(f.KEY_TORRENT_SEQUENTIAL_DOWNLOAD, lambda p: p.torrent.is_sequential_download),
    _field(f.KEY_TORRENT_FIRST_LAST_PIECE_PRIO, lambda p: p.torrent.has_first_last_piece_priority),

    _field(f.KEY_TORRENT_CATEGORY, lambda p: p.torrent.category),
    _field(f.KEY_TORRENT_TAGS, lambda p: join_into_string(p.torrent.tags, TAG_SEPARATOR)),
    _field(f.KEY_TORRENT_SUPER_SEEDING, lambda p: p.torrent.super_seeding),
    _field(f.KEY_TORRENT_FORCE_START, lambda p: p.torrent.is_forced),
    _field(f.KEY_TORRENT_SAVE_PATH, lambda p: _path_to_string(p.torrent.save_path)),
    _field(f.KEY_TORRENT_DOWNLOAD_PATH, lambda p: _path_to_string(p.torrent.download_path)),
    _field(f.KEY_TORRENT_CONTENT_PATH, lambda p: _path_to_string(p.torrent.content_path)),
    _field(f.KEY_TORRENT_ROOT_PATH, lambda p: _path_to_string(p.torrent.root_path)),
    _field(f.KEY_TORRENT_ADDED_ON, lambda p: to_secs_since_epoch(p.torrent.added_time)),
    _field(f.KEY_TORRENT_COMPLETION_ON, lambda p: to_secs_since_epoch(p.torrent.completed_time)),
    _field(f.KEY_TORRENT_TRACKER, lambda p: p.torrent.current_tracker),
    _field(f.KEY_TORRENT_TRACKERS_COUNT, lambda p: len(p.torrent.trackers)),
    _field(f.KEY_TORRENT_DL_LIMIT, lambda p: p.torrent.download_limit),
    _field(f.KEY_TORRENT_UP_LIMIT, lambda p: p.torrent.upload_limit),
    _field(f.KEY_TORRENT_AMOUNT_DOWNLOADED, lambda p: p.torrent.total_download),
    _field(f.KEY_TORRENT_AMOUNT_UPLOADED, lambda p: p.torrent.total_upload),
    _field(f.KEY_TORRENT_AMOUNT_DOWNLOADED_SESSION, lambda p: p.torrent.total_payload_download),
    _field(f.KEY_TORRENT_AMOUNT_UPLOADED_SESSION, lambda p: p.torrent.total_payload_upload),
    _field(f.KEY_TORRENT_AMOUNT_LEFT, lambda p: p.torrent.remaining_size),
    _field(f.KEY_TORRENT_AMOUNT_COMPLETED, lambda p: p.torrent.completed_size),
    _field(f.KEY_TORRENT_CONNECTIONS_COUNT, lambda p: p.torrent.connections_count),
    _field(f.KEY_TORRENT_CONNECTIONS_LIMIT, lambda p: p.torrent.connections_limit),
    _field(f.KEY_TORRENT_MAX_RATIO, lambda p: p.torrent.max_ratio),
    _field(f.KEY_TORRENT_MAX_SEEDING_TIME, lambda p: p.torrent.max_seeding_time),
    _field(f.KEY_TORRENT_MAX_INACTIVE_SEEDING_TIME, lambda p: p.torrent.max_inactive_seeding_time),
    _field(f.KEY_TORRENT_RATIO, lambda p: adjust_ratio(p.torrent.real_ratio)),
    _field(f.KEY_TORRENT_RATIO_LIMIT, lambda p: p.torrent.ratio_limit),
    _field(f.KEY_TORRENT_POPULARITY, lambda p: p.torrent.popularity),
    _field(f.KEY_TORRENT_SEEDING_TIME_LIMIT, lambda p: p.torrent.seeding_time_limit),
    _field(f.KEY_TORRENT_INACTIVE_SEEDING_TIME_LIMIT, lambda p: p.torrent.inactive_seeding_time_limit),
    _field(f.KEY_TORRENT_LAST_SEEN_COMPLETE_TIME, lambda p: to_secs_since_epoch(p.torrent.last_seen_complete)),
    _field(f.KEY_TORRENT_AUTO_TORRENT_MANAGEMENT, lambda p: p.torrent.is_auto_tmm_enabled),
    _field(f.KEY_TORRENT_TIME_ACTIVE, lambda p: p.torrent.active_time),
    _field(f.KEY_TORRENT_SEEDING_TIME, lambda p: p.torrent.finished_time),
    _field(f.KEY_TORRENT_LAST_ACTIVITY_TIME, lambda p: last_activity_time(p.torrent, p.now())),
    _field(f.KEY_TORRENT_AVAILABILITY, lambda p: p.torrent.distributed_copies),
    _field(f.KEY_TORRENT_REANNOUNCE, lambda p: p.torrent.next_announce),
    _field(f.KEY_TORRENT_COMMENT, lambda p: p.torrent.comment),
)

CANONICAL_FIELDS: tuple[str, ...] = tuple(spec.name for spec in FIELD_TABLE)


def normalize_fields(fields: Iterable[str] | None) -> frozenset[str] | None:
    """Normalize a caller selector; ``None`` means every field.

    A bare string is one field name. An empty selector selects everything.
    """
    if fields is None:
        return None
    if isinstance(fields, str):
        fields = (fields,)
    selected = frozenset(fields)
    return selected or None


def select_fields(fields: Iterable[str] | None = None) -> list[str]:
    """Known field names chosen by ``fields``, in canonical order."""
    selected = normalize_fields(fields)
    if selected is None:
        return list(CANONICAL_FIELDS)
    return [name for name in CANONICAL_FIELDS if name in selected]


def serialize(
    torrent: Torrent,
    fields: Iterable[str] | None = None,
    *,
    clock: Clock | None = None,
) -> dict[str, Any]:
    """Project ``torrent`` onto the status schema.

    Args:
        torrent: Torrent to read
        fields: Field names to include; empty or None selects every field.
            Unknown names are ignored.
        clock: Source of the current time (default: wall clock)

    Returns:
        Field name to value, in canonical order

    """
    selected = normalize_fields(fields)
    projection = _Projection(torrent, clock or _default_clock)

    result: dict[str, Any] = {}
    for spec in FIELD_TABLE:
        if selected is None or spec.name in selected:
            result[spec.name] = spec.accessor(projection)
    return result
