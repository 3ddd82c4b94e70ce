"""Torrent status serialization.

Projects torrents onto the versioned status schema and packs projections
into binary records.
"""

from __future__ import annotations

from torrentview.serialize.fields import SCHEMA_VERSION
from torrentview.serialize.serialize_binary import (
    count_records,
    decode_records,
    encode_record,
    iter_records,
    serialize_binary,
)
from torrentview.serialize.serialize_torrent import (
    CANONICAL_FIELDS,
    FIELD_TABLE,
    FieldSpec,
    adjust_queue_position,
    adjust_ratio,
    last_activity_time,
    normalize_fields,
    select_fields,
    serialize,
    torrent_state_to_string,
)

__all__ = [
    "CANONICAL_FIELDS",
    "FIELD_TABLE",
    "SCHEMA_VERSION",
    "FieldSpec",
    "adjust_queue_position",
    "adjust_ratio",
    "count_records",
    "decode_records",
    "encode_record",
    "iter_records",
    "last_activity_time",
    "normalize_fields",
    "select_fields",
    "serialize",
    "serialize_binary",
    "torrent_state_to_string",
]
