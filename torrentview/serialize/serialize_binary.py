"""Binary records for bulk status dumps.

Each record is one msgpack map holding a projection. Records are
self-delimiting, so a dump is simply their concatenation.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

import msgpack

from torrentview.core.torrent import Torrent
from torrentview.serialize.serialize_torrent import serialize
from torrentview.utils.exceptions import RecordDecodeError
from torrentview.utils.time import Clock


def encode_record(projection: dict[str, Any]) -> bytes:
    """Pack one projection into a binary record."""
    return msgpack.packb(projection, use_bin_type=True)


def serialize_binary(
    torrent: Torrent,
    fields: Iterable[str] | None = None,
    *,
    clock: Clock | None = None,
) -> bytes:
    """Project ``torrent`` and pack the result as one binary record."""
    return encode_record(serialize(torrent, fields, clock=clock))


def iter_records(data: bytes) -> Iterator[dict[str, Any]]:
    """Yield the projections stored in a concatenated record stream.

    Raises:
        RecordDecodeError: If the stream is truncated or a record is not a map

    """
    # The whole stream is already in memory; the buffer must hold all of it
    unpacker = msgpack.Unpacker(
        raw=False,
        strict_map_key=True,
        max_buffer_size=max(len(data), 1),
    )
    index = 0
    consumed = 0
    try:
        unpacker.feed(data)
        while consumed < len(data):
            record = unpacker.unpack()
            consumed = unpacker.tell()
            if not isinstance(record, dict):
                msg = "Record is not a map"
                raise RecordDecodeError(msg, {"index": index, "type": type(record).__name__})
            yield record
            index += 1
    except msgpack.OutOfData as e:
        msg = "Truncated record stream"
        raise RecordDecodeError(msg, {"index": index, "offset": consumed}) from e
    except (
        msgpack.BufferFull,
        msgpack.ExtraData,
        msgpack.FormatError,
        msgpack.StackError,
        ValueError,
    ) as e:
        msg = f"Malformed record stream: {e}"
        raise RecordDecodeError(msg, {"index": index}) from e


def decode_records(data: bytes) -> list[dict[str, Any]]:
    """Decode a whole record stream into a list."""
    return list(iter_records(data))


def count_records(data: bytes) -> int:
    """Number of records in a stream."""
    return sum(1 for _ in iter_records(data))
