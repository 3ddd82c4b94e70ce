"""Tests for the torrent status projection."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from torrentview.core.infohash import InfoHash
from torrentview.core.tagset import TagSet
from torrentview.core.torrent import MAX_RATIO, TorrentSnapshot
from torrentview.models import TorrentState
from torrentview.serialize import fields as f
from torrentview.serialize.serialize_torrent import (
    CANONICAL_FIELDS,
    FIELD_TABLE,
    normalize_fields,
    select_fields,
    serialize,
)

pytestmark = [pytest.mark.unit, pytest.mark.serialize]


class TestSchema:
    """Tests for the field table."""

    def test_field_names_are_unique(self):
        """Every schema entry has a distinct name."""
        assert len(set(CANONICAL_FIELDS)) == len(FIELD_TABLE)

    def test_every_key_constant_is_in_schema(self):
        """All KEY_TORRENT_* constants appear in the field table."""
        keys = {
            value for name, value in vars(f).items() if name.startswith("KEY_TORRENT_")
        }
        assert keys == set(CANONICAL_FIELDS)

    def test_canonical_order_starts_with_identity(self):
        """Identity fields lead the canonical order."""
        assert CANONICAL_FIELDS[:4] == ("hash", "infohash_v1", "infohash_v2", "name")
        assert CANONICAL_FIELDS[-1] == "comment"

    def test_select_fields_orders_canonically(self):
        """select_fields ignores selector order and unknown names."""
        assert select_fields(["name", "bogus", "hash"]) == ["hash", "name"]
        assert select_fields(None) == list(CANONICAL_FIELDS)
        assert select_fields([]) == list(CANONICAL_FIELDS)

    def test_normalize_fields(self):
        """Strings are single names; empty selectors mean every field."""
        assert normalize_fields("name") == frozenset({"name"})
        assert normalize_fields(iter(["a", "b", "a"])) == frozenset({"a", "b"})
        assert normalize_fields([]) is None
        assert normalize_fields("") == frozenset({""})
        assert normalize_fields(None) is None


class TestSelection:
    """Tests for field selection."""

    def test_no_selector_returns_all_fields_in_order(self, make_torrent, clock):
        """None selects every field in canonical order."""
        result = serialize(make_torrent(), clock=clock)
        assert list(result) == list(CANONICAL_FIELDS)

    def test_empty_selector_returns_all_fields(self, make_torrent, clock):
        """An empty selector behaves like no selector."""
        torrent = make_torrent()
        assert serialize(torrent, [], clock=clock) == serialize(torrent, clock=clock)
        assert serialize(torrent, set(), clock=clock) == serialize(torrent, clock=clock)

    def test_selector_keeps_canonical_order(self, make_torrent, clock):
        """Output order follows the schema, not the selector."""
        result = serialize(make_torrent(), ["state", "name", "hash"], clock=clock)
        assert list(result) == ["hash", "name", "state"]

    def test_unknown_names_are_ignored(self, make_torrent, clock):
        """Unknown selector entries never raise."""
        result = serialize(make_torrent(), ["name", "no_such_field"], clock=clock)
        assert list(result) == ["name"]

    def test_only_unknown_names_yield_empty_map(self, make_torrent, clock):
        """A selector with no known names selects nothing."""
        assert serialize(make_torrent(), ["nope"], clock=clock) == {}

    def test_single_string_selector(self, make_torrent, clock):
        """A bare string is one field name, not a sequence of characters."""
        assert list(serialize(make_torrent(), "name", clock=clock)) == ["name"]

    def test_partial_is_subset_of_full(self, make_torrent, clock):
        """A partial projection agrees with the full projection."""
        torrent = make_torrent()
        full = serialize(torrent, clock=clock)
        partial = serialize(torrent, ["ratio", "tags", "private"], clock=clock)
        assert partial.items() <= full.items()

    def test_projection_is_repeatable(self, make_torrent, clock):
        """Projecting the same snapshot twice gives identical output."""
        torrent = make_torrent()
        assert serialize(torrent, clock=clock) == serialize(torrent, clock=clock)


class TestValues:
    """Tests for individual field values."""

    def test_direct_reads(self, make_torrent, clock):
        """Plain accessors are copied through."""
        torrent = make_torrent()
        result = serialize(torrent, clock=clock)
        assert result["hash"] == torrent.id
        assert result["infohash_v1"] == torrent.info_hash.v1_hex()
        assert result["infohash_v2"] == ""
        assert result["name"] == torrent.name
        assert result["size"] == 3_000_000_000
        assert result["total_size"] == 4_000_000_000
        assert result["dlspeed"] == 512_000
        assert result["upspeed"] == 64_000
        assert result["num_seeds"] == 12
        assert result["num_complete"] == 340
        assert result["num_leechs"] == 3
        assert result["num_incomplete"] == 25
        assert result["downloaded_session"] == 1_500_000_000
        assert result["uploaded_session"] == 150_000_000
        assert result["availability"] == 14.25
        assert result["reannounce"] == 1800
        assert result["comment"] == "Ubuntu CD releases.ubuntu.com"

    def test_timestamps_are_epoch_seconds(self, make_torrent, clock):
        """Datetime fields become integer epoch seconds; unset ones are -1."""
        result = serialize(make_torrent(), clock=clock)
        assert result["creation_date"] == 1685577600
        assert result["added_on"] == 1703980800
        assert result["completion_on"] == -1
        assert result["seen_complete"] == -1

    def test_paths_render_as_strings(self, make_torrent, clock):
        """Paths become strings; unset paths are empty."""
        result = serialize(make_torrent(), clock=clock)
        assert result["save_path"] == "/downloads"
        assert result["download_path"] == ""

    def test_tags_joined(self, make_torrent, clock):
        """Tags are joined with ', ' in set order."""
        result = serialize(make_torrent(tags=TagSet(["b", "a"])), ["tags"], clock=clock)
        assert result["tags"] == "a, b"

    def test_no_tags_is_empty_string(self, make_torrent, clock):
        """An empty tag set renders as an empty string."""
        result = serialize(make_torrent(tags=TagSet()), ["tags"], clock=clock)
        assert result["tags"] == ""

    def test_trackers_count(self, make_torrent, clock):
        """trackers_count is the number of trackers."""
        assert serialize(make_torrent(), ["trackers_count"], clock=clock) == {"trackers_count": 2}

    def test_queue_position_adjusted(self, make_torrent, clock):
        """Queue position is reported 1-based, 0 when not queued."""
        assert serialize(make_torrent(queue_position=-1), ["priority"], clock=clock) == {"priority": 0}
        assert serialize(make_torrent(queue_position=0), ["priority"], clock=clock) == {"priority": 1}

    def test_ratio_adjusted(self, make_torrent, clock):
        """Ratios at the maximum are reported as -1."""
        assert serialize(make_torrent(real_ratio=MAX_RATIO), ["ratio"], clock=clock) == {"ratio": -1}
        assert serialize(make_torrent(real_ratio=2.5), ["ratio"], clock=clock) == {"ratio": 2.5}

    def test_last_activity_from_clock(self, make_torrent, clock):
        """Active torrents report now minus time since activity."""
        result = serialize(make_torrent(time_since_activity=30), ["last_activity"], clock=clock)
        assert result["last_activity"] == clock.timestamp - 30

    def test_last_activity_never_active(self, make_torrent, clock):
        """Never active torrents report their added time."""
        added = datetime(2023, 12, 31, tzinfo=timezone.utc)
        torrent = make_torrent(time_since_activity=-1, added_time=added)
        result = serialize(torrent, ["last_activity"], clock=clock)
        assert result["last_activity"] == int(added.timestamp())

    def test_state_token(self, make_torrent, clock):
        """The lifecycle state is rendered as its token."""
        torrent = make_torrent(state=TorrentState.STALLED_UPLOADING)
        assert serialize(torrent, ["state"], clock=clock) == {"state": "stalledUP"}

    def test_v2_only_torrent(self, make_torrent, clock):
        """A v2-only torrent uses the truncated v2 hash as its id."""
        v2 = bytes(range(32))
        torrent = make_torrent(info_hash=InfoHash(v2=v2))
        result = serialize(torrent, ["hash", "infohash_v1", "infohash_v2"], clock=clock)
        assert result == {"hash": v2[:20].hex(), "infohash_v1": "", "infohash_v2": v2.hex()}


class TestMetadataGating:
    """Tests for torrents without metadata."""

    def test_private_unknown_without_metadata(self, make_torrent, clock):
        """Privacy is None, not False, before metadata arrives."""
        torrent = make_torrent(has_metadata=False, is_private=False)
        result = serialize(torrent, ["has_metadata", "private"], clock=clock)
        assert result == {"has_metadata": False, "private": None}

    def test_private_reported_with_metadata(self, make_torrent, clock):
        """Privacy is reported once metadata is present."""
        result = serialize(make_torrent(is_private=True), ["private"], clock=clock)
        assert result == {"private": True}

    def test_bare_snapshot_projects_safely(self, clock):
        """A freshly added magnet torrent projects without faulting."""
        torrent = TorrentSnapshot(
            info_hash=InfoHash.from_hex(v1="aa" * 20),
            state=TorrentState.DOWNLOADING_METADATA,
        )
        result = serialize(torrent, clock=clock)
        assert result["private"] is None
        assert result["created_by"] == ""
        assert result["creation_date"] == -1
        assert result["pieces_num"] == 0
        assert result["state"] == "metaDL"
        assert result["last_activity"] == -1
        assert result["magnet_uri"] == f"magnet:?xt=urn:btih:{'aa' * 20}"
