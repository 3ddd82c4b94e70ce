"""Pytest configuration and shared fixtures for torrentview tests."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from pathlib import PurePosixPath
from typing import Any

import pytest

from torrentview.core.infohash import InfoHash
from torrentview.core.tagset import TagSet
from torrentview.core.torrent import TorrentSnapshot
from torrentview.models import TorrentState
from torrentview.utils.exceptions import TorrentRemovedError
from torrentview.utils.time import FixedClock

# 2024-01-01T00:00:00Z
NOW = 1704067200


def pytest_configure(config):
    """Register all project markers to avoid warnings when ini isn't loaded."""
    markers = [
        ("unit", "marks tests as unit tests"),
        ("serialize", "marks tests as projection/record tests"),
        ("export", "marks tests as collection export tests"),
        ("session", "marks tests as resource manager tests"),
        ("api", "marks tests as HTTP API tests"),
        ("cli", "marks tests as CLI tests"),
        ("config", "marks tests as configuration tests"),
        ("property", "marks tests as property-based tests"),
        ("slow", "marks tests as slow (deselect with '-m \"not slow\"')"),
    ]
    for name, desc in markers:
        config.addinivalue_line("markers", f"{name}: {desc}")


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    """Keep config discovery away from the developer's files."""
    for name in list(os.environ):
        if name.startswith("TORRENTVIEW_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


@pytest.fixture(autouse=True)
def cleanup_logging():
    """Clean up logging handlers after each test to prevent closed file errors."""
    yield
    for logger_name in list(logging.Logger.manager.loggerDict.keys()):
        logger = logging.getLogger(logger_name)
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    # setup_logging detaches the package logger from root; caplog needs it back
    package_logger = logging.getLogger("torrentview")
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def clock():
    """Clock frozen at NOW."""
    return FixedClock(NOW)


@pytest.fixture
def make_torrent():
    """Factory for fully populated torrent snapshots."""
    counter = iter(range(1, 10_000))

    def _make(**overrides: Any) -> TorrentSnapshot:
        n = next(counter)
        values: dict[str, Any] = {
            "info_hash": InfoHash(v1=bytes([n % 256]) * 20),
            "name": f"ubuntu-{n}.iso",
            "has_metadata": True,
            "creator": "mktorrent 1.1",
            "creation_date": datetime(2023, 6, 1, tzinfo=timezone.utc),
            "comment": "Ubuntu CD releases.ubuntu.com",
            "is_private": False,
            "total_size": 4_000_000_000,
            "wanted_size": 3_000_000_000,
            "progress": 0.5,
            "pieces_count": 1908,
            "piece_length": 2_097_152,
            "pieces_have": 954,
            "wasted_size": 1024,
            "remaining_size": 1_500_000_000,
            "completed_size": 1_500_000_000,
            "download_payload_rate": 512_000,
            "upload_payload_rate": 64_000,
            "total_download": 1_600_000_000,
            "total_upload": 200_000_000,
            "total_payload_download": 1_500_000_000,
            "total_payload_upload": 150_000_000,
            "queue_position": 2,
            "seeds_count": 12,
            "total_seeds_count": 340,
            "leechs_count": 3,
            "total_leechers_count": 25,
            "connections_count": 15,
            "connections_limit": 100,
            "distributed_copies": 14.25,
            "popularity": 0.1,
            "state": TorrentState.DOWNLOADING,
            "eta": 3000,
            "category": "linux",
            "tags": TagSet(["iso", "distro"]),
            "save_path": PurePosixPath("/downloads"),
            "content_path": PurePosixPath(f"/downloads/ubuntu-{n}.iso"),
            "root_path": PurePosixPath(f"/downloads/ubuntu-{n}.iso"),
            "added_time": datetime(2023, 12, 31, tzinfo=timezone.utc),
            "time_since_activity": 30,
            "active_time": 86_400,
            "next_announce": 1800,
            "current_tracker": "https://torrent.ubuntu.com/announce",
            "trackers": ("https://torrent.ubuntu.com/announce", "udp://tracker.example:6969"),
            "real_ratio": 0.125,
        }
        values.update(overrides)
        return TorrentSnapshot(**values)

    return _make


class VanishingTorrent:
    """Torrent whose accessors fail as if it was removed after enumeration."""

    def __init__(self, snapshot: TorrentSnapshot):
        self._snapshot = snapshot
        self.removed = False

    @property
    def id(self) -> str:
        return self._snapshot.id

    def __getattr__(self, name: str) -> Any:
        if self.__dict__.get("removed"):
            raise TorrentRemovedError("Torrent no longer exists", {"attribute": name})
        return getattr(self.__dict__["_snapshot"], name)


@pytest.fixture
def vanishing_torrent(make_torrent):
    """Factory for torrents that can be marked removed."""

    def _make(**overrides: Any) -> VanishingTorrent:
        return VanishingTorrent(make_torrent(**overrides))

    return _make
