"""Torrent info hashes (BEP 3 SHA-1 and BEP 52 SHA-256)."""

from __future__ import annotations

from dataclasses import dataclass

SHA1_LENGTH = 20
SHA256_LENGTH = 32


@dataclass(frozen=True)
class InfoHash:
    """Pair of v1/v2 info hashes; hybrid torrents carry both."""

    v1: bytes | None = None
    v2: bytes | None = None

    def __post_init__(self) -> None:
        if self.v1 is not None and len(self.v1) != SHA1_LENGTH:
            msg = f"v1 info hash must be {SHA1_LENGTH} bytes, got {len(self.v1)}"
            raise ValueError(msg)
        if self.v2 is not None and len(self.v2) != SHA256_LENGTH:
            msg = f"v2 info hash must be {SHA256_LENGTH} bytes, got {len(self.v2)}"
            raise ValueError(msg)

    @classmethod
    def from_hex(cls, v1: str | None = None, v2: str | None = None) -> InfoHash:
        """Build from hex strings; empty strings count as absent."""
        return cls(
            v1=bytes.fromhex(v1) if v1 else None,
            v2=bytes.fromhex(v2) if v2 else None,
        )

    @property
    def has_v1(self) -> bool:
        return self.v1 is not None

    @property
    def has_v2(self) -> bool:
        return self.v2 is not None

    def is_valid(self) -> bool:
        return self.has_v1 or self.has_v2

    def v1_hex(self) -> str:
        """Hex digest of the v1 hash, empty when absent."""
        return self.v1.hex() if self.v1 is not None else ""

    def v2_hex(self) -> str:
        """Hex digest of the v2 hash, empty when absent."""
        return self.v2.hex() if self.v2 is not None else ""

    def to_torrent_id(self) -> str:
        """Torrent ID: the v1 hash, or the v2 hash truncated to 20 bytes."""
        if self.v1 is not None:
            return self.v1.hex()
        if self.v2 is not None:
            return self.v2[:SHA1_LENGTH].hex()
        return ""
