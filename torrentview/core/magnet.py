"""Magnet link generation (BEP 9, with BEP 52 ``btmh`` topics)."""

from __future__ import annotations

import urllib.parse

from torrentview.core.infohash import InfoHash

# multihash prefix for sha2-256 with a 32 byte digest
_SHA256_MULTIHASH_PREFIX = "1220"
_URL_SAFE = ":/?#[]@!$'()*,;"


def generate_magnet_link(
    info_hash: InfoHash,
    display_name: str | None = None,
    trackers: list[str] | None = None,
    web_seeds: list[str] | None = None,
) -> str:
    """Generate a magnet URI.

    Args:
        info_hash: v1 and/or v2 info hash
        display_name: Optional display name (dn parameter)
        trackers: Optional list of tracker URLs (tr parameters)
        web_seeds: Optional list of web seed URLs (ws parameters)

    Returns:
        Complete magnet URI string, or an empty string when ``info_hash``
        holds no hash

    """
    topics = []
    if info_hash.has_v1:
        topics.append(f"xt=urn:btih:{info_hash.v1_hex()}")
    if info_hash.has_v2:
        topics.append(f"xt=urn:btmh:{_SHA256_MULTIHASH_PREFIX}{info_hash.v2_hex()}")
    if not topics:
        return ""

    parts = list(topics)

    if display_name:
        parts.append(f"dn={urllib.parse.quote(display_name)}")

    for tracker in trackers or ():
        parts.append(f"tr={urllib.parse.quote(tracker, safe=_URL_SAFE)}")

    for web_seed in web_seeds or ():
        parts.append(f"ws={urllib.parse.quote(web_seed, safe=_URL_SAFE)}")

    return "magnet:?" + "&".join(parts)
