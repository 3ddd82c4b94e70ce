"""Torrent tag collection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from torrentview.utils.exceptions import TagError


def validate_tag(tag: str) -> str:
    """Return the normalized tag or raise :class:`TagError`."""
    normalized = tag.strip()
    if not normalized:
        msg = "Tag must not be empty"
        raise TagError(msg, {"tag": tag})
    if "," in normalized:
        msg = "Tag must not contain ','"
        raise TagError(msg, {"tag": tag})
    return normalized


class TagSet:
    """Immutable set of tags iterating in sorted order."""

    __slots__ = ("_tags",)

    def __init__(self, tags: Iterable[str] = ()):
        self._tags: tuple[str, ...] = tuple(sorted({validate_tag(t) for t in tags}))

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, str) and tag.strip() in self._tags

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TagSet):
            return self._tags == other._tags
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._tags)

    def __repr__(self) -> str:
        return f"TagSet({list(self._tags)!r})"

    def with_tag(self, tag: str) -> TagSet:
        """Return a copy that also contains ``tag``."""
        return TagSet((*self._tags, tag))

    def without_tag(self, tag: str) -> TagSet:
        """Return a copy without ``tag``."""
        return TagSet(t for t in self._tags if t != tag.strip())
