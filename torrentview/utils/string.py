"""String helpers."""

from __future__ import annotations

from collections.abc import Iterable


def join_into_string(items: Iterable[object], separator: str) -> str:
    """Join the string form of ``items`` in iteration order."""
    return separator.join(str(item) for item in items)


def split_to_list(value: str, separators: str = ",|") -> list[str]:
    """Split ``value`` on any of ``separators``, dropping blanks.

    Used for field selectors coming from query strings and env vars.
    """
    parts = [value]
    for sep in separators:
        parts = [piece for part in parts for piece in part.split(sep)]
    return [part.strip() for part in parts if part.strip()]
