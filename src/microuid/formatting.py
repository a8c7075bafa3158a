"""Split identifiers into short groups that are easy to read aloud and retype."""

from __future__ import annotations

__all__ = ["SEPARATOR", "format_with_separator", "group_sizes", "strip_separators"]

SEPARATOR = "-"


def group_sizes(length: int) -> list[int] | None:
    """Return the group plan for ``length`` symbols, or ``None`` if none exists.

    Prefers as many four-symbol groups as possible. The three-symbol groups are
    split around them with the larger half first, so ``10`` becomes
    ``[3, 4, 3]`` and ``11`` becomes ``[3, 4, 4]``.
    """

    for fours in range(length // 4, -1, -1):
        rest = length - fours * 4
        if rest % 3 == 0:
            threes = rest // 3
            leading = (threes + 1) // 2
            return [3] * leading + [4] * fours + [3] * (threes - leading)
    return None


def format_with_separator(raw: str, separator: str = SEPARATOR) -> str:
    """Insert ``separator`` between the groups of ``raw``.

    Lengths with no plan (1, 2 and 5) are returned unchanged.
    """

    sizes = group_sizes(len(raw))
    if not sizes:
        return raw
    groups: list[str] = []
    position = 0
    for size in sizes:
        groups.append(raw[position : position + size])
        position += size
    return separator.join(groups)


def strip_separators(uid: str, separator: str = SEPARATOR) -> str:
    return uid.replace(separator, "")
