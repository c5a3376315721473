"""ASCII-only case conversion."""

from __future__ import annotations

_LOWER_TO_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def to_upper(text: str | None) -> str | None:
    """Return a copy of ``text`` with ASCII letters a-z made upper case.

    Every other character is left unchanged. ``None`` gives ``None``.
    """
    if text is None:
        return None
    return text.translate(_LOWER_TO_UPPER)