"""Stable cache keys for analyzed queries."""

from __future__ import annotations

import hashlib

GENERIC_THEME = "generic"
NEUTRAL_CONTEXT = "neutral"
HASH_LENGTH = 8


def stable_hash(theme: str | None, context: str | None) -> str:
    """8-hex digest of ``"{theme}:{context}"`` with generic/neutral defaults.

    Only theme and context feed the key. Queries that differ in mood,
    vibe, energy, motion or colors but share both collapse to one entry.

    Example:
        >>> stable_hash("wedding", "party") == stable_hash("wedding", "party")
        True
        >>> stable_hash(None, None) == stable_hash("generic", "neutral")
        True
    """
    text = f"{theme or GENERIC_THEME}:{context or NEUTRAL_CONTEXT}"
    return hashlib.sha256(text.encode("utf-8")).hexdigest()[:HASH_LENGTH]
