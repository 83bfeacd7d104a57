"""Template tokenizer.

Splits a template into literal text and placeholder tags. Only the placeholder
syntax is understood; the surrounding SQL is opaque.
"""

from __future__ import annotations

import re

from hintdb.core.types import PlaceholderKind

PLACEHOLDER_PATTERN = re.compile(r"(\?[nsiuapv])", re.IGNORECASE)


def tokenize(template: str) -> list[str]:
    """Split a template into alternating literal and placeholder segments.

    Even indices hold literal text (possibly empty), odd indices hold the
    two-character placeholder tags, so joining the segments gives back the
    template unchanged.

    Examples:
        "SELECT * FROM ?n WHERE id=?i" -> ["SELECT * FROM ", "?n", " WHERE id=", "?i", ""]
        "?s?s" -> ["", "?s", "", "?s", ""]

    Args:
        template: Template string

    Returns:
        List of segments with an odd length
    """
    return PLACEHOLDER_PATTERN.split(template)


def count_placeholders(template: str) -> int:
    """Return the number of placeholders in a template."""
    return len(tokenize(template)) // 2


def placeholder_kind(tag: str) -> PlaceholderKind:
    """Map a tag such as ``?S`` to its placeholder kind."""
    return PlaceholderKind(tag[1:].lower())
