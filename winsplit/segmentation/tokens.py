"""Whitespace tokenization."""

from __future__ import annotations

import re

# Unicode White_Space property. str.split() also breaks on the \x1c-\x1f
# separator controls, which are not White_Space.
_WHITESPACE = re.compile(
    "[\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


def tokenize(text: str) -> list[str]:
    """Split on runs of Unicode whitespace, dropping empty fragments."""
    return [t for t in _WHITESPACE.split(text) if t]
