"""Word normalization rules.

A token is normalized in two fixed steps: everything outside
``[A-Za-z0-9 -]`` is removed, then the remainder is case folded. The result
may be empty when the token held nothing but punctuation.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

NORMALIZER_ID = "ascii-alnum-casefold-v1"

_DISALLOWED_RE = re.compile(r"[^A-Za-z0-9 \-]")


def strip_punctuation(token: str) -> str:
    """Drop every character that is not an ASCII letter, digit, space or hyphen."""
    return _DISALLOWED_RE.sub("", token)


def fold_case(token: str) -> str:
    # casefold is locale independent
    return token.casefold()


def normalize_word(token: str) -> str:
    """Return the canonical comparable form of a single token."""
    return fold_case(strip_punctuation(token))


def normalize_words(tokens: Iterable[str]) -> list[str]:
    """Normalize each token, keeping order and length (empty results included)."""
    return [normalize_word(token) for token in tokens]
