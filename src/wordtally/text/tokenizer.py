"""Whitespace tokenizer."""

from __future__ import annotations

import re
from collections.abc import Iterator

_TOKEN_RE = re.compile(r"\S+")


def iter_tokens(text: str) -> Iterator[str]:
    """Yield maximal runs of non-whitespace characters, left to right."""
    for match in _TOKEN_RE.finditer(text):
        yield match.group(0)


def tokenize(text: str) -> list[str]:
    """Split text into whitespace-delimited tokens."""
    return _TOKEN_RE.findall(text)
