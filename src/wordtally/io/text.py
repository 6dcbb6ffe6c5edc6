"""Input text readers."""

from __future__ import annotations

import sys
from pathlib import Path


def read_text(source: str) -> str:
    """Resolve a CLI text argument.

    ``-`` reads stdin, an existing file path is read as UTF-8, and anything
    else is taken as the literal text.
    """
    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    try:
        is_file = path.is_file()
    except (OSError, ValueError):
        is_file = False
    if is_file:
        return path.read_text(encoding="utf-8")
    return source
