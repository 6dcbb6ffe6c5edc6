"""Word tallying and frequency ordering."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping

from wordtally.models import WordCount

TIE_BREAK = "first_occurrence"


def tally(words: Iterable[str]) -> dict[str, int]:
    """Count each distinct non-empty word in a single pass.

    Empty strings (tokens that were pure punctuation) are not words and are
    skipped. Keys keep the order in which each word first appeared.
    """
    return dict(Counter(word for word in words if word))


def merge_tallies(*tallies: Mapping[str, int]) -> dict[str, int]:
    """Sum partial tallies.

    Counts do not depend on argument order; key order follows the first
    tally each word appears in.
    """
    merged: dict[str, int] = {}
    for partial in tallies:
        for word, count in partial.items():
            if count < 1:
                raise ValueError(f"count for {word!r} must be positive, got {count}")
            merged[word] = merged.get(word, 0) + count
    return merged


def rank(
    counts: Mapping[str, int],
    *,
    limit: int | None = None,
    min_count: int = 1,
) -> list[WordCount]:
    """Order a tally by descending count.

    ``sorted`` is stable, so words with equal counts stay in first-occurrence
    order. ``min_count`` and ``limit`` are applied after ordering.
    """
    if limit is not None and limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")
    ordered = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    ranked = [WordCount(word=word, count=count) for word, count in ordered if count >= min_count]
    if limit is not None:
        return ranked[:limit]
    return ranked


def aggregate(words: Iterable[str]) -> list[WordCount]:
    """Tally normalized words and return them ordered by frequency."""
    return rank(tally(words))
