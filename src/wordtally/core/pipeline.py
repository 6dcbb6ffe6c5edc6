"""Text to ordered word-count pipeline."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from wordtally.core.aggregate import TIE_BREAK, aggregate, rank, tally
from wordtally.models import CountMetadata, CountRequest, CountResponse, WordCount
from wordtally.text import NORMALIZER_ID, iter_tokens, normalize_words, tokenize

logger = logging.getLogger(__name__)


def count_words(text: str | None) -> list[WordCount]:
    """Count normalized words in ``text``, most frequent first."""
    return aggregate(normalize_words(iter_tokens(_coerce_text(text))))


def run_count(request: CountRequest) -> CountResponse:
    """Count words for a request and describe how the result was produced."""
    tokens = tokenize(request.text)
    normalized = normalize_words(tokens)
    counts = tally(normalized)
    words = rank(counts, limit=request.limit, min_count=request.min_count)

    word_count = sum(counts.values())
    logger.debug(
        "counted %d tokens into %d distinct words (%d returned)",
        len(tokens),
        len(counts),
        len(words),
    )
    metadata = CountMetadata(
        normalizer_id=NORMALIZER_ID,
        tie_break=TIE_BREAK,
        token_count=len(tokens),
        dropped_token_count=len(tokens) - word_count,
        word_count=word_count,
        distinct_word_count=len(counts),
        generated_at=datetime.now(UTC),
    )
    return CountResponse(metadata=metadata, words=words)


def _coerce_text(text: object) -> str:
    if text is None:
        return ""
    if not isinstance(text, str):
        raise TypeError(f"text must be a string, got type {type(text).__name__}")
    return text
