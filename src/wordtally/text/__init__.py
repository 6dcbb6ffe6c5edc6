"""Tokenization and word normalization."""

from wordtally.text.normalizer import (
    NORMALIZER_ID,
    fold_case,
    normalize_word,
    normalize_words,
    strip_punctuation,
)
from wordtally.text.tokenizer import iter_tokens, tokenize

__all__ = [
    "NORMALIZER_ID",
    "fold_case",
    "iter_tokens",
    "normalize_word",
    "normalize_words",
    "strip_punctuation",
    "tokenize",
]
