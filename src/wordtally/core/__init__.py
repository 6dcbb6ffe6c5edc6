"""Counting pipeline."""

from wordtally.core.aggregate import aggregate, merge_tallies, rank, tally
from wordtally.core.pipeline import count_words, run_count

__all__ = ["aggregate", "count_words", "merge_tallies", "rank", "run_count", "tally"]
