"""wordtally package."""

from wordtally.core import count_words

__version__ = "0.1.0"

__all__ = ["__version__", "count_words"]
