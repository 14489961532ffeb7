"""Utility functions."""

from .text import (
    CLOSE_QUOTE,
    OPEN_QUOTE,
    attach_quotes,
    count_punctuation,
    find_phrases,
    han_ratio,
    strip_quotes,
)

__all__ = [
    "CLOSE_QUOTE",
    "OPEN_QUOTE",
    "attach_quotes",
    "count_punctuation",
    "find_phrases",
    "han_ratio",
    "strip_quotes",
]
