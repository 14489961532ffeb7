"""Text helpers for Chinese verse text."""

import re
from functools import lru_cache

# Han Unicode range (CJK Unified Ideographs)
HAN_RANGE = r"[\u4e00-\u9fff]"

OPEN_QUOTE = "「"
CLOSE_QUOTE = "」"

_han_pattern = re.compile(HAN_RANGE)


def strip_quotes(text: str) -> tuple[str, str, str]:
    """Detach one leading 「 and one trailing 」 from text.

    Nested or repeated quote marks are left inside the content.

    Args:
        text: Input text

    Returns:
        Tuple of (prefix, content, suffix)
    """
    prefix = ""
    suffix = ""
    content = text

    if content.startswith(OPEN_QUOTE):
        prefix = OPEN_QUOTE
        content = content[1:]
    if content.endswith(CLOSE_QUOTE):
        suffix = CLOSE_QUOTE
        content = content[:-1]

    return prefix, content, suffix


def attach_quotes(lines: list[str], prefix: str, suffix: str) -> list[str]:
    """Put the quote marks back on the first and last line."""
    if not lines:
        return lines
    lines = list(lines)
    lines[0] = prefix + lines[0]
    lines[-1] = lines[-1] + suffix
    return lines


@lru_cache(maxsize=None)
def phrase_pattern(punctuation: str) -> re.Pattern:
    """Compile the pattern for one punctuation-terminated phrase.

    Matches the longest run of non-punctuation characters followed by
    exactly one punctuation mark.

    Args:
        punctuation: Characters that end a phrase

    Returns:
        Compiled pattern
    """
    marks = "".join(re.escape(ch) for ch in punctuation)
    return re.compile(f"[^{marks}]+[{marks}]")


def find_phrases(text: str, punctuation: str) -> list[str]:
    """Return every punctuation-terminated phrase in text.

    Trailing characters with no terminal punctuation are not returned.
    """
    return phrase_pattern(punctuation).findall(text)


def count_punctuation(text: str, punctuation: str) -> int:
    """Count the characters of text that belong to punctuation."""
    return sum(1 for ch in text if ch in punctuation)


def han_ratio(text: str) -> float:
    """Fraction of characters in the CJK Unified Ideographs range.

    Args:
        text: Input text

    Returns:
        Ratio in [0, 1]; 0.0 for empty text
    """
    if not text:
        return 0.0
    return len(_han_pattern.findall(text)) / len(text)
