"""Verse-line segmentation for liturgical Chinese text.

Two independent passes split a paragraph into display lines:

- ``split_verses`` breaks a paragraph on the full-width double-space
  separator, then breaks each piece further on ``，`` / ``。``.
- ``split_verse_line`` breaks a short verse-looking line on clause-terminal
  punctuation (``，。？！``).

Each pass has a matching predicate deciding whether a paragraph should be
handed to it. All functions are pure.
"""

from .utils.text import (
    attach_quotes,
    count_punctuation,
    find_phrases,
    han_ratio,
    strip_quotes,
)

# Two full-width spaces (U+3000) join verse lines in source texts
VERSE_SEPARATOR = "\u3000\u3000"

# Phrase endings used after the separator split
VERSE_PUNCTUATION = "，。"

# Clause-terminal punctuation
CLAUSE_PUNCTUATION = "，。？！"

MIN_LINE_LENGTH = 10
MAX_LINE_LENGTH = 60
MIN_PUNCTUATION = 2
MIN_HAN_RATIO = 0.8


def is_verse_paragraph(text: str, separator: str = VERSE_SEPARATOR) -> bool:
    """Check whether a paragraph joins verse lines with the separator."""
    return separator in text


def is_verse_line(
    text: str,
    min_length: int = MIN_LINE_LENGTH,
    max_length: int = MAX_LINE_LENGTH,
    min_punctuation: int = MIN_PUNCTUATION,
    min_han_ratio: float = MIN_HAN_RATIO,
    punctuation: str = CLAUSE_PUNCTUATION,
) -> bool:
    """Check whether a line looks like a verse worth splitting.

    Verses are short, mostly Han characters, and carry a regular pattern
    of clause-terminal punctuation. Short titles, prose paragraphs and
    mixed-script lines are rejected.

    Args:
        text: Line to check
        min_length: Minimum line length (inclusive)
        max_length: Maximum line length (inclusive)
        min_punctuation: Minimum number of punctuation marks
        min_han_ratio: Han character ratio the line must exceed
        punctuation: Clause-terminal punctuation marks

    Returns:
        True if all conditions hold
    """
    if len(text) > max_length or len(text) < min_length:
        return False

    marks = count_punctuation(text, punctuation)
    if marks == 0 or marks < min_punctuation:
        return False

    return han_ratio(text) > min_han_ratio


def split_verses(
    text: str,
    separator: str = VERSE_SEPARATOR,
    punctuation: str = VERSE_PUNCTUATION,
) -> list[str]:
    """Split a separator-joined verse paragraph into lines.

    The content is cut on every separator; each piece holding more than one
    punctuation-terminated phrase is cut again so that every phrase gets
    its own line. A trailing fragment without punctuation is dropped in
    that case. Pieces with a single phrase are kept whole.

    Args:
        text: Paragraph text
        separator: Verse-line separator
        punctuation: Phrase-ending punctuation

    Returns:
        Verse lines, with the outer quote marks on the first and last line
    """
    prefix, content, suffix = strip_quotes(text)

    rough_lines = [line.strip() for line in content.split(separator)]
    rough_lines = [line for line in rough_lines if line]

    lines = []
    for line in rough_lines:
        phrases = find_phrases(line, punctuation)
        if len(phrases) > 1:
            for phrase in phrases:
                phrase = phrase.strip()
                if phrase:
                    lines.append(phrase)
        else:
            lines.append(line)

    return attach_quotes(lines, prefix, suffix)


def split_verse_line(
    text: str,
    punctuation: str = CLAUSE_PUNCTUATION,
) -> list[str]:
    """Split one verse line into its punctuation-terminated phrases.

    Args:
        text: Line text
        punctuation: Clause-terminal punctuation

    Returns:
        Phrases with the outer quote marks restored, or ``[text]`` when the
        line holds fewer than two phrases
    """
    if not text.strip():
        return []

    prefix, content, suffix = strip_quotes(text)

    phrases = find_phrases(content, punctuation)
    if len(phrases) <= 1:
        return [text]

    lines = [phrase.strip() for phrase in phrases]
    lines = [line for line in lines if line]

    return attach_quotes(lines, prefix, suffix)
