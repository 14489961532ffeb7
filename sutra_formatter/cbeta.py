"""Import CBETA plain-text sources as sutra documents."""

import logging
from pathlib import Path
from typing import Iterable, Optional

from .script_converter import to_simplified

logger = logging.getLogger(__name__)

# 开经偈
DEFAULT_OPENING_VERSE = [
    "无上甚深微妙法",
    "百千万劫难遭遇",
    "我今见闻得受持",
    "愿解如来真实义",
]

# 回向文
DEFAULT_DEDICATION = [
    "愿以此功德",
    "庄严佛净土",
    "上报四重恩",
    "下济三途苦",
    "若有见闻者",
    "悉发菩提心",
    "尽此一报身",
    "同生极乐国",
]

# A line holding all of these is the translator credit
TRANSLATOR_MARKERS = ("三藏", "譯")


def parse_source(
    content: str,
    skip_titles: Iterable[str] = (),
    translator_markers: Iterable[str] = TRANSLATOR_MARKERS,
) -> list[str]:
    """Extract body paragraphs from a CBETA text file.

    Header comments (``#``), catalog numbers (``No.``), blank lines, title
    lines and the translator credit are skipped. Every other line becomes
    one paragraph.

    Args:
        content: Full text of the source file
        skip_titles: Exact lines to drop (the sutra title, usually repeated
            at the start and the end)
        translator_markers: Substrings that together identify the
            translator line

    Returns:
        Paragraphs in source order
    """
    skip_titles = set(skip_titles)
    translator_markers = tuple(translator_markers)
    paragraphs = []

    for line in content.splitlines():
        if line.startswith("#") or line.startswith("No."):
            continue

        line = line.strip()
        if not line:
            continue
        if line in skip_titles:
            continue
        if translator_markers and all(marker in line for marker in translator_markers):
            continue

        paragraphs.append(line)

    return paragraphs


def build_document(
    paragraphs: list[str],
    sutra_id: str,
    title: str,
    translator: str,
    chapter_title: Optional[str] = None,
    opening_verse: Optional[list[str]] = None,
    dedication: Optional[list[str]] = None,
    simplify: bool = True,
) -> dict:
    """Build a single-chapter sutra document.

    Args:
        paragraphs: Body paragraphs
        sutra_id: Document id (also the file stem)
        title: Sutra title
        translator: Translator credit
        chapter_title: Title of the only chapter (default: the sutra title)
        opening_verse: Opening verse lines (default: 开经偈)
        dedication: Dedication lines (default: 回向文)
        simplify: Convert paragraphs to Simplified characters

    Returns:
        Sutra document ready to be written
    """
    if simplify:
        paragraphs = [to_simplified(p) for p in paragraphs]

    return {
        "id": sutra_id,
        "title": title,
        "translator": translator,
        "openingVerse": list(opening_verse if opening_verse is not None else DEFAULT_OPENING_VERSE),
        "chapters": [
            {
                "title": chapter_title or title,
                "paragraphs": list(paragraphs),
            }
        ],
        "dedication": list(dedication if dedication is not None else DEFAULT_DEDICATION),
    }


def import_source(
    source_path: str | Path,
    sutra_id: str,
    title: str,
    translator: str,
    source_title: Optional[str] = None,
    chapter_title: Optional[str] = None,
    simplify: bool = True,
) -> dict:
    """Read a CBETA text file and build a sutra document from it.

    Args:
        source_path: Path to the CBETA ``.txt`` file
        sutra_id: Document id
        title: Sutra title
        translator: Translator credit
        source_title: Title line as written in the source (default: title)
        chapter_title: Title of the only chapter
        simplify: Convert paragraphs to Simplified characters

    Returns:
        Sutra document
    """
    source_path = Path(source_path)
    with open(source_path, "r", encoding="utf-8") as f:
        content = f.read()

    skip_titles = {source_title or title, title}
    paragraphs = parse_source(content, skip_titles=skip_titles)
    logger.info("Found %d paragraphs in %s", len(paragraphs), source_path)

    return build_document(
        paragraphs,
        sutra_id=sutra_id,
        title=title,
        translator=translator,
        chapter_title=chapter_title,
        simplify=simplify,
    )
