"""Sutra formatter - split verse text in sutra JSON documents."""

__version__ = "0.1.0"

from .config import Config, OutputConfig, SplitConfig
from .pipeline import FormattingPipeline
from .segmenter import is_verse_line, is_verse_paragraph, split_verse_line, split_verses

__all__ = [
    "Config",
    "FormattingPipeline",
    "OutputConfig",
    "SplitConfig",
    "is_verse_line",
    "is_verse_paragraph",
    "split_verse_line",
    "split_verses",
]
