"""Data models for sutra documents and formatting results."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class StructuredParagraph(BaseModel):
    """A typed paragraph such as a mantra (dharani)."""

    model_config = ConfigDict(extra="allow")

    type: str
    title: Optional[str] = None
    text: str


Paragraph = Union[str, StructuredParagraph]


class Chapter(BaseModel):
    """One chapter of a sutra."""

    model_config = ConfigDict(extra="allow")

    title: str
    paragraphs: list[Paragraph] = Field(default_factory=list)


class SutraDocument(BaseModel):
    """Schema of a sutra JSON file as read by the reader."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    title: str
    translator: str
    opening_verse: Optional[list[str]] = Field(default=None, alias="openingVerse")
    chapters: list[Chapter]
    dedication: Optional[list[str]] = None


@dataclass
class ParagraphSplit:
    """A paragraph replaced by several lines."""

    pass_name: str  # "verses" or "lines"
    chapter_index: int
    paragraph_index: int
    lines: list[str]

    @property
    def line_count(self) -> int:
        return len(self.lines)


@dataclass
class DocumentResult:
    """Result of formatting one document."""

    document: dict
    splits: list[ParagraphSplit] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.splits)

    @property
    def new_lines(self) -> int:
        """Number of lines added over the original paragraph count."""
        return sum(split.line_count - 1 for split in self.splits)


@dataclass
class FileResult:
    """Result of formatting one sutra file."""

    path: Path
    modified: bool
    splits: list[ParagraphSplit] = field(default_factory=list)
    dry_run: bool = False
