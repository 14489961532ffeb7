"""Formatting pipeline that applies the verse segmenter to sutra files."""

import copy
import logging
from pathlib import Path
from typing import Iterable, Optional

from tqdm import tqdm

from .config import Config
from .data import list_sutra_files, load_document, write_document
from .models import DocumentResult, FileResult, ParagraphSplit
from .segmenter import is_verse_line, is_verse_paragraph, split_verse_line, split_verses

logger = logging.getLogger(__name__)

# Pass names, in the order they are meant to run
PASSES = ("verses", "lines")


class FormattingPipeline:
    """Pipeline for splitting verse paragraphs in sutra documents."""

    def __init__(self, config: Config, passes: Iterable[str] = ("verses",)):
        """Initialize formatting pipeline.

        Args:
            config: Pipeline configuration
            passes: Segmentation passes to apply, in order
        """
        self.config = config
        self.passes = tuple(passes)

        unknown = [name for name in self.passes if name not in PASSES]
        if unknown:
            raise ValueError(f"Unknown pass(es): {', '.join(unknown)}")
        if not self.passes:
            raise ValueError("At least one pass is required")

    def split_paragraph(self, pass_name: str, text: str) -> Optional[list[str]]:
        """Split one string paragraph with the given pass.

        Args:
            pass_name: "verses" or "lines"
            text: Paragraph text

        Returns:
            Replacement lines, or None when the paragraph stays as it is
        """
        split = self.config.split

        if pass_name == "verses":
            if not is_verse_paragraph(text, separator=split.verse_separator):
                return None
            lines = split_verses(
                text,
                separator=split.verse_separator,
                punctuation=split.verse_punctuation,
            )
        else:
            if not is_verse_line(
                text,
                min_length=split.min_line_length,
                max_length=split.max_line_length,
                min_punctuation=split.min_punctuation,
                min_han_ratio=split.min_han_ratio,
                punctuation=split.line_punctuation,
            ):
                return None
            lines = split_verse_line(text, punctuation=split.line_punctuation)

        if lines == [text]:
            return None
        return lines

    def _apply_pass(self, document: dict, pass_name: str) -> list[ParagraphSplit]:
        """Rewrite every chapter of a document with one pass."""
        splits = []

        for chapter_index, chapter in enumerate(document["chapters"]):
            new_paragraphs = []

            for paragraph_index, paragraph in enumerate(chapter["paragraphs"]):
                # Structured paragraphs (mantras) are never split
                if not isinstance(paragraph, str):
                    new_paragraphs.append(paragraph)
                    continue

                lines = self.split_paragraph(pass_name, paragraph)
                if lines is None:
                    new_paragraphs.append(paragraph)
                    continue

                logger.debug(
                    "%s pass: chapter %d paragraph %d -> %d lines",
                    pass_name, chapter_index + 1, paragraph_index + 1, len(lines),
                )
                new_paragraphs.extend(lines)
                splits.append(
                    ParagraphSplit(
                        pass_name=pass_name,
                        chapter_index=chapter_index,
                        paragraph_index=paragraph_index,
                        lines=lines,
                    )
                )

            chapter["paragraphs"] = new_paragraphs

        return splits

    def process_document(self, document: dict) -> DocumentResult:
        """Apply the configured passes to a document.

        The input is left untouched; a formatted copy is returned.

        Args:
            document: Parsed sutra document

        Returns:
            DocumentResult with the new document and every split made
        """
        formatted = copy.deepcopy(document)
        splits = []
        for pass_name in self.passes:
            splits.extend(self._apply_pass(formatted, pass_name))
        return DocumentResult(document=formatted, splits=splits)

    def _print_splits(self, splits: list[ParagraphSplit]) -> None:
        for split in splits:
            print(
                f"  Chapter {split.chapter_index + 1}, Para {split.paragraph_index + 1}: "
                f"Split into {split.line_count} lines"
            )

    def _print_preview(self, splits: list[ParagraphSplit]) -> None:
        preview_lines = self.config.output.preview_lines
        preview_chars = self.config.output.preview_chars

        for split in splits:
            print(
                f"  Chapter {split.chapter_index + 1}, Para {split.paragraph_index + 1}: "
                f"Would split into {split.line_count} lines"
            )
            for i, line in enumerate(split.lines[:preview_lines], 1):
                print(f"    {i}. {line[:preview_chars]}...")
            if split.line_count > preview_lines:
                print(f"    ... and {split.line_count - preview_lines} more")

    def process_file(self, path: str | Path, dry_run: bool = False) -> FileResult:
        """Format a sutra file in place.

        Unchanged files are never rewritten.

        Args:
            path: Path to the sutra JSON file
            dry_run: Report intended changes without writing

        Returns:
            FileResult describing what changed
        """
        path = Path(path)

        if dry_run:
            print(f"\n{path.name}:")
            result = self.process_document(load_document(path))
            self._print_preview(result.splits)
            return FileResult(path=path, modified=result.changed, splits=result.splits, dry_run=True)

        print(f"Processing: {path}")
        result = self.process_document(load_document(path))
        self._print_splits(result.splits)

        if result.changed:
            write_document(path, result.document, indent=self.config.output.indent)
            message = f"  ✓ Updated: {path}"
            if "lines" in self.passes:
                message += f" ({result.new_lines} new lines)"
            print(message)
        elif self.passes == ("verses",):
            print(f"  - No verses to split in: {path}")
        else:
            print(f"  - No changes needed: {path}")

        return FileResult(path=path, modified=result.changed, splits=result.splits)

    def sutra_files(self) -> list[Path]:
        """Return every sutra file in the configured directory."""
        return list_sutra_files(self.config.sutras_dir)

    def run(self, paths: Optional[Iterable[str | Path]] = None, dry_run: bool = False) -> int:
        """Format a batch of sutra files, one at a time.

        Args:
            paths: Files to process (default: every file in the sutras directory)
            dry_run: Report intended changes without writing

        Returns:
            Number of files modified (or that would be, in a dry run)
        """
        files = [Path(p) for p in paths] if paths is not None else self.sutra_files()
        logger.info("Formatting %d file(s) with pass(es): %s", len(files), ", ".join(self.passes))

        count = 0
        for path in tqdm(
            files,
            desc="Formatting sutras",
            disable=not self.config.output.show_progress,
        ):
            if self.process_file(path, dry_run=dry_run).modified:
                count += 1

        if dry_run:
            print(f"\nDry run: {count} file(s) would be modified.")
        else:
            print(f"\nDone! Modified {count} file(s).")
        return count
