"""Loading, validating and writing sutra JSON files."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ..models import SutraDocument

logger = logging.getLogger(__name__)

TRADITIONAL_SUFFIX = "-tw"


class DocumentFormatError(ValueError):
    """Raised when a JSON file does not have the sutra document shape."""


def validate_document(data, source: str = "<document>") -> SutraDocument:
    """Validate raw JSON data against the sutra schema.

    Args:
        data: Parsed JSON value
        source: Name used in the error message

    Returns:
        The validated document model

    Raises:
        DocumentFormatError: If the data is not a sutra document
    """
    try:
        return SutraDocument.model_validate(data)
    except ValidationError as e:
        raise DocumentFormatError(f"{source}: not a valid sutra document\n{e}") from e


def load_document(path: str | Path) -> dict:
    """Read and validate a sutra JSON file.

    The raw mapping is returned so that key order and unknown fields
    survive a rewrite.

    Args:
        path: Path to the JSON file

    Returns:
        Parsed document

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
        DocumentFormatError: If the JSON is not a sutra document
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    validate_document(data, source=str(path))
    logger.debug("Loaded %s (%d chapters)", path, len(data["chapters"]))
    return data


def dump_document(document: dict, indent: int = 2) -> str:
    """Serialize a document the way the reader's files are formatted."""
    return json.dumps(document, ensure_ascii=False, indent=indent)


def write_document(path: str | Path, document: dict, indent: int = 2) -> None:
    """Write a document to disk as UTF-8 JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(dump_document(document, indent=indent))
    logger.debug("Wrote %s", path)


def resolve_path(name: str | Path, sutras_dir: Path) -> Path:
    """Resolve a file argument against the sutras directory.

    Absolute paths and paths that exist relative to the working directory
    are used as given; anything else is looked up in ``sutras_dir``.
    """
    path = Path(name)
    if path.is_absolute() or path.exists():
        return path
    return Path(sutras_dir) / path


def resolve_sutra(sutra_id: str, sutras_dir: Path, traditional: bool = False) -> Path:
    """Find the file for a sutra id in the requested script.

    The Traditional edition (``<id>-tw.json``) falls back to the Simplified
    one when it does not exist.

    Args:
        sutra_id: Sutra identifier
        sutras_dir: Directory holding the sutra files
        traditional: Prefer the Traditional edition

    Returns:
        Path to an existing file

    Raises:
        FileNotFoundError: If no edition exists
    """
    sutras_dir = Path(sutras_dir)
    simplified = sutras_dir / f"{sutra_id}.json"

    if traditional:
        candidate = sutras_dir / f"{sutra_id}{TRADITIONAL_SUFFIX}.json"
        if candidate.exists():
            return candidate
        logger.info("No Traditional edition for %s, using %s", sutra_id, simplified.name)

    if not simplified.exists():
        raise FileNotFoundError(f"Sutra not found: {sutra_id}")
    return simplified


def list_sutra_files(sutras_dir: Path) -> list[Path]:
    """Return every JSON file in the sutras directory, sorted by name."""
    sutras_dir = Path(sutras_dir)
    if not sutras_dir.is_dir():
        raise FileNotFoundError(f"Sutras directory not found: {sutras_dir}")
    return sorted(p for p in sutras_dir.glob("*.json") if p.is_file())
