"""Sutra file access."""

from .sutra_store import (
    DocumentFormatError,
    dump_document,
    list_sutra_files,
    load_document,
    resolve_path,
    resolve_sutra,
    validate_document,
    write_document,
)

__all__ = [
    "DocumentFormatError",
    "dump_document",
    "list_sutra_files",
    "load_document",
    "resolve_path",
    "resolve_sutra",
    "validate_document",
    "write_document",
]
