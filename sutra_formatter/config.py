"""Configuration management for the formatting tools."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .segmenter import (
    CLAUSE_PUNCTUATION,
    MAX_LINE_LENGTH,
    MIN_HAN_RATIO,
    MIN_LINE_LENGTH,
    MIN_PUNCTUATION,
    VERSE_PUNCTUATION,
    VERSE_SEPARATOR,
)


class SplitConfig(BaseModel):
    """Configuration for the verse segmenter."""

    verse_separator: str = Field(default=VERSE_SEPARATOR, min_length=1)
    verse_punctuation: str = Field(default=VERSE_PUNCTUATION, min_length=1)
    line_punctuation: str = Field(default=CLAUSE_PUNCTUATION, min_length=1)
    min_line_length: int = Field(default=MIN_LINE_LENGTH, ge=1)
    max_line_length: int = Field(default=MAX_LINE_LENGTH, ge=1)
    min_punctuation: int = Field(default=MIN_PUNCTUATION, ge=1)
    min_han_ratio: float = Field(default=MIN_HAN_RATIO, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def check_length_bounds(self) -> "SplitConfig":
        """Reject an empty length window."""
        if self.max_line_length < self.min_line_length:
            raise ValueError(
                f"max_line_length ({self.max_line_length}) is smaller than "
                f"min_line_length ({self.min_line_length})"
            )
        return self


class OutputConfig(BaseModel):
    """Configuration for writing and reporting."""

    indent: int = Field(default=2, ge=0)
    show_progress: bool = True
    preview_lines: int = Field(default=4, ge=0)  # Dry-run lines shown per paragraph
    preview_chars: int = Field(default=40, ge=1)


class Config(BaseModel):
    """Main configuration for the formatting tools."""

    sutras_dir: Path = Path("sutras")
    split: SplitConfig = Field(default_factory=SplitConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("sutras_dir", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        return Path(v) if isinstance(v, str) else v

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True)
