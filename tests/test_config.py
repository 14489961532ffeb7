"""Tests for configuration handling."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from sutra_formatter.config import Config, SplitConfig


def test_defaults():
    config = Config()

    assert config.sutras_dir == Path("sutras")
    assert config.split.verse_separator == "\u3000\u3000"
    assert config.split.line_punctuation == "，。？！"
    assert config.split.min_line_length == 10
    assert config.split.max_line_length == 60
    assert config.split.min_punctuation == 2
    assert config.split.min_han_ratio == 0.8
    assert config.output.indent == 2
    assert config.output.preview_lines == 4


def test_sutras_dir_from_string():
    assert Config(sutras_dir="data/sutras").sutras_dir == Path("data/sutras")


def test_length_window_validated():
    with pytest.raises(ValidationError):
        SplitConfig(min_line_length=20, max_line_length=10)


def test_ratio_bounds():
    with pytest.raises(ValidationError):
        SplitConfig(min_han_ratio=1.5)


def test_yaml_round_trip(tmp_path):
    config = Config(sutras_dir=tmp_path)
    config.split.max_line_length = 40
    path = tmp_path / "config.yaml"

    config.to_yaml(path)
    loaded = Config.from_yaml(path)

    assert loaded.sutras_dir == tmp_path
    assert loaded.split.max_line_length == 40
    assert loaded.split.verse_separator == "\u3000\u3000"


def test_empty_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")

    assert Config.from_yaml(path) == Config()


def test_missing_yaml(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config.from_yaml(tmp_path / "missing.yaml")
