"""Shared fixtures for the formatter tests."""

import json
from pathlib import Path

import pytest

from sutra_formatter.config import Config, OutputConfig

SEP = "\u3000\u3000"

VERSE_PARAGRAPH = f"愿以此功德，庄严佛净土。{SEP}上报四重恩，下济三途苦。"
VERSE_LINE = "恒河沙劫说难尽，见闻瞻礼一念间，"
PROSE = "尔时世尊告诸大众。"
MANTRA = {
    "type": "mantra",
    "title": "往生咒",
    "text": f"南无阿弥多婆夜{SEP}哆他伽多夜，哆地夜他，阿弥利都婆毗。",
}


def make_document(paragraphs, sutra_id="test-sutra"):
    """Build a one-chapter sutra document."""
    return {
        "id": sutra_id,
        "title": "测试经",
        "translator": "唐 某某 译",
        "openingVerse": ["无上甚深微妙法", "百千万劫难遭遇"],
        "chapters": [
            {"title": "第一品", "paragraphs": list(paragraphs)},
        ],
        "dedication": ["愿以此功德", "庄严佛净土"],
    }


def write_json(path: Path, data, indent: int = 2) -> Path:
    path.write_text(json.dumps(data, ensure_ascii=False, indent=indent), encoding="utf-8")
    return path


@pytest.fixture
def sample_document():
    return make_document([PROSE, VERSE_PARAGRAPH, MANTRA, VERSE_LINE])


@pytest.fixture
def sutras_dir(tmp_path):
    directory = tmp_path / "sutras"
    directory.mkdir()
    return directory


@pytest.fixture
def config(sutras_dir):
    return Config(sutras_dir=sutras_dir, output=OutputConfig(show_progress=False))
