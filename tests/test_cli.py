"""Tests for the command-line interface."""

import json

from sutra_formatter.cli import format_verses_main, main, split_verse_lines_main
from sutra_formatter.data import load_document

from conftest import PROSE, SEP, VERSE_LINE, VERSE_PARAGRAPH, make_document, write_json


def run(*args):
    return main(list(args))


class TestUsage:
    """Tests for argument handling."""

    def test_no_arguments(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out.lower()

    def test_format_command_without_file(self, sutras_dir):
        assert run("verses", "--sutras-dir", str(sutras_dir)) == 1

    def test_legacy_tools_without_arguments(self, capsys):
        assert format_verses_main([]) == 1
        out = capsys.readouterr().out
        assert "Usage:" in out
        assert "--dry-run" in out

        assert split_verse_lines_main([]) == 1
        out = capsys.readouterr().out
        assert "split-verse-lines --all" in out
        assert "--dry-run" not in out

    def test_missing_file(self, sutras_dir, capsys):
        assert run("verses", "missing.json", "--sutras-dir", str(sutras_dir)) == 1
        assert "File not found" in capsys.readouterr().err


class TestFormatCommands:
    """Tests for the verses, lines and format commands."""

    def test_single_file_by_name(self, sutras_dir, sample_document):
        path = write_json(sutras_dir / "test-sutra.json", sample_document)

        assert run("verses", "test-sutra.json", "--sutras-dir", str(sutras_dir)) == 0

        assert len(load_document(path)["chapters"][0]["paragraphs"]) == 7

    def test_single_file_by_absolute_path(self, tmp_path, sample_document):
        path = write_json(tmp_path / "elsewhere.json", sample_document)

        assert split_verse_lines_main([str(path)]) == 0

        assert load_document(path)["chapters"][0]["paragraphs"][-1] == "见闻瞻礼一念间，"

    def test_all(self, sutras_dir, capsys):
        write_json(sutras_dir / "a.json", make_document([f"愿以此功德{SEP}庄严佛净土"]))
        write_json(sutras_dir / "b.json", make_document([PROSE]))
        write_json(sutras_dir / "c.json", make_document([VERSE_LINE]))

        assert run("verses", "--all", "--sutras-dir", str(sutras_dir), "--no-progress") == 0

        assert "Done! Modified 1 file(s)." in capsys.readouterr().out

    def test_format_runs_both_passes(self, sutras_dir):
        path = write_json(sutras_dir / "a.json", make_document([VERSE_PARAGRAPH, VERSE_LINE]))

        assert run("format", "--all", "--sutras-dir", str(sutras_dir), "--no-progress") == 0

        assert len(load_document(path)["chapters"][0]["paragraphs"]) == 6

    def test_dry_run_without_file_previews_all(self, sutras_dir, capsys):
        path = write_json(sutras_dir / "a.json", make_document([VERSE_PARAGRAPH]))
        before = path.read_bytes()

        assert format_verses_main(["--dry-run", "--sutras-dir", str(sutras_dir), "--no-progress"]) == 0

        assert path.read_bytes() == before
        assert "Would split into 4 lines" in capsys.readouterr().out

    def test_malformed_json(self, sutras_dir, capsys):
        (sutras_dir / "broken.json").write_text("{", encoding="utf-8")

        assert run("verses", "broken.json", "--sutras-dir", str(sutras_dir)) == 1
        assert "Error" in capsys.readouterr().err

    def test_config_file(self, tmp_path, sutras_dir, capsys):
        write_json(sutras_dir / "a.json", make_document(["愿以此功德 | 庄严佛净土"]))
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            f"sutras_dir: {sutras_dir}\n"
            "split:\n"
            "  verse_separator: ' | '\n"
            "output:\n"
            "  show_progress: false\n",
            encoding="utf-8",
        )

        assert run("verses", "--all", "--config", str(config_path)) == 0

        assert "Modified 1 file(s)" in capsys.readouterr().out

    def test_invalid_config(self, tmp_path, capsys):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("split:\n  min_line_length: 0\n", encoding="utf-8")

        assert run("verses", "--all", "--config", str(config_path)) == 1
        assert "Error" in capsys.readouterr().err


class TestConvertCommand:
    """Tests for the convert command."""

    def test_traditional_file_converted_next_to_it(self, sutras_dir):
        document = make_document(["爾時世尊告諸大眾。"], sutra_id="dizang")
        document["title"] = "地藏菩薩本願經"
        write_json(sutras_dir / "dizang-tw.json", document)

        assert run("convert", "dizang-tw.json", "--sutras-dir", str(sutras_dir)) == 0

        converted = load_document(sutras_dir / "dizang.json")
        assert converted["title"] == "地藏菩萨本愿经"
        assert converted["chapters"][0]["paragraphs"] == ["尔时世尊告诸大众。"]

    def test_explicit_output(self, tmp_path, sutras_dir):
        source = write_json(sutras_dir / "a.json", make_document(["如是我聞。"]))
        output = tmp_path / "out" / "a.json"

        assert run("convert", str(source), "--output", str(output)) == 0

        assert json.loads(output.read_text(encoding="utf-8"))["chapters"][0]["paragraphs"] == ["如是我闻。"]


class TestImportCommand:
    """Tests for the import-cbeta command."""

    def test_import(self, tmp_path, sutras_dir, capsys):
        source = tmp_path / "T0829_001.txt"
        source.write_text(
            "# CBETA header\n"
            "No. 829\n"
            "大乘離文字普光明藏經\n"
            "\n"
            "唐中天竺三藏法師地婆訶羅奉　詔譯\n"
            "\n"
            "如是我聞。一時佛在王舍城。\n"
            "爾時世尊告諸菩薩。\n",
            encoding="utf-8",
        )

        assert run(
            "import-cbeta", str(source),
            "--id", "dasheng-liwen",
            "--title", "大乘离文字普光明藏经",
            "--translator", "唐 中天竺三藏法师地婆诃罗 奉诏译",
            "--source-title", "大乘離文字普光明藏經",
            "--sutras-dir", str(sutras_dir),
        ) == 0

        document = load_document(sutras_dir / "dasheng-liwen.json")
        assert document["chapters"][0]["paragraphs"] == [
            "如是我闻。一时佛在王舍城。",
            "尔时世尊告诸菩萨。",
        ]
        assert "Paragraphs: 2" in capsys.readouterr().out

    def test_missing_source(self, tmp_path, capsys):
        assert run(
            "import-cbeta", str(tmp_path / "missing.txt"),
            "--id", "x", "--title", "x", "--translator", "x",
        ) == 1
        assert "File not found" in capsys.readouterr().err
