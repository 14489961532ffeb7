"""Command-line interface for the sutra formatting tools."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .cbeta import import_source
from .config import Config
from .data import load_document, resolve_path, write_document
from .data.sutra_store import TRADITIONAL_SUFFIX, DocumentFormatError
from .pipeline import FormattingPipeline
from .script_converter import convert_document

# Passes run by each formatting command
FORMAT_COMMANDS = {
    "verses": ("verses",),
    "lines": ("lines",),
    "format": ("verses", "lines"),
}


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sutra-format",
        description="Format verse text in sutra JSON files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Split verse paragraphs joined by full-width spaces in one file
  sutra-format verses dizang-benyuan.json

  # Split short verse lines on punctuation in every sutra
  sutra-format lines --all

  # Run both passes and preview the result
  sutra-format format --all --dry-run

  # Import a CBETA source file
  sutra-format import-cbeta T0829_001.txt --id dasheng-liwen \\
      --title 大乘离文字普光明藏经 --translator "唐 地婆诃罗 译"
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    verses_parser = subparsers.add_parser(
        "verses", help="Split paragraphs on the full-width double-space separator"
    )
    setup_format_parser(verses_parser)

    lines_parser = subparsers.add_parser(
        "lines", help="Split short verse lines on clause-terminal punctuation"
    )
    setup_format_parser(lines_parser)

    format_parser = subparsers.add_parser(
        "format", help="Run the separator pass, then the punctuation pass"
    )
    setup_format_parser(format_parser)

    convert_parser = subparsers.add_parser(
        "convert", help="Convert a sutra file from Traditional to Simplified characters"
    )
    setup_convert_parser(convert_parser)

    import_parser = subparsers.add_parser(
        "import-cbeta", help="Create a sutra file from a CBETA text source"
    )
    setup_import_parser(import_parser)

    return parser


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments shared by every command."""
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--sutras-dir",
        type=Path,
        help="Directory holding the sutra JSON files (default: sutras)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def setup_format_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for the formatting commands."""
    parser.add_argument(
        "file",
        nargs="?",
        help="Sutra file to process (name in the sutras directory, or a path)",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Process every JSON file in the sutras directory",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be changed without writing",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Hide the progress bar in batch mode",
    )
    add_common_arguments(parser)


def setup_convert_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for the convert command."""
    parser.add_argument("file", help="Sutra file to convert")
    parser.add_argument(
        "--output",
        type=Path,
        help="Output path (default: input without the -tw suffix, or in place)",
    )
    add_common_arguments(parser)


def setup_import_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for the import-cbeta command."""
    parser.add_argument("source", type=Path, help="CBETA .txt source file")
    parser.add_argument("--id", dest="sutra_id", required=True, help="Sutra id")
    parser.add_argument("--title", required=True, help="Sutra title")
    parser.add_argument("--translator", required=True, help="Translator credit")
    parser.add_argument(
        "--source-title",
        help="Title line as written in the source, if it differs from --title",
    )
    parser.add_argument("--chapter-title", help="Chapter title (default: --title)")
    parser.add_argument(
        "--keep-traditional",
        action="store_true",
        help="Keep paragraphs in Traditional characters",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Output path (default: <sutras-dir>/<id>.json)",
    )
    add_common_arguments(parser)


def build_config(args: argparse.Namespace) -> Config:
    """Build configuration from arguments."""
    if getattr(args, "config", None):
        config = Config.from_yaml(args.config)
    else:
        config = Config()

    if getattr(args, "sutras_dir", None):
        config.sutras_dir = args.sutras_dir
    if getattr(args, "no_progress", False):
        config.output.show_progress = False

    return config


def handle_format(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    """Handle the verses, lines and format commands."""
    config = build_config(args)
    pipeline = FormattingPipeline(config, passes=FORMAT_COMMANDS[args.command])

    if args.all or (args.dry_run and not args.file):
        pipeline.run(dry_run=args.dry_run)
        return 0

    if not args.file:
        parser.print_usage()
        return 1

    path = resolve_path(args.file, config.sutras_dir)
    if not path.exists():
        print(f"File not found: {path}", file=sys.stderr)
        return 1

    pipeline.process_file(path, dry_run=args.dry_run)
    return 0


def handle_convert(args: argparse.Namespace) -> int:
    """Handle the convert command."""
    config = build_config(args)
    path = resolve_path(args.file, config.sutras_dir)
    if not path.exists():
        print(f"File not found: {path}", file=sys.stderr)
        return 1

    output = args.output
    if output is None:
        stem = path.stem
        if stem.endswith(TRADITIONAL_SUFFIX):
            stem = stem[: -len(TRADITIONAL_SUFFIX)]
        output = path.with_name(f"{stem}{path.suffix}")

    document = convert_document(load_document(path))
    write_document(output, document, indent=config.output.indent)
    print(f"Converted {path} -> {output}")
    return 0


def handle_import(args: argparse.Namespace) -> int:
    """Handle the import-cbeta command."""
    config = build_config(args)
    if not args.source.exists():
        print(f"File not found: {args.source}", file=sys.stderr)
        return 1

    document = import_source(
        args.source,
        sutra_id=args.sutra_id,
        title=args.title,
        translator=args.translator,
        source_title=args.source_title,
        chapter_title=args.chapter_title,
        simplify=not args.keep_traditional,
    )
    output = args.output or config.sutras_dir / f"{args.sutra_id}.json"
    write_document(output, document, indent=config.output.indent)

    print(f"Done! Updated: {output}")
    print(f"Paragraphs: {len(document['chapters'][0]['paragraphs'])}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        parser.print_help()
        return 1

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 1

    setup_logging(args.verbose)

    try:
        if args.command in FORMAT_COMMANDS:
            return handle_format(args, parser)
        if args.command == "convert":
            return handle_convert(args)
        return handle_import(args)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (json.JSONDecodeError, DocumentFormatError) as e:
        logging.exception("Could not read sutra file")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logging.exception("Formatting failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _legacy_main(command: str, tool: str, argv: Optional[list[str]], dry_run: bool) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("Usage:")
        print(f"  {tool} <sutra-file.json>  - Process single file")
        print(f"  {tool} --all              - Process all sutras")
        if dry_run:
            print(f"  {tool} --dry-run          - Show what would be changed")
        return 1
    return main([command, *argv])


def format_verses_main(argv: Optional[list[str]] = None) -> int:
    """Entry point of ``format-verses``."""
    return _legacy_main("verses", "format-verses", argv, dry_run=True)


def split_verse_lines_main(argv: Optional[list[str]] = None) -> int:
    """Entry point of ``split-verse-lines``."""
    return _legacy_main("lines", "split-verse-lines", argv, dry_run=False)


if __name__ == "__main__":
    sys.exit(main())
