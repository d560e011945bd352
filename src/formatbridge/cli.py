#!/usr/bin/env python3
"""
FormatBridge CLI
Command-line interface for converting files between data formats
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Set

from .api import convert_batch
from .config import get_indent_size, get_morse_separators, load_settings
from .core.capabilities import (
    FORMAT_EXTENSIONS,
    FORMAT_LABELS,
    SOURCE_FORMATS,
    TARGET_FORMAT_MAP,
    detect_source_format,
    parse_format,
)
from .core.models import ConversionFormat
from .core.morse import decode, encode, is_valid_morse
from .utils.logging import FormatBridgeLogger


def format_capabilities() -> str:
    """Human-readable listing of the capability map"""
    lines = []
    for option in SOURCE_FORMATS:
        targets = ", ".join(target.value.value for target in TARGET_FORMAT_MAP[option.value])
        lines.append(f"{option.value.value:<10} ({option.label}) -> {targets}")
    return "\n".join(lines)


def output_path_for(
    input_path: Path,
    target: ConversionFormat,
    output: Optional[str],
    multiple: bool,
    used: Set[Path],
) -> Path:
    """Choose where a target's output goes without clobbering the input or a sibling"""
    extension = FORMAT_EXTENSIONS[target]

    if output and not multiple:
        return Path(output)

    directory = Path(output) if output else input_path.parent
    path = directory / f"{input_path.stem}{extension}"
    if path == input_path or path in used:
        path = directory / f"{input_path.stem}_{target.value}{extension}"
    return path


def main(argv: Optional[List[str]] = None) -> int:
    """Convert a file into one or more target formats"""
    parser = argparse.ArgumentParser(
        prog="formatbridge",
        description="Convert data files between JSON, XML, YAML, CSV, TSV, SQL, Protobuf,\n"
        "Avro, Markdown, HTML, plain text and Morse code.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", nargs="?", help="Input file")
    parser.add_argument(
        "-f", "--from", dest="source", help="Source format (detected from the extension if omitted)"
    )
    parser.add_argument(
        "-t", "--to", dest="targets", nargs="+", metavar="FORMAT",
        help="Target format(s) (defaults to the first target available for the source)",
    )
    parser.add_argument("--indent", type=int, help="Indent size (default from settings)")
    parser.add_argument(
        "-o", "--output",
        help="Output file for a single target, or output directory for several",
    )
    parser.add_argument("--list", action="store_true", help="List supported conversions and exit")

    args = parser.parse_args(argv)

    if args.list:
        print(format_capabilities())
        return 0

    if not args.input:
        parser.error("an input file is required")

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"✗ Input file {input_path} does not exist", file=sys.stderr)
        return 1

    source = parse_format(args.source) if args.source else detect_source_format(input_path.name)
    if source is None:
        print(
            f"✗ Cannot determine source format for {input_path.name}; use --from",
            file=sys.stderr,
        )
        return 1

    if args.targets:
        targets = args.targets
    elif TARGET_FORMAT_MAP.get(source):
        targets = [TARGET_FORMAT_MAP[source][0].value]
    else:
        print(f"✗ No target formats available for {source.value}", file=sys.stderr)
        return 1

    FormatBridgeLogger.setup_logger(str(input_path))

    failures = 0
    try:
        indent_size = args.indent if args.indent is not None else get_indent_size()
        content = input_path.read_text(encoding="utf-8")
        FormatBridgeLogger.info(
            f"Converting {input_path.name} from {source.value} to {', '.join(map(str, targets))}"
        )

        results = convert_batch(content, source, targets, indent_size)
        multiple = len(results) > 1
        if args.output and multiple:
            Path(args.output).mkdir(parents=True, exist_ok=True)

        used: Set[Path] = set()
        for target, result in results.items():
            label = FORMAT_LABELS.get(target, str(target))
            with FormatBridgeLogger.conversion(f"{source.value}-to-{target}"):
                if not result.success:
                    failures += 1
                    FormatBridgeLogger.error(f"{label}: {result.error}")
                    print(f"✗ {label}: {result.error}", file=sys.stderr)
                    continue

                output_path = output_path_for(input_path, target, args.output, multiple, used)
                used.add(output_path)
                output_path.write_text(result.result, encoding="utf-8")
                FormatBridgeLogger.success(f"Converted {input_path.name} -> {output_path.name}")
            print(f"✓ {label}: {output_path}")

    except UnicodeDecodeError as e:
        FormatBridgeLogger.error(f"{input_path.name} is not UTF-8 text: {e}")
        print(f"✗ {input_path.name} is not UTF-8 text: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        FormatBridgeLogger.error(f"Error during conversion: {e}")
        print(f"✗ Error during conversion: {e}", file=sys.stderr)
        return 1
    finally:
        log_path = FormatBridgeLogger.get_log_file_path()
        if log_path:
            print(f"\nLog file: {log_path}")
        FormatBridgeLogger.cleanup()

    return 1 if failures else 0


def morse_main(argv: Optional[List[str]] = None) -> int:
    """Encode or decode Morse code from the command line"""
    argv = sys.argv[1:] if argv is None else list(argv)

    # Morse text starts with dashes, so decode arguments never go through option parsing
    if argv[:1] == ["decode"] and not set(argv[1:2]) & {"-h", "--help"}:
        return decode_command(argv[1:])

    settings = load_settings()
    separators = get_morse_separators(settings)

    parser = argparse.ArgumentParser(prog="formatbridge-morse", description="Morse code translator")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    encode_parser = subparsers.add_parser("encode", help="Translate text to Morse code")
    encode_parser.add_argument("text", nargs="+", help="Text to encode")
    encode_parser.add_argument(
        "--word-separator", default=separators["word_separator"], help="Separator between words"
    )
    encode_parser.add_argument(
        "--char-separator", default=separators["char_separator"], help="Separator between characters"
    )

    decode_parser = subparsers.add_parser(
        "decode",
        help="Translate Morse code to text",
        description="Every argument is read as Morse code; with no arguments, stdin is decoded.",
    )
    decode_parser.add_argument("morse", nargs="*", help="Morse code to decode")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "decode":
        return decode_command(args.morse)

    print(encode(
        " ".join(args.text),
        word_separator=args.word_separator,
        char_separator=args.char_separator,
    ))
    return 0


def decode_command(words: List[str]) -> int:
    """Decode Morse given as arguments, or read from stdin when none are given"""
    morse = " ".join(words) if words else sys.stdin.read()
    morse = morse.strip()
    if not is_valid_morse(morse):
        print("✗ Invalid Morse code: only '.', '-', '/' and spaces are allowed", file=sys.stderr)
        return 1
    print(decode(morse))
    return 0


if __name__ == "__main__":
    sys.exit(main())
