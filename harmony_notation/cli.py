"""Command line front end for the harmony notation engine.

Examples
--------
    harmony-notation roman C major "V6/5"
    harmony-notation symbol Eb minor "Fm7b5/Ab"
    harmony-notation harmonize A minor "F A D#" --bass F
    harmony-notation vocabulary G major
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import TYPE_CHECKING

from harmony_notation.engine import (
    chord_to_result,
    convert_roman_to_symbol,
    convert_symbol_to_roman,
    generate_vocabulary,
    harmonize_notes,
)
from harmony_notation.keys import build_key

if TYPE_CHECKING:
    from collections.abc import Sequence

    from harmony_notation.models import ConversionResult

MODES = ("major", "minor")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per entry point."""
    parser = argparse.ArgumentParser(
        prog="harmony-notation",
        description="Convert between Roman numerals, chord symbols and note sets in a key",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parser decisions to stderr",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_command(name: str, help_text: str) -> argparse.ArgumentParser:
        command = subparsers.add_parser(name, help=help_text)
        command.add_argument("tonic", help="Tonic of the key (e.g., C, F#, Bb)")
        command.add_argument("mode", choices=MODES, help="Mode of the key")
        return command

    roman = add_command("roman", "Roman numeral to chord symbol")
    roman.add_argument("numeral", help="Roman numeral (e.g., V6/5, bVII, Ger+6)")

    symbol = add_command("symbol", "Chord symbol to Roman numeral")
    symbol.add_argument("symbol", help="Chord symbol (e.g., G7/D, Bm7b5)")

    harmonize = add_command("harmonize", "Standard chords containing a set of notes")
    harmonize.add_argument("notes", help="Notes separated by spaces or commas")
    harmonize.add_argument("--bass", default=None, help="Required bass note")

    add_command("vocabulary", "List the standard chords of a key")
    return parser


def _write_json(data: object, indent: int) -> None:
    sys.stdout.write(json.dumps(data, indent=indent, ensure_ascii=False) + "\n")


def _run(args: argparse.Namespace) -> list[ConversionResult] | ConversionResult | None:
    if args.command == "roman":
        return convert_roman_to_symbol(args.tonic, args.mode, args.numeral)
    if args.command == "symbol":
        return convert_symbol_to_roman(args.tonic, args.mode, args.symbol)
    if args.command == "harmonize":
        return list(harmonize_notes(args.tonic, args.mode, args.notes, args.bass))
    key = build_key(args.tonic, args.mode)
    return [chord_to_result(key, chord) for chord in generate_vocabulary(key)]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface.

    Returns
    -------
    int
        0 on success, 1 when the input has no conversion.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        result = _run(args)
    except ValueError as e:
        parser.error(str(e))

    if result is None:
        print(f"Invalid {args.command}: no conversion in {args.tonic} {args.mode}", file=sys.stderr)
        return 1
    if isinstance(result, list):
        _write_json([item.as_dict() for item in result], args.indent)
    else:
        _write_json(result.as_dict(), args.indent)
    return 0


if __name__ == "__main__":
    sys.exit(main())
