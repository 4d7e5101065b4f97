"""Harmony notation engine for Roman numerals, chord symbols and note sets.

This library converts between a Roman-numeral analysis (e.g., "V6/5"),
a chord symbol (e.g., "G7/B") and the notes of a chord in a major or
minor key, and enumerates the standard chord vocabulary of a key.

Examples
--------
>>> from harmony_notation import convert_roman_to_symbol, convert_symbol_to_roman

>>> # Roman numeral to chord symbol
>>> result = convert_roman_to_symbol("C", "major", "V6/5")
>>> result.symbol
'G7/B'
>>> result.chord_tones
('G', 'B', 'D', 'F')

>>> # Chord symbol to Roman numeral
>>> convert_symbol_to_roman("C", "major", "C/E").roman
'I6'

>>> # Standard chords containing a set of notes
>>> from harmony_notation import harmonize_notes
>>> [r.roman for r in harmonize_notes("A", "minor", "Bb D F")]
['bII', 'bII6']
"""

from harmony_notation.engine import (
    build_chord_from_roman,
    convert_roman_to_symbol,
    convert_symbol_to_roman,
    generate_vocabulary,
    harmonize_notes,
)
from harmony_notation.keys import build_key
from harmony_notation.models import Chord, ConversionResult, Key, Note, ParsedChordSymbol, RomanNumeral
from harmony_notation.notes import format_note_name, parse_note_list, parse_note_name
from harmony_notation.roman import format_roman_numeral, parse_roman_numeral
from harmony_notation.symbols import format_chord_symbol, parse_chord_symbol

__all__ = [
    "Chord",
    "ConversionResult",
    "Key",
    "Note",
    "ParsedChordSymbol",
    "RomanNumeral",
    "build_chord_from_roman",
    "build_key",
    "convert_roman_to_symbol",
    "convert_symbol_to_roman",
    "format_chord_symbol",
    "format_note_name",
    "format_roman_numeral",
    "generate_vocabulary",
    "harmonize_notes",
    "parse_chord_symbol",
    "parse_note_list",
    "parse_note_name",
    "parse_roman_numeral",
]
