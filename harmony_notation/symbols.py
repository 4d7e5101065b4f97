"""Chord-symbol grammar.

This module parses lead-sheet chord symbols (e.g., "Bbmaj7", "F#m7b5/A")
into ParsedChordSymbol values and formats resolved chords back into
symbols.
"""

from __future__ import annotations

import logging
import re

from harmony_notation.models import ChordQuality, Note, ParsedChordSymbol, SeventhQuality
from harmony_notation.notes import parse_note_name

logger = logging.getLogger(__name__)

# Root letter, optional accidental token, free-form quality suffix
SYMBOL_RE = re.compile(r"^([A-Ga-g])(bb|bx|b|##|#|x)?(.*)$")

# Suffix for sevenths; major7 depends on the triad quality
SEVENTH_SYMBOL: dict[SeventhQuality, str] = {
    "dominant7": "7",
    "minor7": "m7",
    "halfDim7": "m7b5",
    "dim7": "dim7",
}
MAJOR_SEVENTH_SYMBOL: dict[ChordQuality, str] = {
    "major": "maj7",
    "minor": "mMaj7",
    "diminished": "maj7",
    "augmented": "maj7",
}
TRIAD_SYMBOL: dict[ChordQuality, str] = {
    "major": "",
    "minor": "m",
    "diminished": "dim",
    "augmented": "aug",
}


def parse_symbol_quality(suffix: str) -> ChordQuality:
    """Classify the triad quality of a symbol suffix.

    Examples
    --------
    >>> parse_symbol_quality("m7")
    'minor'
    >>> parse_symbol_quality("maj7")
    'major'
    """
    lower = suffix.lower()
    if "dim" in lower or "o" in suffix:
        return "diminished"
    if "aug" in lower or "+" in suffix:
        return "augmented"
    if suffix.startswith("m") and not lower.startswith("maj"):
        return "minor"
    return "major"


def parse_symbol_seventh(suffix: str) -> SeventhQuality:
    """Classify the seventh quality of a symbol suffix.

    Examples
    --------
    >>> parse_symbol_seventh("m7b5")
    'halfDim7'
    >>> parse_symbol_seventh("mMaj7")
    'major7'
    """
    lower = suffix.lower()
    if "ø" in suffix or "m7b5" in lower:
        return "halfDim7"
    if "dim7" in lower or "o7" in suffix:
        return "dim7"
    if "maj7" in lower or "M7" in suffix:
        return "major7"
    if "m7" in lower:
        return "minor7"
    if "7" in lower:
        return "dominant7"
    return "none"


def parse_chord_symbol(text: str) -> ParsedChordSymbol | None:
    """Parse a chord symbol string.

    Parameters
    ----------
    text : str
        Chord symbol (e.g., "G7", "Bm7b5/D", "Ebaug").

    Returns
    -------
    ParsedChordSymbol | None
        The parsed symbol, or None if the root is not a note name.
        A slash bass that is not a note name is dropped.

    Examples
    --------
    >>> symbol = parse_chord_symbol("G7/D")
    >>> symbol.root.name, symbol.quality, symbol.seventh, symbol.bass.name
    ('G', 'major', 'dominant7', 'D')
    >>> parse_chord_symbol("Bm7b5").quality
    'diminished'
    >>> parse_chord_symbol("H7") is None
    True
    """
    trimmed = text.strip()
    if not trimmed:
        return None
    body, _, bass_text = trimmed.partition("/")
    match = SYMBOL_RE.match(body)
    if match is None:
        logger.debug("Rejecting chord symbol %r: no root note", text)
        return None
    root = parse_note_name(f"{match.group(1)}{match.group(2) or ''}")
    if root is None:
        return None

    suffix = match.group(3)
    quality = parse_symbol_quality(suffix)
    seventh = parse_symbol_seventh(suffix)
    # Half-diminished and diminished sevenths sit on a diminished triad
    if seventh in ("halfDim7", "dim7"):
        quality = "diminished"

    bass = parse_note_name(bass_text) if bass_text else None
    if bass_text and bass is None:
        logger.debug("Ignoring unrecognized slash bass %r in %r", bass_text, text)
    return ParsedChordSymbol(root=root, quality=quality, seventh=seventh, bass=bass)


def format_symbol_suffix(quality: ChordQuality, seventh: SeventhQuality) -> str:
    """Return the quality/seventh suffix of a chord symbol."""
    if seventh == "major7":
        return MAJOR_SEVENTH_SYMBOL[quality]
    if seventh != "none":
        return SEVENTH_SYMBOL[seventh]
    return TRIAD_SYMBOL[quality]


def format_chord_symbol(
    root: Note,
    quality: ChordQuality,
    seventh: SeventhQuality,
    bass: Note | None = None,
) -> str:
    """Format a chord symbol.

    Examples
    --------
    >>> from harmony_notation.notes import make_note
    >>> format_chord_symbol(make_note("G"), "major", "dominant7", make_note("B"))
    'G7/B'
    >>> format_chord_symbol(make_note("C"), "minor", "major7")
    'CmMaj7'
    """
    result = f"{root.name}{format_symbol_suffix(quality, seventh)}"
    if bass is not None and bass != root:
        result = f"{result}/{bass.name}"
    return result
