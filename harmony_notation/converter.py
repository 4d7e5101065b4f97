"""Export of resolved chords to Harte and pychord notation.

This module writes Chords in the notations other chord tools read:
Harte notation (e.g., "G:7/3") and pychord's simplified notation
(e.g., "Bm7-5").
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from harmony_notation.engine import AUGMENTED_SIXTH_KINDS
from harmony_notation.models import LETTERS, ChordQuality, Note, SeventhQuality, accidental_to_text

if TYPE_CHECKING:
    from harmony_notation.models import Chord

# Semitones of the major-scale degree reached by each letter step
MAJOR_DEGREE_SEMITONES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# Triad quality and seventh to Harte shorthand
HARTE_SHORTHAND: dict[tuple[ChordQuality, SeventhQuality], str] = {
    ("major", "none"): "maj",
    ("minor", "none"): "min",
    ("diminished", "none"): "dim",
    ("augmented", "none"): "aug",
    ("major", "dominant7"): "7",
    ("major", "major7"): "maj7",
    ("minor", "minor7"): "min7",
    ("minor", "major7"): "minmaj7",
    ("diminished", "halfDim7"): "hdim7",
    ("diminished", "dim7"): "dim7",
    ("augmented", "dominant7"): "aug7",
}

# Harte shorthand to pychord quality
HARTE_TO_PYCHORD_QUALITY: dict[str, str] = {
    "maj": "",
    "min": "m",
    "dim": "dim",
    "aug": "aug",
    "7": "7",
    "maj7": "maj7",
    "min7": "m7",
    "minmaj7": "mmaj7",
    "hdim7": "m7-5",
    "dim7": "dim7",
    "aug7": "aug7",
}


def interval_name(root: Note, note: Note) -> str:
    """Return the Harte interval degree of ``note`` above ``root``.

    Examples
    --------
    >>> from harmony_notation.notes import make_note
    >>> interval_name(make_note("B"), make_note("A", -1))
    'bb7'
    >>> interval_name(make_note("A", -1), make_note("F", 1))
    '#6'
    """
    steps = (LETTERS.index(note.letter) - LETTERS.index(root.letter)) % 7
    diff = (note.pitch_class - root.pitch_class - MAJOR_DEGREE_SEMITONES[steps]) % 12
    if diff > 6:
        diff -= 12
    return f"{accidental_to_text(diff)}{steps + 1}"


def harte_shorthand(chord: Chord) -> str | None:
    """Return the Harte shorthand of a chord, or None if it has none.

    Augmented sixth chords have no shorthand.
    """
    if chord.roman in AUGMENTED_SIXTH_KINDS:
        return None
    return HARTE_SHORTHAND.get((chord.quality, chord.seventh))


def harte_quality_to_pychord(harte_quality: str) -> str:
    """Convert a Harte shorthand to pychord quality string.

    Parameters
    ----------
    harte_quality : str
        The Harte shorthand (e.g., "min7", "hdim7").

    Returns
    -------
    str
        The equivalent pychord quality (e.g., "m7", "m7-5").

    Raises
    ------
    ValueError
        If the quality is not recognized.

    Examples
    --------
    >>> harte_quality_to_pychord("hdim7")
    'm7-5'
    >>> harte_quality_to_pychord("maj")
    ''
    """
    if harte_quality in HARTE_TO_PYCHORD_QUALITY:
        return HARTE_TO_PYCHORD_QUALITY[harte_quality]
    msg = f"Unknown Harte quality: {harte_quality}"
    raise ValueError(msg)


def chord_to_harte(chord: Chord) -> str:
    """Convert a Chord to Harte notation.

    Chords without a shorthand are written as an explicit interval list.
    A bass other than the root is written as an interval degree.

    Examples
    --------
    >>> from harmony_notation.engine import build_chord_from_roman
    >>> from harmony_notation.keys import build_key
    >>> from harmony_notation.roman import parse_roman_numeral
    >>> chord_to_harte(build_chord_from_roman(build_key("C", "major"), parse_roman_numeral("V6/5"), "input"))
    'G:7/3'
    """
    shorthand = harte_shorthand(chord)
    if shorthand is None:
        intervals = ",".join(interval_name(chord.root, note) for note in chord.notes[1:])
        shorthand = f"({intervals})"
    result = f"{chord.root.name}:{shorthand}"
    if chord.bass != chord.root:
        result = f"{result}/{interval_name(chord.root, chord.bass)}"
    return result


def chord_to_pychord(chord: Chord) -> str:
    """Convert a Chord to pychord notation.

    Raises
    ------
    ValueError
        If the chord has no pychord quality (augmented sixth chords).

    Examples
    --------
    >>> from harmony_notation.engine import build_chord_from_roman
    >>> from harmony_notation.keys import build_key
    >>> from harmony_notation.roman import parse_roman_numeral
    >>> chord_to_pychord(build_chord_from_roman(build_key("C", "major"), parse_roman_numeral("viiø6/5"), "input"))
    'Bm7-5/D'
    """
    shorthand = harte_shorthand(chord)
    if shorthand is None:
        msg = f"No pychord quality for chord: {chord.symbol}"
        raise ValueError(msg)
    result = f"{chord.root.name}{harte_quality_to_pychord(shorthand)}"
    if chord.bass != chord.root:
        result = f"{result}/{chord.bass.name}"
    return result
