"""Value types for the harmony notation engine.

This module provides the immutable data structures shared by every layer:
notes, keys, parsed Roman numerals and chord symbols, resolved chords, and
the plain conversion results handed to callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

Letter = Literal["C", "D", "E", "F", "G", "A", "B"]
Mode = Literal["major", "minor"]
ScaleType = Literal["major", "naturalMinor", "harmonicMinor", "melodicMinor"]
ChordQuality = Literal["major", "minor", "diminished", "augmented"]
SeventhQuality = Literal["none", "dominant7", "major7", "minor7", "halfDim7", "dim7"]
Inversion = Literal["root", "first", "second", "third"]

LETTERS: tuple[Letter, ...] = ("C", "D", "E", "F", "G", "A", "B")

# Pitch class of each natural letter (C=0)
NATURAL_PC: dict[Letter, int] = {
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
    "A": 9,
    "B": 11,
}


def accidental_to_text(accidental: int) -> str:
    """Render a signed accidental count as ``#``/``b`` characters."""
    if accidental > 0:
        return "#" * accidental
    return "b" * -accidental


@dataclass(frozen=True)
class Note:
    """A spelled pitch class.

    Parameters
    ----------
    letter : Letter
        The letter name (e.g., "B").
    accidental : int
        Signed count of sharps (positive) or flats (negative).

    Examples
    --------
    >>> note = Note(letter="B", accidental=-1)
    >>> note.name
    'Bb'
    >>> note.pitch_class
    10
    """

    letter: Letter
    accidental: int = 0

    @property
    def pitch_class(self) -> int:
        """Return the pitch class (0-11) implied by letter and accidental."""
        return (NATURAL_PC[self.letter] + self.accidental) % 12

    @property
    def name(self) -> str:
        """Return the display name (e.g., "F#", "Ebb")."""
        return f"{self.letter}{accidental_to_text(self.accidental)}"

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Key:
    """A tonic and mode with its seven-note diatonic scale.

    Parameters
    ----------
    tonic : Note
        The tonic note.
    mode : Mode
        Either "major" or "minor".
    prefer_sharps : bool
        Whether the key conventionally spells accidentals with sharps.
    scale : tuple[Note, ...]
        The seven scale notes, index 0 being the tonic. Minor keys store
        the natural-minor form.
    """

    tonic: Note
    mode: Mode
    prefer_sharps: bool
    scale: tuple[Note, ...]

    @property
    def name(self) -> str:
        """Return the key label (e.g., "Bb minor")."""
        return f"{self.tonic.name} {self.mode}"


@dataclass(frozen=True)
class RomanNumeralTarget:
    """The scale degree tonicized by a secondary function.

    Parameters
    ----------
    degree : int
        Scale degree 1-7.
    accidental : int
        Chromatic alteration of the degree.
    """

    degree: int
    accidental: int = 0


@dataclass(frozen=True)
class RomanNumeral:
    """Parsed analytical intent, not yet resolved against a key.

    Parameters
    ----------
    degree : int
        Scale degree 1-7.
    accidental : int
        Chromatic alteration of the degree (e.g., -1 for "bVI").
    quality : ChordQuality
        Triad quality.
    seventh : SeventhQuality
        Seventh quality, "none" for triads.
    inversion : Inversion
        Inversion given by the figured-bass signature.
    secondary : RomanNumeralTarget | None
        Tonicized degree for secondary functions (e.g., "V/V").
    """

    degree: int
    accidental: int
    quality: ChordQuality
    seventh: SeventhQuality = "none"
    inversion: Inversion = "root"
    secondary: RomanNumeralTarget | None = None


@dataclass(frozen=True)
class ParsedChordSymbol:
    """Parsed, key-independent chord symbol.

    Parameters
    ----------
    root : Note
        The chord root.
    quality : ChordQuality
        Triad quality.
    seventh : SeventhQuality
        Seventh quality, "none" for triads.
    bass : Note | None
        The slash bass, if one was written.
    """

    root: Note
    quality: ChordQuality
    seventh: SeventhQuality = "none"
    bass: Note | None = None


@dataclass(frozen=True)
class Chord:
    """A chord resolved in a key, with both of its labels.

    Parameters
    ----------
    root : Note
        The chord root.
    quality : ChordQuality
        Triad quality.
    seventh : SeventhQuality
        Seventh quality.
    notes : tuple[Note, ...]
        Chord tones in root-position stacking order (3 or 4 notes).
    bass : Note
        The sounding bass, always one of ``notes``.
    inversion : Inversion
        Which chord tone is in the bass.
    roman : str
        Roman-numeral label (e.g., "V6/5").
    symbol : str
        Chord-symbol label (e.g., "G7/B").
    vocabulary_tag : str
        Category of the chord within a key's vocabulary, or "input".
    """

    root: Note
    quality: ChordQuality
    seventh: SeventhQuality
    notes: tuple[Note, ...]
    bass: Note
    inversion: Inversion
    roman: str
    symbol: str
    vocabulary_tag: str

    def to_harte(self) -> str:
        """Convert to Harte notation string.

        Returns
        -------
        str
            Chord in Harte notation (e.g., "G:7/3").
        """
        from harmony_notation.converter import chord_to_harte

        return chord_to_harte(self)

    def to_pychord(self) -> str:
        """Convert to pychord notation string.

        Returns
        -------
        str
            Chord in pychord notation (e.g., "Bm7-5").
        """
        from harmony_notation.converter import chord_to_pychord

        return chord_to_pychord(self)

    def __str__(self) -> str:
        """Return the chord symbol as default string representation."""
        return self.symbol


@dataclass(frozen=True)
class ConversionResult:
    """Plain result of a conversion or harmonization.

    Parameters
    ----------
    key_name : str
        The key the chord was read in (e.g., "C major").
    roman : str
        Roman-numeral label.
    symbol : str
        Chord-symbol label.
    chord_tones : tuple[str, ...]
        Note names in root-position order.
    inversion : Inversion
        Which chord tone is in the bass.
    vocabulary_tag : str
        Vocabulary category, or "input" when the chord was not matched.
    """

    key_name: str
    roman: str
    symbol: str
    chord_tones: tuple[str, ...]
    inversion: Inversion
    vocabulary_tag: str

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable mapping of the result."""
        return {
            "key": self.key_name,
            "roman": self.roman,
            "symbol": self.symbol,
            "chord_tones": list(self.chord_tones),
            "inversion": self.inversion,
            "vocabulary_tag": self.vocabulary_tag,
        }


HarmonizationResult = ConversionResult
