"""Chord tone stacking and bass selection."""

from __future__ import annotations

from harmony_notation.models import ChordQuality, Inversion, Note, SeventhQuality
from harmony_notation.notes import transpose_by_interval

# Semitones above the root for root, third and fifth
TRIAD_SEMITONES: dict[ChordQuality, tuple[int, int, int]] = {
    "major": (0, 4, 7),
    "minor": (0, 3, 7),
    "diminished": (0, 3, 6),
    "augmented": (0, 4, 8),
}

# Semitones above the root for the seventh (None for triads)
SEVENTH_SEMITONES: dict[SeventhQuality, int | None] = {
    "none": None,
    "dominant7": 10,
    "major7": 11,
    "minor7": 10,
    "halfDim7": 10,
    "dim7": 9,
}

INVERSION_INDEX: dict[Inversion, int] = {
    "root": 0,
    "first": 1,
    "second": 2,
    "third": 3,
}


def build_chord_tones(root: Note, quality: ChordQuality, seventh: SeventhQuality) -> tuple[Note, ...]:
    """Stack the chord tones above a root in thirds.

    Parameters
    ----------
    root : Note
        The chord root.
    quality : ChordQuality
        Triad quality.
    seventh : SeventhQuality
        Seventh quality, "none" for a triad.

    Returns
    -------
    tuple[Note, ...]
        Three or four notes in root-position order.

    Examples
    --------
    >>> from harmony_notation.notes import make_note
    >>> [n.name for n in build_chord_tones(make_note("B"), "diminished", "dim7")]
    ['B', 'D', 'F', 'Ab']
    """
    tones = [
        transpose_by_interval(root, index * 2, semitones)
        for index, semitones in enumerate(TRIAD_SEMITONES[quality])
    ]
    seventh_semitones = SEVENTH_SEMITONES[seventh]
    if seventh_semitones is not None:
        tones.append(transpose_by_interval(root, 6, seventh_semitones))
    return tuple(tones)


def apply_inversion(notes: tuple[Note, ...], inversion: Inversion) -> Note:
    """Return the chord tone sounding in the bass for an inversion.

    Raises
    ------
    ValueError
        If third inversion is requested for a triad.
    """
    index = INVERSION_INDEX[inversion]
    if index >= len(notes):
        msg = f"{inversion} inversion needs {index + 1} chord tones, got {len(notes)}"
        raise ValueError(msg)
    return notes[index]


def inversion_for_index(index: int) -> Inversion:
    """Return the inversion that puts chord tone ``index`` in the bass.

    Indices outside 1-3 (including -1 for "not a chord tone") give root.
    """
    for inversion, inversion_index in INVERSION_INDEX.items():
        if inversion_index == index:
            return inversion
    return "root"
