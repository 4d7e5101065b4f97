"""Pitch class operations for chord matching.

This module provides pitch class (0-11) representations of note
collections, as sets and as 12-bin chroma vectors, so chords can be
compared on sounding content rather than on spelling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterable

    from harmony_notation.models import Note

N_PITCH_CLASSES = 12


def pitch_class_set(notes: Iterable[Note]) -> frozenset[int]:
    """Convert notes to a set of pitch classes.

    Examples
    --------
    >>> from harmony_notation.notes import parse_note_list
    >>> sorted(pitch_class_set(parse_note_list("C E G C")))
    [0, 4, 7]
    """
    return frozenset(note.pitch_class for note in notes)


def chroma(notes: Iterable[Note]) -> np.ndarray:
    """Convert notes to a binary chroma vector.

    Parameters
    ----------
    notes : Iterable[Note]
        Notes to mark. Repeated pitch classes are marked once.

    Returns
    -------
    np.ndarray
        Boolean array of shape (12,), True where a pitch class sounds.

    Examples
    --------
    >>> from harmony_notation.notes import parse_note_list
    >>> np.flatnonzero(chroma(parse_note_list("G B D F"))).tolist()
    [2, 5, 7, 11]
    """
    vector = np.zeros(N_PITCH_CLASSES, dtype=bool)
    for note in notes:
        vector[note.pitch_class] = True
    return vector


def same_pitch_classes(notes1: Iterable[Note], notes2: Iterable[Note]) -> bool:
    """Check whether two note collections sound the same pitch classes.

    Examples
    --------
    >>> from harmony_notation.notes import parse_note_list
    >>> same_pitch_classes(parse_note_list("C E G"), parse_note_list("G C E"))
    True
    """
    return bool(np.array_equal(chroma(notes1), chroma(notes2)))


def contains_pitch_classes(container: Iterable[Note], subset: Iterable[Note]) -> bool:
    """Check that every pitch class of ``subset`` sounds in ``container``.

    Examples
    --------
    >>> from harmony_notation.notes import parse_note_list
    >>> contains_pitch_classes(parse_note_list("G B D F"), parse_note_list("B F"))
    True
    >>> contains_pitch_classes(parse_note_list("C E G"), parse_note_list("C Eb"))
    False
    """
    return not bool(np.any(chroma(subset) & ~chroma(container)))
