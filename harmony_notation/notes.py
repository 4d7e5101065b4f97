"""Note algebra: spelling, parsing and interval transposition.

Every derived note is spelled by moving the letter name and then choosing
the accidental that lands on the wanted pitch class, so results keep a
correct enharmonic spelling (a major third above Db is F, not E#).
"""

from __future__ import annotations

import logging
import re

from harmony_notation.models import LETTERS, NATURAL_PC, Letter, Note

logger = logging.getLogger(__name__)

# Accidental token to signed semitone count. "x" is a double sharp and
# "bx" a single sharp, following the notation this grammar accepts.
ACCIDENTAL_TOKENS: dict[str, int] = {
    "": 0,
    "b": -1,
    "bb": -2,
    "#": 1,
    "##": 2,
    "x": 2,
    "bx": 1,
}

NOTE_RE = re.compile(r"^([A-Ga-g])(bb|bx|b|##|#|x)?$")
NOTE_LIST_SPLIT_RE = re.compile(r"[,\s]+")


def make_note(letter: Letter, accidental: int = 0) -> Note:
    """Build a note from a letter and a signed accidental count.

    Examples
    --------
    >>> make_note("F", 1).name
    'F#'
    >>> make_note("C", -1).pitch_class
    11
    """
    return Note(letter=letter, accidental=accidental)


def format_note_name(note: Note) -> str:
    """Return the display name of a note (e.g., "Bb")."""
    return note.name


def parse_note_name(text: str) -> Note | None:
    """Parse a note name such as "Bb", "f#" or "Cx".

    Parameters
    ----------
    text : str
        Letter (any case) optionally followed by b, bb, #, ##, x or bx.

    Returns
    -------
    Note | None
        The parsed note, or None if the text is not a note name.

    Examples
    --------
    >>> parse_note_name("eb").name
    'Eb'
    >>> parse_note_name("H") is None
    True
    """
    match = NOTE_RE.match(text.strip())
    if match is None:
        return None
    letter = match.group(1).upper()
    accidental = ACCIDENTAL_TOKENS[match.group(2) or ""]
    return make_note(letter, accidental)  # type: ignore[arg-type]


def _nearest_accidental(letter: Letter, target_pc: int) -> int:
    """Smallest accidental taking ``letter`` to ``target_pc``, in (-6, 6]."""
    diff = (target_pc - NATURAL_PC[letter]) % 12
    if diff > 6:
        diff -= 12
    return diff


def transpose_by_interval(note: Note, letter_steps: int, semitones: int) -> Note:
    """Transpose a note by a spelled interval.

    Parameters
    ----------
    note : Note
        The starting note.
    letter_steps : int
        Number of letter names to advance (2 for a third, 4 for a fifth).
    semitones : int
        Size of the interval in semitones.

    Returns
    -------
    Note
        The note ``letter_steps`` letters above, spelled to match the
        pitch class ``note.pitch_class + semitones``.

    Examples
    --------
    >>> transpose_by_interval(make_note("D", -1), 2, 4).name
    'F'
    >>> transpose_by_interval(make_note("B"), 4, 6).name
    'F'
    """
    start = LETTERS.index(note.letter)
    letter = LETTERS[(start + letter_steps) % len(LETTERS)]
    target_pc = (note.pitch_class + semitones) % 12
    return make_note(letter, _nearest_accidental(letter, target_pc))


def shift_note_by_semitones(note: Note, semitones: int) -> Note:
    """Move a note by semitones while keeping its letter name.

    Examples
    --------
    >>> shift_note_by_semitones(make_note("G"), 1).name
    'G#'
    """
    target_pc = (note.pitch_class + semitones) % 12
    return make_note(note.letter, _nearest_accidental(note.letter, target_pc))


def parse_note_list(text: str) -> tuple[Note, ...]:
    """Parse a whitespace/comma separated list of note names.

    Tokens that are not note names are skipped.

    Examples
    --------
    >>> [n.name for n in parse_note_list("C, E  G# zz")]
    ['C', 'E', 'G#']
    """
    notes = []
    for token in NOTE_LIST_SPLIT_RE.split(text):
        if not token:
            continue
        note = parse_note_name(token)
        if note is None:
            logger.debug("Skipping unrecognized note token %r", token)
            continue
        notes.append(note)
    return tuple(notes)
