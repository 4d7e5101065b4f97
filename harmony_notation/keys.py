"""Key and scale construction."""

from __future__ import annotations

from harmony_notation.models import Key, Mode, Note, ScaleType
from harmony_notation.notes import make_note, parse_note_name, transpose_by_interval

# Semitones above the tonic for each scale degree
SCALE_INTERVALS: dict[ScaleType, tuple[int, ...]] = {
    "major": (0, 2, 4, 5, 7, 9, 11),
    "naturalMinor": (0, 2, 3, 5, 7, 8, 10),
    "harmonicMinor": (0, 2, 3, 5, 7, 8, 11),
    "melodicMinor": (0, 2, 3, 5, 7, 9, 11),
}

# Scale stored on a Key for each mode. Raised leading tones in minor are
# applied where a chord needs them, not baked into the key.
MODE_SCALE_TYPE: dict[Mode, ScaleType] = {
    "major": "major",
    "minor": "naturalMinor",
}

SHARP_MAJOR_TONICS: frozenset[str] = frozenset({"G", "D", "A", "E", "B", "F#", "C#"})
SHARP_MINOR_TONICS: frozenset[str] = frozenset({"E", "B", "F#", "C#", "G#", "D#", "A#"})


def build_scale(tonic: Note, scale_type: ScaleType) -> tuple[Note, ...]:
    """Build the seven notes of a scale, one per letter name.

    Examples
    --------
    >>> from harmony_notation.notes import make_note
    >>> [n.name for n in build_scale(make_note("A"), "harmonicMinor")]
    ['A', 'B', 'C', 'D', 'E', 'F', 'G#']
    """
    return tuple(
        transpose_by_interval(tonic, degree_index, semitones)
        for degree_index, semitones in enumerate(SCALE_INTERVALS[scale_type])
    )


def prefers_sharps(tonic_name: str, mode: Mode) -> bool:
    """Return whether a key signature is spelled with sharps."""
    if "#" in tonic_name:
        return True
    if "b" in tonic_name:
        return False
    if mode == "major":
        return tonic_name in SHARP_MAJOR_TONICS
    return tonic_name in SHARP_MINOR_TONICS


def key_from_tonic(tonic: Note, mode: Mode) -> Key:
    """Build a key from an already parsed tonic note."""
    return Key(
        tonic=tonic,
        mode=mode,
        prefer_sharps=prefers_sharps(tonic.name, mode),
        scale=build_scale(tonic, MODE_SCALE_TYPE[mode]),
    )


def build_key(tonic_name: str, mode: Mode) -> Key:
    """Build a key from a tonic name and mode.

    Parameters
    ----------
    tonic_name : str
        Tonic note name (e.g., "Eb", "f#").
    mode : Mode
        Either "major" or "minor".

    Returns
    -------
    Key
        The key with its diatonic scale.

    Raises
    ------
    ValueError
        If the tonic name is not a note name.

    Examples
    --------
    >>> key = build_key("Bb", "minor")
    >>> key.name
    'Bb minor'
    >>> [n.name for n in key.scale]
    ['Bb', 'C', 'Db', 'Eb', 'F', 'Gb', 'Ab']
    """
    tonic = parse_note_name(tonic_name)
    if tonic is None:
        msg = f"Invalid tonic: {tonic_name}"
        raise ValueError(msg)
    if mode not in MODE_SCALE_TYPE:
        msg = f"Invalid mode: {mode}"
        raise ValueError(msg)
    return key_from_tonic(tonic, mode)


def degree_to_scale_note(key: Key, degree: int, accidental: int = 0) -> Note:
    """Return the scale note of a degree, altered by ``accidental``.

    The alteration is added to the scale note's own accidental, so bVI in
    A major is F (F# lowered), not E#.

    Examples
    --------
    >>> degree_to_scale_note(build_key("A", "major"), 6, -1).name
    'F'
    """
    base = key.scale[degree - 1]
    return make_note(base.letter, base.accidental + accidental)
