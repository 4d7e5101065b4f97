"""Harmony engine: resolve, enumerate, convert and harmonize.

This module ties the grammars to the key model. Roman numerals are
resolved into Chords in a key; a key's standard vocabulary is enumerated
from fixed Roman-numeral lists; chord symbols are converted to Roman
numerals by matching them against that vocabulary; and note sets are
harmonized by searching the vocabulary for chords containing them.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Literal

from harmony_notation.chords import apply_inversion, build_chord_tones, inversion_for_index
from harmony_notation.keys import build_key, degree_to_scale_note, key_from_tonic
from harmony_notation.models import (
    LETTERS,
    Chord,
    ChordQuality,
    ConversionResult,
    HarmonizationResult,
    Inversion,
    Key,
    Mode,
    Note,
    ParsedChordSymbol,
    RomanNumeral,
    SeventhQuality,
)
from harmony_notation.notes import make_note, parse_note_list, parse_note_name
from harmony_notation.pitch_class import contains_pitch_classes, same_pitch_classes
from harmony_notation.roman import format_roman_numeral, parse_roman_numeral
from harmony_notation.symbols import format_chord_symbol, parse_chord_symbol

logger = logging.getLogger(__name__)

AugmentedSixthKind = Literal["It+6", "Fr+6", "Ger+6"]

AUGMENTED_SIXTH_KINDS: tuple[AugmentedSixthKind, ...] = ("It+6", "Fr+6", "Ger+6")

DIATONIC_TRIADS: dict[Mode, tuple[str, ...]] = {
    "major": ("I", "ii", "iii", "IV", "V", "vi", "viio"),
    "minor": ("i", "iio", "III", "iv", "V", "VI", "viio"),
}
DIATONIC_SEVENTHS: dict[Mode, tuple[str, ...]] = {
    "major": ("IM7", "ii7", "iii7", "IVM7", "V7", "vi7", "viiø7"),
    "minor": ("i7", "iiø7", "IIIM7", "iv7", "V7", "VIM7", "viio7"),
}
MODAL_MIXTURE: dict[Mode, tuple[str, ...]] = {
    "major": ("iv", "bIII", "bVI", "bVII", "iio"),
    "minor": ("I", "IV", "V", "bII", "bVI", "bVII"),
}
SECONDARY_TARGETS: tuple[int, ...] = (2, 3, 4, 5, 6)

# A bare "7" on a diminished or minor triad names the diatonic seventh
SEVENTH_FOR_QUALITY: dict[ChordQuality, dict[SeventhQuality, SeventhQuality]] = {
    "diminished": {"dominant7": "halfDim7"},
    "minor": {"dominant7": "minor7"},
}


def secondary_key(key: Key, roman: RomanNumeral) -> Key:
    """Return the key a Roman numeral is read in.

    Secondary functions are read in the major key built on their target
    degree; anything else is read in ``key`` itself.

    Examples
    --------
    >>> from harmony_notation.keys import build_key
    >>> from harmony_notation.roman import parse_roman_numeral
    >>> secondary_key(build_key("C", "minor"), parse_roman_numeral("V/III")).name
    'Eb major'
    """
    if roman.secondary is None:
        return key
    target = degree_to_scale_note(key, roman.secondary.degree, roman.secondary.accidental)
    return key_from_tonic(target, "major")


def _resolve_seventh(quality: ChordQuality, seventh: SeventhQuality) -> SeventhQuality:
    return SEVENTH_FOR_QUALITY.get(quality, {}).get(seventh, seventh)


def build_chord_from_roman(
    key: Key,
    roman: RomanNumeral,
    vocabulary_tag: str,
    raise_leading_tone: bool = True,
) -> Chord:
    """Resolve a Roman numeral into a Chord in a key.

    Parameters
    ----------
    key : Key
        The home key.
    roman : RomanNumeral
        The parsed numeral.
    vocabulary_tag : str
        Category label to attach to the chord.
    raise_leading_tone : bool
        Whether a diminished vii in a minor key is moved onto the raised
        leading tone. Off when the root comes from a written chord symbol.

    Returns
    -------
    Chord
        The resolved chord. In minor keys an unaltered diminished vii
        with no secondary target is built on the raised leading tone.

    Examples
    --------
    >>> from harmony_notation.keys import build_key
    >>> from harmony_notation.roman import parse_roman_numeral
    >>> chord = build_chord_from_roman(build_key("C", "major"), parse_roman_numeral("V6/5"), "input")
    >>> chord.symbol, chord.bass.name
    ('G7/B', 'B')
    """
    target_key = secondary_key(key, roman)
    root = degree_to_scale_note(target_key, roman.degree, roman.accidental)
    if (
        raise_leading_tone
        and target_key.mode == "minor"
        and roman.degree == 7
        and roman.accidental == 0
        and roman.quality == "diminished"
        and roman.secondary is None
    ):
        root = make_note(root.letter, root.accidental + 1)

    seventh = _resolve_seventh(roman.quality, roman.seventh)
    notes = build_chord_tones(root, roman.quality, seventh)
    bass = apply_inversion(notes, roman.inversion)
    symbol_bass = None if roman.inversion == "root" else bass
    return Chord(
        root=root,
        quality=roman.quality,
        seventh=seventh,
        notes=notes,
        bass=bass,
        inversion=roman.inversion,
        roman=format_roman_numeral(roman),
        symbol=format_chord_symbol(root, roman.quality, seventh, symbol_bass),
        vocabulary_tag=vocabulary_tag,
    )


def build_augmented_sixth_chord(key: Key, kind: AugmentedSixthKind, vocabulary_tag: str) -> Chord:
    """Build an Italian, French or German augmented sixth chord.

    The chord is spelled from scale degrees: the lowered sixth (in the
    bass), the tonic, the raised fourth, plus the second degree for the
    French and the (minor) third degree for the German variety.

    Examples
    --------
    >>> from harmony_notation.keys import build_key
    >>> chord = build_augmented_sixth_chord(build_key("C", "major"), "Ger+6", "augmented-sixth")
    >>> chord.symbol, [n.name for n in chord.notes]
    ('Ab+6(Ger)', ['Ab', 'C', 'Eb', 'F#'])
    """
    if kind not in AUGMENTED_SIXTH_KINDS:
        msg = f"Unknown augmented sixth chord: {kind}"
        raise ValueError(msg)
    lowered = 0 if key.mode == "minor" else -1
    flat_six = degree_to_scale_note(key, 6, lowered)
    tonic = degree_to_scale_note(key, 1)
    sharp_four = degree_to_scale_note(key, 4, 1)
    if kind == "Fr+6":
        notes: tuple[Note, ...] = (flat_six, tonic, degree_to_scale_note(key, 2), sharp_four)
    elif kind == "Ger+6":
        notes = (flat_six, tonic, degree_to_scale_note(key, 3, lowered), sharp_four)
    else:
        notes = (flat_six, tonic, sharp_four)
    return Chord(
        root=flat_six,
        quality="major",
        seventh="none",
        notes=notes,
        bass=flat_six,
        inversion="root",
        roman=kind,
        symbol=f"{flat_six.name}+6({kind.removesuffix('+6')})",
        vocabulary_tag=vocabulary_tag,
    )


def _vocabulary_entries(mode: Mode) -> list[tuple[str, str]]:
    """Roman numeral text and vocabulary tag of every generated chord."""
    entries = [(text, "diatonic-triad") for text in DIATONIC_TRIADS[mode]]
    entries += [(text, "diatonic-seventh") for text in DIATONIC_SEVENTHS[mode]]
    entries += [(text, "modal-mixture") for text in MODAL_MIXTURE[mode]]
    for degree in SECONDARY_TARGETS:
        target = format_roman_numeral(RomanNumeral(degree=degree, accidental=0, quality="major"))
        entries += [
            (f"V/{target}", "secondary-dominant"),
            (f"viio/{target}", "secondary-leading-tone"),
            (f"V7/{target}", "secondary-dominant"),
        ]
    if mode == "minor":
        entries.append(("bII6", "neapolitan"))
    return entries


def generate_vocabulary(key: Key) -> tuple[Chord, ...]:
    """Enumerate the standard chords of a key.

    Parameters
    ----------
    key : Key
        The key to enumerate.

    Returns
    -------
    tuple[Chord, ...]
        Diatonic triads, diatonic sevenths, modal-mixture chords,
        secondary dominants and leading-tone chords of degrees 2-6, the
        Neapolitan (minor keys only) and the three augmented sixths, in
        that order.

    Notes
    -----
    Lowered degrees of flat minor keys can need three flats (bVI in Db
    minor is Bbbb). Such symbols are produced but note names only accept
    up to two accidentals, so ``parse_chord_symbol`` cannot read them back.

    Examples
    --------
    >>> from harmony_notation.keys import build_key
    >>> vocabulary = generate_vocabulary(build_key("C", "major"))
    >>> [chord.symbol for chord in vocabulary[:7]]
    ['C', 'Dm', 'Em', 'F', 'G', 'Am', 'Bdim']
    """
    vocabulary = []
    for text, tag in _vocabulary_entries(key.mode):
        roman = parse_roman_numeral(text)
        if roman is None:
            continue
        vocabulary.append(build_chord_from_roman(key, roman, tag))
    vocabulary.extend(build_augmented_sixth_chord(key, kind, "augmented-sixth") for kind in AUGMENTED_SIXTH_KINDS)
    return tuple(vocabulary)


def chord_to_result(key: Key, chord: Chord) -> ConversionResult:
    """Flatten a Chord into the plain result handed to callers."""
    return ConversionResult(
        key_name=key.name,
        roman=chord.roman,
        symbol=chord.symbol,
        chord_tones=tuple(note.name for note in chord.notes),
        inversion=chord.inversion,
        vocabulary_tag=chord.vocabulary_tag,
    )


def convert_roman_to_symbol(tonic_name: str, mode: Mode, roman_text: str) -> ConversionResult | None:
    """Convert a Roman numeral to a chord symbol in a key.

    Parameters
    ----------
    tonic_name : str
        Tonic of the key (e.g., "C").
    mode : Mode
        Either "major" or "minor".
    roman_text : str
        Roman numeral, or one of "It+6", "Fr+6", "Ger+6".

    Returns
    -------
    ConversionResult | None
        The converted chord, or None if the numeral does not parse.

    Raises
    ------
    ValueError
        If the tonic is not a note name.

    Examples
    --------
    >>> convert_roman_to_symbol("C", "minor", "viio7").symbol
    'Bdim7'
    >>> convert_roman_to_symbol("C", "major", "Z") is None
    True
    """
    key = build_key(tonic_name, mode)
    trimmed = roman_text.strip()
    for kind in AUGMENTED_SIXTH_KINDS:
        if trimmed.startswith(kind):
            return chord_to_result(key, build_augmented_sixth_chord(key, kind, "input"))
    roman = parse_roman_numeral(trimmed)
    if roman is None:
        return None
    return chord_to_result(key, build_chord_from_roman(key, roman, "input"))


def _inversion_from_bass(notes: tuple[Note, ...], bass: Note | None) -> Inversion:
    """Find which chord tone a slash bass names, by spelling then pitch class."""
    if bass is None:
        return "root"
    names = [note.name for note in notes]
    if bass.name in names:
        return inversion_for_index(names.index(bass.name))
    pitch_classes = [note.pitch_class for note in notes]
    if bass.pitch_class in pitch_classes:
        return inversion_for_index(pitch_classes.index(bass.pitch_class))
    return "root"


def roman_from_chord_symbol(key: Key, symbol: ParsedChordSymbol) -> RomanNumeral:
    """Derive a Roman numeral from scale-degree arithmetic alone.

    The degree is the letter distance from the tonic; the accidental is
    the root's accidental relative to the diatonic scale note.

    Examples
    --------
    >>> from harmony_notation.keys import build_key
    >>> from harmony_notation.symbols import parse_chord_symbol
    >>> roman = roman_from_chord_symbol(build_key("D", "major"), parse_chord_symbol("C"))
    >>> format_roman_numeral(roman)
    'bVII'
    """
    tonic_index = LETTERS.index(key.tonic.letter)
    root_index = LETTERS.index(symbol.root.letter)
    degree = (root_index - tonic_index) % 7 + 1
    scale_note = key.scale[degree - 1]
    return RomanNumeral(
        degree=degree,
        accidental=symbol.root.accidental - scale_note.accidental,
        quality=symbol.quality,
        seventh=symbol.seventh,
    )


def convert_symbol_to_roman(tonic_name: str, mode: Mode, symbol_text: str) -> ConversionResult | None:
    """Convert a chord symbol to a Roman numeral in a key.

    The symbol is matched against the key's vocabulary (same root
    spelling, same pitch classes) so it picks up the vocabulary's
    analytical label; unmatched symbols get a label computed from scale
    degrees and the tag "input".

    Parameters
    ----------
    tonic_name : str
        Tonic of the key (e.g., "C").
    mode : Mode
        Either "major" or "minor".
    symbol_text : str
        Chord symbol (e.g., "G7/D").

    Returns
    -------
    ConversionResult | None
        The converted chord, or None if the symbol does not parse.

    Raises
    ------
    ValueError
        If the tonic is not a note name.

    Examples
    --------
    >>> convert_symbol_to_roman("C", "major", "G7/D").roman
    'V4/3'
    >>> convert_symbol_to_roman("C", "major", "Bm7b5/D").roman
    'viiø6/5'
    >>> convert_symbol_to_roman("C", "minor", "Bbm7b5").symbol
    'Bbm7b5'
    """
    key = build_key(tonic_name, mode)
    symbol = parse_chord_symbol(symbol_text)
    if symbol is None:
        return None
    notes = build_chord_tones(symbol.root, symbol.quality, symbol.seventh)

    matched = None
    for candidate in generate_vocabulary(key):
        if candidate.root.letter != symbol.root.letter:
            continue
        if candidate.root.pitch_class != symbol.root.pitch_class:
            continue
        if same_pitch_classes(candidate.notes, notes):
            matched = candidate
            break

    roman = parse_roman_numeral(matched.roman) if matched is not None else None
    if roman is None:
        logger.debug("No vocabulary match for %r in %s", symbol_text, key.name)
        roman = roman_from_chord_symbol(key, symbol)
        vocabulary_tag = "input"
    else:
        vocabulary_tag = matched.vocabulary_tag

    roman = replace(roman, inversion=_inversion_from_bass(notes, symbol.bass))
    # An unmatched symbol keeps its written root
    chord = build_chord_from_roman(key, roman, vocabulary_tag, raise_leading_tone=vocabulary_tag != "input")
    return chord_to_result(key, chord)


def harmonize_notes(
    tonic_name: str,
    mode: Mode,
    notes_text: str,
    bass_text: str | None = None,
) -> tuple[HarmonizationResult, ...]:
    """Find the vocabulary chords that contain a set of notes.

    Parameters
    ----------
    tonic_name : str
        Tonic of the key (e.g., "A").
    mode : Mode
        Either "major" or "minor".
    notes_text : str
        Note names separated by spaces or commas. Unrecognized tokens are
        ignored.
    bass_text : str | None
        Optional bass note; when it parses, only chords with that bass
        pitch class are kept.

    Returns
    -------
    tuple[HarmonizationResult, ...]
        Every vocabulary chord whose pitch classes include all the input
        pitch classes, in vocabulary order. Empty when no note parses or
        nothing matches.

    Raises
    ------
    ValueError
        If the tonic is not a note name.

    Examples
    --------
    >>> [r.roman for r in harmonize_notes("A", "minor", "F A D#")]
    ['It+6', 'Fr+6', 'Ger+6']
    """
    key = build_key(tonic_name, mode)
    notes = parse_note_list(notes_text)
    if not notes:
        return ()
    bass = parse_note_name(bass_text) if bass_text else None

    results = []
    for chord in generate_vocabulary(key):
        if not contains_pitch_classes(chord.notes, notes):
            continue
        if bass is not None and chord.bass.pitch_class != bass.pitch_class:
            continue
        results.append(chord_to_result(key, chord))
    return tuple(results)
