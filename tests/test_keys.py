"""Tests for key/scale construction and chord tone stacking."""

import pytest

from harmony_notation.chords import apply_inversion, build_chord_tones, inversion_for_index
from harmony_notation.keys import (
    build_key,
    build_scale,
    degree_to_scale_note,
    key_from_tonic,
    prefers_sharps,
)
from harmony_notation.notes import make_note, parse_note_name


def names(notes):
    return [note.name for note in notes]


class TestBuildScale:
    @pytest.mark.parametrize(
        ("tonic", "scale_type", "expected"),
        [
            ("C", "major", ["C", "D", "E", "F", "G", "A", "B"]),
            ("F#", "major", ["F#", "G#", "A#", "B", "C#", "D#", "E#"]),
            ("Db", "major", ["Db", "Eb", "F", "Gb", "Ab", "Bb", "C"]),
            ("A", "naturalMinor", ["A", "B", "C", "D", "E", "F", "G"]),
            ("A", "harmonicMinor", ["A", "B", "C", "D", "E", "F", "G#"]),
            ("A", "melodicMinor", ["A", "B", "C", "D", "E", "F#", "G#"]),
            ("G#", "harmonicMinor", ["G#", "A#", "B", "C#", "D#", "E", "F##"]),
        ],
    )
    def test_scales(self, tonic, scale_type, expected):
        assert names(build_scale(parse_note_name(tonic), scale_type)) == expected


class TestBuildKey:
    def test_minor_key_stores_natural_minor(self):
        key = build_key("C", "minor")
        assert names(key.scale) == ["C", "D", "Eb", "F", "G", "Ab", "Bb"]

    def test_key_name(self):
        assert build_key("bb", "minor").name == "Bb minor"
        assert build_key("F#", "major").name == "F# major"

    def test_invalid_tonic_raises(self):
        with pytest.raises(ValueError, match="Invalid tonic"):
            build_key("H", "major")

    def test_invalid_mode_raises(self):
        with pytest.raises(ValueError, match="Invalid mode"):
            build_key("C", "dorian")  # type: ignore[arg-type]

    def test_key_from_tonic_matches_build_key(self):
        assert key_from_tonic(make_note("E", -1), "major") == build_key("Eb", "major")

    @pytest.mark.parametrize(
        ("tonic", "mode", "expected"),
        [
            ("G", "major", True),
            ("C", "major", False),
            ("F", "major", False),
            ("Bb", "major", False),
            ("F#", "minor", True),
            ("E", "minor", True),
            ("D", "minor", False),
            ("A", "minor", False),
        ],
    )
    def test_prefer_sharps(self, tonic, mode, expected):
        assert prefers_sharps(tonic, mode) is expected
        assert build_key(tonic, mode).prefer_sharps is expected


class TestDegreeToScaleNote:
    def test_diatonic(self):
        assert degree_to_scale_note(build_key("E", "major"), 7).name == "D#"

    def test_alteration_layers_on_scale_note(self):
        key = build_key("A", "major")
        assert degree_to_scale_note(key, 3, -1).name == "C"
        assert degree_to_scale_note(key, 4, 1).name == "D#"
        assert degree_to_scale_note(build_key("C", "minor"), 6, -1).name == "Abb"


class TestBuildChordTones:
    @pytest.mark.parametrize(
        ("root", "quality", "seventh", "expected"),
        [
            ("C", "major", "none", ["C", "E", "G"]),
            ("D", "minor", "none", ["D", "F", "A"]),
            ("B", "diminished", "none", ["B", "D", "F"]),
            ("Eb", "augmented", "none", ["Eb", "G", "B"]),
            ("G", "major", "dominant7", ["G", "B", "D", "F"]),
            ("F", "major", "major7", ["F", "A", "C", "E"]),
            ("A", "minor", "minor7", ["A", "C", "E", "G"]),
            ("B", "diminished", "halfDim7", ["B", "D", "F", "A"]),
            ("G#", "diminished", "dim7", ["G#", "B", "D", "F"]),
            ("C", "minor", "major7", ["C", "Eb", "G", "B"]),
        ],
    )
    def test_chord_tones(self, root, quality, seventh, expected):
        assert names(build_chord_tones(parse_note_name(root), quality, seventh)) == expected


class TestInversion:
    def test_apply_inversion(self):
        notes = build_chord_tones(make_note("G"), "major", "dominant7")
        assert apply_inversion(notes, "root").name == "G"
        assert apply_inversion(notes, "first").name == "B"
        assert apply_inversion(notes, "second").name == "D"
        assert apply_inversion(notes, "third").name == "F"

    def test_third_inversion_of_triad_is_rejected(self):
        notes = build_chord_tones(make_note("C"), "major", "none")
        with pytest.raises(ValueError):
            apply_inversion(notes, "third")

    @pytest.mark.parametrize(
        ("index", "expected"),
        [(0, "root"), (1, "first"), (2, "second"), (3, "third"), (-1, "root"), (4, "root")],
    )
    def test_inversion_for_index(self, index, expected):
        assert inversion_for_index(index) == expected
