"""Tests for the Roman-numeral grammar."""

import pytest

from harmony_notation.models import RomanNumeral, RomanNumeralTarget
from harmony_notation.roman import (
    format_inversion_figure,
    format_roman_numeral,
    parse_accidentals,
    parse_roman_numeral,
    parse_secondary,
)


class TestParseQuality:
    @pytest.mark.parametrize(
        ("text", "quality"),
        [
            ("I", "major"),
            ("ii", "minor"),
            ("Vi", "minor"),
            ("III+", "augmented"),
            ("viio", "diminished"),
            ("vii°", "diminished"),
            ("viiø7", "diminished"),
        ],
    )
    def test_quality(self, text, quality):
        assert parse_roman_numeral(text).quality == quality

    def test_degree_and_accidental(self):
        roman = parse_roman_numeral("bVII")
        assert roman.degree == 7
        assert roman.accidental == -1
        assert parse_roman_numeral("#iv").accidental == 1
        assert parse_roman_numeral("bbVI").accidental == -2


class TestParseSeventh:
    @pytest.mark.parametrize(
        ("text", "seventh"),
        [
            ("V", "none"),
            ("viio", "none"),
            ("V7", "dominant7"),
            ("ii7", "dominant7"),
            ("iim7", "minor7"),
            ("IM7", "major7"),
            ("viiø7", "halfDim7"),
            ("viio7", "dim7"),
            ("vii°7", "dim7"),
            ("V6/5", "dominant7"),
            ("ii6/5", "minor7"),
            ("viio4/3", "dim7"),
            ("viiø4/2", "halfDim7"),
            ("IM6/5", "major7"),
        ],
    )
    def test_seventh(self, text, seventh):
        assert parse_roman_numeral(text).seventh == seventh


class TestParseInversion:
    @pytest.mark.parametrize(
        ("text", "inversion"),
        [
            ("I", "root"),
            ("I6", "first"),
            ("I6/4", "second"),
            ("I64", "second"),
            ("viio6", "first"),
            ("V7", "root"),
            ("V6/5", "first"),
            ("V4/3", "second"),
            ("V4/2", "third"),
            ("viiø6/5", "first"),
            ("IM4/3", "second"),
        ],
    )
    def test_inversion(self, text, inversion):
        assert parse_roman_numeral(text).inversion == inversion


class TestParseSecondary:
    def test_secondary_dominant(self):
        roman = parse_roman_numeral("V7/V")
        assert roman.degree == 5
        assert roman.seventh == "dominant7"
        assert roman.secondary == RomanNumeralTarget(degree=5, accidental=0)

    def test_secondary_with_figure(self):
        roman = parse_roman_numeral("V6/5/ii")
        assert roman.inversion == "first"
        assert roman.secondary == RomanNumeralTarget(degree=2, accidental=0)

    def test_secondary_with_accidental(self):
        assert parse_roman_numeral("V/bVI").secondary == RomanNumeralTarget(degree=6, accidental=-1)

    def test_parse_secondary(self):
        assert parse_secondary("iv") == RomanNumeralTarget(degree=4)
        assert parse_secondary("IIII") is None
        assert parse_secondary("V7") is None

    def test_parse_accidentals(self):
        assert parse_accidentals("") == 0
        assert parse_accidentals("##") == 2
        assert parse_accidentals("b") == -1


class TestParseInvalid:
    @pytest.mark.parametrize("text", ["", "   ", "X", "IIII", "7", "V/x", "V/IIII", "V/"])
    def test_invalid(self, text):
        assert parse_roman_numeral(text) is None

    def test_whitespace_is_trimmed(self):
        assert parse_roman_numeral("  V7 ").seventh == "dominant7"


class TestFormat:
    @pytest.mark.parametrize(
        ("roman", "expected"),
        [
            (RomanNumeral(degree=1, accidental=0, quality="major"), "I"),
            (RomanNumeral(degree=2, accidental=0, quality="minor", inversion="first"), "ii6"),
            (RomanNumeral(degree=7, accidental=0, quality="diminished"), "viio"),
            (RomanNumeral(degree=7, accidental=0, quality="diminished", inversion="second"), "viio6/4"),
            (RomanNumeral(degree=3, accidental=-1, quality="augmented"), "bIII+"),
            (RomanNumeral(degree=5, accidental=0, quality="major", seventh="dominant7"), "V7"),
            (RomanNumeral(degree=1, accidental=0, quality="major", seventh="major7", inversion="third"), "IM4/2"),
            (RomanNumeral(degree=2, accidental=0, quality="minor", seventh="minor7", inversion="first"), "ii6/5"),
            (RomanNumeral(degree=7, accidental=0, quality="diminished", seventh="dim7"), "viio7"),
            (RomanNumeral(degree=7, accidental=0, quality="diminished", seventh="dim7", inversion="second"), "viio4/3"),
            (RomanNumeral(degree=7, accidental=0, quality="diminished", seventh="halfDim7"), "viiø7"),
            (
                RomanNumeral(
                    degree=5,
                    accidental=0,
                    quality="major",
                    seventh="dominant7",
                    secondary=RomanNumeralTarget(degree=2),
                ),
                "V7/II",
            ),
            (RomanNumeral(degree=2, accidental=-1, quality="major", inversion="first"), "bII6"),
        ],
    )
    def test_format(self, roman, expected):
        assert format_roman_numeral(roman) == expected

    def test_format_inversion_figure(self):
        assert format_inversion_figure("root", False) == ""
        assert format_inversion_figure("first", False) == "6"
        assert format_inversion_figure("third", True) == "4/2"


class TestRoundTrip:
    @pytest.mark.parametrize(
        "text",
        [
            "I",
            "ii6",
            "viio6/4",
            "bIII+",
            "V7",
            "V6/5",
            "V4/3",
            "V4/2",
            "IM7",
            "IM6/5",
            "viiø7",
            "viiø4/3",
            "viio7",
            "viio6/5",
            "viio4/2",
            "V7/II",
            "viio/VI",
            "bII6",
            "#iv",
        ],
    )
    def test_parse_format_roundtrip(self, text):
        assert format_roman_numeral(parse_roman_numeral(text)) == text
