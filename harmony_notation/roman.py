"""Roman-numeral grammar.

This module parses analytical symbols such as "bVI", "viiø6/5" or
"V7/V" into RomanNumeral values and formats them back. The grammar is:

    [b|#]* DEGREE SUFFIX [/ [b|#]* DEGREE]

where DEGREE is I-VII in either case (case selects major or minor), and
SUFFIX carries quality marks (+, o, °, ø), seventh marks (7, M7, ø7, o7)
and figured-bass inversion signatures (6, 6/4, 6/5, 4/3, 4/2).
"""

from __future__ import annotations

import logging
import re

from harmony_notation.models import (
    ChordQuality,
    Inversion,
    RomanNumeral,
    RomanNumeralTarget,
    SeventhQuality,
    accidental_to_text,
)

logger = logging.getLogger(__name__)

ROMAN_DEGREES: dict[str, int] = {
    "I": 1,
    "II": 2,
    "III": 3,
    "IV": 4,
    "V": 5,
    "VI": 6,
    "VII": 7,
}

DEGREE_NUMERALS: tuple[str, ...] = tuple(ROMAN_DEGREES)

ROMAN_RE = re.compile(r"^([b#]*)([ivIV]+)(.*)$")
SECONDARY_RE = re.compile(r"^([b#]*)([ivIV]+)$")
SEVENTH_FIGURE_RE = re.compile(r"6/?5|4/?3|4/?2")

# Figure digits (slashes and the literal 7 removed) to inversion
TRIAD_FIGURES: dict[str, Inversion] = {
    "6": "first",
    "64": "second",
}
SEVENTH_FIGURES: dict[str, Inversion] = {
    "65": "first",
    "43": "second",
    "42": "third",
}

TRIAD_FIGURE_TEXT: dict[Inversion, str] = {
    "root": "",
    "first": "6",
    "second": "6/4",
    "third": "",
}
SEVENTH_FIGURE_TEXT: dict[Inversion, str] = {
    "root": "",
    "first": "6/5",
    "second": "4/3",
    "third": "4/2",
}

SEVENTH_SUFFIX: dict[SeventhQuality, str] = {
    "none": "",
    "dominant7": "7",
    "major7": "M7",
    "minor7": "7",
    "halfDim7": "ø7",
    "dim7": "o7",
}

# Seventh inferred from a bare inversion figure such as "ii6/5"
FIGURE_SEVENTH: dict[ChordQuality, SeventhQuality] = {
    "major": "dominant7",
    "minor": "minor7",
    "diminished": "halfDim7",
    "augmented": "dominant7",
}


def parse_accidentals(text: str) -> int:
    """Count a run of ``b``/``#`` characters as a signed accidental."""
    return text.count("#") - text.count("b")


def parse_degree(numeral: str) -> int | None:
    """Map a Roman numeral (either case) to a scale degree 1-7."""
    return ROMAN_DEGREES.get(numeral.upper())


def parse_secondary(text: str) -> RomanNumeralTarget | None:
    """Parse the target of a secondary function (e.g., "V", "bVI").

    Examples
    --------
    >>> parse_secondary("bVI")
    RomanNumeralTarget(degree=6, accidental=-1)
    >>> parse_secondary("x") is None
    True
    """
    match = SECONDARY_RE.match(text)
    if match is None:
        return None
    degree = parse_degree(match.group(2))
    if degree is None:
        return None
    return RomanNumeralTarget(degree=degree, accidental=parse_accidentals(match.group(1)))


def _parse_quality(numeral: str, suffix: str) -> ChordQuality:
    quality: ChordQuality = "major" if numeral.isupper() else "minor"
    if "+" in suffix:
        quality = "augmented"
    if "o" in suffix or "°" in suffix or "ø" in suffix:
        quality = "diminished"
    return quality


def _parse_seventh(suffix: str, quality: ChordQuality) -> SeventhQuality:
    has_seven = "7" in suffix
    has_figure = SEVENTH_FIGURE_RE.search(suffix) is not None
    if not has_seven and not has_figure:
        return "none"
    # Quality marks apply to a seventh written either as 7 or as a figure
    if "ø" in suffix:
        return "halfDim7"
    if "o" in suffix or "°" in suffix:
        return "dim7"
    if "M" in suffix:
        return "major7"
    if "m" in suffix:
        return "minor7"
    if has_seven:
        return "dominant7"
    return FIGURE_SEVENTH[quality]


def _parse_inversion(suffix: str, is_seventh: bool) -> Inversion:
    figure = "".join(char for char in suffix if char.isdigit() and char != "7")
    if is_seventh:
        return SEVENTH_FIGURES.get(figure, "root")
    return TRIAD_FIGURES.get(figure, "root")


def _split_secondary(text: str) -> tuple[str, str | None]:
    """Split "V7/V" into ("V7", "V"); figure slashes such as "6/4" stay."""
    head, slash, tail = text.rpartition("/")
    if not slash or (tail and tail[0].isdigit()):
        return text, None
    return head, tail


def parse_roman_numeral(text: str) -> RomanNumeral | None:
    """Parse a Roman numeral string.

    Parameters
    ----------
    text : str
        Roman numeral (e.g., "V6/5", "bVII", "viio7", "V7/ii").

    Returns
    -------
    RomanNumeral | None
        The parsed numeral, or None if the degree or the secondary
        target is not recognized.

    Examples
    --------
    >>> roman = parse_roman_numeral("V6/5/V")
    >>> roman.seventh, roman.inversion, roman.secondary.degree
    ('dominant7', 'first', 5)
    >>> parse_roman_numeral("viiø7").quality
    'diminished'
    >>> parse_roman_numeral("X") is None
    True
    """
    trimmed = text.strip()
    if not trimmed:
        return None

    primary, secondary_text = _split_secondary(trimmed)
    secondary = None
    if secondary_text is not None:
        secondary = parse_secondary(secondary_text)
        if secondary is None:
            logger.debug("Rejecting %r: bad secondary target %r", text, secondary_text)
            return None

    match = ROMAN_RE.match(primary)
    if match is None:
        logger.debug("Rejecting %r: no Roman numeral degree", text)
        return None
    accidental_text, numeral, suffix = match.groups()
    degree = parse_degree(numeral)
    if degree is None:
        logger.debug("Rejecting %r: unknown degree %r", text, numeral)
        return None

    quality = _parse_quality(numeral, suffix)
    seventh = _parse_seventh(suffix, quality)
    return RomanNumeral(
        degree=degree,
        accidental=parse_accidentals(accidental_text),
        quality=quality,
        seventh=seventh,
        inversion=_parse_inversion(suffix, seventh != "none"),
        secondary=secondary,
    )


def format_inversion_figure(inversion: Inversion, is_seventh: bool) -> str:
    """Return the figured-bass signature for an inversion.

    Examples
    --------
    >>> format_inversion_figure("second", False)
    '6/4'
    >>> format_inversion_figure("second", True)
    '4/3'
    """
    if is_seventh:
        return SEVENTH_FIGURE_TEXT[inversion]
    return TRIAD_FIGURE_TEXT[inversion]


def format_roman_numeral(roman: RomanNumeral) -> str:
    """Format a RomanNumeral as text.

    Examples
    --------
    >>> format_roman_numeral(RomanNumeral(degree=7, accidental=0, quality="diminished",
    ...                                   seventh="halfDim7", inversion="first"))
    'viiø6/5'
    >>> format_roman_numeral(RomanNumeral(degree=5, accidental=0, quality="major",
    ...                                   secondary=RomanNumeralTarget(degree=2)))
    'V/II'
    """
    numeral = DEGREE_NUMERALS[roman.degree - 1]
    if roman.quality in ("minor", "diminished"):
        numeral = numeral.lower()

    quality_mark = ""
    if roman.quality == "augmented":
        quality_mark = "+"
    elif roman.quality == "diminished" and roman.seventh == "none":
        quality_mark = "o"

    if roman.seventh == "none":
        figure = format_inversion_figure(roman.inversion, False)
    else:
        figure = SEVENTH_SUFFIX[roman.seventh]
        inversion_figure = format_inversion_figure(roman.inversion, True)
        if inversion_figure:
            figure = f"{figure[:-1]}{inversion_figure}"

    secondary = ""
    if roman.secondary is not None:
        target = RomanNumeral(
            degree=roman.secondary.degree,
            accidental=roman.secondary.accidental,
            quality="major",
        )
        secondary = f"/{format_roman_numeral(target)}"

    return f"{accidental_to_text(roman.accidental)}{numeral}{quality_mark}{figure}{secondary}"
