"""
Devanagari <-> Brahmi codepoint conversion.

Both scripts are abugidas with the same structure, so conversion is a
one-to-one codepoint substitution over a closed set of letters and signs.
Everything outside that set (whitespace, Latin, punctuation, other scripts)
passes through untouched. Python strings iterate by codepoint, so the
supplementary-plane Brahmi block needs no surrogate handling.

The one lossy case is the Devanagari nukta (U+093C): Brahmi has no
equivalent and it is dropped on the way to Brahmi.

Usage:
    from lipi.script import to_brahmi, to_devanagari

    to_brahmi("नमस्कार")        # -> "𑀦𑀫𑀲𑁆𑀓𑀸𑀭"
    to_devanagari("𑀦𑀫𑀲𑁆𑀓𑀸𑀭")   # -> "नमस्कार"
"""

from __future__ import annotations


BRAHMI_BLOCK = (0x11000, 0x1107F)
DEVANAGARI_BLOCK = (0x0900, 0x097F)

DEVANAGARI_NUKTA = 0x093C


# =============================================================================
# Codepoint Table
# =============================================================================


DEVANAGARI_TO_BRAHMI: dict[int, int] = {
    # Signs
    0x0901: 0x11000,  # candrabindu
    0x0902: 0x11001,  # anusvara
    0x0903: 0x11002,  # visarga

    # Independent vowels
    0x0905: 0x11005,  # A
    0x0906: 0x11006,  # AA
    0x0907: 0x11007,  # I
    0x0908: 0x11008,  # II
    0x0909: 0x11009,  # U
    0x090A: 0x1100A,  # UU
    0x090B: 0x1100B,  # vocalic R
    0x0960: 0x1100C,  # vocalic RR
    0x090C: 0x1100D,  # vocalic L
    0x0961: 0x1100E,  # vocalic LL
    0x090F: 0x1100F,  # E
    0x0910: 0x11010,  # AI
    0x0913: 0x11011,  # O
    0x0914: 0x11012,  # AU

    # Consonants
    0x0915: 0x11013,  # KA
    0x0916: 0x11014,  # KHA
    0x0917: 0x11015,  # GA
    0x0918: 0x11016,  # GHA
    0x0919: 0x11017,  # NGA
    0x091A: 0x11018,  # CA
    0x091B: 0x11019,  # CHA
    0x091C: 0x1101A,  # JA
    0x091D: 0x1101B,  # JHA
    0x091E: 0x1101C,  # NYA
    0x091F: 0x1101D,  # TTA
    0x0920: 0x1101E,  # TTHA
    0x0921: 0x1101F,  # DDA
    0x0922: 0x11020,  # DDHA
    0x0923: 0x11021,  # NNA
    0x0924: 0x11022,  # TA
    0x0925: 0x11023,  # THA
    0x0926: 0x11024,  # DA
    0x0927: 0x11025,  # DHA
    0x0928: 0x11026,  # NA
    0x092A: 0x11027,  # PA
    0x092B: 0x11028,  # PHA
    0x092C: 0x11029,  # BA
    0x092D: 0x1102A,  # BHA
    0x092E: 0x1102B,  # MA
    0x092F: 0x1102C,  # YA
    0x0930: 0x1102D,  # RA
    0x0932: 0x1102E,  # LA
    0x0935: 0x1102F,  # VA
    0x0936: 0x11030,  # SHA
    0x0937: 0x11031,  # SSA
    0x0938: 0x11032,  # SA
    0x0939: 0x11033,  # HA
    0x0933: 0x11034,  # LLA

    # Dependent vowel signs (matras)
    0x093E: 0x11038,  # AA
    0x093F: 0x1103A,  # I
    0x0940: 0x1103B,  # II
    0x0941: 0x1103C,  # U
    0x0942: 0x1103D,  # UU
    0x0943: 0x1103E,  # vocalic R
    0x0944: 0x1103F,  # vocalic RR
    0x0962: 0x11040,  # vocalic L
    0x0963: 0x11041,  # vocalic LL
    0x0947: 0x11042,  # E
    0x0948: 0x11043,  # AI
    0x094B: 0x11044,  # O
    0x094C: 0x11045,  # AU

    # Virama and punctuation
    0x094D: 0x11046,  # virama
    0x0964: 0x11047,  # danda
    0x0965: 0x11048,  # double danda

    # Digits
    0x0966: 0x11066,  # 0
    0x0967: 0x11067,  # 1
    0x0968: 0x11068,  # 2
    0x0969: 0x11069,  # 3
    0x096A: 0x1106A,  # 4
    0x096B: 0x1106B,  # 5
    0x096C: 0x1106C,  # 6
    0x096D: 0x1106D,  # 7
    0x096E: 0x1106E,  # 8
    0x096F: 0x1106F,  # 9
}

BRAHMI_TO_DEVANAGARI: dict[int, int] = {b: d for d, b in DEVANAGARI_TO_BRAHMI.items()}


# str.translate tables; None deletes the character
_TO_BRAHMI_TABLE: dict[int, int | None] = {**DEVANAGARI_TO_BRAHMI, DEVANAGARI_NUKTA: None}
_TO_DEVANAGARI_TABLE: dict[int, int | None] = dict(BRAHMI_TO_DEVANAGARI)


# =============================================================================
# Conversion
# =============================================================================


def to_brahmi(text: str) -> str:
    """Convert Devanagari characters to Brahmi, leaving everything else alone."""
    return text.translate(_TO_BRAHMI_TABLE)


def to_devanagari(text: str) -> str:
    """Convert Brahmi characters to Devanagari, leaving everything else alone."""
    return text.translate(_TO_DEVANAGARI_TABLE)


# =============================================================================
# Helpers
# =============================================================================


def mapped_devanagari() -> list[str]:
    """All Devanagari characters with a Brahmi counterpart."""
    return [chr(cp) for cp in DEVANAGARI_TO_BRAHMI]
