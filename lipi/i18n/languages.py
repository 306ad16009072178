"""
Language tags and utilities.

Tags are lowercase ISO 639-1 codes plus one synthetic tag, "brahmi", which
names a script rather than a language. Any other two/three-letter code is
passed to the MT provider as-is.
"""

from enum import Enum


BRAHMI = "brahmi"
UNKNOWN = "unknown"
PIVOT_LANGUAGE = "hi"


class Language(str, Enum):
    """Languages the detector can report, plus the Devanagari family."""

    # === Latin ===
    EN = "en"      # English

    # === Devanagari family (convertible to Brahmi without MT) ===
    HI = "hi"      # Hindi
    SA = "sa"      # Sanskrit
    MR = "mr"      # Marathi
    NE = "ne"      # Nepali

    # === Other Indic scripts ===
    BN = "bn"      # Bengali
    GU = "gu"      # Gujarati
    PA = "pa"      # Punjabi (Gurmukhi)
    OR = "or"      # Odia
    TA = "ta"      # Tamil
    TE = "te"      # Telugu
    KN = "kn"      # Kannada
    ML = "ml"      # Malayalam

    # === Synthetic ===
    BRAHMI = "brahmi"


# Human-readable names
LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "hi": "Hindi",
    "sa": "Sanskrit",
    "mr": "Marathi",
    "ne": "Nepali",
    "bn": "Bengali",
    "gu": "Gujarati",
    "pa": "Punjabi",
    "or": "Odia",
    "ta": "Tamil",
    "te": "Telugu",
    "kn": "Kannada",
    "ml": "Malayalam",
    "brahmi": "Brahmi",
}


# Languages written in Devanagari; Brahmi maps onto these by codepoint
DEVANAGARI_LANGUAGES: frozenset[str] = frozenset({
    Language.HI.value,
    Language.SA.value,
    Language.MR.value,
    Language.NE.value,
})


# =============================================================================
# Utilities
# =============================================================================


def get_language_name(code: str) -> str:
    """Get human-readable language name."""
    return LANGUAGE_NAMES.get(code.lower(), "Unknown")


def normalize_language_code(code: str) -> str:
    """Normalize language code to standard form."""
    code = code.lower().strip()

    # Handle common variants
    variants = {
        "english": "en",
        "hindi": "hi",
        "sanskrit": "sa",
        "marathi": "mr",
        "nepali": "ne",
        "bengali": "bn",
        "bangla": "bn",
        "gujarati": "gu",
        "punjabi": "pa",
        "gurmukhi": "pa",
        "odia": "or",
        "oriya": "or",
        "tamil": "ta",
        "telugu": "te",
        "kannada": "kn",
        "malayalam": "ml",
        "devanagari": "hi",
        # Brahmi is a script tag, accept the obvious spellings
        "brahmi script": "brahmi",
        "brah": "brahmi",
    }

    return variants.get(code, code)


def is_devanagari_based(code: str) -> bool:
    """Check if a language is written in Devanagari."""
    return normalize_language_code(code) in DEVANAGARI_LANGUAGES
