"""
Language handling - tags, script detection, and segmentation.

Design:
1. Language tags are ISO 639-1 codes plus the synthetic "brahmi" script tag
2. Detection is a Unicode-block heuristic, no model involved
3. Segmentation splits by language run (lossless) or by size (transport limits)

Usage:
    from lipi.i18n import detect_language, segment_by_language, segment_by_size

    detect_language("नमस्ते दुनिया")        # -> "hi"
    segment_by_language("Hello नमस्ते")    # -> [en "Hello ", hi "नमस्ते"]
    segment_by_size(long_text, 200)        # -> ["...", "..."]
"""

from lipi.i18n.languages import (
    Language,
    BRAHMI,
    UNKNOWN,
    PIVOT_LANGUAGE,
    DEVANAGARI_LANGUAGES,
    get_language_name,
    normalize_language_code,
    is_devanagari_based,
)
from lipi.i18n.detection import (
    DETECTABLE_LANGUAGES,
    detect_language,
)
from lipi.i18n.segmentation import (
    SIZE_CHUNK_SEPARATOR,
    segment_by_language,
    segment_by_size,
    language_stats,
)

__all__ = [
    # Languages
    "Language",
    "BRAHMI",
    "UNKNOWN",
    "PIVOT_LANGUAGE",
    "DEVANAGARI_LANGUAGES",
    "get_language_name",
    "normalize_language_code",
    "is_devanagari_based",
    # Detection
    "DETECTABLE_LANGUAGES",
    "detect_language",
    # Segmentation
    "SIZE_CHUNK_SEPARATOR",
    "segment_by_language",
    "segment_by_size",
    "language_stats",
]
