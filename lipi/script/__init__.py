"""Script conversion between Devanagari and Brahmi."""

from lipi.script.converter import (
    BRAHMI_BLOCK,
    BRAHMI_TO_DEVANAGARI,
    DEVANAGARI_BLOCK,
    DEVANAGARI_TO_BRAHMI,
    mapped_devanagari,
    to_brahmi,
    to_devanagari,
)

__all__ = [
    "BRAHMI_BLOCK",
    "BRAHMI_TO_DEVANAGARI",
    "DEVANAGARI_BLOCK",
    "DEVANAGARI_TO_BRAHMI",
    "mapped_devanagari",
    "to_brahmi",
    "to_devanagari",
]
