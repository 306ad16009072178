"""
Text segmentation.

Two unrelated splitters live here:

1. segment_by_language - lossless split into runs of one detected script,
   used to translate mixed-script documents run by run.
2. segment_by_size - split into pieces no longer than a transport limit,
   preferring sentence and then word boundaries.
"""

from __future__ import annotations

import re

from lipi.core.models import LanguageChunk
from lipi.i18n.detection import detect_language
from lipi.i18n.languages import UNKNOWN, get_language_name


# Translated size-chunks are always rejoined with this
SIZE_CHUNK_SEPARATOR = " "

SENTENCE_TERMINATORS = ".!?।॥"  # Latin plus danda and double danda

_WHITESPACE_SPLIT = re.compile(r"(\s+)")

# A sentence with its terminators and trailing whitespace, or an
# unterminated tail
_SENTENCE = re.compile(
    rf"[^{re.escape(SENTENCE_TERMINATORS)}]*[{re.escape(SENTENCE_TERMINATORS)}]+\s*"
    rf"|[^{re.escape(SENTENCE_TERMINATORS)}]+\Z"
)


# =============================================================================
# Language Segmentation
# =============================================================================


def segment_by_language(text: str) -> list[LanguageChunk]:
    """
    Split text into maximal runs of one detected language.

    Whitespace and tokens without script signal (pure punctuation) never
    start a new run; they join whichever run is open. Concatenating the
    chunk texts in order gives back the input exactly.
    """
    if not text:
        return []

    chunks: list[LanguageChunk] = []
    current = ""
    current_language: str | None = None
    start = 0
    position = 0

    for token in _WHITESPACE_SPLIT.split(text):
        if not token:
            continue

        language = detect_language(token)

        if language != UNKNOWN and current_language is None:
            # First script-bearing token claims whatever came before it
            current_language = language
        elif language != UNKNOWN and language != current_language:
            chunks.append(LanguageChunk(
                text=current,
                language=current_language,
                start_index=start,
                end_index=position,
            ))
            current = ""
            current_language = language
            start = position

        current += token
        position += len(token)

    if current:
        chunks.append(LanguageChunk(
            text=current,
            language=current_language or UNKNOWN,
            start_index=start,
            end_index=position,
        ))

    return chunks


def language_stats(text: str) -> dict[str, int]:
    """
    Count characters per language name across the language runs of text.

    Surrounding whitespace of each run is not counted.
    """
    stats: dict[str, int] = {}
    for chunk in segment_by_language(text):
        name = get_language_name(chunk.language)
        stats[name] = stats.get(name, 0) + len(chunk.text.strip())
    return stats


# =============================================================================
# Size Segmentation
# =============================================================================


def _accumulate(pieces: list[str], max_size: int) -> list[str]:
    """Greedily pack pieces into chunks of at most max_size characters."""
    chunks: list[str] = []
    current = ""

    for piece in pieces:
        if current and len(current) + len(piece) > max_size:
            chunks.append(current)
            current = piece
        else:
            current += piece

    if current:
        chunks.append(current)

    return chunks


def segment_by_size(text: str, max_size: int) -> list[str]:
    """
    Split text into chunks of at most max_size characters.

    Sentences are kept together where they fit; a sentence that does not fit
    on its own is split between words. A single word longer than max_size
    is returned whole rather than cut. Chunks are stripped of surrounding
    whitespace.

    Args:
        text: Text to split
        max_size: Maximum chunk length in characters (must be positive)

    Returns:
        Chunks in source order; empty for blank text
    """
    if max_size <= 0:
        raise ValueError(f"max_size must be positive, got {max_size}")

    if not text.strip():
        return []

    if len(text) <= max_size:
        return [text]

    sentences = _SENTENCE.findall(text)
    chunks: list[str] = []

    for chunk in _accumulate(sentences, max_size):
        chunk = chunk.strip()
        if not chunk:
            continue
        if len(chunk) <= max_size:
            chunks.append(chunk)
            continue

        # One sentence too long on its own
        words = [w for w in _WHITESPACE_SPLIT.split(chunk) if w]
        for word_chunk in _accumulate(words, max_size):
            word_chunk = word_chunk.strip()
            if word_chunk:
                chunks.append(word_chunk)

    return chunks
