"""
Heuristic language detection by Unicode block.

Counts characters per script block and picks the dominant one. This is a
script classifier, not a language model: Devanagari always reports "hi"
(Sanskrit, Marathi and Nepali share the block), and short or evenly mixed
strings can go either way.
"""

from __future__ import annotations

from lipi.i18n.languages import BRAHMI, UNKNOWN, Language
from lipi.script.converter import BRAHMI_BLOCK, DEVANAGARI_BLOCK


# Share of significant characters a script needs to win outright
DOMINANCE_THRESHOLD = 0.3

# Unicode blocks as (start, end, tag). Order breaks ties.
_SCRIPT_RANGES: list[tuple[int, int, str]] = [
    (0x0041, 0x005A, Language.EN.value),
    (0x0061, 0x007A, Language.EN.value),
    (DEVANAGARI_BLOCK[0], DEVANAGARI_BLOCK[1], Language.HI.value),
    (0x0C80, 0x0CFF, Language.KN.value),
    (0x0B80, 0x0BFF, Language.TA.value),
    (0x0C00, 0x0C7F, Language.TE.value),
    (0x0980, 0x09FF, Language.BN.value),
    (0x0A80, 0x0AFF, Language.GU.value),
    (0x0D00, 0x0D7F, Language.ML.value),
    (0x0B00, 0x0B7F, Language.OR.value),
    (0x0A00, 0x0A7F, Language.PA.value),
    (BRAHMI_BLOCK[0], BRAHMI_BLOCK[1], BRAHMI),
]

# Every tag the detector can return, in tie-break order
DETECTABLE_LANGUAGES: list[str] = list(dict.fromkeys(tag for _, _, tag in _SCRIPT_RANGES))


def _is_insignificant(code: int) -> bool:
    """Whitespace, control characters, and ASCII punctuation carry no signal."""
    return (
        code <= 0x0020
        or 0x0021 <= code <= 0x002F
        or 0x003A <= code <= 0x0040
        or 0x005B <= code <= 0x0060
        or 0x007B <= code <= 0x007F
        or chr(code).isspace()
    )


def _script_of(code: int) -> str | None:
    for start, end, tag in _SCRIPT_RANGES:
        if start <= code <= end:
            return tag
    return None


def count_scripts(text: str) -> tuple[dict[str, int], int, int]:
    """
    Count characters per script.

    Returns:
        Tuple of (counts per tag, ASCII digit count, significant character total)
    """
    counts = {tag: 0 for tag in DETECTABLE_LANGUAGES}
    digits = 0
    total = 0

    for char in text:
        code = ord(char)
        if _is_insignificant(code):
            continue

        total += 1

        if 0x0030 <= code <= 0x0039:
            digits += 1
            continue

        tag = _script_of(code)
        if tag is not None:
            counts[tag] += 1

    return counts, digits, total


def detect_language(text: str) -> str:
    """
    Detect the dominant script/language tag of text.

    Returns:
        A tag from DETECTABLE_LANGUAGES, or "unknown" when the text has no
        significant characters.
    """
    if not text or not text.strip():
        return UNKNOWN

    counts, digits, total = count_scripts(text)

    if total == 0:
        return UNKNOWN

    # Digits alone say nothing about script
    if digits == total:
        return Language.EN.value

    # Digits inherit the identity of the surrounding script
    dominant = max(counts, key=lambda tag: counts[tag])
    counts[dominant] += digits

    best_tag: str | None = None
    best_share = 0.0
    for tag, count in counts.items():
        share = count / total
        if share > DOMINANCE_THRESHOLD and share > best_share:
            best_tag = tag
            best_share = share

    if best_tag is not None:
        return best_tag

    # Plurality fallback
    return max(counts, key=lambda tag: counts[tag])
