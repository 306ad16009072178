"""
Shared utility functions for the lipi package.
"""

from __future__ import annotations

import uuid


def generate_trace_id() -> str:
    """
    Generate a request trace ID.

    Returns:
        A full UUID4 string like "1b4e28ba-2fa1-4d2e-883f-0016d3cca427"
    """
    return str(uuid.uuid4())


def split_surrounding_whitespace(text: str) -> tuple[str, str, str]:
    """
    Split text into (leading whitespace, body, trailing whitespace).

    Providers trim what they return, so callers re-wrap the body afterwards.
    """
    body = text.strip()
    if not body:
        return text, "", ""
    start = text.index(body)
    return text[:start], body, text[start + len(body):]
