"""
Core data models for the translation pipeline.

Chunks and requests are plain value objects. Nothing here is persisted.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# Enums
# =============================================================================


class ProviderKind(str, Enum):
    """Machine-translation backends the pipeline knows how to build."""

    GOOGLE = "google"  # GET, no key
    AZURE = "azure"  # POST, subscription key


class Route(str, Enum):
    """How a request travels between source and target."""

    IDENTITY = "identity"  # brahmi -> brahmi
    BRAHMI_TO_DEVANAGARI = "brahmi_to_devanagari"  # script conversion only
    BRAHMI_VIA_HINDI = "brahmi_via_hindi"  # convert, then provider(hi -> target)
    DEVANAGARI_TO_BRAHMI = "devanagari_to_brahmi"  # script conversion only
    VIA_HINDI_TO_BRAHMI = "via_hindi_to_brahmi"  # provider(source -> hi), then convert
    DIRECT = "direct"  # provider(source -> target)

    @property
    def needs_provider(self) -> bool:
        return self in (Route.BRAHMI_VIA_HINDI, Route.VIA_HINDI_TO_BRAHMI, Route.DIRECT)


# =============================================================================
# Chunks
# =============================================================================


class LanguageChunk(BaseModel):
    """
    A maximal run of text in one detected script.

    `text` is always `original[start_index:end_index]`.
    """

    text: str
    language: str
    start_index: int
    end_index: int


# =============================================================================
# Requests
# =============================================================================


class TranslationRequest(BaseModel):
    """A single translate call: text plus normalized source and target tags."""

    text: str
    source: str = Field(description="Language code or 'brahmi'")
    target: str = Field(description="Language code or 'brahmi'")

    @field_validator("source", "target")
    @classmethod
    def _normalize_tag(cls, value: str) -> str:
        from lipi.i18n.languages import normalize_language_code
        return normalize_language_code(value)
