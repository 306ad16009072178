"""
Core module - data models, errors, and shared utilities.

This module contains:
- models: LanguageChunk, TranslationRequest, ProviderKind, Route
- errors: TranslationError and the provider error taxonomy
- utils: Shared utility functions
"""

from lipi.core.models import (
    LanguageChunk,
    TranslationRequest,
    ProviderKind,
    Route,
)

from lipi.core.errors import (
    TranslationError,
    ProviderError,
    NetworkError,
    ClientError,
    ServerError,
    MalformedResponseError,
    RequestTooLargeError,
    ChunkTranslationError,
    FallbackExhaustedError,
)

from lipi.core.utils import (
    generate_trace_id,
    split_surrounding_whitespace,
)

__all__ = [
    # Models
    "LanguageChunk",
    "TranslationRequest",
    "ProviderKind",
    "Route",
    # Errors
    "TranslationError",
    "ProviderError",
    "NetworkError",
    "ClientError",
    "ServerError",
    "MalformedResponseError",
    "RequestTooLargeError",
    "ChunkTranslationError",
    "FallbackExhaustedError",
    # Utils
    "generate_trace_id",
    "split_surrounding_whitespace",
]
