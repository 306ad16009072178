"""
Translation error taxonomy.

Provider errors are classified at the HTTP boundary so the orchestrator can
decide between falling back and propagating without inspecting transports.
"""

from __future__ import annotations


class TranslationError(Exception):
    """Base class for everything the translation pipeline raises."""
    pass


# =============================================================================
# Provider errors
# =============================================================================


class ProviderError(TranslationError):
    """A provider call failed."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        self.message = message
        super().__init__(f"{provider}: {message}")


class NetworkError(ProviderError):
    """Connection, DNS, or timeout failure. Transient."""
    pass


class ClientError(ProviderError):
    """
    Provider rejected the request (4xx).

    Usually an unsupported language pair or a malformed request; a different
    provider may accept it, so this is the only error that triggers fallback.
    """

    def __init__(self, provider: str, status_code: int, message: str = ""):
        self.status_code = status_code
        super().__init__(provider, f"HTTP {status_code} {message}".rstrip())


class ServerError(ProviderError):
    """Provider-side outage (5xx). Transient."""

    def __init__(self, provider: str, status_code: int, message: str = ""):
        self.status_code = status_code
        super().__init__(provider, f"HTTP {status_code} {message}".rstrip())


class MalformedResponseError(ProviderError):
    """Response body did not have the expected JSON shape."""
    pass


class RequestTooLargeError(ProviderError):
    """Request rejected locally before sending; only ever triggers chunking."""
    pass


class ChunkTranslationError(ProviderError):
    """A single size-chunk failed. Logged and degraded, never raised to callers."""

    def __init__(self, provider: str, index: int, cause: ProviderError):
        self.index = index
        self.cause = cause
        super().__init__(provider, f"chunk {index + 1} failed: {cause.message}")


# =============================================================================
# Orchestrator errors
# =============================================================================


class FallbackExhaustedError(TranslationError):
    """Both the primary and the fallback provider failed."""

    def __init__(self, primary_error: ProviderError, fallback_error: Exception):
        self.primary_error = primary_error
        self.fallback_error = fallback_error
        fallback_name = getattr(fallback_error, "provider", "fallback")
        fallback_detail = getattr(fallback_error, "message", str(fallback_error))
        super().__init__(
            f"Translation failed with {primary_error.provider} ({primary_error.message}) "
            f"and {fallback_name} ({fallback_detail})"
        )
