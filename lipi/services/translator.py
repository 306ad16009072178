"""
Translation orchestrator.

Routes each request through zero, one, or two machine-translation calls.
No MT provider understands Brahmi, so anything touching Brahmi pivots
through Hindi and the codepoint converter:

    brahmi      -> brahmi       identity
    brahmi      -> hi/sa/mr/ne  to_devanagari
    brahmi      -> other        to_devanagari, provider(hi -> other)
    hi/sa/mr/ne -> brahmi       to_brahmi
    other       -> brahmi       provider(other -> hi), to_brahmi
    other       -> other        provider(source -> target)

Provider calls go to the primary provider; only a ClientError (the provider
rejected the request) moves on to the fallback. Transient failures propagate.

Usage:
    orchestrator = TranslationOrchestrator(
        primary=AzureTranslateProvider(subscription_key="..."),
        fallback=GoogleTranslateProvider(),
    )

    await orchestrator.translate("नमस्कार", "hi", "brahmi")     # -> "𑀦𑀫𑀲𑁆𑀓𑀸𑀭"
    await orchestrator.translate("Hello", "en", "brahmi")      # en -> hi, then script
    await orchestrator.translate_mixed("Hello नमस्ते", "brahmi")
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from lipi.config import Settings, get_settings
from lipi.core.errors import ClientError, FallbackExhaustedError, ProviderError
from lipi.core.models import Route, TranslationRequest
from lipi.core.utils import split_surrounding_whitespace
from lipi.i18n.languages import (
    BRAHMI,
    PIVOT_LANGUAGE,
    UNKNOWN,
    is_devanagari_based,
    normalize_language_code,
)
from lipi.i18n.segmentation import segment_by_language
from lipi.providers.base import TranslationProvider
from lipi.providers.factory import providers_from_settings
from lipi.script.converter import to_brahmi, to_devanagari

logger = logging.getLogger(__name__)


# =============================================================================
# Routing
# =============================================================================


def resolve_route(source: str, target: str) -> Route:
    """Decide how a request travels from source to target."""
    source = normalize_language_code(source)
    target = normalize_language_code(target)

    if source == BRAHMI:
        if target == BRAHMI:
            return Route.IDENTITY
        if is_devanagari_based(target):
            return Route.BRAHMI_TO_DEVANAGARI
        return Route.BRAHMI_VIA_HINDI

    if target == BRAHMI:
        if is_devanagari_based(source):
            return Route.DEVANAGARI_TO_BRAHMI
        return Route.VIA_HINDI_TO_BRAHMI

    return Route.DIRECT


# =============================================================================
# Orchestrator
# =============================================================================


class TranslationOrchestrator:
    """
    Translate text between languages and the Brahmi script.

    Holds an ordered (primary, fallback) provider pair and nothing else, so
    one instance can serve any number of concurrent requests.
    """

    def __init__(
        self,
        primary: TranslationProvider,
        fallback: TranslationProvider | None = None,
    ):
        self.primary = primary
        self.fallback = fallback

    @classmethod
    def from_providers(cls, providers: list[TranslationProvider]) -> TranslationOrchestrator:
        """Use the first provider as primary and the second, if any, as fallback."""
        if not providers:
            raise ValueError("At least one translation provider is required")
        return cls(primary=providers[0], fallback=providers[1] if len(providers) > 1 else None)

    def describe(self) -> str:
        """Human-readable provider summary."""
        info = f"Primary: {self.primary.name}"
        if self.fallback is not None:
            info += f", Fallback: {self.fallback.name}"
        return info

    # =========================================================================
    # Public API
    # =========================================================================

    async def translate(
        self,
        text: str,
        source: str,
        target: str,
        *,
        timeout: float | None = None,
    ) -> str:
        """
        Translate text from source to target.

        Args:
            text: Text to translate
            source: Source language code, or "brahmi"
            target: Target language code, or "brahmi"
            timeout: Optional limit in seconds for the whole request.
                On expiry the in-flight call is cancelled, no further
                chunks are sent, and TimeoutError is raised.

        Returns:
            Translated text (blank input is returned unchanged)

        Raises:
            ProviderError: a provider failed and no fallback applied
            FallbackExhaustedError: primary and fallback both failed
        """
        if not text or not text.strip():
            return text

        coro = self._translate(text, normalize_language_code(source), normalize_language_code(target))
        if timeout is None:
            return await coro
        return await asyncio.wait_for(coro, timeout=timeout)

    async def translate_request(
        self,
        request: TranslationRequest,
        *,
        timeout: float | None = None,
    ) -> str:
        """Translate a TranslationRequest."""
        return await self.translate(request.text, request.source, request.target, timeout=timeout)

    async def translate_mixed(
        self,
        text: str,
        target: str,
        *,
        timeout: float | None = None,
    ) -> str:
        """
        Translate text that mixes scripts, one language run at a time.

        Runs already in the target language, or with no script at all, are
        kept verbatim. Whitespace around each run is preserved.
        """
        if not text or not text.strip():
            return text

        coro = self._translate_mixed(text, normalize_language_code(target))
        if timeout is None:
            return await coro
        return await asyncio.wait_for(coro, timeout=timeout)

    # =========================================================================
    # Internals
    # =========================================================================

    async def _translate(self, text: str, source: str, target: str) -> str:
        route = resolve_route(source, target)
        logger.debug(f"Route {source} -> {target}: {route.value}")

        if route is Route.IDENTITY:
            return text

        if route is Route.BRAHMI_TO_DEVANAGARI:
            return to_devanagari(text)

        if route is Route.BRAHMI_VIA_HINDI:
            return await self._call_providers(to_devanagari(text), PIVOT_LANGUAGE, target)

        if route is Route.DEVANAGARI_TO_BRAHMI:
            return to_brahmi(text)

        if route is Route.VIA_HINDI_TO_BRAHMI:
            hindi = await self._call_providers(text, source, PIVOT_LANGUAGE)
            return to_brahmi(hindi)

        return await self._call_providers(text, source, target)

    async def _translate_mixed(self, text: str, target: str) -> str:
        parts: list[str] = []

        for chunk in segment_by_language(text):
            if chunk.language in (target, UNKNOWN):
                parts.append(chunk.text)
                continue

            leading, body, trailing = split_surrounding_whitespace(chunk.text)
            translated = await self._translate(body, chunk.language, target)
            parts.append(f"{leading}{translated}{trailing}")

        return "".join(parts)

    async def _call_providers(self, text: str, source: str, target: str) -> str:
        """Call the primary provider, moving to the fallback only on ClientError."""
        logger.info(f"Translating {source} -> {target} with {self.primary.name}")

        try:
            return await self.primary.translate_chunked(text, source, target)
        except ClientError as e:
            if self.fallback is None:
                logger.error(f"{self.primary.name} rejected the request and no fallback is configured")
                raise
            primary_error = e
        except ProviderError as e:
            logger.error(f"{self.primary.name} translation failed: {e.message}")
            raise

        logger.info(
            f"{self.primary.name} rejected the request ({primary_error.message}), "
            f"falling back to {self.fallback.name}"
        )

        try:
            return await self.fallback.translate_chunked(text, source, target)
        except ProviderError as e:
            logger.error(f"{self.fallback.name} fallback translation failed: {e.message}")
            raise FallbackExhaustedError(primary_error, e) from e


# =============================================================================
# Construction
# =============================================================================


def build_orchestrator(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TranslationOrchestrator:
    """Build an orchestrator from the configured provider priority list."""
    settings = settings or get_settings()
    providers = providers_from_settings(settings, transport)

    if len(providers) > 2:
        logger.warning(
            f"{len(providers)} providers configured; only the first two are used "
            f"({providers[0].name}, {providers[1].name})"
        )

    orchestrator = TranslationOrchestrator.from_providers(providers)
    logger.info(orchestrator.describe())
    return orchestrator
