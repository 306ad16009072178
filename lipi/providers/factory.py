"""Provider construction from settings."""

from __future__ import annotations

import logging

import httpx

from lipi.config import Settings, get_settings
from lipi.core.models import ProviderKind
from lipi.providers.azure import AzureTranslateProvider
from lipi.providers.base import TranslationProvider
from lipi.providers.google import GoogleTranslateProvider

logger = logging.getLogger(__name__)


def create_provider(
    kind: ProviderKind | str,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TranslationProvider:
    """
    Create a provider of the given kind.

    Raises:
        ValueError: unknown kind, or the provider is missing credentials
    """
    settings = settings or get_settings()

    try:
        kind = ProviderKind(kind)
    except ValueError:
        available = [k.value for k in ProviderKind]
        raise ValueError(f"Unknown provider: {kind}. Available: {available}") from None

    if kind is ProviderKind.GOOGLE:
        return GoogleTranslateProvider.from_settings(settings, transport)
    if kind is ProviderKind.AZURE:
        return AzureTranslateProvider.from_settings(settings, transport)

    raise ValueError(f"No factory for provider kind {kind.value}")


def providers_from_settings(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[TranslationProvider]:
    """
    Build providers in priority order, skipping ones without credentials.

    Falls back to Google alone when nothing in the priority list is usable.
    """
    settings = settings or get_settings()
    providers: list[TranslationProvider] = []

    for name in settings.provider_priority_list:
        if name == ProviderKind.AZURE.value and not settings.use_azure:
            logger.warning("Skipping provider 'azure': AZURE_TRANSLATE_KEY not set")
            continue
        try:
            providers.append(create_provider(name, settings, transport))
        except ValueError as e:
            logger.warning(f"Skipping provider '{name}': {e}")

    if not providers:
        providers.append(GoogleTranslateProvider.from_settings(settings, transport))

    return providers
