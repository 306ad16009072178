"""
Machine-translation providers.

Each provider wraps one external HTTP API:
- GoogleTranslateProvider → translate.googleapis.com (GET, no key)
- AzureTranslateProvider → Azure Translator v3 (POST, subscription key)
"""

from lipi.providers.base import TranslationProvider
from lipi.providers.google import GoogleTranslateProvider
from lipi.providers.azure import AzureTranslateProvider
from lipi.providers.factory import create_provider, providers_from_settings

__all__ = [
    "TranslationProvider",
    "GoogleTranslateProvider",
    "AzureTranslateProvider",
    "create_provider",
    "providers_from_settings",
]
