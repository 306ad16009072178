"""
Azure Translator provider (keyed POST endpoint).

Wire format:
    POST <endpoint>/translate?api-version=3.0&from=<from>&to=<to>
    [{"text": "..."}]
    -> [{"translations": [{"text": "...", "to": "<to>"}]}]
"""

from __future__ import annotations

from typing import Any

import httpx

from lipi.config import Settings, get_settings
from lipi.core.errors import MalformedResponseError
from lipi.core.models import ProviderKind
from lipi.core.utils import generate_trace_id
from lipi.providers.base import TranslationProvider


class AzureTranslateProvider(TranslationProvider):
    """JSON POST provider. Needs a subscription key."""

    name = "Microsoft Azure Translate"
    kind = ProviderKind.AZURE

    API_VERSION = "3.0"

    def __init__(
        self,
        subscription_key: str,
        endpoint: str = "https://api.cognitive.microsofttranslator.com",
        region: str = "global",
        chunk_size: int = 1000,
        chunk_delay: float = 0.1,
        timeout: float = 15.0,
        retry_attempts: int = 2,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not subscription_key:
            raise ValueError("Azure Translate subscription key not set (AZURE_TRANSLATE_KEY)")

        super().__init__(
            chunk_size=chunk_size,
            chunk_delay=chunk_delay,
            timeout=timeout,
            retry_attempts=retry_attempts,
            transport=transport,
        )
        self.subscription_key = subscription_key
        self.endpoint = endpoint.rstrip("/")
        self.region = region or "global"

    def __repr__(self) -> str:
        # Keep the key out of logs
        return f"AzureTranslateProvider(endpoint={self.endpoint!r}, region={self.region!r})"

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> AzureTranslateProvider:
        settings = settings or get_settings()
        return cls(
            subscription_key=settings.azure_translate_key,
            endpoint=settings.azure_translate_endpoint,
            region=settings.azure_translate_region,
            chunk_size=settings.azure_chunk_size,
            chunk_delay=settings.azure_chunk_delay,
            timeout=settings.http_timeout,
            retry_attempts=settings.http_retry_attempts,
            transport=transport,
        )

    def _headers(self) -> dict[str, str]:
        return {
            "Ocp-Apim-Subscription-Key": self.subscription_key,
            "Ocp-Apim-Subscription-Region": self.region,
            "Content-Type": "application/json",
            "X-ClientTraceId": generate_trace_id(),
        }

    async def _request(
        self,
        client: httpx.AsyncClient,
        text: str,
        source: str,
        target: str,
    ) -> str:
        response = await client.post(
            f"{self.endpoint}/translate",
            params={"api-version": self.API_VERSION, "from": source, "to": target},
            headers=self._headers(),
            json=[{"text": text}],
        )
        self._classify(response)
        return self._extract(self._json(response))

    def _extract(self, data: Any) -> str:
        """Return data[0]["translations"][0]["text"]."""
        try:
            translated = data[0]["translations"][0]["text"]
        except (IndexError, KeyError, TypeError) as e:
            raise MalformedResponseError(self.name, f"unexpected response shape: {e!r}") from e

        if not isinstance(translated, str):
            raise MalformedResponseError(self.name, "translation text is not a string")

        return translated
