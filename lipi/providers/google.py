"""
Google Translate provider (unauthenticated GET endpoint).

Text travels in the query string, so requests are bounded by URL length.
Anything over the budget is refused locally and goes to chunking instead.

Wire format:
    GET <base>?client=gtx&sl=<from>&tl=<to>&dt=t&q=<text>
    -> [[["translated", "original", ...], ["more", ...]], ...]
"""

from __future__ import annotations

from typing import Any

import httpx

from lipi.config import Settings, get_settings
from lipi.core.errors import MalformedResponseError, RequestTooLargeError
from lipi.core.models import ProviderKind
from lipi.i18n.segmentation import segment_by_size
from lipi.providers.base import TranslationProvider


class GoogleTranslateProvider(TranslationProvider):
    """GET-based provider with a conservative URL-length budget."""

    name = "Google Translate"
    kind = ProviderKind.GOOGLE

    def __init__(
        self,
        base_url: str = "https://translate.googleapis.com/translate_a/single",
        max_url_length: int = 1800,
        chunk_size: int = 200,
        chunk_delay: float = 0.5,
        timeout: float = 15.0,
        retry_attempts: int = 2,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(
            chunk_size=chunk_size,
            chunk_delay=chunk_delay,
            timeout=timeout,
            retry_attempts=retry_attempts,
            transport=transport,
        )
        self.base_url = base_url
        self.max_url_length = max_url_length

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> GoogleTranslateProvider:
        settings = settings or get_settings()
        return cls(
            base_url=settings.google_base_url,
            max_url_length=settings.google_max_url_length,
            chunk_size=settings.google_chunk_size,
            chunk_delay=settings.google_chunk_delay,
            timeout=settings.http_timeout,
            retry_attempts=settings.http_retry_attempts,
            transport=transport,
        )

    def build_url(self, text: str, source: str, target: str) -> httpx.URL:
        """Build the full request URL, query string encoded."""
        return httpx.URL(
            self.base_url,
            params={
                "client": "gtx",
                "sl": source,
                "tl": target,
                "dt": "t",
                "q": text,
            },
        )

    def url_length(self, text: str, source: str, target: str) -> int:
        return len(str(self.build_url(text, source, target)))

    async def translate(self, text: str, source: str, target: str) -> str:
        length = self.url_length(text, source, target)
        if length > self.max_url_length:
            raise RequestTooLargeError(
                self.name,
                f"request URL is {length} characters (limit {self.max_url_length})",
            )
        return await super().translate(text, source, target)

    def _split(self, text: str, source: str, target: str) -> list[str]:
        """
        Split by characters, then re-split any chunk whose encoded URL is
        still over budget.

        Non-ASCII text grows up to nine times when percent-encoded, so a
        chunk within `chunk_size` can still overflow the URL. Such a chunk is
        halved until it fits or is down to a single word.
        """
        chunks: list[str] = []
        pending = super()._split(text, source, target)

        while pending:
            chunk = pending.pop(0)
            if (
                self.url_length(chunk, source, target) <= self.max_url_length
                or len(chunk.split()) == 1
            ):
                chunks.append(chunk)
                continue
            pending[:0] = segment_by_size(chunk, max(1, len(chunk) // 2))

        return chunks

    async def _request(
        self,
        client: httpx.AsyncClient,
        text: str,
        source: str,
        target: str,
    ) -> str:
        response = await client.get(self.build_url(text, source, target))
        self._classify(response)
        return self._extract(self._json(response))

    def _extract(self, data: Any) -> str:
        """Join the first element of every segment in data[0]."""
        if not isinstance(data, list) or not data or not isinstance(data[0], list):
            raise MalformedResponseError(self.name, "expected a nested array")

        parts: list[str] = []
        for segment in data[0]:
            if segment is None:
                continue
            if not isinstance(segment, list) or not segment:
                raise MalformedResponseError(self.name, "unexpected segment shape")
            if isinstance(segment[0], str):
                parts.append(segment[0])

        if not parts:
            raise MalformedResponseError(self.name, "no translated segments")

        return "".join(parts)
