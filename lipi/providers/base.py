"""
Base class for machine-translation providers.

A provider wraps one external MT HTTP API. Subclasses implement a single
request (`_request`); the base class adds the shared behaviour:

- transient network failures are retried with tenacity
- HTTP status codes are classified into the ProviderError taxonomy
- `translate_chunked` falls back to sequential size-bounded chunks when a
  single request fails, degrading chunk by chunk instead of failing whole
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from lipi.core.errors import (
    ChunkTranslationError,
    ClientError,
    MalformedResponseError,
    NetworkError,
    ProviderError,
    ServerError,
)
from lipi.core.models import ProviderKind
from lipi.i18n.segmentation import SIZE_CHUNK_SEPARATOR, segment_by_size

logger = logging.getLogger(__name__)


class TranslationProvider(ABC):
    """
    Base class for all translation providers.

    Instances hold configuration only and can be shared between concurrent
    requests. Every HTTP call opens its own client unless a transport is
    injected (tests pass an httpx.MockTransport).

    Example:
        class EchoProvider(TranslationProvider):
            name = "Echo"
            kind = ProviderKind.GOOGLE

            async def _request(self, client, text, source, target):
                return text
    """

    name: str = "provider"
    kind: ProviderKind

    def __init__(
        self,
        chunk_size: int,
        chunk_delay: float,
        timeout: float = 15.0,
        retry_attempts: int = 2,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.chunk_size = chunk_size
        self.chunk_delay = chunk_delay
        self.timeout = timeout
        self.retry_attempts = max(1, retry_attempts)
        self._transport = transport

    def __repr__(self) -> str:
        return f"{type(self).__name__}(chunk_size={self.chunk_size})"

    # =========================================================================
    # Subclass hooks
    # =========================================================================

    @abstractmethod
    async def _request(
        self,
        client: httpx.AsyncClient,
        text: str,
        source: str,
        target: str,
    ) -> str:
        """
        Send one translation request and return the translated text.

        Implementations raise ProviderError subclasses; transport errors
        may be left to propagate and are classified by `translate`.
        """
        pass

    # =========================================================================
    # Single request
    # =========================================================================

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def _send_once(self, text: str, source: str, target: str) -> str:
        try:
            async with self._client() as client:
                return await self._request(client, text, source, target)
        except httpx.TransportError as e:
            raise NetworkError(self.name, f"{type(e).__name__}: {e}") from e

    async def translate(self, text: str, source: str, target: str) -> str:
        """
        Translate text in a single request.

        Network failures are retried up to `retry_attempts` times in total;
        every other error is raised immediately.

        Raises:
            ProviderError: classified failure
        """
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.retry_attempts),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
            retry=retry_if_exception_type(NetworkError),
            reraise=True,
        ):
            with attempt:
                return await self._send_once(text, source, target)

    # =========================================================================
    # Chunked translation
    # =========================================================================

    async def translate_chunked(self, text: str, source: str, target: str) -> str:
        """
        Translate text, splitting it into size-bounded chunks if needed.

        Tries a single request first. If that fails, the text is split with
        `_split` (segment_by_size by default) and chunks are translated one
        at a time with `chunk_delay` seconds between calls. A chunk rejected
        with a ClientError aborts the whole request so the caller can try
        another provider; any other chunk failure keeps that chunk's original
        text.

        Raises:
            ClientError: a request or chunk was rejected as invalid
            ProviderError: the single request failed and there was nothing
                to split, or every chunk failed
        """
        try:
            return await self.translate(text, source, target)
        except ProviderError as e:
            chunks = self._split(text, source, target)
            if len(chunks) <= 1:
                raise
            logger.info(
                f"{self.name} single request failed ({e.message}), "
                f"falling back to {len(chunks)} chunks"
            )

        return await self._translate_chunks(chunks, source, target)

    def _split(self, text: str, source: str, target: str) -> list[str]:
        """Split text into chunks this provider can send one at a time."""
        return segment_by_size(text, self.chunk_size)

    async def _translate_chunks(self, chunks: list[str], source: str, target: str) -> str:
        translated: list[str] = []
        failures: list[ChunkTranslationError] = []

        for i, chunk in enumerate(chunks):
            try:
                translated.append(await self.translate(chunk, source, target))
            except ClientError:
                raise
            except ProviderError as e:
                failure = ChunkTranslationError(self.name, i, e)
                logger.warning(f"{failure}; keeping original text")
                failures.append(failure)
                translated.append(chunk)

            if i < len(chunks) - 1:
                await asyncio.sleep(self.chunk_delay)

        if len(failures) == len(chunks):
            raise failures[0].cause

        return SIZE_CHUNK_SEPARATOR.join(translated)

    # =========================================================================
    # Response handling
    # =========================================================================

    def _classify(self, response: httpx.Response) -> None:
        """Raise the ProviderError matching a non-2xx response."""
        if response.is_success:
            return

        detail = response.text[:200]
        logger.error(f"{self.name} returned {response.status_code}: {detail}")

        if response.is_client_error:
            raise ClientError(self.name, response.status_code, detail)
        raise ServerError(self.name, response.status_code, detail)

    def _json(self, response: httpx.Response) -> Any:
        """Decode a JSON body, classifying failures."""
        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(self.name, f"invalid JSON: {e}") from e
