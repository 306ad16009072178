"""
Tests for the Google and Azure providers.

HTTP is faked with httpx.MockTransport; nothing leaves the process.
"""

import json

import httpx
import pytest

from lipi.config import Settings
from lipi.core.errors import (
    ClientError,
    MalformedResponseError,
    NetworkError,
    RequestTooLargeError,
    ServerError,
)
from lipi.core.models import ProviderKind
from lipi.providers import (
    AzureTranslateProvider,
    GoogleTranslateProvider,
    create_provider,
    providers_from_settings,
)
from lipi.script import to_brahmi
from lipi.services import build_orchestrator


NAMASTE = "नमस्ते"


def google_body(*segments: str) -> list:
    """Google's nested-array response for the given translated segments."""
    return [[[s, "source", None, None, 10] for s in segments], None, "en"]


def azure_body(text: str, to: str = "hi") -> list:
    return [{"translations": [{"text": text, "to": to}]}]


class Recorder:
    """MockTransport handler that records requests and delegates to a function."""

    def __init__(self, respond):
        self.respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def queries(self) -> list[str]:
        return [r.url.params["q"] for r in self.requests]


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def upper_google():
    """Google endpoint that 'translates' by upper-casing the query."""
    return Recorder(lambda r: httpx.Response(200, json=google_body(r.url.params["q"].upper())))


def small_google(recorder: Recorder, **kwargs) -> GoogleTranslateProvider:
    """Google provider with limits small enough to force chunking."""
    options = dict(
        base_url="https://mt.test/t",
        max_url_length=90,
        chunk_size=25,
        chunk_delay=0,
        transport=recorder.transport,
    )
    options.update(kwargs)
    return GoogleTranslateProvider(**options)


LONG_TEXT = "Alpha beta gamma. Delta epsilon zeta. Eta theta iota."


# =============================================================================
# Google Translate
# =============================================================================


class TestGoogleRequest:
    @pytest.mark.asyncio
    async def test_success(self):
        recorder = Recorder(lambda r: httpx.Response(200, json=google_body(NAMASTE)))
        provider = GoogleTranslateProvider(base_url="https://mt.test/t", transport=recorder.transport)

        result = await provider.translate("Hello", "en", "hi")

        assert result == NAMASTE
        params = recorder.requests[0].url.params
        assert recorder.requests[0].method == "GET"
        assert params["client"] == "gtx"
        assert params["sl"] == "en"
        assert params["tl"] == "hi"
        assert params["dt"] == "t"
        assert params["q"] == "Hello"

    @pytest.mark.asyncio
    async def test_joins_segments(self):
        recorder = Recorder(lambda r: httpx.Response(200, json=google_body("Hello. ", "World.")))
        provider = GoogleTranslateProvider(transport=recorder.transport)

        assert await provider.translate("x", "de", "en") == "Hello. World."

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status, error", [(400, ClientError), (429, ClientError), (503, ServerError)])
    async def test_status_classification(self, status, error):
        recorder = Recorder(lambda r: httpx.Response(status, text="nope"))
        provider = GoogleTranslateProvider(transport=recorder.transport)

        with pytest.raises(error) as exc:
            await provider.translate("Hello", "en", "hi")

        assert exc.value.status_code == status
        assert len(recorder.requests) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("response", [
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(200, json=[]),
        httpx.Response(200, json={"error": "x"}),
        httpx.Response(200, json=[[None]]),
    ])
    async def test_malformed(self, response):
        provider = GoogleTranslateProvider(transport=Recorder(lambda r: response).transport)

        with pytest.raises(MalformedResponseError):
            await provider.translate("Hello", "en", "hi")

    @pytest.mark.asyncio
    async def test_network_error_retried(self):
        attempts = []

        def respond(request):
            attempts.append(request)
            if len(attempts) == 1:
                raise httpx.ConnectError("connection refused", request=request)
            return httpx.Response(200, json=google_body("ok"))

        provider = GoogleTranslateProvider(retry_attempts=2, transport=httpx.MockTransport(respond))

        assert await provider.translate("Hello", "en", "hi") == "ok"
        assert len(attempts) == 2

    @pytest.mark.asyncio
    async def test_network_error_raised_after_retries(self):
        def respond(request):
            raise httpx.ConnectError("connection refused", request=request)

        provider = GoogleTranslateProvider(retry_attempts=1, transport=httpx.MockTransport(respond))

        with pytest.raises(NetworkError):
            await provider.translate("Hello", "en", "hi")

    @pytest.mark.asyncio
    async def test_url_too_long_not_sent(self, upper_google):
        provider = small_google(upper_google)

        with pytest.raises(RequestTooLargeError):
            await provider.translate(LONG_TEXT, "en", "hi")

        assert upper_google.requests == []


class TestGoogleChunking:
    @pytest.mark.asyncio
    async def test_oversized_text_chunked(self, upper_google):
        provider = small_google(upper_google)

        result = await provider.translate_chunked(LONG_TEXT, "en", "hi")

        assert result == "ALPHA BETA GAMMA. DELTA EPSILON ZETA. ETA THETA IOTA."
        assert upper_google.queries == [
            "Alpha beta gamma.",
            "Delta epsilon zeta.",
            "Eta theta iota.",
        ]

    @pytest.mark.asyncio
    async def test_single_request_failure_falls_back_to_chunks(self):
        def respond(request):
            q = request.url.params["q"]
            if q == LONG_TEXT:
                return httpx.Response(503)
            return httpx.Response(200, json=google_body(q.upper()))

        recorder = Recorder(respond)
        provider = small_google(recorder, max_url_length=1800)

        result = await provider.translate_chunked(LONG_TEXT, "en", "hi")

        assert result == LONG_TEXT.upper()
        assert len(recorder.requests) == 4

    @pytest.mark.asyncio
    async def test_failed_chunk_keeps_original_text(self):
        def respond(request):
            q = request.url.params["q"]
            if q.startswith("Delta"):
                return httpx.Response(503)
            return httpx.Response(200, json=google_body(q.upper()))

        provider = small_google(Recorder(respond))

        result = await provider.translate_chunked(LONG_TEXT, "en", "hi")

        assert result == "ALPHA BETA GAMMA. Delta epsilon zeta. ETA THETA IOTA."

    @pytest.mark.asyncio
    async def test_rejected_chunk_aborts(self):
        def respond(request):
            q = request.url.params["q"]
            if q.startswith("Delta"):
                return httpx.Response(400)
            return httpx.Response(200, json=google_body(q.upper()))

        recorder = Recorder(respond)
        provider = small_google(recorder)

        with pytest.raises(ClientError):
            await provider.translate_chunked(LONG_TEXT, "en", "hi")

        # The third chunk is never sent
        assert len(recorder.requests) == 2

    @pytest.mark.asyncio
    async def test_every_chunk_failing_raises(self):
        provider = small_google(Recorder(lambda r: httpx.Response(502)))

        with pytest.raises(ServerError):
            await provider.translate_chunked(LONG_TEXT, "en", "hi")

    @pytest.mark.asyncio
    async def test_unsplittable_text_fails_once(self):
        recorder = Recorder(lambda r: httpx.Response(503))
        provider = small_google(recorder)

        with pytest.raises(ServerError):
            await provider.translate_chunked("Short one.", "en", "hi")

        assert len(recorder.requests) == 1

    @pytest.mark.asyncio
    async def test_encoded_chunks_fit_url_budget(self, upper_google):
        # Each Devanagari letter takes nine characters once percent-encoded
        text = " ".join(["क" * 19] * 20) + "।"
        provider = GoogleTranslateProvider(chunk_delay=0, transport=upper_google.transport)

        result = await provider.translate_chunked(text, "hi", "en")

        assert len(upper_google.requests) > 2
        for request in upper_google.requests:
            assert len(str(request.url)) <= provider.max_url_length
        assert result == " ".join(upper_google.queries)
        assert result.split() == text.split()

    def test_split_respects_url_budget(self):
        text = " ".join(["क" * 19] * 20) + "।"
        provider = GoogleTranslateProvider()

        chunks = provider._split(text, "hi", "en")

        assert " ".join(chunks).split() == text.split()
        for chunk in chunks:
            assert provider.url_length(chunk, "hi", "en") <= provider.max_url_length
            assert len(chunk) <= provider.chunk_size


# =============================================================================
# Azure Translate
# =============================================================================


def azure(recorder: Recorder, **kwargs) -> AzureTranslateProvider:
    return AzureTranslateProvider(
        subscription_key="secret-key",
        endpoint="https://azure.test/",
        region="centralindia",
        transport=recorder.transport,
        **kwargs,
    )


class TestAzure:
    @pytest.mark.asyncio
    async def test_success(self):
        recorder = Recorder(lambda r: httpx.Response(200, json=azure_body(NAMASTE)))

        result = await azure(recorder).translate("Hello", "en", "hi")

        assert result == NAMASTE
        request = recorder.requests[0]
        assert request.method == "POST"
        assert request.url.path == "/translate"
        assert request.url.params["api-version"] == "3.0"
        assert request.url.params["from"] == "en"
        assert request.url.params["to"] == "hi"
        assert request.headers["Ocp-Apim-Subscription-Key"] == "secret-key"
        assert request.headers["Ocp-Apim-Subscription-Region"] == "centralindia"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["X-ClientTraceId"]
        assert json.loads(request.content) == [{"text": "Hello"}]

    @pytest.mark.asyncio
    async def test_trace_id_per_request(self):
        recorder = Recorder(lambda r: httpx.Response(200, json=azure_body("x")))
        provider = azure(recorder)

        await provider.translate("a", "en", "hi")
        await provider.translate("b", "en", "hi")

        ids = {r.headers["X-ClientTraceId"] for r in recorder.requests}
        assert len(ids) == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status, error", [(401, ClientError), (400, ClientError), (500, ServerError)])
    async def test_status_classification(self, status, error):
        recorder = Recorder(lambda r: httpx.Response(status, json={"error": {"code": status}}))

        with pytest.raises(error):
            await azure(recorder).translate("Hello", "en", "hi")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [[], [{}], [{"translations": []}], {"text": "x"}, [{"translations": [{"text": 5}]}]])
    async def test_malformed(self, body):
        recorder = Recorder(lambda r: httpx.Response(200, json=body))

        with pytest.raises(MalformedResponseError):
            await azure(recorder).translate("Hello", "en", "hi")

    def test_requires_key(self):
        with pytest.raises(ValueError):
            AzureTranslateProvider(subscription_key="")

    def test_repr_hides_key(self):
        provider = AzureTranslateProvider(subscription_key="secret-key")
        assert "secret-key" not in repr(provider)


# =============================================================================
# Factory
# =============================================================================


class TestFactory:
    def test_create_google(self):
        provider = create_provider("google", Settings(google_chunk_size=42))

        assert isinstance(provider, GoogleTranslateProvider)
        assert provider.chunk_size == 42

    def test_create_azure(self):
        provider = create_provider(ProviderKind.AZURE, Settings(azure_translate_key="k"))
        assert isinstance(provider, AzureTranslateProvider)

    def test_azure_without_key(self):
        with pytest.raises(ValueError):
            create_provider("azure", Settings(azure_translate_key=""))

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown provider"):
            create_provider("deepl", Settings())

    def test_priority_order(self):
        settings = Settings(provider_priority="azure, google", azure_translate_key="k")
        kinds = [p.kind for p in providers_from_settings(settings)]
        assert kinds == [ProviderKind.AZURE, ProviderKind.GOOGLE]

    def test_unusable_providers_skipped(self):
        settings = Settings(provider_priority="azure,google", azure_translate_key="")
        kinds = [p.kind for p in providers_from_settings(settings)]
        assert kinds == [ProviderKind.GOOGLE]

    def test_azure_credentials_flag(self):
        assert Settings(azure_translate_key="k").use_azure
        assert not Settings(azure_translate_key="").use_azure

    def test_defaults_to_google(self):
        providers = providers_from_settings(Settings(provider_priority="deepl"))
        assert [p.kind for p in providers] == [ProviderKind.GOOGLE]


# =============================================================================
# Fallback over HTTP
# =============================================================================


class TestFallbackOverHttp:
    @pytest.fixture
    def settings(self):
        return Settings(
            provider_priority="google,azure",
            google_base_url="https://google.test/t",
            google_chunk_delay=0,
            azure_translate_key="k",
            azure_translate_endpoint="https://azure.test",
        )

    @pytest.mark.asyncio
    async def test_rejected_by_google_served_by_azure(self, settings):
        def respond(request):
            if request.url.host == "google.test":
                return httpx.Response(400, text="bad language pair")
            return httpx.Response(200, json=azure_body(NAMASTE))

        recorder = Recorder(respond)
        orchestrator = build_orchestrator(settings, transport=recorder.transport)

        result = await orchestrator.translate("Hello", "en", "brahmi")

        assert result == to_brahmi(NAMASTE)
        assert [r.url.host for r in recorder.requests] == ["google.test", "azure.test"]

    @pytest.mark.asyncio
    async def test_outage_not_sent_to_fallback(self, settings):
        def respond(request):
            if request.url.host == "google.test":
                return httpx.Response(503)
            return httpx.Response(200, json=azure_body(NAMASTE))

        recorder = Recorder(respond)
        orchestrator = build_orchestrator(settings, transport=recorder.transport)

        with pytest.raises(ServerError):
            await orchestrator.translate("Hello", "en", "hi")

        assert {r.url.host for r in recorder.requests} == {"google.test"}
