"""Tests for LibreTranslateClient against an httpx.MockTransport."""

import json

import httpx
import pytest

from app.domain.exceptions import TranslationBackendError
from app.infrastructure.external.translation import LibreTranslateClient


def _client(handler, api_key: str | None = None) -> tuple[LibreTranslateClient, httpx.AsyncClient]:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return LibreTranslateClient("http://lt.test/", api_key=api_key, http_client=http), http


async def test_posts_payload_and_returns_translation() -> None:
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"translatedText": "Hello world"})

    client, http = _client(handler, api_key="secret")
    async with http:
        assert await client.translate("Bonjour le monde", "fr", "en") == "Hello world"
    assert seen["url"] == "http://lt.test/translate"
    assert seen["body"] == {
        "q": "Bonjour le monde",
        "source": "fr",
        "target": "en",
        "format": "text",
        "api_key": "secret",
    }


async def test_api_key_omitted_when_not_configured() -> None:
    bodies: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"translatedText": "x"})

    client, http = _client(handler)
    async with http:
        await client.translate("a b", "fr", "en")
    assert "api_key" not in bodies[0]


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(503, json={"error": "busy"}),
        httpx.Response(200, text="<html>"),
        httpx.Response(200, json={"other": "field"}),
        httpx.Response(200, json=["translatedText"]),
        httpx.Response(200, json={"translatedText": None}),
    ],
)
async def test_bad_responses_raise_backend_error(response: httpx.Response) -> None:
    client, http = _client(lambda request: response)
    async with http:
        with pytest.raises(TranslationBackendError) as exc_info:
            await client.translate("Bonjour", "fr", "en")
    assert exc_info.value.error_code == "TRANSLATION_BACKEND_ERROR"
    assert exc_info.value.details["source"] == "fr"


async def test_timeout_raises_backend_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    client, http = _client(handler)
    async with http:
        with pytest.raises(TranslationBackendError, match="timeout"):
            await client.translate("Bonjour", "fr", "en")


async def test_connection_error_raises_backend_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client, http = _client(handler)
    async with http:
        with pytest.raises(TranslationBackendError, match="transport error"):
            await client.translate("Bonjour", "fr", "en")
