"""Response translation middleware.

Translates JSON and plain-text response bodies into the language requested
by Accept-Language. Endpoints opt in to field markers and enum types by
naming their entity with set_translate_entity(request, "User"); without it
the body is still walked, with no markers.

Uses raw ASGI (no BaseHTTPMiddleware). Only uncompressed application/json
and text/plain responses with status < 500 are buffered; everything else
streams through untouched. The translation service is read from
app.state.translation_service (set in lifespan); when it is missing or
disabled the middleware is a pass-through.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any, Callable

from fastapi import Request

logger = logging.getLogger(__name__)

TRANSLATE_ENTITY_STATE_KEY = "translate_entity"

DEFAULT_EXCLUDED_PATH_PREFIXES = (
    "/docs",
    "/redoc",
    "/openapi.json",
    "/api/v1/health",
    "/api/v1/translate",
)

_TRANSLATABLE_MEDIA_TYPES = ("application/json", "text/plain")


def set_translate_entity(request: Request, entity: str) -> None:
    """Declare which registered entity describes this response body."""
    setattr(request.state, TRANSLATE_ENTITY_STATE_KEY, entity)


def extract_language(accept_language: str | None, default: str) -> str:
    """Two-letter language from an Accept-Language header.

    "en-US" -> "en"; "fr-FR,fr;q=0.9,en;q=0.8" -> "fr"; missing -> default.
    """
    if not accept_language:
        return default
    first = accept_language.split(",")[0].split(";")[0].strip()
    if len(first) < 2 or not first[:2].isalpha():
        return default
    return first[:2].lower()


def _get_header(headers: Iterable[tuple[bytes, bytes]], name: str) -> str | None:
    """Return first header value for name (case-insensitive). Headers are (bytes, bytes)."""
    want = name.lower().encode()
    for k, v in headers:
        if k.lower() == want:
            return v.decode("latin-1")
    return None


def _replace_headers(
    headers: list[tuple[bytes, bytes]], updates: dict[bytes, bytes]
) -> list[tuple[bytes, bytes]]:
    kept = [(k, v) for k, v in headers if k.lower() not in updates]
    kept.extend(updates.items())
    return kept


def _is_excluded(path: str, prefixes: tuple[str, ...]) -> bool:
    return any(path == p or path.startswith(p.rstrip("/") + "/") for p in prefixes)


def _charset(content_type: str) -> str:
    for part in content_type.split(";")[1:]:
        key, _, value = part.strip().partition("=")
        if key.lower() == "charset" and value:
            return value.strip('"')
    return "utf-8"


async def _translate_body(
    service: Any,
    body: bytes,
    content_type: str,
    target_lang: str,
    entity: str | None,
) -> bytes | None:
    """Translated body bytes, or None to keep the original body."""
    charset = _charset(content_type)
    try:
        text = body.decode(charset)
    except (LookupError, UnicodeDecodeError):
        logger.warning("Response body is not %s; skipping translation", charset)
        return None
    if content_type.startswith("text/plain"):
        return (await service.translate(text, target_lang)).encode(charset)
    try:
        data = json.loads(text)
    except ValueError:
        logger.warning("Response body is not valid JSON; skipping translation")
        return None
    if isinstance(data, str):
        translated: Any = await service.translate(data, target_lang)
    else:
        translated = await service.translate_tree(data, target_lang, entity)
    return json.dumps(
        translated, ensure_ascii=False, allow_nan=False, separators=(",", ":")
    ).encode("utf-8")


def TranslationMiddleware(
    app: Callable,
    exclude_paths: Iterable[str] = DEFAULT_EXCLUDED_PATH_PREFIXES,
) -> Callable:
    """Translate response bodies per Accept-Language. Raw ASGI."""
    excluded = tuple(exclude_paths)

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http" or _is_excluded(scope.get("path", ""), excluded):
            await app(scope, receive, send)
            return
        starlette_app = scope.get("app")
        service = getattr(getattr(starlette_app, "state", None), "translation_service", None)
        if service is None or not service.enabled:
            await app(scope, receive, send)
            return

        target_lang = extract_language(
            _get_header(scope.get("headers", []), "accept-language"),
            service.source_language,
        )
        start: dict | None = None
        chunks: list[bytes] = []

        async def send_wrapper(message: dict) -> None:
            nonlocal start
            if message["type"] == "http.response.start":
                headers = message.get("headers", [])
                content_type = (_get_header(headers, "content-type") or "").lower()
                if (
                    message.get("status", 200) < 500
                    and content_type.startswith(_TRANSLATABLE_MEDIA_TYPES)
                    and _get_header(headers, "content-encoding") is None
                ):
                    start = message
                    return
                await send(message)
                return
            if message["type"] != "http.response.body" or start is None:
                await send(message)
                return
            chunks.append(message.get("body", b""))
            if message.get("more_body", False):
                return

            body = b"".join(chunks)
            headers = list(start.get("headers", []))
            content_type = (_get_header(headers, "content-type") or "").lower()
            entity = scope.get("state", {}).get(TRANSLATE_ENTITY_STATE_KEY)
            try:
                translated = await _translate_body(
                    service, body, content_type, target_lang, entity
                )
            except ValueError:
                logger.warning("Translated body could not be encoded; sending original", exc_info=True)
                translated = None
            if translated is not None:
                body = translated
                start["headers"] = _replace_headers(
                    headers,
                    {
                        b"content-language": target_lang.encode(),
                        b"content-length": str(len(body)).encode(),
                    },
                )
            await send(start)
            await send({"type": "http.response.body", "body": body, "more_body": False})

        await app(scope, receive, send_wrapper)

    return asgi_app
