"""httpx client builder.

Standardizes timeout and default headers for every resource, and lets tests
plug an `httpx.MockTransport` in place of the network.
"""

from __future__ import annotations

import httpx

from pagseguro.core.config import AppSettings

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
XML_CONTENT_TYPE = "application/xml"


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with the configured timeout and headers."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": f"{XML_CONTENT_TYPE};charset={settings.charset}",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        transport=transport,
    )


def content_type(media_type: str, charset: str) -> str:
    return f"{media_type}; charset={charset}"


def response_charset(response: httpx.Response, default: str) -> str:
    """Charset declared by the response's Content-Type, or `default`."""

    return response.charset_encoding or default
