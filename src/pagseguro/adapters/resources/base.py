"""Shared plumbing of the resources: one HTTP exchange, one decode.

Every lower-level failure is mapped here to the library taxonomy, with the
original exception chained as the cause.
"""

from __future__ import annotations

from typing import Mapping, TypeVar

import httpx

from pagseguro.adapters.http_client import (
    FORM_CONTENT_TYPE,
    XML_CONTENT_TYPE,
    content_type,
    response_charset,
)
from pagseguro.core.config import AppSettings
from pagseguro.core.conversion.decoder import decode, error_entries, is_error_document, parse_xml
from pagseguro.core.conversion.field_map import FieldMap
from pagseguro.core.domain.results import ResultModel
from pagseguro.core.errors import DecodeError, ServiceError, TransportError
from pagseguro.core.interfaces.log_sink import LogSink

ResultT = TypeVar("ResultT", bound=ResultModel)


class BaseResource:
    def __init__(self, settings: AppSettings, http_client: httpx.Client, log: LogSink) -> None:
        self._settings = settings
        self._http = http_client
        self._log = log

    def _send(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, str] | None = None,
        form: FieldMap | None = None,
        xml: bytes | None = None,
    ) -> httpx.Response:
        charset = self._settings.charset
        headers: dict[str, str] = {}
        content: bytes | None = None
        if form is not None:
            content = form.to_form_body(charset)
            headers["Content-Type"] = content_type(FORM_CONTENT_TYPE, charset)
        elif xml is not None:
            content = xml
            headers["Content-Type"] = content_type(XML_CONTENT_TYPE, charset)

        self._log.debug(
            "http_request",
            method=method,
            url=url,
            fields=list(form) if form is not None else None,
        )
        try:
            response = self._http.request(
                method,
                url,
                params=dict(params or {}),
                headers=headers,
                content=content,
            )
        except httpx.HTTPError as exc:
            self._log.error("http_request_failed", method=method, url=url, error=str(exc))
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        self._log.debug("http_response", status_code=response.status_code, url=url)
        return response

    def _decode(self, response: httpx.Response, result_type: type[ResultT]) -> ResultT:
        charset = response_charset(response, self._settings.charset)
        status = response.status_code
        endpoint = response.request.url.copy_with(query=None)

        if response.is_success:
            try:
                return decode(response.content, result_type, status_code=status, charset=charset)
            except ServiceError as exc:
                self._log.warning("service_error", status_code=status, codes=list(exc.codes))
                raise

        try:
            root = parse_xml(response.content, charset=charset)
        except DecodeError as exc:
            self._log.error("http_error_status", status_code=status)
            raise TransportError(f"HTTP {status} from {endpoint}", status_code=status) from exc

        if is_error_document(root):
            try:
                entries = error_entries(root, payload=response.content)
            except DecodeError as exc:
                self._log.error("http_error_status", status_code=status, root=root.tag)
                raise TransportError(f"HTTP {status} from {endpoint}", status_code=status) from exc
            exc = ServiceError(entries, status_code=status)
            self._log.warning("service_error", status_code=status, codes=list(exc.codes))
            raise exc

        self._log.error("http_error_status", status_code=status, root=root.tag)
        raise TransportError(f"HTTP {status} from {endpoint}", status_code=status)
