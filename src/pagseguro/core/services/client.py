"""Client entry point.

`PagSeguro` wires settings, the HTTP client and the log sink together and
hands out resources. It owns (and closes) the HTTP client only when it built
it itself.
"""

from __future__ import annotations

from types import TracebackType

import httpx

from pagseguro.adapters.http_client import build_client
from pagseguro.adapters.logging import get_log_sink
from pagseguro.adapters.resources import AuthorizationsResource, PreApprovalsResource
from pagseguro.core.config import AppSettings
from pagseguro.core.interfaces.log_sink import LogSink


class PagSeguro:
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        http_client: httpx.Client | None = None,
        log_sink: LogSink | None = None,
    ) -> None:
        self.settings = settings or AppSettings()
        self._owns_http_client = http_client is None
        self._http = http_client if http_client is not None else build_client(self.settings)
        self._log = log_sink if log_sink is not None else get_log_sink()

    def authorizations(self) -> AuthorizationsResource:
        return AuthorizationsResource(self.settings, self._http, self._log)

    def pre_approvals(self) -> PreApprovalsResource:
        return PreApprovalsResource(self.settings, self._http, self._log)

    def close(self) -> None:
        if self._owns_http_client:
            self._http.close()

    def __enter__(self) -> "PagSeguro":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
