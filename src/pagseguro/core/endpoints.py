"""Endpoint templates of the web services (fixed by the service)."""

from __future__ import annotations

from urllib.parse import quote

AUTHORIZATION_REQUEST = "{host}/v2/authorizations/request"
PRE_APPROVALS = "{host}/pre-approvals"
PRE_APPROVAL_CANCEL = "{host}/v2/pre-approvals/cancel/{code}"
PRE_APPROVAL_PAYMENT = "{host}/v2/pre-approvals/payment"


def build_url(template: str, *, host: str, **params: str) -> str:
    """Fill an endpoint template; path parameters are percent-encoded."""

    encoded = {key: quote(value, safe="") for key, value in params.items()}
    return template.format(host=host.rstrip("/"), **encoded)
