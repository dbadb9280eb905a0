"""PagSeguro web-services client.

Typed operations (authorization registration, pre-approval subscription,
cancellation and charge) that build requests, send them over HTTP and decode
the XML responses.
"""

from pagseguro.core.config import AppSettings, Environment
from pagseguro.core.errors import (
    DecodeError,
    PagSeguroError,
    RequestValidationError,
    ServiceError,
    ServiceErrorEntry,
    TransportError,
)
from pagseguro.core.services.client import PagSeguro

__version__ = "0.1.0"

__all__ = [
    "AppSettings",
    "DecodeError",
    "Environment",
    "PagSeguro",
    "PagSeguroError",
    "RequestValidationError",
    "ServiceError",
    "ServiceErrorEntry",
    "TransportError",
]
