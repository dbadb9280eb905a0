"""Shared fixtures: settings, XML fixtures and a recording HTTP transport."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from pagseguro.core.config import AppSettings, Environment
from pagseguro.core.domain import (
    Address,
    CreditCard,
    CreditCardHolder,
    Document,
    DocumentType,
    Item,
    PaymentMethod,
    Phone,
    PreApprovalCharge,
    PreApprovalSubscription,
    Sender,
)
from pagseguro.core.services.client import PagSeguro

FIXTURES = Path(__file__).parent / "fixtures"

XML_HEADERS = {"Content-Type": "application/xml;charset=ISO-8859-1"}


def load_fixture(name: str) -> bytes:
    return (FIXTURES / name).read_bytes()


class RecordingTransport:
    """Hands out canned responses (or raises canned exceptions) in order."""

    def __init__(self, *outcomes: httpx.Response | Callable[[httpx.Request], Any]) -> None:
        self.requests: list[httpx.Request] = []
        self._outcomes = list(outcomes)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcome = self._outcomes.pop(0)
        if callable(outcome):
            return outcome(request)
        return outcome


class RecordingLogSink:
    def __init__(self) -> None:
        self.events: list[tuple[str, str, dict[str, Any]]] = []

    def _record(self, level: str, event: str, fields: dict[str, Any]) -> None:
        self.events.append((level, event, fields))

    def debug(self, event: str, **fields: Any) -> None:
        self._record("debug", event, fields)

    def info(self, event: str, **fields: Any) -> None:
        self._record("info", event, fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._record("warning", event, fields)

    def error(self, event: str, **fields: Any) -> None:
        self._record("error", event, fields)

    @property
    def names(self) -> list[str]:
        return [name for _, name, _ in self.events]


def xml_response(fixture: str, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=load_fixture(fixture), headers=XML_HEADERS)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        environment=Environment.SANDBOX,
        email="seller@example.com",
        token="SELLER-TOKEN-123",
        app_id="my-app",
        app_key="APP-KEY-456",
    )


@pytest.fixture
def log_sink() -> RecordingLogSink:
    return RecordingLogSink()


@pytest.fixture
def make_pagseguro(settings: AppSettings, log_sink: RecordingLogSink):
    """Build a `PagSeguro` whose HTTP client talks to a `RecordingTransport`."""

    clients: list[httpx.Client] = []

    def factory(transport: RecordingTransport) -> PagSeguro:
        client = httpx.Client(transport=httpx.MockTransport(transport))
        clients.append(client)
        return PagSeguro(settings, http_client=client, log_sink=log_sink)

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def address() -> Address:
    return Address(
        street="Avenida Brigadeiro Faria Lima",
        number="1384",
        complement="5o andar",
        district="Jardim Paulistano",
        city="São Paulo",
        state="SP",
        postal_code="01452-002",
    )


@pytest.fixture
def subscription(address: Address) -> PreApprovalSubscription:
    return PreApprovalSubscription(
        plan="PLAN-GOLD",
        reference="SUB-0001",
        sender=Sender(
            name="João Comprador",
            email="comprador@sandbox.pagseguro.com.br",
            ip="192.168.0.1",
            hash="abc123hash",
            phone=Phone(area_code="11", number="999990000"),
            address=address,
            documents=[Document(type=DocumentType.CPF, value="123.456.789-09")],
        ),
        payment_method=PaymentMethod(
            credit_card=CreditCard(
                token="CARD-TOKEN",
                holder=CreditCardHolder(
                    name="João Comprador",
                    birth_date=date(1980, 5, 17),
                    documents=[Document(type=DocumentType.CPF, value="12345678909")],
                    phone=Phone(area_code="11", number="33334444"),
                    billing_address=address,
                ),
            ),
        ),
    )


@pytest.fixture
def charge() -> PreApprovalCharge:
    return PreApprovalCharge(
        code="12E6D5D2A8A8AB3004E11FB0C3C1D5A7",
        reference="CHARGE-01",
        sender_ip="10.0.0.1",
        items=[
            Item(id="0001", description="Mensalidade", amount="10", quantity=1),
            Item(id="0002", description="Taxa de adesão", amount="2.5", quantity=2, weight=100),
            Item(id="0003", description="Frete", amount="7.99", shipping_cost="1.005"),
        ],
    )
