from __future__ import annotations

import pytest
from pydantic import ValidationError

from pagseguro.core.domain import (
    Address,
    AuthorizationRegistration,
    Document,
    DocumentType,
    Permission,
    PreApprovalSubscription,
    Sender,
)
from pagseguro.core.errors import RequestValidationError


def test_create_names_missing_field():
    with pytest.raises(RequestValidationError) as excinfo:
        Sender.create(name="Comprador")

    assert excinfo.value.field == "email"
    assert excinfo.value.errors[0]["type"] == "missing"


def test_create_names_nested_field():
    with pytest.raises(RequestValidationError) as excinfo:
        PreApprovalSubscription.create(
            plan="GOLD",
            sender={"name": "Comprador"},
            payment_method={},
        )

    assert excinfo.value.field == "sender.email"


def test_create_keeps_pydantic_error_as_cause():
    with pytest.raises(RequestValidationError) as excinfo:
        AuthorizationRegistration.create(reference="X" * 21)

    assert isinstance(excinfo.value.cause, ValidationError)
    assert isinstance(excinfo.value, ValueError)


def test_unknown_fields_are_rejected():
    with pytest.raises(RequestValidationError) as excinfo:
        AuthorizationRegistration.create(permission=["CREATE_CHECKOUTS"])

    assert excinfo.value.field == "permission"


def test_requests_are_immutable():
    registration = AuthorizationRegistration.create(permissions=[Permission.DIRECT_PAYMENT])

    with pytest.raises(ValidationError):
        registration.reference = "changed"


def test_enum_codes_are_accepted_as_strings():
    registration = AuthorizationRegistration.create(permissions=["SEARCH_TRANSACTIONS"])

    assert registration.permissions == (Permission.SEARCH_TRANSACTIONS,)


def test_digit_fields_are_normalized():
    document = Document(type=DocumentType.CPF, value="123.456.789-09")
    address = Address(
        street="Rua A",
        number="10",
        district="Centro",
        city="Recife",
        state="PE",
        postal_code="50030-230",
    )

    assert document.value == "12345678909"
    assert address.postal_code == "50030230"
    assert address.country == "BRA"


def test_coerce_accepts_object_or_mapping():
    registration = AuthorizationRegistration.create(permissions=["DIRECT_PAYMENT"])

    assert AuthorizationRegistration.coerce(registration) is registration
    assert AuthorizationRegistration.coerce({"permissions": ["DIRECT_PAYMENT"]}) == registration


def test_coerce_rejects_other_types():
    with pytest.raises(RequestValidationError) as excinfo:
        AuthorizationRegistration.coerce(["DIRECT_PAYMENT"])

    assert excinfo.value.field == "AuthorizationRegistration"
