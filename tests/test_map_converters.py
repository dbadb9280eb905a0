from __future__ import annotations

from decimal import Decimal

import pytest

from pagseguro.core.conversion.map_converters import (
    authorization_registration_to_map,
    pre_approval_charge_to_map,
    pre_approval_subscription_to_map,
)
from pagseguro.core.domain import (
    AuthorizationRegistration,
    Item,
    PaymentMethod,
    PaymentMethodType,
    Permission,
    PreApprovalCharge,
)
from pagseguro.core.errors import RequestValidationError


def test_authorization_registration_keys():
    registration = AuthorizationRegistration(
        reference="REF1234",
        permissions=[Permission.CREATE_CHECKOUTS, Permission.SEARCH_TRANSACTIONS],
        redirect_url="https://loja.example.com/retorno",
        notification_url="https://loja.example.com/notificacao",
    )

    fields = authorization_registration_to_map(registration)

    assert dict(fields) == {
        "reference": "REF1234",
        "permissions": "CREATE_CHECKOUTS,SEARCH_TRANSACTIONS",
        "redirectURL": "https://loja.example.com/retorno",
        "notificationURL": "https://loja.example.com/notificacao",
    }


def test_authorization_optional_fields_are_omitted():
    fields = authorization_registration_to_map(
        AuthorizationRegistration(permissions=[Permission.DIRECT_PAYMENT])
    )

    assert dict(fields) == {"permissions": "DIRECT_PAYMENT"}


def test_authorization_without_permissions_fails():
    with pytest.raises(RequestValidationError) as excinfo:
        authorization_registration_to_map(AuthorizationRegistration(reference="REF"))

    assert excinfo.value.field == "permissions"


def test_subscription_map(subscription):
    fields = pre_approval_subscription_to_map(subscription)

    assert fields["plan"] == "PLAN-GOLD"
    assert fields["reference"] == "SUB-0001"
    assert fields["sender.name"] == "João Comprador"
    assert fields["sender.hash"] == "abc123hash"
    assert fields["sender.phone.areaCode"] == "11"
    assert fields["sender.phone.number"] == "999990000"
    assert "sender.phone.type" not in fields
    assert fields["sender.address.city"] == "São Paulo"
    assert fields["sender.address.postalCode"] == "01452002"
    assert fields["sender.address.country"] == "BRA"
    assert fields["sender.documents.0.type"] == "CPF"
    assert fields["sender.documents.0.value"] == "12345678909"
    assert "sender.documents.1.type" not in fields
    assert fields["paymentMethod.type"] == "CREDITCARD"
    assert fields["paymentMethod.creditCard.token"] == "CARD-TOKEN"
    assert fields["paymentMethod.creditCard.holder.birthDate"] == "1980-05-17"
    assert fields["paymentMethod.creditCard.holder.documents.0.value"] == "12345678909"
    assert fields["paymentMethod.creditCard.holder.phone.number"] == "33334444"
    assert fields["paymentMethod.creditCard.holder.billingAddress.street"] == (
        "Avenida Brigadeiro Faria Lima"
    )


def test_subscription_credit_card_is_mandated(subscription):
    without_card = subscription.model_copy(update={"payment_method": PaymentMethod()})

    with pytest.raises(RequestValidationError) as excinfo:
        pre_approval_subscription_to_map(without_card)

    assert excinfo.value.field == "paymentMethod.creditCard"


def test_subscription_non_card_method_has_no_card_keys(subscription):
    boleto = subscription.model_copy(
        update={"payment_method": PaymentMethod(type=PaymentMethodType.BOLETO)}
    )

    fields = pre_approval_subscription_to_map(boleto)

    assert fields["paymentMethod.type"] == "BOLETO"
    assert not any(key.startswith("paymentMethod.creditCard") for key in fields)


def test_charge_items_are_indexed_contiguously(charge):
    fields = pre_approval_charge_to_map(charge)

    item_keys = [key for key in fields if key.startswith("items.")]
    assert {key.split(".")[1] for key in item_keys} == {"0", "1", "2"}
    assert fields["preApprovalCode"] == "12E6D5D2A8A8AB3004E11FB0C3C1D5A7"
    assert fields["senderIp"] == "10.0.0.1"
    assert fields["items.0.amount"] == "10.00"
    assert fields["items.1.amount"] == "2.50"
    assert fields["items.1.quantity"] == "2"
    assert fields["items.1.weight"] == "100"
    assert fields["items.2.shippingCost"] == "1.01"
    assert "items.0.weight" not in fields


def test_charge_indexes_ignore_source_numbering():
    by_line = {
        3: Item(id="a", description="A", amount="1"),
        7: Item(id="b", description="B", amount="2"),
        42: Item(id="c", description="C", amount="3"),
    }
    charge = PreApprovalCharge(code="CODE", items=list(by_line.values()))

    fields = pre_approval_charge_to_map(charge)

    assert [fields[f"items.{n}.id"] for n in range(3)] == ["a", "b", "c"]
    assert "items.3.id" not in fields


def test_charge_without_items_fails():
    with pytest.raises(RequestValidationError) as excinfo:
        pre_approval_charge_to_map(PreApprovalCharge(code="CODE"))

    assert excinfo.value.field == "items"


def test_conversion_is_deterministic(subscription, charge):
    for convert, request in (
        (pre_approval_subscription_to_map, subscription),
        (pre_approval_charge_to_map, charge),
    ):
        first, second = convert(request), convert(request)
        assert list(first.items()) == list(second.items())
        assert first.to_form_body() == second.to_form_body()


@pytest.mark.parametrize("field", ["amount", "shipping_cost"])
def test_item_amounts_above_the_limit_are_rejected(field):
    values = {"id": "a", "description": "A", "amount": "1", field: "1E+30"}

    with pytest.raises(RequestValidationError) as excinfo:
        Item.create(**values)

    assert excinfo.value.field == field


def test_unformattable_item_amount_names_the_wire_key():
    item = Item.model_construct(id="a", description="A", amount=Decimal("1E+30"), quantity=1)
    charge = PreApprovalCharge(code="CODE").model_copy(update={"items": (item,)})

    with pytest.raises(RequestValidationError) as excinfo:
        pre_approval_charge_to_map(charge)

    assert excinfo.value.field == "items.0.amount"
    assert excinfo.value.cause is not None
