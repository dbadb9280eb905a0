"""Request objects -> Field Map (form-encoded endpoints).

Each converter is a pure function. Optional values that are absent never
reach the map; mandated values that are absent raise
`RequestValidationError` with the wire key of the missing field.

Key layout is fixed by the web services:

- authorization: `reference`, `permissions`, `redirectURL`, `notificationURL`
- subscription: `plan`, `reference`, `sender.*`, `paymentMethod.*`
- charge: `preApprovalCode`, `reference`, `senderIp`, `items.N.*`
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Sequence

from pagseguro.core.conversion.field_map import FieldMap, join_key
from pagseguro.core.conversion.formatting import (
    format_amount,
    format_date,
    format_enum,
    format_int,
)
from pagseguro.core.domain.enums import PaymentMethodType
from pagseguro.core.domain.requests import (
    Address,
    AuthorizationRegistration,
    Document,
    Item,
    Phone,
    PreApprovalCharge,
    PreApprovalSubscription,
)
from pagseguro.core.errors import RequestValidationError


def require_any(values: Sequence[object], field: str) -> None:
    if not values:
        raise RequestValidationError(field, "at least one entry is required")


def authorization_registration_to_map(request: AuthorizationRegistration) -> FieldMap:
    require_any(request.permissions, "permissions")

    fields = FieldMap()
    fields.put("reference", request.reference)
    fields.put("permissions", ",".join(format_enum(p) or "" for p in request.permissions))
    fields.put("redirectURL", request.redirect_url)
    fields.put("notificationURL", request.notification_url)
    return fields


def pre_approval_subscription_to_map(request: PreApprovalSubscription) -> FieldMap:
    fields = FieldMap()
    fields.put("plan", request.plan)
    fields.put("reference", request.reference)

    sender = request.sender
    fields.put("sender.name", sender.name)
    fields.put("sender.email", sender.email)
    fields.put("sender.ip", sender.ip)
    fields.put("sender.hash", sender.hash)
    _put_phone(fields, "sender.phone", sender.phone)
    _put_address(fields, "sender.address", sender.address)
    _put_documents(fields, "sender.documents", sender.documents)

    method = request.payment_method
    fields.put("paymentMethod.type", format_enum(method.type))
    if method.type is PaymentMethodType.CREDITCARD:
        card = method.credit_card
        if card is None:
            raise RequestValidationError.missing("paymentMethod.creditCard")
        fields.put("paymentMethod.creditCard.token", card.token)
        holder = card.holder
        prefix = "paymentMethod.creditCard.holder"
        fields.put(join_key(prefix, "name"), holder.name)
        fields.put(join_key(prefix, "birthDate"), format_date(holder.birth_date))
        _put_documents(fields, join_key(prefix, "documents"), holder.documents)
        _put_phone(fields, join_key(prefix, "phone"), holder.phone)
        _put_address(fields, join_key(prefix, "billingAddress"), holder.billing_address)
    return fields


def pre_approval_charge_to_map(request: PreApprovalCharge) -> FieldMap:
    require_any(request.items, "items")

    fields = FieldMap()
    fields.put("preApprovalCode", request.code)
    fields.put("reference", request.reference)
    fields.put("senderIp", request.sender_ip)
    _put_items(fields, "items", request.items)
    return fields


def _put_items(fields: FieldMap, prefix: str, items: Iterable[Item]) -> None:
    for index, item in enumerate(items):
        key = join_key(prefix, index)
        fields.put_all(
            key,
            {
                "id": item.id,
                "description": item.description,
                "amount": _item_amount(item.amount, join_key(key, "amount")),
                "quantity": format_int(item.quantity),
                "weight": format_int(item.weight),
                "shippingCost": _item_amount(item.shipping_cost, join_key(key, "shippingCost")),
            },
        )


def _item_amount(value: Decimal | None, key: str) -> str | None:
    try:
        return format_amount(value)
    except (TypeError, ValueError) as exc:
        raise RequestValidationError(key, str(exc)) from exc


def _put_documents(fields: FieldMap, prefix: str, documents: Iterable[Document]) -> None:
    for index, document in enumerate(documents):
        fields.put_all(
            join_key(prefix, index),
            {"type": format_enum(document.type), "value": document.value},
        )


def _put_phone(fields: FieldMap, prefix: str, phone: Phone | None) -> None:
    if phone is None:
        return
    fields.put_all(
        prefix,
        {
            "type": format_enum(phone.type),
            "areaCode": phone.area_code,
            "number": phone.number,
        },
    )


def _put_address(fields: FieldMap, prefix: str, address: Address | None) -> None:
    if address is None:
        return
    fields.put_all(
        prefix,
        {
            "street": address.street,
            "number": address.number,
            "complement": address.complement,
            "district": address.district,
            "city": address.city,
            "state": address.state,
            "country": address.country,
            "postalCode": address.postal_code,
        },
    )
