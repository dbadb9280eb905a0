"""Request models (Pydantic v2).

Immutable value objects describing what the caller wants the service to do.
They know nothing about wire formats; converters in
`pagseguro.core.conversion` turn them into Field Maps or XML documents.

Build them through `Model.create(**fields)`: it returns a valid object or
raises `RequestValidationError` naming the offending field.
"""

from __future__ import annotations

import re
from datetime import date
from decimal import Decimal
from typing import Annotated, Any, Mapping, TypeVar

from pydantic import BaseModel, BeforeValidator, Field, ValidationError
from pydantic.config import ConfigDict

from pagseguro.core.domain.enums import (
    AccountType,
    DocumentType,
    PaymentMethodType,
    Permission,
    PhoneType,
)
from pagseguro.core.errors import RequestValidationError

_NON_DIGITS = re.compile(r"\D")

# Largest amount the web services accept for a single item.
MAX_AMOUNT = Decimal("9999999.99")

RequestT = TypeVar("RequestT", bound="RequestModel")


class RequestModel(BaseModel):
    """Base for every request object: frozen, strict about unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def create(cls: type[RequestT], **fields: Any) -> RequestT:
        """Validating factory.

        Translates pydantic's `ValidationError` into the library taxonomy; the
        first failing location becomes `RequestValidationError.field`.
        """

        try:
            return cls(**fields)
        except ValidationError as exc:
            errors = exc.errors(include_url=False, include_context=False)
            first = errors[0]
            field = ".".join(str(part) for part in first["loc"]) or cls.__name__
            raise RequestValidationError(field, first["msg"], errors=errors) from exc

    @classmethod
    def coerce(cls: type[RequestT], value: RequestT | Mapping[str, Any]) -> RequestT:
        """Accept a prebuilt object or a mapping of fields."""

        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.create(**value)
        raise RequestValidationError(
            cls.__name__,
            f"expected {cls.__name__} or a mapping, got {type(value).__name__}",
        )


def _digits(value: object) -> object:
    if isinstance(value, str):
        return _NON_DIGITS.sub("", value)
    return value


Digits = Annotated[str, BeforeValidator(_digits)]


class Document(RequestModel):
    type: DocumentType = Field(..., description="Document kind (CPF/CNPJ).")
    value: Digits = Field(..., min_length=11, max_length=14, description="Digits only.")


class Phone(RequestModel):
    area_code: Digits = Field(..., pattern=r"^\d{2}$")
    number: Digits = Field(..., pattern=r"^\d{7,9}$")
    type: PhoneType | None = None


class Address(RequestModel):
    street: str = Field(..., min_length=1, max_length=80)
    number: str = Field(..., min_length=1, max_length=20)
    complement: str | None = Field(default=None, max_length=40)
    district: str = Field(..., min_length=1, max_length=60)
    city: str = Field(..., min_length=2, max_length=60)
    state: str = Field(..., pattern=r"^[A-Z]{2}$", description="Two-letter state code (UF).")
    country: str = Field(default="BRA", pattern=r"^[A-Z]{3}$")
    postal_code: Digits = Field(..., pattern=r"^\d{8}$", description="CEP, digits only.")


class AuthorizationPerson(RequestModel):
    name: str = Field(..., min_length=1, max_length=50)
    birth_date: date | None = None
    documents: tuple[Document, ...] = ()
    phones: tuple[Phone, ...] = ()
    address: Address | None = None


class AuthorizationCompany(RequestModel):
    name: str = Field(..., min_length=1, max_length=100)
    display_name: str | None = Field(default=None, max_length=100)
    website_url: str | None = Field(default=None, max_length=255)
    documents: tuple[Document, ...] = ()
    phones: tuple[Phone, ...] = ()
    address: Address | None = None
    partner: AuthorizationPerson | None = None


class AuthorizationAccount(RequestModel):
    """Seller data suggested to PagSeguro when the account does not exist yet."""

    email: str = Field(..., min_length=3, max_length=60)
    type: AccountType = AccountType.SELLER
    person: AuthorizationPerson | None = None
    company: AuthorizationCompany | None = None


class AuthorizationRegistration(RequestModel):
    """An application asking a seller for permissions."""

    reference: str | None = Field(default=None, max_length=20)
    permissions: tuple[Permission, ...] = Field(
        default=(),
        description="At least one permission is mandated by the service.",
    )
    redirect_url: str | None = Field(default=None, max_length=255)
    notification_url: str | None = Field(default=None, max_length=255)
    account: AuthorizationAccount | None = Field(
        default=None,
        description="Only sent by the XML (suggestion) registration.",
    )


class Sender(RequestModel):
    name: str = Field(..., min_length=1, max_length=50)
    email: str = Field(..., min_length=3, max_length=60)
    ip: str | None = None
    hash: str | None = Field(default=None, description="Browser fingerprint from the JS library.")
    phone: Phone | None = None
    address: Address | None = None
    documents: tuple[Document, ...] = ()


class CreditCardHolder(RequestModel):
    name: str = Field(..., min_length=1, max_length=50)
    birth_date: date
    documents: tuple[Document, ...] = ()
    phone: Phone | None = None
    billing_address: Address | None = None


class CreditCard(RequestModel):
    token: str = Field(..., min_length=1)
    holder: CreditCardHolder


class PaymentMethod(RequestModel):
    type: PaymentMethodType = PaymentMethodType.CREDITCARD
    credit_card: CreditCard | None = None


class PreApprovalSubscription(RequestModel):
    """A buyer adhering to an existing pre-approval plan."""

    plan: str = Field(..., min_length=1, description="Plan code returned when the plan was created.")
    reference: str | None = Field(default=None, max_length=200)
    sender: Sender
    payment_method: PaymentMethod


class Item(RequestModel):
    id: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=100)
    amount: Decimal = Field(..., gt=0, le=MAX_AMOUNT)
    quantity: int = Field(default=1, ge=1, le=999)
    weight: int | None = Field(default=None, ge=0, description="Grams.")
    shipping_cost: Decimal | None = Field(default=None, ge=0, le=MAX_AMOUNT)


class PreApprovalCharge(RequestModel):
    """A charge issued against an active pre-approval."""

    code: str = Field(..., min_length=1, description="Pre-approval code.")
    reference: str | None = Field(default=None, max_length=200)
    sender_ip: str | None = None
    items: tuple[Item, ...] = Field(
        default=(),
        description="At least one item is mandated by the service.",
    )
