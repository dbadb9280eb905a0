"""Enumerations shared by requests and converters.

Every member's value is the code string the web services expect, never a
display label.
"""

from __future__ import annotations

from enum import Enum


class Permission(str, Enum):
    """Permissions an application may request from a seller."""

    CREATE_CHECKOUTS = "CREATE_CHECKOUTS"
    RECEIVE_TRANSACTION_NOTIFICATIONS = "RECEIVE_TRANSACTION_NOTIFICATIONS"
    SEARCH_TRANSACTIONS = "SEARCH_TRANSACTIONS"
    MANAGE_PAYMENT_PRE_APPROVALS = "MANAGE_PAYMENT_PRE_APPROVALS"
    DIRECT_PAYMENT = "DIRECT_PAYMENT"
    REFUND_TRANSACTIONS = "REFUND_TRANSACTIONS"
    CANCEL_TRANSACTIONS = "CANCEL_TRANSACTIONS"

    @classmethod
    def defaults(cls) -> tuple["Permission", ...]:
        """Permission set most integrations request."""

        return (
            cls.CREATE_CHECKOUTS,
            cls.RECEIVE_TRANSACTION_NOTIFICATIONS,
            cls.SEARCH_TRANSACTIONS,
        )


class AccountType(str, Enum):
    SELLER = "SELLER"
    COMPANY = "COMPANY"


class DocumentType(str, Enum):
    CPF = "CPF"
    CNPJ = "CNPJ"


class PhoneType(str, Enum):
    HOME = "HOME"
    MOBILE = "MOBILE"
    BUSINESS = "BUSINESS"


class PaymentMethodType(str, Enum):
    CREDITCARD = "CREDITCARD"
    BOLETO = "BOLETO"
    DEBITO_ONLINE = "DEBITO_ONLINE"
