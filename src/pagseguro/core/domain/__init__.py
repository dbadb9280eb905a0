"""Domain models and enumerations.

Pure data structures (Pydantic v2). The domain knows nothing about HTTP,
XML or the CLI: only the concepts of the payment service.
"""

from pagseguro.core.domain.enums import (
    AccountType,
    DocumentType,
    PaymentMethodType,
    Permission,
    PhoneType,
)
from pagseguro.core.domain.requests import (
    Address,
    AuthorizationAccount,
    AuthorizationCompany,
    AuthorizationPerson,
    AuthorizationRegistration,
    CreditCard,
    CreditCardHolder,
    Document,
    Item,
    PaymentMethod,
    Phone,
    PreApprovalCharge,
    PreApprovalSubscription,
    RequestModel,
    Sender,
)
from pagseguro.core.domain.results import (
    CancelledPreApprovalSubscription,
    ChargedPreApproval,
    RegisteredAuthorization,
    ResultModel,
    SubscribedPreApproval,
)

__all__ = [
    "AccountType",
    "Address",
    "AuthorizationAccount",
    "AuthorizationCompany",
    "AuthorizationPerson",
    "AuthorizationRegistration",
    "CancelledPreApprovalSubscription",
    "ChargedPreApproval",
    "CreditCard",
    "CreditCardHolder",
    "Document",
    "DocumentType",
    "Item",
    "PaymentMethod",
    "PaymentMethodType",
    "Permission",
    "Phone",
    "PhoneType",
    "PreApprovalCharge",
    "PreApprovalSubscription",
    "RegisteredAuthorization",
    "RequestModel",
    "ResultModel",
    "Sender",
    "SubscribedPreApproval",
]
