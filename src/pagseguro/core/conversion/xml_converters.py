"""Request objects -> XML documents.

Tag names and nesting are the service's contract and live here as constants.
Documents are serialized with an explicit declaration in the declared
charset; characters the charset cannot hold become character references.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Iterable

from pagseguro.core.config import DEFAULT_CHARSET
from pagseguro.core.conversion.formatting import format_date, format_enum
from pagseguro.core.domain.enums import AccountType
from pagseguro.core.domain.requests import (
    Address,
    AuthorizationAccount,
    AuthorizationCompany,
    AuthorizationPerson,
    AuthorizationRegistration,
    Document,
    Phone,
)
from pagseguro.core.errors import RequestValidationError

TAG_AUTHORIZATION_REQUEST = "authorizationRequest"
TAG_REFERENCE = "reference"
TAG_PERMISSIONS = "permissions"
TAG_CODE = "code"
TAG_REDIRECT_URL = "redirectURL"
TAG_NOTIFICATION_URL = "notificationURL"
TAG_ACCOUNT = "account"
TAG_EMAIL = "email"
TAG_TYPE = "type"
TAG_PERSON = "person"
TAG_COMPANY = "company"
TAG_PARTNER = "partner"
TAG_NAME = "name"
TAG_DISPLAY_NAME = "displayName"
TAG_WEBSITE_URL = "websiteURL"
TAG_BIRTH_DATE = "birthDate"
TAG_DOCUMENTS = "documents"
TAG_DOCUMENT = "document"
TAG_VALUE = "value"
TAG_PHONES = "phones"
TAG_PHONE = "phone"
TAG_AREA_CODE = "areaCode"
TAG_NUMBER = "number"
TAG_ADDRESS = "address"
TAG_POSTAL_CODE = "postalCode"
TAG_STREET = "street"
TAG_COMPLEMENT = "complement"
TAG_DISTRICT = "district"
TAG_CITY = "city"
TAG_STATE = "state"
TAG_COUNTRY = "country"


def authorization_registration_to_xml(request: AuthorizationRegistration) -> ET.Element:
    """Build the `<authorizationRequest>` document of a registration with suggestion."""

    if not request.permissions:
        raise RequestValidationError(TAG_PERMISSIONS, "at least one entry is required")
    if request.account is not None:
        _validate_account(request.account)

    root = ET.Element(TAG_AUTHORIZATION_REQUEST)
    _text(root, TAG_REFERENCE, request.reference)
    permissions = ET.SubElement(root, TAG_PERMISSIONS)
    for permission in request.permissions:
        _text(permissions, TAG_CODE, format_enum(permission))
    _text(root, TAG_REDIRECT_URL, request.redirect_url)
    _text(root, TAG_NOTIFICATION_URL, request.notification_url)

    if request.account is not None:
        _append_account(root, request.account)
    return root


def serialize_xml(element: ET.Element, charset: str = DEFAULT_CHARSET) -> bytes:
    return ET.tostring(element, encoding=charset, xml_declaration=True)


def _validate_account(account: AuthorizationAccount) -> None:
    if account.type is AccountType.SELLER and account.person is None:
        raise RequestValidationError.missing("account.person")
    if account.type is AccountType.COMPANY and account.company is None:
        raise RequestValidationError.missing("account.company")


def _append_account(parent: ET.Element, account: AuthorizationAccount) -> None:
    node = ET.SubElement(parent, TAG_ACCOUNT)
    _text(node, TAG_EMAIL, account.email)
    _text(node, TAG_TYPE, format_enum(account.type))
    if account.type is AccountType.COMPANY and account.company is not None:
        _append_company(node, account.company)
    elif account.person is not None:
        _append_person(node, TAG_PERSON, account.person)


def _append_person(parent: ET.Element, tag: str, person: AuthorizationPerson) -> None:
    node = ET.SubElement(parent, tag)
    _text(node, TAG_NAME, person.name)
    _text(node, TAG_BIRTH_DATE, format_date(person.birth_date))
    _append_documents(node, person.documents)
    _append_phones(node, person.phones)
    _append_address(node, person.address)


def _append_company(parent: ET.Element, company: AuthorizationCompany) -> None:
    node = ET.SubElement(parent, TAG_COMPANY)
    _text(node, TAG_NAME, company.name)
    _text(node, TAG_DISPLAY_NAME, company.display_name)
    _text(node, TAG_WEBSITE_URL, company.website_url)
    _append_documents(node, company.documents)
    _append_phones(node, company.phones)
    _append_address(node, company.address)
    if company.partner is not None:
        _append_person(node, TAG_PARTNER, company.partner)


def _append_documents(parent: ET.Element, documents: Iterable[Document]) -> None:
    documents = list(documents)
    if not documents:
        return
    node = ET.SubElement(parent, TAG_DOCUMENTS)
    for document in documents:
        entry = ET.SubElement(node, TAG_DOCUMENT)
        _text(entry, TAG_TYPE, format_enum(document.type))
        _text(entry, TAG_VALUE, document.value)


def _append_phones(parent: ET.Element, phones: Iterable[Phone]) -> None:
    phones = list(phones)
    if not phones:
        return
    node = ET.SubElement(parent, TAG_PHONES)
    for phone in phones:
        entry = ET.SubElement(node, TAG_PHONE)
        _text(entry, TAG_TYPE, format_enum(phone.type))
        _text(entry, TAG_AREA_CODE, phone.area_code)
        _text(entry, TAG_NUMBER, phone.number)


def _append_address(parent: ET.Element, address: Address | None) -> None:
    if address is None:
        return
    node = ET.SubElement(parent, TAG_ADDRESS)
    _text(node, TAG_POSTAL_CODE, address.postal_code)
    _text(node, TAG_STREET, address.street)
    _text(node, TAG_NUMBER, address.number)
    _text(node, TAG_COMPLEMENT, address.complement)
    _text(node, TAG_DISTRICT, address.district)
    _text(node, TAG_CITY, address.city)
    _text(node, TAG_STATE, address.state)
    _text(node, TAG_COUNTRY, address.country)


def _text(parent: ET.Element, tag: str, value: str | None) -> None:
    if value is None:
        return
    ET.SubElement(parent, tag).text = value
