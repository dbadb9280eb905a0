"""Conversion layer: request objects -> wire payloads, XML responses -> results.

Everything here is pure and synchronous; no module in this package performs
I/O or logs.
"""

from pagseguro.core.conversion.decoder import decode
from pagseguro.core.conversion.field_map import FieldMap
from pagseguro.core.conversion.formatting import format_amount, format_date
from pagseguro.core.conversion.map_converters import (
    authorization_registration_to_map,
    pre_approval_charge_to_map,
    pre_approval_subscription_to_map,
)
from pagseguro.core.conversion.xml_converters import (
    authorization_registration_to_xml,
    serialize_xml,
)

__all__ = [
    "FieldMap",
    "authorization_registration_to_map",
    "authorization_registration_to_xml",
    "decode",
    "format_amount",
    "format_date",
    "pre_approval_charge_to_map",
    "pre_approval_subscription_to_map",
    "serialize_xml",
]
