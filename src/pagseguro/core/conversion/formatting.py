"""Value formatting rules shared by the converters."""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum

_CENTS = Decimal("0.01")


def format_amount(value: Decimal | int | float | str | None) -> str | None:
    """Monetary amount with exactly two decimals, `.` separator, no grouping.

    Extra digits are rounded half-up (`10.005 -> "10.01"`). Floats go through
    `str()` first so `10.005` is not seen as `10.00499999...`.
    """

    if value is None:
        return None
    if isinstance(value, bool):
        raise TypeError("boolean is not a monetary amount")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
        return format(amount.quantize(_CENTS, rounding=ROUND_HALF_UP), "f")
    except InvalidOperation as exc:
        raise ValueError(f"invalid monetary amount: {value!r}") from exc


def format_date(value: date | datetime | None) -> str | None:
    """ISO-8601 date (or date-time)."""

    if value is None:
        return None
    return value.isoformat()


def format_enum(value: Enum | None) -> str | None:
    """The service code string of an enumeration member."""

    if value is None:
        return None
    return str(value.value)


def format_int(value: int | None) -> str | None:
    if value is None:
        return None
    return str(value)
