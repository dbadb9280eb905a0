"""Field Map: the flat body of a form-encoded request."""

from __future__ import annotations

from typing import Iterator, Mapping
from urllib.parse import quote_plus, urlencode

from pagseguro.core.config import DEFAULT_CHARSET
from pagseguro.core.errors import RequestValidationError


class FieldMap(Mapping[str, str]):
    """Ordered `str -> str` mapping with dotted/indexed keys.

    Keys are unique; insertion order is kept so logged and encoded bodies read
    in the same order the converter produced them.
    """

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FieldMap({self._data!r})"

    def put(self, key: str, value: str | None) -> None:
        """Add a field. `None` means absent and is skipped."""

        if value is None:
            return
        if key in self._data:
            raise KeyError(f"duplicate field map key: {key}")
        self._data[key] = value

    def put_all(self, prefix: str, values: Mapping[str, str | None]) -> None:
        for name, value in values.items():
            self.put(join_key(prefix, name), value)

    def to_form_body(self, charset: str = DEFAULT_CHARSET) -> bytes:
        """Encode as `application/x-www-form-urlencoded` in `charset`.

        A value the charset cannot represent raises `RequestValidationError`
        for that key instead of being replaced.
        """

        for key, value in self._data.items():
            try:
                value.encode(charset)
            except UnicodeEncodeError as exc:
                raise RequestValidationError(key, f"value cannot be encoded as {charset}") from exc
        return urlencode(self._data, quote_via=quote_plus, encoding=charset).encode("ascii")


def join_key(*parts: str | int) -> str:
    """`join_key("items", 0, "amount") -> "items.0.amount"`; empty parts are dropped."""

    return ".".join(str(part) for part in parts if part != "")
