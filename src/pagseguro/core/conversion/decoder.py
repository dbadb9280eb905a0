"""XML response -> result object, `ServiceError` or `DecodeError`.

Outcomes of `decode`:

1. Root element is `<errors>`: raise `ServiceError` with every
   `(code, message)` pair, in document order.
2. Root element is the result type's `xml_root`: return the validated result.
   Absent optional elements become `None`; absent required elements raise
   `DecodeError`.
3. Anything else (malformed XML, unknown root): raise `DecodeError`.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any, TypeVar

from pydantic import ValidationError

from pagseguro.core.config import DEFAULT_CHARSET
from pagseguro.core.domain.results import ResultModel
from pagseguro.core.errors import DecodeError, ServiceError, ServiceErrorEntry

ERRORS_ROOT = "errors"
ERROR_TAG = "error"
ERROR_CODE_TAG = "code"
ERROR_MESSAGE_TAG = "message"

_XML_PROLOG_SKIP = b"\xef\xbb\xbf \t\r\n"

ResultT = TypeVar("ResultT", bound=ResultModel)


def decode(
    payload: bytes | str,
    result_type: type[ResultT],
    *,
    status_code: int | None = None,
    charset: str = DEFAULT_CHARSET,
) -> ResultT:
    root = parse_xml(payload, charset=charset)
    if is_error_document(root):
        raise ServiceError(error_entries(root, payload=payload), status_code=status_code)

    tag = local_name(root.tag)
    if tag != result_type.xml_root:
        raise DecodeError(
            f"unexpected root element <{tag}>, expected <{result_type.xml_root}>",
            payload=payload,
        )

    data = element_to_data(root)
    try:
        return result_type.model_validate(data if isinstance(data, dict) else {})
    except ValidationError as exc:
        problems = ", ".join(
            f"{'.'.join(str(part) for part in error['loc'])} ({error['type']})"
            for error in exc.errors(include_url=False)
        )
        raise DecodeError(
            f"<{tag}> does not match {result_type.__name__}: {problems}",
            payload=payload,
        ) from exc


def parse_xml(payload: bytes | str, *, charset: str = DEFAULT_CHARSET) -> ET.Element:
    """Parse a response body.

    Bytes carrying an XML declaration are handed to the parser untouched so
    the declared encoding wins; bytes without one are decoded with `charset`.
    """

    if isinstance(payload, bytes) and not payload.lstrip(_XML_PROLOG_SKIP).startswith(b"<?xml"):
        try:
            payload = payload.decode(charset)
        except (LookupError, UnicodeDecodeError) as exc:
            raise DecodeError(f"response body is not valid {charset}", payload=payload) from exc

    if not payload.strip():
        raise DecodeError("empty response body")
    try:
        return ET.fromstring(payload)
    except ET.ParseError as exc:
        raise DecodeError(f"malformed XML: {exc}", payload=payload) from exc


def is_error_document(root: ET.Element) -> bool:
    return local_name(root.tag) == ERRORS_ROOT


def error_entries(root: ET.Element, *, payload: bytes | str | None = None) -> list[ServiceErrorEntry]:
    entries: list[ServiceErrorEntry] = []
    for node in root:
        if local_name(node.tag) != ERROR_TAG:
            continue
        fields = element_to_data(node)
        if not isinstance(fields, dict) or not fields.get(ERROR_CODE_TAG):
            raise DecodeError("<error> element without <code>", payload=payload)
        entries.append(
            ServiceErrorEntry(
                code=str(fields[ERROR_CODE_TAG]),
                message=str(fields.get(ERROR_MESSAGE_TAG) or ""),
            )
        )
    if not entries:
        raise DecodeError("<errors> document without <error> entries", payload=payload)
    return entries


def element_to_data(element: ET.Element) -> Any:
    """Flatten an element into plain data.

    Leaf elements become their stripped text (`None` when empty); repeated
    child tags become lists in document order.
    """

    children = list(element)
    if not children:
        text = (element.text or "").strip()
        return text or None

    data: dict[str, Any] = {}
    for child in children:
        tag = local_name(child.tag)
        value = element_to_data(child)
        if tag not in data:
            data[tag] = value
        elif isinstance(data[tag], list):
            data[tag].append(value)
        else:
            data[tag] = [data[tag], value]
    return data


def local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]
