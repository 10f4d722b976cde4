"""Decoder for the loosely-typed JSON bodies returned by the webhook."""
import re
from dataclasses import dataclass
from typing import Any, List, Union

from services.errors import InvalidResponseFormatError

# Field names checked in order before falling back to any string value.
PREFERRED_FIELDS = ("paraphrased", "text", "result", "output", "processed")

_INDEX_KEY = re.compile(r"0|[1-9][0-9]*")


@dataclass(frozen=True)
class StringBody:
    """The whole response body is a JSON string."""
    value: str


@dataclass(frozen=True)
class ObjectWithField:
    """An object carrying one of the preferred string fields."""
    name: str
    value: str


@dataclass(frozen=True)
class ObjectWithAnyStringValue:
    """An object (or array) whose first string value in enumeration order is used."""
    key: str
    value: str


DecodedResponse = Union[StringBody, ObjectWithField, ObjectWithAnyStringValue]


def _is_usable(value: Any) -> bool:
    # Empty strings are skipped inside objects.
    return isinstance(value, str) and value != ""


def _is_index_key(key: str) -> bool:
    """Canonical array-index keys ("0", "17"; not "01" or "-1")."""
    return bool(_INDEX_KEY.fullmatch(key)) and int(key) < 2 ** 32 - 1


def _value_order(data: dict) -> List[str]:
    """
    Key order used when scanning object values.

    Index-like keys come first in ascending numeric order, then the rest in
    insertion order, the way JavaScript enumerates an object's own keys.
    """
    index_keys = sorted((k for k in data if _is_index_key(k)), key=int)
    other_keys = [k for k in data if not _is_index_key(k)]
    return index_keys + other_keys


def decode_response(data: Any) -> DecodedResponse:
    """
    Classify a parsed JSON body into one of the known response shapes.

    Arrays are scanned like objects keyed by position.

    Raises:
        InvalidResponseFormatError: If no shape matches
    """
    if isinstance(data, str):
        return StringBody(value=data)

    if isinstance(data, list):
        for index, value in enumerate(data):
            if _is_usable(value):
                return ObjectWithAnyStringValue(key=str(index), value=value)

        raise InvalidResponseFormatError(details={"body_type": "list", "length": len(data)})

    if isinstance(data, dict):
        for name in PREFERRED_FIELDS:
            if _is_usable(data.get(name)):
                return ObjectWithField(name=name, value=data[name])

        for key in _value_order(data):
            if _is_usable(data[key]):
                return ObjectWithAnyStringValue(key=key, value=data[key])

        raise InvalidResponseFormatError(details={"keys": list(data.keys())})

    raise InvalidResponseFormatError(details={"body_type": type(data).__name__})


def extract_text(data: Any) -> str:
    """Return the transformed text carried by a parsed JSON body."""
    return decode_response(data).value
