r"""Request encoding for the PAY.JP wire format.

The API expects query strings and request bodies to be encoded as
``application/x-www-form-urlencoded`` with nested parameters flattened
using bracket notation, e.g. a ``number`` field under ``card`` becomes
``card[number]``.
"""

from __future__ import annotations

__all__ = [
    "FORM_CONTENT_TYPE",
    "RequestDescriptor",
    "encode_form",
    "flatten_params",
]

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel

from aiopayjp.exceptions import SerializationError

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class RequestDescriptor:
    """Description of one logical API call.

    Attributes:
        method: The HTTP method (``GET``, ``POST`` or ``DELETE``).
        path: The path relative to the configured base URL.
        params: Optional parameters, sent as query string for ``GET``
            and as form body otherwise.
    """

    method: str
    path: str
    params: BaseModel | Mapping[str, Any] | None = None

    def encoded_params(self) -> list[tuple[str, str]]:
        """Flatten the parameters, or return an empty list if none."""
        if self.params is None:
            return []
        return flatten_params(self.params)


def _to_mapping(params: BaseModel | Mapping[str, Any]) -> Mapping[str, Any]:
    if isinstance(params, BaseModel):
        try:
            return params.model_dump(mode="json", by_alias=True, exclude_none=True)
        except ValueError as exc:
            msg = f"Failed to serialize {type(params).__name__}: {exc}"
            raise SerializationError(msg) from exc
    if isinstance(params, Mapping):
        return params
    msg = f"Cannot encode parameters of type {type(params).__name__}"
    raise SerializationError(msg)


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return _scalar(value.value)
    if isinstance(value, (str, int, float)):
        return str(value)
    msg = f"Cannot encode value of type {type(value).__name__}"
    raise SerializationError(msg)


def _flatten(prefix: str, value: Any, pairs: list[tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, BaseModel):
        value = _to_mapping(value)
    if isinstance(value, Mapping):
        for key, item in value.items():
            _flatten(f"{prefix}[{key}]", item, pairs)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _flatten(f"{prefix}[]", item, pairs)
    else:
        pairs.append((prefix, _scalar(value)))


def flatten_params(params: BaseModel | Mapping[str, Any]) -> list[tuple[str, str]]:
    r"""Flatten parameters into ``(key, value)`` pairs using bracket
    notation.

    Nested mappings and models become ``outer[inner]``, sequences become
    repeated ``outer[]`` keys, booleans become ``true``/``false`` and
    ``None`` values are omitted.

    Args:
        params: A pydantic model or a mapping of parameters.

    Returns:
        The flattened pairs, in field order.

    Raises:
        SerializationError: If a value cannot be encoded.

    Example:
        ```pycon
        >>> from aiopayjp.encoding import flatten_params
        >>> flatten_params({"amount": 1000, "card": {"number": "4242"}, "capture": False})
        [('amount', '1000'), ('card[number]', '4242'), ('capture', 'false')]

        ```
    """
    pairs: list[tuple[str, str]] = []
    for key, value in _to_mapping(params).items():
        _flatten(str(key), value, pairs)
    return pairs


def encode_form(params: BaseModel | Mapping[str, Any]) -> str:
    r"""Encode parameters as an ``application/x-www-form-urlencoded``
    string.

    Args:
        params: A pydantic model or a mapping of parameters.

    Returns:
        The percent-encoded body.

    Raises:
        SerializationError: If a value cannot be encoded.

    Example:
        ```pycon
        >>> from aiopayjp.encoding import encode_form
        >>> encode_form({"card": {"number": "4242424242424242", "name": "Test User"}})
        'card%5Bnumber%5D=4242424242424242&card%5Bname%5D=Test+User'

        ```
    """
    return urlencode(flatten_params(params))
