r"""Shared response types."""

from __future__ import annotations

__all__ = ["DeletedObject", "ListResponse", "PayjpObject"]

from collections.abc import Iterator
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class PayjpObject(BaseModel):
    """Base class of all objects returned by the API.

    Fields the API adds later are kept as extra attributes instead of
    failing validation.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ListResponse(PayjpObject, Generic[T]):
    r"""A page of objects returned by a list endpoint.

    Attributes:
        object: Always ``"list"``.
        data: The objects of this page.
        has_more: Whether more objects are available after this page.
        url: The endpoint the page was fetched from.
        count: The number of objects in ``data``.

    Example:
        ```pycon
        >>> from aiopayjp.response import ListResponse
        >>> page = ListResponse[int].model_validate_json(
        ...     '{"object": "list", "data": [1, 2], "has_more": false, "url": "/v1/x", "count": 2}'
        ... )
        >>> len(page), list(page)
        (2, [1, 2])

        ```
    """

    object: str = "list"
    data: list[T]
    has_more: bool = False
    url: str = ""
    count: int = 0

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)


class DeletedObject(PayjpObject):
    """Confirmation returned when an object is deleted."""

    id: str
    deleted: bool
    livemode: bool
