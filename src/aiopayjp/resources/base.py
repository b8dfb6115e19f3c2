r"""Base class of the resource services."""

from __future__ import annotations

__all__ = ["BaseService", "quote_id"]

from typing import TYPE_CHECKING
from urllib.parse import quote

if TYPE_CHECKING:
    from aiopayjp.client import BaseClient


def quote_id(object_id: str) -> str:
    r"""Percent-encode an object ID for use as one path segment.

    Example:
        ```pycon
        >>> from aiopayjp.resources.base import quote_id
        >>> quote_id("ch_1/refund?x#y")
        'ch_1%2Frefund%3Fx%23y'

        ```
    """
    quoted = quote(object_id, safe="")
    # Dot segments would be collapsed by URL normalization.
    if quoted in {".", ".."}:
        return quoted.replace(".", "%2E")
    return quoted


class BaseService:
    """Groups the operations of one API resource.

    A service holds no state besides the client it sends requests
    through, so it is cheap to create.

    Args:
        client: The client used to send requests.
    """

    def __init__(self, client: BaseClient) -> None:
        self._client = client

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"
