r"""Shared request parameter types.

Parameter objects are plain pydantic models. Optional fields default
to ``None`` and are left out of the encoded request.
"""

from __future__ import annotations

__all__ = ["ListParams", "Metadata", "Params"]

from pydantic import BaseModel, ConfigDict, Field

# PAY.JP accepts up to 20 keys of 40 characters with values of up to
# 500 characters.
Metadata = dict[str, str]


class Params(BaseModel):
    """Base class of all request parameter objects."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class ListParams(Params):
    r"""Pagination and time-range filters of list endpoints.

    Args:
        limit: Maximum number of items to return (1 to 100).
        offset: Number of items to skip.
        since: Only return items created at or after this Unix timestamp.
        until: Only return items created at or before this Unix timestamp.

    Example:
        ```pycon
        >>> from aiopayjp.params import ListParams
        >>> from aiopayjp.encoding import flatten_params
        >>> flatten_params(ListParams(limit=10))
        [('limit', '10')]

        ```
    """

    limit: int | None = Field(default=None, ge=1, le=100)
    offset: int | None = Field(default=None, ge=0)
    since: int | None = None
    until: int | None = None
