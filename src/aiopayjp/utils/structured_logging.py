r"""JSON log output and correlation ids for aiopayjp log records.

The library only emits records through ``logging`` under the
``aiopayjp`` logger and leaves handler setup to the application. Attach
``StructuredFormatter`` to a handler to get one JSON object per line,
and use a correlation id to group the records of one business
operation, for example every retry of one checkout.

Example:
    ```python
    import logging

    from aiopayjp.utils.structured_logging import StructuredFormatter, correlation_scope

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logging.getLogger("aiopayjp").addHandler(handler)
    logging.getLogger("aiopayjp").setLevel(logging.DEBUG)

    with correlation_scope("order-123"):
        charge = await client.charges.create(params)
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "correlation_scope",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Generator

# Task-local under asyncio: each task sees the value set in its own context.
_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "aiopayjp_correlation_id", default=None
)

# Attributes every LogRecord has; anything else on a record came from ``extra``.
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


def get_correlation_id() -> str | None:
    r"""Return the correlation id of the current context, if any.

    Example:
        ```pycon
        >>> from aiopayjp.utils.structured_logging import correlation_scope, get_correlation_id
        >>> with correlation_scope("order-1"):
        ...     get_correlation_id()
        ...
        'order-1'

        ```
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Attach ``correlation_id`` to every record logged from now on in
    the current context."""
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    _correlation_id.set(None)


@contextmanager
def correlation_scope(correlation_id: str) -> Generator[None, None, None]:
    """Set a correlation id for the duration of a ``with`` block.

    The previous value is restored on exit, so scopes can be nested.

    Args:
        correlation_id: The id to attach, e.g. an order number.
    """
    token = _correlation_id.set(correlation_id)
    try:
        yield
    finally:
        _correlation_id.reset(token)


class StructuredFormatter(logging.Formatter):
    r"""Format log records as single-line JSON objects.

    Every object has ``timestamp`` (UTC, millisecond precision),
    ``level``, ``logger``, ``message``, ``module``, ``function`` and
    ``line``. ``correlation_id`` is added when one is set and
    ``exception`` when the record carries exception info. Fields given
    through ``extra`` are copied as top-level keys; values that are not
    JSON serializable are written with ``str``.

    Example:
        ```pycon
        >>> import json, logging
        >>> from aiopayjp.utils.structured_logging import StructuredFormatter
        >>> record = logging.LogRecord(
        ...     "aiopayjp", logging.INFO, "client.py", 1, "Charge created", (), None
        ... )
        >>> record.charge_id = "ch_123"
        >>> data = json.loads(StructuredFormatter().format(record))
        >>> data["message"], data["charge_id"]
        ('Charge created', 'ch_123')

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if (correlation_id := get_correlation_id()) is not None:
            payload["correlation_id"] = correlation_id
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        payload.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and key not in payload
        )
        return json.dumps(payload, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        if datefmt is not None:
            return super().formatTime(record, datefmt)
        stamp = time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
        return f"{stamp}.{int(record.msecs):03d}Z"


def log_structured(logger: logging.Logger, level: int, message: str, **fields: Any) -> None:
    """Log ``message`` with ``fields`` attached as record attributes.

    With ``StructuredFormatter`` the fields become keys of the JSON
    object. Field names must not clash with ``LogRecord`` attributes.
    """
    logger.log(level, message, extra=fields)
