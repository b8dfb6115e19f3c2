r"""Interface shared by the delays used between rate-limited attempts."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Computes how long to wait after the ``attempt``-th HTTP 429.

    Subclasses work in whole milliseconds; the executor sleeps for
    ``calculate(attempt)`` seconds.
    """

    @abstractmethod
    def calculate_ms(self, attempt: int) -> int:
        """Return the delay in milliseconds.

        Args:
            attempt: Number of retries already made, so ``0`` is the
                wait before the first retry.
        """

    def calculate(self, attempt: int) -> float:
        return self.calculate_ms(attempt) / 1000
