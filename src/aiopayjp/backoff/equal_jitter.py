r"""Exponential backoff strategy with equal jitter."""

from __future__ import annotations

__all__ = ["EqualJitterBackoff", "MAX_DELAY_MS"]

import random

from aiopayjp.backoff.base import BaseBackoffStrategy

# Saturation bound of the exponential term (largest unsigned 64-bit value)
MAX_DELAY_MS = 2**64 - 1

_MAX_SHIFT = MAX_DELAY_MS.bit_length()


class EqualJitterBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy with equal jitter.

    The delay before retry ``attempt`` is computed in milliseconds as::

        base   = initial_delay_ms * 2 ** attempt   (saturating)
        capped = min(base, max_delay_ms)
        delay  = capped // 2 + randint(0, capped // 2)

    so it is uniformly distributed in the upper half of the capped
    exponential range. The exponential term saturates at
    ``MAX_DELAY_MS`` instead of growing without bound, which keeps the
    computation constant-time for arbitrarily large attempt numbers.

    Args:
        initial_delay_ms: The delay before the first retry, in milliseconds.
        max_delay_ms: The upper bound of any delay, in milliseconds.
        rng: Optional random number generator. Defaults to the ``random``
            module's shared generator.

    Example:
        ```pycon
        >>> from aiopayjp.backoff import EqualJitterBackoff
        >>> backoff = EqualJitterBackoff(initial_delay_ms=500, max_delay_ms=10_000)
        >>> backoff.capped_ms(0), backoff.capped_ms(1), backoff.capped_ms(5)
        (500, 1000, 10000)
        >>> 250 <= backoff.calculate_ms(0) <= 500
        True
        >>> 5000 <= backoff.calculate_ms(2**64) <= 10_000
        True

        ```
    """

    def __init__(
        self,
        initial_delay_ms: int,
        max_delay_ms: int,
        rng: random.Random | None = None,
    ) -> None:
        if initial_delay_ms < 0:
            msg = f"initial_delay_ms must be non-negative, got {initial_delay_ms}"
            raise ValueError(msg)
        if max_delay_ms < 0:
            msg = f"max_delay_ms must be non-negative, got {max_delay_ms}"
            raise ValueError(msg)

        self.initial_delay_ms = int(initial_delay_ms)
        self.max_delay_ms = int(max_delay_ms)
        self._rng = rng

    def base_ms(self, attempt: int) -> int:
        """Compute the saturating exponential term.

        Args:
            attempt: The zero-based number of retries already made.

        Returns:
            ``initial_delay_ms * 2 ** attempt`` clamped to ``MAX_DELAY_MS``.
        """
        if attempt < 0:
            msg = f"attempt must be non-negative, got {attempt}"
            raise ValueError(msg)
        if self.initial_delay_ms == 0:
            return 0
        if attempt >= _MAX_SHIFT:
            return MAX_DELAY_MS
        return min(self.initial_delay_ms << attempt, MAX_DELAY_MS)

    def capped_ms(self, attempt: int) -> int:
        """Compute the exponential term capped at ``max_delay_ms``."""
        return min(self.base_ms(attempt), self.max_delay_ms)

    def calculate_ms(self, attempt: int) -> int:
        half = self.capped_ms(attempt) // 2
        randint = self._rng.randint if self._rng is not None else random.randint
        return half + randint(0, half)  # noqa: S311
