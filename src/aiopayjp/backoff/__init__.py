r"""Backoff strategies used between rate-limited attempts."""

from __future__ import annotations

__all__ = ["MAX_DELAY_MS", "BaseBackoffStrategy", "EqualJitterBackoff"]

from aiopayjp.backoff.base import BaseBackoffStrategy
from aiopayjp.backoff.equal_jitter import MAX_DELAY_MS, EqualJitterBackoff
