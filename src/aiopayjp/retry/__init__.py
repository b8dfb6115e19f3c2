r"""Request dispatch and retry engine.

Public API:
    - AsyncRetryExecutor: Runs one logical call, retrying on HTTP 429
    - RetryState: States of the retry loop
    - StatusInterpreter: Maps HTTP responses to classified outcomes
    - Outcome: Classified result of one attempt
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor", "Outcome", "RetryState", "StatusInterpreter"]

from aiopayjp.retry.executor import AsyncRetryExecutor, RetryState
from aiopayjp.retry.interpreter import Outcome, StatusInterpreter
