r"""Callback types and data structures for observability.

This module provides callback support for aretry, enabling users to hook
into the retry lifecycle for logging, metrics and alerting.

The callback system provides three lifecycle hooks:
- on_retry: Called after a failed decision, before waiting for the next
  attempt
- on_success: Called when the execution returns a value
- on_failure: Called when the execution gives up on a failure

Example:
    ```pycon
    >>> from aretry import execute
    >>> from aretry.callbacks import RetryInfo
    >>> from aretry.retry import CallbackConfig
    >>> from aretry.predicate import and_, attempts, on_exception
    >>> def log_retry(info: RetryInfo) -> None:
    ...     print(f"retry after attempt {info.attempt}, waiting {info.delay}s")
    ...
    >>> def flaky(attempt: int) -> str:
    ...     if attempt < 1:
    ...         raise OSError("unavailable")
    ...     return "ok"
    ...
    >>> execute(
    ...     and_(on_exception(), attempts(3)), flaky, callbacks=CallbackConfig(on_retry=log_retry)
    ... )
    retry after attempt 0, waiting 0.0s
    'ok'

    ```
"""

from __future__ import annotations

__all__ = ["FailureInfo", "RetryInfo", "SuccessInfo"]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from aretry.outcome import Outcome


@dataclass
class RetryInfo:
    """Information passed to on_retry callback.

    Attributes:
        attempt: The index of the attempt that is being retried (0-indexed).
        outcome: The outcome of that attempt.
        delay: The delay in seconds before the next attempt.
        elapsed: Seconds elapsed since the execution started.
    """

    attempt: int
    outcome: Outcome
    delay: float
    elapsed: float


@dataclass
class SuccessInfo:
    """Information passed to on_success callback.

    Attributes:
        attempt: The index of the final attempt (0-indexed).
        value: The value returned by the operation.
        elapsed: Seconds elapsed since the execution started.
    """

    attempt: int
    value: Any
    elapsed: float


@dataclass
class FailureInfo:
    """Information passed to on_failure callback.

    Attributes:
        attempt: The index of the final attempt (0-indexed).
        error: The exception about to be re-raised.
        elapsed: Seconds elapsed since the execution started.
    """

    attempt: int
    error: Exception
    elapsed: float
