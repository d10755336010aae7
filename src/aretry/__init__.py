r"""aretry - Composable retry policies for sync and async operations.

This package runs a fallible operation until a retry policy stops asking
for further attempts. A policy pairs two independent pieces:

    - A retry predicate deciding, after every attempt, whether to retry
      (attempt limits, failure and result checks, time limits, failure
      counters, combined with boolean combinators)
    - A delay strategy computing the wait before the next attempt
      (constant, sequential, linear, Fibonacci, exponential or custom,
      combined with arithmetic, bounding and jitter combinators)

The final failure is always re-raised unchanged; intermediate failures
are only visible to the predicate and to the optional callbacks.

Example:
    ```pycon
    >>> from aretry import execute
    >>> from aretry.delay import clamp_max, exponential, with_jitter
    >>> from aretry.policy import with_delay
    >>> from aretry.predicate import and_, attempts, on_exception_type
    >>> policy = with_delay(
    ...     and_(on_exception_type(ConnectionError), attempts(5)),
    ...     with_jitter(clamp_max(exponential(0.1, 2.0), 2.0), 0.1),
    ... )
    >>> execute(policy, lambda attempt: "done")
    'done'
    >>> # Stateful predicates are given as factories, one instance per run
    >>> import asyncio
    >>> from aretry import execute_async
    >>> from aretry.predicate import time_limit, and_, on_exception
    >>> async def ping(attempt: int) -> str:
    ...     return "pong"
    ...
    >>> asyncio.run(execute_async(lambda: and_(on_exception(), time_limit(30)), ping))
    'pong'

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "AttemptContext",
    "CallbackConfig",
    "Failure",
    "RetryExecutor",
    "RetryPolicy",
    "Success",
    "__version__",
    "as_policy",
    "execute",
    "execute_async",
    "with_delay",
    "with_predicate",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.outcome import AttemptContext, Failure, Success
from aretry.policy import RetryPolicy, as_policy, with_delay, with_predicate
from aretry.retry import (
    AsyncRetryExecutor,
    CallbackConfig,
    RetryExecutor,
    execute,
    execute_async,
)

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
