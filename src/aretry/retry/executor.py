r"""Synchronous retry executor.

This module provides the RetryExecutor class that runs a synchronous
operation until its retry policy stops asking for further attempts. The
wait between attempts blocks the calling thread with ``time.sleep``; use
``AsyncRetryExecutor`` when running under an event loop.
"""

from __future__ import annotations

__all__ = ["RetryExecutor", "execute"]

import inspect
import logging
import time
from typing import TYPE_CHECKING, TypeVar

from aretry.outcome import AttemptContext, Failure, Success
from aretry.retry.executor_core import compute_delay, decide, finish, resolve_policy
from aretry.retry.manager import CallbackManager
from aretry.utils.clock import use_clock

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.outcome import Outcome
    from aretry.retry.config import CallbackConfig
    from aretry.retry.executor_core import PolicyLike

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes synchronous operations with automatic retry logic.

    The executor orchestrates the following components:
    - RetryPolicy: decides whether to retry and how long to wait
    - CallbackManager: invokes user-defined callbacks at lifecycle events

    The policy may be given as a factory, which is called once per
    ``execute`` call. Use this for policies holding per-run state such as
    ``time_limit``. The same executor can then be shared.

    Args:
        policy: A policy, a predicate, a delay strategy, or a zero-argument
            factory returning one of them.
        callback_config: Optional configuration for lifecycle callbacks.
        clock: The clock used to measure the elapsed time. Defaults to
            ``time.monotonic``. It is also the default clock of the
            ``time_limit`` predicates built by a policy factory.

    Example:
        ```pycon
        >>> from aretry.delay import no_delay
        >>> from aretry.policy import with_delay
        >>> from aretry.predicate import and_, attempts, on_exception
        >>> from aretry.retry import RetryExecutor
        >>> executor = RetryExecutor(with_delay(and_(on_exception(), attempts(5)), no_delay()))
        >>> def operation(attempt: int) -> int:
        ...     if attempt < 2:
        ...         raise ConnectionError("try again")
        ...     return attempt
        ...
        >>> executor.execute(operation)
        2

        ```
    """

    def __init__(
        self,
        policy: PolicyLike,
        callback_config: CallbackConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.policy = policy
        self.callbacks: CallbackManager = CallbackManager(callback_config)
        self.clock = clock

    def execute(self, operation: Callable[[int], T]) -> T:
        """Execute an operation with automatic retry logic.

        The operation is called with the attempt index (0 for the first
        attempt). Any ``Exception`` it raises is captured and handed to the
        policy. Other ``BaseException`` subclasses such as
        ``KeyboardInterrupt`` abort the loop immediately.

        Args:
            operation: The operation to run.

        Returns:
            The value returned by the final attempt.

        Raises:
            Exception: The exception raised by the final attempt, unchanged.
            TypeError: If the operation returns an awaitable.
        """
        with use_clock(self.clock):
            policy = resolve_policy(self.policy)
        logger.debug(f"Starting execution with {policy}")
        start = self.clock()
        attempt = 0
        while True:
            outcome: Outcome
            try:
                result = operation(attempt)
            except Exception as exc:  # noqa: BLE001
                outcome = Failure(exc)
            else:
                if inspect.isawaitable(result):
                    if inspect.iscoroutine(result):
                        result.close()
                    msg = (
                        f"operation returned an awaitable ({type(result).__name__}); "
                        "use AsyncRetryExecutor or execute_async for async operations"
                    )
                    raise TypeError(msg)
                outcome = Success(result)
            context = AttemptContext(attempt=attempt, elapsed=self.clock() - start)

            if not decide(policy, outcome, context):
                return finish(outcome, context, self.callbacks)

            delay = compute_delay(policy, context)
            self.callbacks.on_retry(context, outcome, delay)
            time.sleep(delay)
            attempt += 1


def execute(
    policy: PolicyLike,
    operation: Callable[[int], T],
    *,
    callbacks: CallbackConfig | None = None,
    clock: Callable[[], float] | None = None,
) -> T:
    """Run ``operation`` under ``policy``, blocking between attempts.

    Args:
        policy: A policy, a predicate, a delay strategy, or a zero-argument
            factory returning one of them.
        operation: The operation to run. It receives the attempt index.
        callbacks: Optional configuration for lifecycle callbacks.
        clock: Optional clock used to measure the elapsed time, also used
            by the ``time_limit`` predicates built by a policy factory.

    Returns:
        The value returned by the final attempt.

    Raises:
        Exception: The exception raised by the final attempt, unchanged.

    Example:
        ```pycon
        >>> from aretry import execute
        >>> from aretry.predicate import on_null
        >>> values = iter([None, None, "ready"])
        >>> execute(on_null(), lambda attempt: next(values))
        'ready'

        ```
    """
    executor = RetryExecutor(
        policy, callback_config=callbacks, clock=clock if clock is not None else time.monotonic
    )
    return executor.execute(operation)
