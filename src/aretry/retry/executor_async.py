r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that runs an operation
until its retry policy stops asking for further attempts, waiting between
attempts with ``asyncio.sleep`` so that other tasks keep running.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor", "execute_async"]

import asyncio
import inspect
import logging
import time
from typing import TYPE_CHECKING, Any

from aretry.outcome import AttemptContext, Failure, Success
from aretry.retry.executor_core import compute_delay, decide, finish, resolve_policy
from aretry.retry.manager import CallbackManager
from aretry.utils.clock import use_clock

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.outcome import Outcome
    from aretry.retry.config import CallbackConfig
    from aretry.retry.executor_core import PolicyLike

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes async operations with automatic retry logic.

    This class implements the retry loop for asynchronous operations. It
    accepts coroutine functions as well as plain callables: the result of
    the operation is awaited when it is awaitable.

    Cancellation is never retried. ``asyncio.CancelledError`` raised while
    the operation runs or while waiting between attempts propagates
    immediately and no further attempt is made.

    Args:
        policy: A policy, a predicate, a delay strategy, or a zero-argument
            factory returning one of them. Factories are called once per
            ``execute`` call.
        callback_config: Optional configuration for lifecycle callbacks.
        clock: The clock used to measure the elapsed time. Defaults to
            ``time.monotonic``. It is also the default clock of the
            ``time_limit`` predicates built by a policy factory.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.delay import constant
        >>> from aretry.policy import with_delay
        >>> from aretry.predicate import and_, attempts, on_exception
        >>> from aretry.retry import AsyncRetryExecutor
        >>>
        >>> async def fetch(attempt: int) -> str:
        ...     if attempt == 0:
        ...         raise TimeoutError
        ...     return "payload"
        ...
        >>> executor = AsyncRetryExecutor(
        ...     with_delay(and_(on_exception(), attempts(3)), constant(0.01))
        ... )
        >>> asyncio.run(executor.execute(fetch))
        'payload'

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

    async def execute(self, operation: Callable[[int], Any]) -> Any:
        """Execute an operation with automatic retry logic.

        Args:
            operation: The operation to run. It receives the attempt index
                and returns either a value or an awaitable.

        Returns:
            The value produced by the final attempt.

        Raises:
            Exception: The exception raised by the final attempt, unchanged.
            asyncio.CancelledError: If the calling task is cancelled.
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
                if inspect.isawaitable(result):
                    result = await result
                outcome = Success(result)
            except Exception as exc:  # noqa: BLE001
                outcome = Failure(exc)
            context = AttemptContext(attempt=attempt, elapsed=self.clock() - start)

            if not decide(policy, outcome, context):
                return finish(outcome, context, self.callbacks)

            delay = compute_delay(policy, context)
            self.callbacks.on_retry(context, outcome, delay)
            await asyncio.sleep(delay)
            attempt += 1


async def execute_async(
    policy: PolicyLike,
    operation: Callable[[int], Any],
    *,
    callbacks: CallbackConfig | None = None,
    clock: Callable[[], float] | None = None,
) -> Any:
    """Run ``operation`` under ``policy`` without blocking the event loop.

    Args:
        policy: A policy, a predicate, a delay strategy, or a zero-argument
            factory returning one of them.
        operation: The operation to run. It receives the attempt index and
            returns either a value or an awaitable.
        callbacks: Optional configuration for lifecycle callbacks.
        clock: Optional clock used to measure the elapsed time, also used
            by the ``time_limit`` predicates built by a policy factory.

    Returns:
        The value produced by the final attempt.

    Raises:
        Exception: The exception raised by the final attempt, unchanged.
    """
    executor = AsyncRetryExecutor(
        policy, callback_config=callbacks, clock=clock if clock is not None else time.monotonic
    )
    return await executor.execute(operation)
