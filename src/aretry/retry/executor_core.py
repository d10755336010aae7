r"""Shared core logic for retry executors.

This module provides helper functions used by both the synchronous and
the asynchronous retry executors: policy resolution, the retry decision
and the handling of the final outcome.
"""

from __future__ import annotations

__all__ = ["PolicyLike", "compute_delay", "decide", "finish", "resolve_policy"]

import logging
from typing import TYPE_CHECKING, Any, Callable, Union

from aretry.delay import BaseDelayStrategy
from aretry.policy import RetryPolicy, as_policy
from aretry.predicate import BaseRetryPredicate

if TYPE_CHECKING:
    from aretry.outcome import AttemptContext, Outcome
    from aretry.retry.manager import CallbackManager

logger: logging.Logger = logging.getLogger(__name__)

PolicyComponent = Union[RetryPolicy, BaseRetryPredicate, BaseDelayStrategy]
PolicyLike = Union[PolicyComponent, Callable[[], PolicyComponent]]


def resolve_policy(policy: PolicyLike) -> RetryPolicy:
    """Build the policy used by one execution.

    Factories are called once per execution, so that stateful predicates
    such as ``time_limit`` start afresh every time.

    Args:
        policy: A policy, a predicate, a delay strategy, or a zero-argument
            factory returning one of them.

    Returns:
        The retry policy.

    Raises:
        TypeError: If ``policy`` is none of the accepted types.

    Example:
        ```pycon
        >>> from aretry.predicate import time_limit
        >>> from aretry.retry.executor_core import resolve_policy
        >>> policy = resolve_policy(lambda: time_limit(10.0))
        >>> type(policy.predicate).__name__
        'TimeLimitPredicate'

        ```
    """
    if isinstance(policy, (RetryPolicy, BaseRetryPredicate, BaseDelayStrategy)):
        return as_policy(policy)
    if callable(policy):
        return as_policy(policy())
    return as_policy(policy)


def decide(policy: RetryPolicy, outcome: Outcome, context: AttemptContext) -> bool:
    """Ask the policy whether another attempt should be made.

    Args:
        policy: The retry policy.
        outcome: The outcome of the attempt that just completed.
        context: The context of that attempt.

    Returns:
        ``True`` if another attempt should be made.
    """
    should_retry = policy.should_retry(outcome, context.attempt, context.elapsed)
    if should_retry:
        if outcome.is_failure:
            logger.debug(
                f"Attempt {context.attempt} failed with {type(outcome.error).__name__} "
                f"(elapsed={context.elapsed:.2f}s), will retry"
            )
        else:
            logger.debug(
                f"Attempt {context.attempt} returned {type(outcome.value).__name__} "
                f"(elapsed={context.elapsed:.2f}s), will retry"
            )
    return should_retry


def compute_delay(policy: RetryPolicy, context: AttemptContext) -> float:
    """Compute the wait before the attempt following ``context``.

    Composed strategies may produce negative delays; they are waited as
    zero.

    Args:
        policy: The retry policy.
        context: The context of the attempt that is being retried.

    Returns:
        The delay in seconds, never negative.
    """
    delay = policy.get(context.attempt)
    if delay < 0:
        logger.debug(f"Negative delay {delay:.2f}s for retry {context.attempt}, using 0s")
        delay = 0.0
    logger.debug(f"Waiting {delay:.2f}s before attempt {context.attempt + 1}")
    return delay


def finish(outcome: Outcome, context: AttemptContext, callbacks: CallbackManager) -> Any:
    """Surface the final outcome of an execution.

    Args:
        outcome: The outcome of the final attempt.
        context: The context of the final attempt.
        callbacks: The callback manager to notify.

    Returns:
        The value of a successful outcome.

    Raises:
        Exception: The error of a failed outcome, unchanged.
    """
    if outcome.is_failure:
        logger.debug(
            f"Giving up after {context.attempt + 1} attempts "
            f"(elapsed={context.elapsed:.2f}s): {type(outcome.error).__name__}"
        )
        callbacks.on_failure(context, outcome.error)
        raise outcome.error
    logger.debug(
        f"Succeeded after {context.attempt + 1} attempts (elapsed={context.elapsed:.2f}s)"
    )
    callbacks.on_success(context, outcome.value)
    return outcome.value
