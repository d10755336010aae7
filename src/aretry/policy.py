r"""Retry policy pairing a retry predicate with a delay strategy.

This module provides the ``RetryPolicy`` dataclass and the helper
functions building policies from their components, in either order.
"""

from __future__ import annotations

__all__ = ["RetryPolicy", "as_policy", "with_delay", "with_predicate"]

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from aretry.delay import BaseDelayStrategy, no_delay
from aretry.predicate import BaseRetryPredicate, on_exception

if TYPE_CHECKING:
    from aretry.outcome import Outcome


@dataclass(frozen=True)
class RetryPolicy:
    """Immutable pair of a retry predicate and a delay strategy.

    The policy answers both questions of the execution loop: whether to
    retry (``should_retry``) and how long to wait first (``get``).

    Args:
        predicate: The retry predicate. Defaults to ``on_exception()``,
            i.e. retry on any failure.
        delay: The delay strategy. Defaults to ``no_delay()``.

    Raises:
        TypeError: If a component has the wrong type.

    Example:
        ```pycon
        >>> from aretry import RetryPolicy
        >>> from aretry.delay import constant
        >>> from aretry.outcome import Failure
        >>> from aretry.predicate import and_, attempts, on_exception
        >>> policy = RetryPolicy(and_(on_exception(), attempts(3)), constant(0.5))
        >>> policy.should_retry(Failure(OSError()), 0, 0.0)
        True
        >>> policy.get(0)
        0.5

        ```
    """

    predicate: BaseRetryPredicate = field(default_factory=on_exception)
    delay: BaseDelayStrategy = field(default_factory=no_delay)

    def __post_init__(self) -> None:
        if not isinstance(self.predicate, BaseRetryPredicate):
            msg = f"predicate must be a BaseRetryPredicate, got {type(self.predicate).__name__}"
            raise TypeError(msg)
        if not isinstance(self.delay, BaseDelayStrategy):
            msg = f"delay must be a BaseDelayStrategy, got {type(self.delay).__name__}"
            raise TypeError(msg)

    def should_retry(self, outcome: Outcome, attempt: int, elapsed: float) -> bool:
        """Delegate the retry decision to the predicate."""
        return self.predicate.should_retry(outcome, attempt, elapsed)

    def get(self, index: int) -> float:
        """Delegate the delay computation to the delay strategy."""
        return self.delay.get(index)


def with_delay(predicate: BaseRetryPredicate, delay: BaseDelayStrategy) -> RetryPolicy:
    """Pair a predicate with a delay strategy.

    Example:
        ```pycon
        >>> from aretry.delay import constant
        >>> from aretry.policy import with_delay, with_predicate
        >>> from aretry.predicate import on_exception
        >>> predicate, delay = on_exception(), constant(1.0)
        >>> with_delay(predicate, delay) == with_predicate(delay, predicate)
        True

        ```
    """
    return RetryPolicy(predicate=predicate, delay=delay)


def with_predicate(delay: BaseDelayStrategy, predicate: BaseRetryPredicate) -> RetryPolicy:
    """Pair a delay strategy with a predicate."""
    return RetryPolicy(predicate=predicate, delay=delay)


def as_policy(value: RetryPolicy | BaseRetryPredicate | BaseDelayStrategy) -> RetryPolicy:
    """Promote a predicate or a delay strategy to a full policy.

    A predicate is paired with ``no_delay()`` and a delay strategy with
    ``on_exception()``. Policies are returned unchanged.

    Args:
        value: The policy, predicate or delay strategy to promote.

    Returns:
        The retry policy.

    Raises:
        TypeError: If ``value`` is none of the accepted types.
    """
    if isinstance(value, RetryPolicy):
        return value
    if isinstance(value, BaseRetryPredicate):
        return RetryPolicy(predicate=value)
    if isinstance(value, BaseDelayStrategy):
        return RetryPolicy(delay=value)
    msg = (
        "expected a RetryPolicy, a BaseRetryPredicate or a BaseDelayStrategy, "
        f"got {type(value).__name__}"
    )
    raise TypeError(msg)
