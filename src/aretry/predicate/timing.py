r"""Time-based retry predicates.

Two flavours are provided:

- ``time_limit`` measures time itself from the moment it is created. It is
  stateful, so build a fresh instance for every execution (for example by
  passing ``lambda: time_limit(30)`` to the executor, which also makes it
  share the executor clock).
- ``elapsed_limit`` relies on the elapsed time measured by the execution
  loop and is therefore stateless and safe to share.
"""

from __future__ import annotations

__all__ = ["ElapsedLimitPredicate", "TimeLimitPredicate", "elapsed_limit", "time_limit"]

from typing import TYPE_CHECKING

from aretry.predicate.base import BaseRetryPredicate
from aretry.utils.clock import get_clock
from aretry.utils.duration import to_seconds

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.outcome import Outcome
    from aretry.utils.duration import Duration


class TimeLimitPredicate(BaseRetryPredicate):
    """Predicate retrying while less than ``duration`` seconds have passed
    since the predicate was created.

    Args:
        duration: The time budget in seconds (or a ``timedelta``).
        clock: The clock used to measure time. Defaults to the clock of
            the executor building the policy (see ``use_clock``), and to
            ``time.monotonic`` outside of an execution.

    Example:
        ```pycon
        >>> from aretry.outcome import Success
        >>> from aretry.predicate import TimeLimitPredicate
        >>> now = [100.0]
        >>> predicate = TimeLimitPredicate(5.0, clock=lambda: now[0])
        >>> predicate.should_retry(Success(None), 0, 0.0)
        True
        >>> now[0] = 105.0
        >>> predicate.should_retry(Success(None), 1, 0.0)
        False

        ```
    """

    def __init__(self, duration: Duration, clock: Callable[[], float] | None = None) -> None:
        self.duration = to_seconds(duration)
        self.clock = clock if clock is not None else get_clock()
        self.start = self.clock()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(duration={self.duration}, start={self.start})"

    def should_retry(self, outcome: Outcome, attempt: int, elapsed: float) -> bool:  # noqa: ARG002
        return self.clock() - self.start < self.duration


class ElapsedLimitPredicate(BaseRetryPredicate):
    """Predicate retrying while the elapsed time reported by the
    execution loop is below ``duration`` seconds.

    Args:
        duration: The time budget in seconds (or a ``timedelta``).
    """

    def __init__(self, duration: Duration) -> None:
        self.duration = to_seconds(duration)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(duration={self.duration})"

    def should_retry(self, outcome: Outcome, attempt: int, elapsed: float) -> bool:  # noqa: ARG002
        return elapsed < self.duration


def time_limit(
    duration: Duration, clock: Callable[[], float] | None = None
) -> TimeLimitPredicate:
    """Return a self-timed predicate limiting retries to ``duration``
    seconds from now.

    Without an explicit ``clock`` the predicate uses the clock of the
    executor when it is created by a policy factory, for example
    ``lambda: time_limit(30)``. An instance created outside of an
    execution uses ``time.monotonic``.
    """
    return TimeLimitPredicate(duration, clock)


def elapsed_limit(duration: Duration) -> ElapsedLimitPredicate:
    """Return a stateless predicate limiting retries to ``duration``
    seconds of loop-measured elapsed time."""
    return ElapsedLimitPredicate(duration)
