r"""Stateful predicate counting failures per exception category."""

from __future__ import annotations

__all__ = ["ExceptionLimitPredicate", "exception_limit"]

import logging
from collections import Counter
from typing import TYPE_CHECKING

from aretry.predicate.base import BaseRetryPredicate
from aretry.utils.validation import validate_non_negative

if TYPE_CHECKING:
    from aretry.outcome import Outcome

logger: logging.Logger = logging.getLogger(__name__)


class ExceptionLimitPredicate(BaseRetryPredicate):
    """Predicate retrying a failure category at most ``limit`` times.

    Every failure whose error is an instance of ``exception_types`` is
    counted under that category (the first matching type). The predicate
    asks for another attempt while the count of the current category does
    not exceed ``limit``. Successes and non-matching failures are not
    retried.

    The counts live in the predicate instance: build a fresh one for every
    execution.

    Args:
        limit: The maximum number of retries per category. Must be >= 0.
        exception_types: The exception types to count. When empty, every
            failure is counted under ``Exception``.

    Raises:
        ValueError: If ``limit`` is negative.

    Example:
        ```pycon
        >>> from aretry.outcome import Failure
        >>> from aretry.predicate import ExceptionLimitPredicate
        >>> predicate = ExceptionLimitPredicate(2, (TimeoutError, ConnectionError))
        >>> [predicate.should_retry(Failure(TimeoutError()), i, 0.0) for i in range(3)]
        [True, True, False]
        >>> predicate.should_retry(Failure(ConnectionError()), 3, 0.0)
        True
        >>> predicate.counts[TimeoutError]
        3

        ```
    """

    def __init__(self, limit: int, exception_types: tuple[type[BaseException], ...] = ()) -> None:
        validate_non_negative("limit", limit)
        self.limit = limit
        self.exception_types = exception_types or (Exception,)
        self.counts: Counter[type[BaseException]] = Counter()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(limit={self.limit}, "
            f"counts={dict(self.counts)})"
        )

    def _category(self, error: BaseException) -> type[BaseException] | None:
        for exc_type in self.exception_types:
            if isinstance(error, exc_type):
                return exc_type
        return None

    def should_retry(self, outcome: Outcome, attempt: int, elapsed: float) -> bool:  # noqa: ARG002
        if not outcome.is_failure:
            return False
        category = self._category(outcome.error)
        if category is None:
            return False
        self.counts[category] += 1
        if self.counts[category] > self.limit:
            logger.debug(
                f"{category.__name__} occurred {self.counts[category]} times "
                f"(limit={self.limit}): not retrying"
            )
            return False
        return True


def exception_limit(
    limit: int, *exception_types: type[BaseException]
) -> ExceptionLimitPredicate:
    """Return a predicate retrying each failure category at most ``limit``
    times."""
    return ExceptionLimitPredicate(limit, exception_types)
