r"""Abstract base class for retry predicates."""

from __future__ import annotations

__all__ = ["BaseRetryPredicate"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.outcome import Outcome


class BaseRetryPredicate(ABC):
    """Abstract base class for retry predicates.

    A retry predicate decides, after each attempt, whether another attempt
    should be made. Predicates are combined with the boolean functions of
    ``aretry.predicate`` (``and_``, ``or_``, ``not_``, ...).

    Predicates holding per-run state (for example ``time_limit`` or
    ``exception_limit``) must not be shared between executions. Pass a
    factory to the executor instead so that every execution builds its
    own instance.
    """

    @abstractmethod
    def should_retry(self, outcome: Outcome, attempt: int, elapsed: float) -> bool:
        """Decide whether another attempt should be made.

        Args:
            outcome: The outcome of the attempt that just completed.
            attempt: The index of that attempt (0 after the first attempt).
            elapsed: Seconds elapsed since the execution loop started.

        Returns:
            ``True`` to perform another attempt, ``False`` to stop and
            surface ``outcome`` as the final result.
        """
