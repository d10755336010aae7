r"""Abstract base class for delay strategies."""

from __future__ import annotations

__all__ = ["BaseDelayStrategy"]

from abc import ABC, abstractmethod


class BaseDelayStrategy(ABC):
    """Abstract base class for delay strategies.

    A delay strategy determines how long to wait before the next attempt,
    based only on the number of retries already performed and on its own
    internal state.

    Strategies are composed with the free functions of ``aretry.delay``
    (``add``, ``scale``, ``clamp_max``, ``with_jitter``, ...), each of which
    returns a new strategy and leaves its operands untouched.
    """

    @abstractmethod
    def get(self, index: int) -> float:
        """Compute the delay before the next attempt.

        Args:
            index: The number of retries already performed (0-indexed).
                For example, index=0 is the delay before the first retry,
                index=1 is the delay before the second retry, etc.

        Returns:
            The delay in seconds.
        """
