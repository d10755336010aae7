r"""Exponential backoff delay strategy."""

from __future__ import annotations

__all__ = ["ExponentialDelay", "exponential"]

import math
from typing import TYPE_CHECKING

from aretry.delay.base import BaseDelayStrategy
from aretry.utils.duration import to_seconds

if TYPE_CHECKING:
    from aretry.utils.duration import Duration


class ExponentialDelay(BaseDelayStrategy):
    """Exponential backoff delay strategy.

    Calculates delay as: initial * (factor ** index), clamped to zero.

    This works well for most scenarios where you want progressively longer
    delays between retries. Combine it with ``clamp_max`` to cap the
    delay. Values too large to be represented saturate to infinity.

    Args:
        initial: The delay before the first retry, in seconds.
        factor: The multiplier applied for every further retry.

    Example:
        ```pycon
        >>> from aretry.delay import ExponentialDelay
        >>> strategy = ExponentialDelay(initial=0.5, factor=2.0)
        >>> strategy.get(0)
        0.5
        >>> strategy.get(1)
        1.0
        >>> strategy.get(3)
        4.0

        ```
    """

    def __init__(self, initial: Duration, factor: float) -> None:
        self.initial = to_seconds(initial)
        self.factor = float(factor)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(initial={self.initial}, factor={self.factor})"

    def get(self, index: int) -> float:
        try:
            delay = self.initial * self.factor**index
        except OverflowError:
            if self.initial == 0:
                return 0.0
            negative = (self.initial < 0) != (self.factor < 0 and index % 2 == 1)
            delay = -math.inf if negative else math.inf
        return max(delay, 0.0)


def exponential(initial: Duration, factor: float = 2.0) -> ExponentialDelay:
    """Return an exponential backoff strategy.

    Args:
        initial: The delay before the first retry, in seconds.
        factor: The multiplier applied for every further retry
            (default: 2.0).

    Returns:
        The strategy.
    """
    return ExponentialDelay(initial, factor)
