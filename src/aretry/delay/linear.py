r"""Linear backoff delay strategy."""

from __future__ import annotations

__all__ = ["LinearDelay", "linear"]

from typing import TYPE_CHECKING

from aretry.delay.base import BaseDelayStrategy
from aretry.utils.duration import to_seconds

if TYPE_CHECKING:
    from aretry.utils.duration import Duration


class LinearDelay(BaseDelayStrategy):
    """Linear backoff delay strategy.

    Calculates delay as: initial + increment * index, clamped to zero.

    This strategy provides evenly spaced delays, which can be useful for
    operations that recover quickly or when you want predictable timing.
    A negative increment produces a decreasing schedule that bottoms out
    at zero.

    Args:
        initial: The delay before the first retry, in seconds.
        increment: The amount added for every further retry, in seconds.

    Example:
        ```pycon
        >>> from aretry.delay import LinearDelay
        >>> strategy = LinearDelay(initial=1.0, increment=0.5)
        >>> strategy.get(0)
        1.0
        >>> strategy.get(1)
        1.5
        >>> strategy.get(4)
        3.0
        >>> LinearDelay(initial=1.0, increment=-0.5).get(5)
        0.0

        ```
    """

    def __init__(self, initial: Duration, increment: Duration) -> None:
        self.initial = to_seconds(initial)
        self.increment = to_seconds(increment)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(initial={self.initial}, increment={self.increment})"
        )

    def get(self, index: int) -> float:
        return max(self.initial + self.increment * index, 0.0)


def linear(initial: Duration, increment: Duration) -> LinearDelay:
    """Return a linear backoff strategy.

    Args:
        initial: The delay before the first retry, in seconds.
        increment: The amount added for every further retry, in seconds.

    Returns:
        The strategy.
    """
    return LinearDelay(initial, increment)
