r"""Fibonacci backoff delay strategy."""

from __future__ import annotations

__all__ = ["FibonacciDelay", "fibonacci"]

from typing import TYPE_CHECKING

from aretry.delay.base import BaseDelayStrategy
from aretry.utils.duration import to_seconds

if TYPE_CHECKING:
    from aretry.utils.duration import Duration


class FibonacciDelay(BaseDelayStrategy):
    """Fibonacci backoff delay strategy.

    Calculates delay as: base * fib(index), clamped to zero, where the
    sequence is seeded with ``start``: fib(0) = start[0],
    fib(1) = start[1] and fib(n) = fib(n - 1) + fib(n - 2).

    This strategy provides a middle ground between linear and exponential
    backoff. With the default seed (0, 1) the multipliers are
    0, 1, 1, 2, 3, 5, 8, 13, ...

    Args:
        base: The base delay in seconds.
        start: The first two numbers of the sequence (default: (0, 1)).

    Example:
        ```pycon
        >>> from aretry.delay import FibonacciDelay
        >>> strategy = FibonacciDelay(base=1.0)
        >>> [strategy.get(i) for i in range(7)]
        [0.0, 1.0, 1.0, 2.0, 3.0, 5.0, 8.0]
        >>> strategy = FibonacciDelay(base=1.0, start=(1, 2))
        >>> [strategy.get(i) for i in range(5)]
        [1.0, 2.0, 3.0, 5.0, 8.0]

        ```
    """

    def __init__(self, base: Duration, start: tuple[int, int] = (0, 1)) -> None:
        self.base = to_seconds(base)
        self.start = tuple(start)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base={self.base}, start={self.start})"

    def _fibonacci(self, n: int) -> int:
        """Calculate the nth number of the seeded sequence (0-indexed).

        Args:
            n: The position in the sequence.

        Returns:
            The nth number of the sequence.
        """
        a, b = self.start
        if n == 0:
            return a
        for _ in range(n - 1):
            a, b = b, a + b
        return b

    def get(self, index: int) -> float:
        return max(self._fibonacci(index) * self.base, 0.0)


def fibonacci(base: Duration, start: tuple[int, int] = (0, 1)) -> FibonacciDelay:
    """Return a Fibonacci backoff strategy.

    Args:
        base: The base delay in seconds.
        start: The first two numbers of the sequence (default: (0, 1)).

    Returns:
        The strategy.
    """
    return FibonacciDelay(base, start)
