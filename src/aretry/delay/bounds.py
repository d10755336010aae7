r"""Bounding combinators for delay strategies."""

from __future__ import annotations

__all__ = [
    "ClampedDelay",
    "MaxDelay",
    "MinDelay",
    "clamp_max",
    "clamp_min",
    "clamp_range",
    "max_of",
    "min_of",
]

from typing import TYPE_CHECKING

from aretry.delay.base import BaseDelayStrategy
from aretry.utils.duration import to_seconds

if TYPE_CHECKING:
    from aretry.utils.duration import Duration


class MinDelay(BaseDelayStrategy):
    """Delay strategy returning the smallest delay of several
    strategies."""

    def __init__(self, strategies: tuple[BaseDelayStrategy, ...]) -> None:
        self.strategies = strategies

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.strategies!r})"

    def get(self, index: int) -> float:
        return min(strategy.get(index) for strategy in self.strategies)


class MaxDelay(BaseDelayStrategy):
    """Delay strategy returning the largest delay of several
    strategies."""

    def __init__(self, strategies: tuple[BaseDelayStrategy, ...]) -> None:
        self.strategies = strategies

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.strategies!r})"

    def get(self, index: int) -> float:
        return max(strategy.get(index) for strategy in self.strategies)


class ClampedDelay(BaseDelayStrategy):
    """Delay strategy bounding the delays of another strategy.

    Args:
        strategy: The strategy to bound.
        floor: Optional lower bound in seconds.
        ceiling: Optional upper bound in seconds.

    Raises:
        ValueError: If both bounds are set and ``floor > ceiling``.

    Example:
        ```pycon
        >>> from aretry.delay import ClampedDelay, exponential
        >>> strategy = ClampedDelay(exponential(1.0, 2.0), floor=2.0, ceiling=5.0)
        >>> [strategy.get(i) for i in range(5)]
        [2.0, 2.0, 4.0, 5.0, 5.0]

        ```
    """

    def __init__(
        self,
        strategy: BaseDelayStrategy,
        floor: Duration | None = None,
        ceiling: Duration | None = None,
    ) -> None:
        self.strategy = strategy
        self.floor = None if floor is None else to_seconds(floor)
        self.ceiling = None if ceiling is None else to_seconds(ceiling)
        if self.floor is not None and self.ceiling is not None and self.floor > self.ceiling:
            msg = f"floor ({self.floor}) must be <= ceiling ({self.ceiling})"
            raise ValueError(msg)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}({self.strategy!r}, "
            f"floor={self.floor}, ceiling={self.ceiling})"
        )

    def get(self, index: int) -> float:
        delay = self.strategy.get(index)
        if self.floor is not None:
            delay = max(delay, self.floor)
        if self.ceiling is not None:
            delay = min(delay, self.ceiling)
        return delay


def min_of(
    first: BaseDelayStrategy, second: BaseDelayStrategy, *others: BaseDelayStrategy
) -> MinDelay:
    """Return a strategy picking, at each index, the smallest delay.

    Example:
        ```pycon
        >>> from aretry.delay import constant, linear, min_of
        >>> strategy = min_of(constant(2.0), linear(0.0, 1.0))
        >>> [strategy.get(i) for i in range(4)]
        [0.0, 1.0, 2.0, 2.0]

        ```
    """
    return MinDelay((first, second, *others))


def max_of(
    first: BaseDelayStrategy, second: BaseDelayStrategy, *others: BaseDelayStrategy
) -> MaxDelay:
    """Return a strategy picking, at each index, the largest delay."""
    return MaxDelay((first, second, *others))


def clamp_min(strategy: BaseDelayStrategy, floor: Duration) -> ClampedDelay:
    """Return a strategy whose delays are never below ``floor``."""
    return ClampedDelay(strategy, floor=floor)


def clamp_max(strategy: BaseDelayStrategy, ceiling: Duration) -> ClampedDelay:
    """Return a strategy whose delays are never above ``ceiling``."""
    return ClampedDelay(strategy, ceiling=ceiling)


def clamp_range(strategy: BaseDelayStrategy, floor: Duration, ceiling: Duration) -> ClampedDelay:
    """Return a strategy whose delays stay within ``[floor, ceiling]``.

    Raises:
        ValueError: If ``floor > ceiling``.
    """
    return ClampedDelay(strategy, floor=floor, ceiling=ceiling)
