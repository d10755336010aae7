r"""Arithmetic combinators for delay strategies.

The strategies returned by these functions compute their delay pointwise
from their operands at the same index. The results are never clamped, so
``subtract`` and ``negate`` can produce negative delays; bound them with
``clamp_min`` when needed.
"""

from __future__ import annotations

__all__ = [
    "DifferenceDelay",
    "NegatedDelay",
    "QuotientDelay",
    "ScaledDelay",
    "SumDelay",
    "add",
    "divide",
    "identity",
    "negate",
    "scale",
    "subtract",
]

from aretry.delay.base import BaseDelayStrategy


class SumDelay(BaseDelayStrategy):
    """Delay strategy returning the sum of two strategies."""

    def __init__(self, first: BaseDelayStrategy, second: BaseDelayStrategy) -> None:
        self.first = first
        self.second = second

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.first!r}, {self.second!r})"

    def get(self, index: int) -> float:
        return self.first.get(index) + self.second.get(index)


class DifferenceDelay(BaseDelayStrategy):
    """Delay strategy returning the difference of two strategies."""

    def __init__(self, first: BaseDelayStrategy, second: BaseDelayStrategy) -> None:
        self.first = first
        self.second = second

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.first!r}, {self.second!r})"

    def get(self, index: int) -> float:
        return self.first.get(index) - self.second.get(index)


class ScaledDelay(BaseDelayStrategy):
    """Delay strategy multiplying another strategy by a scalar."""

    def __init__(self, strategy: BaseDelayStrategy, factor: float) -> None:
        self.strategy = strategy
        self.factor = factor

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.strategy!r}, factor={self.factor})"

    def get(self, index: int) -> float:
        return self.strategy.get(index) * self.factor


class QuotientDelay(BaseDelayStrategy):
    """Delay strategy dividing another strategy by a non-zero scalar.

    Raises:
        ValueError: If ``divisor`` is zero.
    """

    def __init__(self, strategy: BaseDelayStrategy, divisor: float) -> None:
        if divisor == 0:
            msg = "divisor must not be zero"
            raise ValueError(msg)
        self.strategy = strategy
        self.divisor = divisor

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.strategy!r}, divisor={self.divisor})"

    def get(self, index: int) -> float:
        return self.strategy.get(index) / self.divisor


class NegatedDelay(BaseDelayStrategy):
    """Delay strategy negating another strategy."""

    def __init__(self, strategy: BaseDelayStrategy) -> None:
        self.strategy = strategy

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.strategy!r})"

    def get(self, index: int) -> float:
        return -self.strategy.get(index)


def add(first: BaseDelayStrategy, second: BaseDelayStrategy) -> SumDelay:
    """Return a strategy adding the delays of two strategies.

    Example:
        ```pycon
        >>> from aretry.delay import add, constant, linear
        >>> strategy = add(constant(1.0), linear(0.0, 0.5))
        >>> [strategy.get(i) for i in range(3)]
        [1.0, 1.5, 2.0]

        ```
    """
    return SumDelay(first, second)


def subtract(first: BaseDelayStrategy, second: BaseDelayStrategy) -> DifferenceDelay:
    """Return a strategy subtracting the delays of ``second`` from
    ``first``.

    Example:
        ```pycon
        >>> from aretry.delay import constant, subtract
        >>> subtract(constant(1.0), constant(3.0)).get(0)
        -2.0

        ```
    """
    return DifferenceDelay(first, second)


def scale(strategy: BaseDelayStrategy, factor: float) -> ScaledDelay:
    """Return a strategy multiplying the delays of ``strategy`` by
    ``factor``."""
    return ScaledDelay(strategy, factor)


def divide(strategy: BaseDelayStrategy, divisor: float) -> QuotientDelay:
    """Return a strategy dividing the delays of ``strategy`` by
    ``divisor``.

    Raises:
        ValueError: If ``divisor`` is zero.
    """
    return QuotientDelay(strategy, divisor)


def negate(strategy: BaseDelayStrategy) -> NegatedDelay:
    """Return a strategy negating the delays of ``strategy``."""
    return NegatedDelay(strategy)


def identity(strategy: BaseDelayStrategy) -> BaseDelayStrategy:
    """Return ``strategy`` unchanged."""
    return strategy
