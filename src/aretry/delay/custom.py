r"""Delay strategy backed by a user-supplied function."""

from __future__ import annotations

__all__ = ["CustomDelay", "custom"]

from typing import TYPE_CHECKING

from aretry.delay.base import BaseDelayStrategy
from aretry.utils.duration import to_seconds

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.utils.duration import Duration


class CustomDelay(BaseDelayStrategy):
    """Delay strategy computing its delays with an arbitrary function.

    Args:
        func: A function mapping the retry index to a delay in seconds
            (or a ``timedelta``). Negative results are clamped to zero.

    Example:
        ```pycon
        >>> from aretry.delay import CustomDelay
        >>> strategy = CustomDelay(lambda index: 0.5 * index)
        >>> strategy.get(3)
        1.5
        >>> CustomDelay(lambda index: -1.0).get(0)
        0.0

        ```
    """

    def __init__(self, func: Callable[[int], Duration]) -> None:
        self.func = func

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(func={self.func!r})"

    def get(self, index: int) -> float:
        return max(to_seconds(self.func(index)), 0.0)


def custom(func: Callable[[int], Duration]) -> CustomDelay:
    """Return a strategy computing its delays with ``func``."""
    return CustomDelay(func)
