r"""Constant delay strategy."""

from __future__ import annotations

__all__ = ["ConstantDelay", "constant", "no_delay"]

from typing import TYPE_CHECKING

from aretry.delay.base import BaseDelayStrategy
from aretry.utils.duration import to_seconds

if TYPE_CHECKING:
    from aretry.utils.duration import Duration


class ConstantDelay(BaseDelayStrategy):
    """Constant/fixed delay strategy.

    Returns the same delay for every retry, regardless of the index. The
    value is returned as given and is not clamped.

    Args:
        delay: The fixed delay in seconds (or a ``timedelta``).

    Example:
        ```pycon
        >>> from aretry.delay import ConstantDelay
        >>> strategy = ConstantDelay(2.5)
        >>> strategy.get(0)
        2.5
        >>> strategy.get(10)
        2.5

        ```
    """

    def __init__(self, delay: Duration) -> None:
        self.delay = to_seconds(delay)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"

    def get(self, index: int) -> float:  # noqa: ARG002
        return self.delay


def constant(delay: Duration) -> ConstantDelay:
    """Return a strategy that always waits ``delay`` seconds.

    Example:
        ```pycon
        >>> from aretry.delay import constant
        >>> constant(0.5).get(3)
        0.5

        ```
    """
    return ConstantDelay(delay)


def no_delay() -> ConstantDelay:
    """Return a strategy that never waits.

    Example:
        ```pycon
        >>> from aretry.delay import no_delay
        >>> no_delay().get(0)
        0.0

        ```
    """
    return ConstantDelay(0.0)
