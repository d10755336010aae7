r"""Sequential delay strategy."""

from __future__ import annotations

__all__ = ["SequentialDelay", "sequential"]

from typing import TYPE_CHECKING

from aretry.delay.base import BaseDelayStrategy
from aretry.utils.duration import to_seconds

if TYPE_CHECKING:
    from collections.abc import Iterable

    from aretry.utils.duration import Duration


class SequentialDelay(BaseDelayStrategy):
    """Delay strategy reading its delays from a fixed sequence.

    The delay for ``index`` is ``delays[index]``; indices past the end of
    the sequence reuse the last delay. Negative delays are clamped to zero.

    Args:
        delays: The delays in seconds. Must not be empty.

    Raises:
        ValueError: If ``delays`` is empty.

    Example:
        ```pycon
        >>> from aretry.delay import SequentialDelay
        >>> strategy = SequentialDelay([0.1, 0.5, 2.0])
        >>> strategy.get(0)
        0.1
        >>> strategy.get(2)
        2.0
        >>> strategy.get(7)  # past the end
        2.0

        ```
    """

    def __init__(self, delays: Iterable[Duration]) -> None:
        self.delays = tuple(to_seconds(delay) for delay in delays)
        if not self.delays:
            msg = "delays must not be empty"
            raise ValueError(msg)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delays={self.delays})"

    def get(self, index: int) -> float:
        delay = self.delays[index] if index < len(self.delays) else self.delays[-1]
        return max(delay, 0.0)


def sequential(delays: Iterable[Duration]) -> SequentialDelay:
    """Return a strategy that walks through ``delays`` and then repeats
    the last one."""
    return SequentialDelay(delays)
