r"""Jitter combinator for delay strategies."""

from __future__ import annotations

__all__ = ["JitteredDelay", "with_jitter"]

import logging
import random
from typing import TYPE_CHECKING

from aretry.delay.base import BaseDelayStrategy

if TYPE_CHECKING:
    from random import Random

logger: logging.Logger = logging.getLogger(__name__)


class JitteredDelay(BaseDelayStrategy):
    """Delay strategy adding random jitter to another strategy.

    For a base delay ``d`` and a uniform draw ``u`` in ``[0, 1)``, the
    delay is ``max(d + (2u - 1) * jitter_factor * d, 0)``, i.e. the base
    delay perturbed by up to ``jitter_factor * d`` in either direction.
    Spreading the delays prevents clients that failed together from
    retrying together.

    Args:
        strategy: The strategy providing the base delays.
        jitter_factor: The maximum relative perturbation. Typically in
            ``[0, 1]``; 0.1 perturbs each delay by up to 10%.
        rng: Optional random number generator exposing ``random()``.
            Defaults to the shared generator of the ``random`` module.

    Example:
        ```pycon
        >>> import random
        >>> from aretry.delay import JitteredDelay, constant
        >>> strategy = JitteredDelay(constant(10.0), 0.1, rng=random.Random(0))
        >>> 9.0 <= strategy.get(0) <= 11.0
        True

        ```
    """

    def __init__(
        self, strategy: BaseDelayStrategy, jitter_factor: float, rng: Random | None = None
    ) -> None:
        self.strategy = strategy
        self.jitter_factor = jitter_factor
        self.rng = rng

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.strategy!r}, jitter_factor={self.jitter_factor})"

    def get(self, index: int) -> float:
        base = self.strategy.get(index)
        draw = self.rng.random() if self.rng is not None else random.random()  # noqa: S311
        jitter = (2 * draw - 1) * self.jitter_factor * base
        logger.debug(f"Jittered delay for retry {index}: base={base:.3f}s, jitter={jitter:.3f}s")
        return max(base + jitter, 0.0)


def with_jitter(
    strategy: BaseDelayStrategy, jitter_factor: float, rng: Random | None = None
) -> JitteredDelay:
    """Return ``strategy`` with random jitter applied to every delay.

    Args:
        strategy: The strategy providing the base delays.
        jitter_factor: The maximum relative perturbation.
        rng: Optional random number generator exposing ``random()``.

    Returns:
        The jittered strategy.
    """
    return JitteredDelay(strategy, jitter_factor, rng)
