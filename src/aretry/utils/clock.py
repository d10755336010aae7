r"""Clock used by the current execution.

The executors install their clock here while they build the policy of a
run, so that time-based predicates created at that moment (typically by a
policy factory) measure time with the same clock as the execution loop.
"""

from __future__ import annotations

__all__ = ["get_clock", "use_clock"]

import contextvars
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Generator

# Context variable for the clock of the current execution (async-safe)
_clock: contextvars.ContextVar[Callable[[], float]] = contextvars.ContextVar(
    "clock", default=time.monotonic
)


def get_clock() -> Callable[[], float]:
    """Get the clock of the current context.

    Returns:
        The clock installed by ``use_clock``, or ``time.monotonic`` when
        none is installed.

    Example:
        ```pycon
        >>> import time
        >>> from aretry.utils.clock import get_clock
        >>> get_clock() is time.monotonic
        True

        ```
    """
    return _clock.get()


@contextmanager
def use_clock(clock: Callable[[], float]) -> Generator[None, None, None]:
    """Install ``clock`` for the current context until the block exits.

    Args:
        clock: A zero-argument callable returning monotonic seconds.

    Example:
        ```pycon
        >>> from aretry.utils.clock import get_clock, use_clock
        >>> with use_clock(lambda: 42.0):
        ...     get_clock()()
        ...
        42.0
        >>> get_clock()() == 42.0
        False

        ```
    """
    token = _clock.set(clock)
    try:
        yield
    finally:
        _clock.reset(token)
