r"""Duration conversion utilities.

Durations are represented as a number of seconds (``float``) everywhere in
aretry. This module converts the accepted input forms to that
representation.
"""

from __future__ import annotations

__all__ = ["Duration", "to_seconds"]

from datetime import timedelta
from typing import Union

Duration = Union[float, int, timedelta]


def to_seconds(duration: Duration) -> float:
    """Convert a duration to a number of seconds.

    Args:
        duration: A number of seconds or a ``datetime.timedelta``.

    Returns:
        The duration in seconds.

    Raises:
        TypeError: If ``duration`` is neither a number nor a timedelta.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry.utils.duration import to_seconds
        >>> to_seconds(1.5)
        1.5
        >>> to_seconds(timedelta(milliseconds=500))
        0.5

        ```
    """
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    if isinstance(duration, bool) or not isinstance(duration, (int, float)):
        msg = f"duration must be a number of seconds or a timedelta, got {duration!r}"
        raise TypeError(msg)
    return float(duration)
