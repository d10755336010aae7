r"""Outcome types describing the result of a single attempt.

This module provides the ``Success`` and ``Failure`` outcome variants and
the ``AttemptContext`` record that the execution loop builds for every
attempt.
"""

from __future__ import annotations

__all__ = ["AttemptContext", "Failure", "Outcome", "Success"]

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Outcome of an attempt that returned normally.

    Attributes:
        value: The value returned by the operation.

    Example:
        ```pycon
        >>> from aretry.outcome import Success
        >>> outcome = Success(42)
        >>> outcome.is_success
        True
        >>> outcome.get()
        42

        ```
    """

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def get(self) -> T:
        """Return the wrapped value."""
        return self.value


@dataclass(frozen=True)
class Failure:
    """Outcome of an attempt that raised an exception.

    The exception object is kept as is, so that it can be re-raised
    unchanged once no further attempt is made.

    Attributes:
        error: The exception raised by the operation.

    Example:
        ```pycon
        >>> from aretry.outcome import Failure
        >>> outcome = Failure(ValueError("boom"))
        >>> outcome.is_failure
        True
        >>> outcome.get()
        Traceback (most recent call last):
        ...
        ValueError: boom

        ```
    """

    error: Exception

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def get(self) -> Any:
        """Raise the captured exception.

        Raises:
            Exception: The captured exception, unchanged.
        """
        raise self.error


Outcome = Union[Success[Any], Failure]


@dataclass(frozen=True)
class AttemptContext:
    """Information about one attempt, built by the execution loop.

    Attributes:
        attempt: The attempt index (0 for the first attempt).
        elapsed: Seconds elapsed since the execution loop started.
    """

    attempt: int
    elapsed: float
