r"""Common retry predicates.

This module provides the stateless predicates: attempt limits, checks on
the outcome kind, value and type, and wrappers around plain functions.
"""

from __future__ import annotations

__all__ = [
    "AttemptsPredicate",
    "ConstantPredicate",
    "ExceptionTypePredicate",
    "FunctionPredicate",
    "NullResultPredicate",
    "ResultTypePredicate",
    "always",
    "attempts",
    "never",
    "on",
    "on_exception",
    "on_exception_type",
    "on_failure",
    "on_null",
    "on_result_type",
    "until",
    "until_result",
    "until_result_type",
]

from typing import TYPE_CHECKING

from aretry.predicate.base import BaseRetryPredicate
from aretry.predicate.logic import or_

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.outcome import Outcome

    PredicateFunction = Callable[[Outcome, int, float], bool]


class AttemptsPredicate(BaseRetryPredicate):
    """Predicate allowing at most ``max_attempts`` attempts in total.

    It ignores the outcome, so it is meant to be combined with an
    outcome-aware predicate through ``and_``.

    Args:
        max_attempts: The maximum number of attempts, including the first
            one. Must be > 0.

    Raises:
        ValueError: If ``max_attempts`` is not > 0.

    Example:
        ```pycon
        >>> from aretry.outcome import Success
        >>> from aretry.predicate import AttemptsPredicate
        >>> predicate = AttemptsPredicate(3)
        >>> [predicate.should_retry(Success(None), attempt, 0.0) for attempt in range(4)]
        [True, True, False, False]

        ```
    """

    def __init__(self, max_attempts: int) -> None:
        if max_attempts <= 0:
            msg = f"max_attempts must be > 0, got {max_attempts}"
            raise ValueError(msg)
        self.max_attempts = max_attempts

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(max_attempts={self.max_attempts})"

    def should_retry(self, outcome: Outcome, attempt: int, elapsed: float) -> bool:  # noqa: ARG002
        return attempt < self.max_attempts - 1


class ConstantPredicate(BaseRetryPredicate):
    """Predicate always returning the same decision."""

    def __init__(self, value: bool) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(value={self.value})"

    def should_retry(self, outcome: Outcome, attempt: int, elapsed: float) -> bool:  # noqa: ARG002
        return self.value


class ExceptionTypePredicate(BaseRetryPredicate):
    """Predicate retrying on failures raised with one of the given
    exception types.

    Args:
        exception_types: The exception types to retry on. When empty, every
            failure is retried.

    Example:
        ```pycon
        >>> from aretry.outcome import Failure, Success
        >>> from aretry.predicate import ExceptionTypePredicate
        >>> predicate = ExceptionTypePredicate((TimeoutError,))
        >>> predicate.should_retry(Failure(TimeoutError()), 0, 0.0)
        True
        >>> predicate.should_retry(Failure(KeyError()), 0, 0.0)
        False
        >>> predicate.should_retry(Success(1), 0, 0.0)
        False

        ```
    """

    def __init__(self, exception_types: tuple[type[BaseException], ...] = ()) -> None:
        self.exception_types = exception_types

    def __repr__(self) -> str:
        names = ", ".join(exc_type.__name__ for exc_type in self.exception_types)
        return f"{self.__class__.__qualname__}({names})"

    def should_retry(self, outcome: Outcome, attempt: int, elapsed: float) -> bool:  # noqa: ARG002
        if not outcome.is_failure:
            return False
        if not self.exception_types:
            return True
        return isinstance(outcome.error, self.exception_types)


class NullResultPredicate(BaseRetryPredicate):
    """Predicate retrying on successful attempts that returned ``None``."""

    def should_retry(self, outcome: Outcome, attempt: int, elapsed: float) -> bool:  # noqa: ARG002
        return outcome.is_success and outcome.value is None


class ResultTypePredicate(BaseRetryPredicate):
    """Predicate checking the runtime type of a successful result.

    Failures always yield ``False``, whatever ``negate`` is.

    Args:
        result_type: The type (or tuple of types) to check against with
            ``isinstance``.
        negate: If ``True``, retry when the result is *not* an instance of
            ``result_type``.
    """

    def __init__(self, result_type: type | tuple[type, ...], negate: bool = False) -> None:
        self.result_type = result_type
        self.negate = negate

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.result_type!r}, negate={self.negate})"

    def should_retry(self, outcome: Outcome, attempt: int, elapsed: float) -> bool:  # noqa: ARG002
        if not outcome.is_success:
            return False
        return isinstance(outcome.value, self.result_type) != self.negate


class FunctionPredicate(BaseRetryPredicate):
    """Predicate delegating the decision to a plain function.

    Args:
        func: A function taking ``(outcome, attempt, elapsed)`` and
            returning a bool.
        negate: If ``True``, the decision of ``func`` is inverted.
    """

    def __init__(self, func: PredicateFunction, negate: bool = False) -> None:
        self.func = func
        self.negate = negate

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.func!r}, negate={self.negate})"

    def should_retry(self, outcome: Outcome, attempt: int, elapsed: float) -> bool:
        return bool(self.func(outcome, attempt, elapsed)) != self.negate


def attempts(n: int) -> AttemptsPredicate:
    """Return a predicate allowing at most ``n`` attempts in total.

    Raises:
        ValueError: If ``n`` is not > 0.
    """
    return AttemptsPredicate(n)


def always() -> ConstantPredicate:
    """Return a predicate that always asks for another attempt.

    Used alone it retries forever; combine it with a limit.
    """
    return ConstantPredicate(True)


def never() -> ConstantPredicate:
    """Return a predicate that never asks for another attempt."""
    return ConstantPredicate(False)


def on_exception() -> ExceptionTypePredicate:
    """Return a predicate retrying on any failure.

    Example:
        ```pycon
        >>> from aretry.outcome import Failure, Success
        >>> from aretry.predicate import on_exception
        >>> on_exception().should_retry(Failure(RuntimeError()), 5, 12.0)
        True
        >>> on_exception().should_retry(Success(None), 0, 0.0)
        False

        ```
    """
    return ExceptionTypePredicate()


def on_failure() -> ExceptionTypePredicate:
    """Alias of ``on_exception``."""
    return on_exception()


def on_exception_type(*exception_types: type[BaseException]) -> ExceptionTypePredicate:
    """Return a predicate retrying on failures of the given types.

    Raises:
        ValueError: If no exception type is given.
    """
    if not exception_types:
        msg = "at least one exception type is required"
        raise ValueError(msg)
    return ExceptionTypePredicate(exception_types)


def on_null() -> NullResultPredicate:
    """Return a predicate retrying while the operation returns ``None``."""
    return NullResultPredicate()


def until_result() -> BaseRetryPredicate:
    """Return a predicate retrying until the operation returns a value
    other than ``None``.

    Failures are retried as well, i.e. this is
    ``or_(on_exception(), on_null())``.
    """
    return or_(on_exception(), on_null())


def on_result_type(result_type: type | tuple[type, ...]) -> ResultTypePredicate:
    """Return a predicate retrying while the result is an instance of
    ``result_type``."""
    return ResultTypePredicate(result_type)


def until_result_type(result_type: type | tuple[type, ...]) -> ResultTypePredicate:
    """Return a predicate retrying until the result is an instance of
    ``result_type``.

    Example:
        ```pycon
        >>> from aretry.outcome import Success
        >>> from aretry.predicate import until_result_type
        >>> predicate = until_result_type(int)
        >>> predicate.should_retry(Success("pending"), 0, 0.0)
        True
        >>> predicate.should_retry(Success(3), 0, 0.0)
        False

        ```
    """
    return ResultTypePredicate(result_type, negate=True)


def on(func: PredicateFunction) -> FunctionPredicate:
    """Return a predicate retrying while ``func`` returns ``True``.

    Args:
        func: A function taking ``(outcome, attempt, elapsed)``.
    """
    return FunctionPredicate(func)


def until(func: PredicateFunction) -> FunctionPredicate:
    """Return a predicate retrying until ``func`` returns ``True``.

    Args:
        func: A function taking ``(outcome, attempt, elapsed)``.
    """
    return FunctionPredicate(func, negate=True)
