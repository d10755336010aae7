r"""Shared test helpers for the retry tests."""

from __future__ import annotations

__all__ = ["FakeClock", "FlakyOperation", "StaticPredicate"]

from typing import TYPE_CHECKING, Any

from aretry.predicate import BaseRetryPredicate

if TYPE_CHECKING:
    from aretry.outcome import Outcome


class FakeClock:
    """Clock returning a manually controlled time.

    Calling the instance returns the current time; ``advance`` moves it
    forward and is used as the side effect of the patched sleep functions.
    """

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FlakyOperation:
    """Operation failing a fixed number of times before returning a
    value.

    Attributes:
        calls: The attempt indices the operation was called with.
        errors: The exceptions raised, in order.
    """

    def __init__(self, failures: int, value: Any = "ok", error_type: type[Exception] = OSError) -> None:
        self.failures = failures
        self.value = value
        self.error_type = error_type
        self.calls: list[int] = []
        self.errors: list[Exception] = []

    def __call__(self, attempt: int) -> Any:
        self.calls.append(attempt)
        if len(self.calls) <= self.failures:
            error = self.error_type(f"failure {len(self.calls)}")
            self.errors.append(error)
            raise error
        return self.value


class StaticPredicate(BaseRetryPredicate):
    """Predicate returning a fixed decision and counting its calls."""

    def __init__(self, value: bool) -> None:
        self.value = value
        self.calls = 0

    def should_retry(self, outcome: Outcome, attempt: int, elapsed: float) -> bool:  # noqa: ARG002
        self.calls += 1
        return self.value
