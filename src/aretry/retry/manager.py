r"""Callback manager for orchestrating retry lifecycle events.

This module provides the CallbackManager class that handles invocation
of user-defined callbacks at various points in the retry lifecycle.
"""

from __future__ import annotations

__all__ = ["CallbackManager"]

from typing import TYPE_CHECKING, Any

from aretry.callbacks import FailureInfo, RetryInfo, SuccessInfo
from aretry.retry.config import CallbackConfig

if TYPE_CHECKING:
    from aretry.outcome import AttemptContext, Outcome


class CallbackManager:
    """Manages callback invocations during the retry lifecycle.

    Attributes:
        callbacks: Configuration containing callback functions for
            lifecycle events.
    """

    def __init__(self, callbacks: CallbackConfig | None = None) -> None:
        self.callbacks = callbacks if callbacks is not None else CallbackConfig()

    def on_retry(self, context: AttemptContext, outcome: Outcome, delay: float) -> None:
        """Invoke on_retry callback.

        Args:
            context: The context of the attempt being retried.
            outcome: The outcome of that attempt.
            delay: The delay in seconds before the next attempt.
        """
        if self.callbacks.on_retry is not None:
            self.callbacks.on_retry(
                RetryInfo(
                    attempt=context.attempt,
                    outcome=outcome,
                    delay=delay,
                    elapsed=context.elapsed,
                )
            )

    def on_success(self, context: AttemptContext, value: Any) -> None:
        """Invoke on_success callback.

        Args:
            context: The context of the final attempt.
            value: The value returned by the operation.
        """
        if self.callbacks.on_success is not None:
            self.callbacks.on_success(
                SuccessInfo(attempt=context.attempt, value=value, elapsed=context.elapsed)
            )

    def on_failure(self, context: AttemptContext, error: Exception) -> None:
        """Invoke on_failure callback.

        Args:
            context: The context of the final attempt.
            error: The exception about to be re-raised.
        """
        if self.callbacks.on_failure is not None:
            self.callbacks.on_failure(
                FailureInfo(attempt=context.attempt, error=error, elapsed=context.elapsed)
            )
