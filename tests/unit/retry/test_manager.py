r"""Unit tests for the callback manager."""

from __future__ import annotations

from unittest.mock import Mock

from aretry.callbacks import FailureInfo, RetryInfo, SuccessInfo
from aretry.outcome import AttemptContext, Failure
from aretry.retry import CallbackConfig, CallbackManager

CONTEXT = AttemptContext(attempt=2, elapsed=1.25)


def test_callback_manager_without_config() -> None:
    """Test that a manager without config does nothing."""
    manager = CallbackManager()
    manager.on_retry(CONTEXT, Failure(OSError()), 0.5)
    manager.on_success(CONTEXT, "value")
    manager.on_failure(CONTEXT, OSError())
    assert manager.callbacks == CallbackConfig()


def test_callback_manager_on_retry(mock_callback: Mock) -> None:
    """Test that on_retry receives a RetryInfo."""
    outcome = Failure(OSError("down"))
    CallbackManager(CallbackConfig(on_retry=mock_callback)).on_retry(CONTEXT, outcome, 0.5)
    mock_callback.assert_called_once_with(
        RetryInfo(attempt=2, outcome=outcome, delay=0.5, elapsed=1.25)
    )


def test_callback_manager_on_success(mock_callback: Mock) -> None:
    """Test that on_success receives a SuccessInfo."""
    CallbackManager(CallbackConfig(on_success=mock_callback)).on_success(CONTEXT, "value")
    mock_callback.assert_called_once_with(SuccessInfo(attempt=2, value="value", elapsed=1.25))


def test_callback_manager_on_failure(mock_callback: Mock) -> None:
    """Test that on_failure receives a FailureInfo."""
    error = OSError("down")
    CallbackManager(CallbackConfig(on_failure=mock_callback)).on_failure(CONTEXT, error)
    mock_callback.assert_called_once_with(FailureInfo(attempt=2, error=error, elapsed=1.25))


def test_callback_manager_only_configured_callbacks(mock_callback: Mock) -> None:
    """Test that other lifecycle events do not trigger a callback."""
    manager = CallbackManager(CallbackConfig(on_failure=mock_callback))
    manager.on_retry(CONTEXT, Failure(OSError()), 0.5)
    manager.on_success(CONTEXT, 1)
    mock_callback.assert_not_called()
