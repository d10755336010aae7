r"""Unit tests for the callback configuration dataclass."""

from __future__ import annotations

from unittest.mock import Mock

from aretry.retry import CallbackConfig


def test_callback_config_defaults() -> None:
    """Test that CallbackConfig has no callback by default."""
    config = CallbackConfig()
    assert config.on_retry is None
    assert config.on_success is None
    assert config.on_failure is None


def test_callback_config_custom() -> None:
    """Test CallbackConfig with custom callbacks."""
    on_retry, on_success, on_failure = Mock(), Mock(), Mock()
    config = CallbackConfig(on_retry=on_retry, on_success=on_success, on_failure=on_failure)
    assert config.on_retry is on_retry
    assert config.on_success is on_success
    assert config.on_failure is on_failure
