r"""Unit tests for the execution clock context."""

from __future__ import annotations

import time

import pytest

from aretry.utils import get_clock, use_clock


def test_get_clock_default() -> None:
    """Test that the default clock is time.monotonic."""
    assert get_clock() is time.monotonic


def test_use_clock() -> None:
    """Test that use_clock installs the clock inside the block only."""

    def clock() -> float:
        return 5.0

    with use_clock(clock):
        assert get_clock() is clock
    assert get_clock() is time.monotonic


def test_use_clock_nested() -> None:
    """Test that nested blocks restore the outer clock."""

    def outer() -> float:
        return 1.0

    def inner() -> float:
        return 2.0

    with use_clock(outer):
        with use_clock(inner):
            assert get_clock() is inner
        assert get_clock() is outer


def test_use_clock_restored_on_error() -> None:
    """Test that the previous clock is restored when the block raises."""
    with pytest.raises(ValueError, match=r"boom"), use_clock(lambda: 0.0):
        msg = "boom"
        raise ValueError(msg)
    assert get_clock() is time.monotonic
