r"""Unit tests for duration conversion utilities."""

from __future__ import annotations

from datetime import timedelta

import pytest

from aretry.utils import to_seconds


@pytest.mark.parametrize(
    ("duration", "expected"),
    [(0, 0.0), (1, 1.0), (0.25, 0.25), (-2.5, -2.5), (timedelta(minutes=1), 60.0)],
)
def test_to_seconds(duration: float | timedelta, expected: float) -> None:
    """Test conversion of numbers and timedeltas to seconds."""
    result = to_seconds(duration)
    assert result == expected
    assert isinstance(result, float)


@pytest.mark.parametrize("duration", ["1", None, True, [1.0]])
def test_to_seconds_invalid(duration: object) -> None:
    """Test that unsupported values raise TypeError."""
    with pytest.raises(TypeError, match=r"duration must be a number of seconds or a timedelta"):
        to_seconds(duration)  # type: ignore[arg-type]
