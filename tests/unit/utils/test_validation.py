r"""Unit tests for parameter validation utilities."""

from __future__ import annotations

import pytest

from aretry.utils import validate_non_negative


@pytest.mark.parametrize("value", [0, 1, 0.5, 100])
def test_validate_non_negative_valid(value: float) -> None:
    """Test that non-negative values are accepted."""
    validate_non_negative("limit", value)


@pytest.mark.parametrize("value", [-1, -0.1])
def test_validate_non_negative_invalid(value: float) -> None:
    """Test that negative values raise ValueError."""
    with pytest.raises(ValueError, match=r"limit must be >= 0"):
        validate_non_negative("limit", value)
