r"""Parameter validation utilities."""

from __future__ import annotations

__all__ = ["validate_non_negative"]


def validate_non_negative(name: str, value: float) -> None:
    """Validate that a numeric parameter is non-negative.

    Args:
        name: The parameter name, used in the error message.
        value: The value to check.

    Raises:
        ValueError: If ``value`` is negative.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_non_negative
        >>> validate_non_negative("limit", 3)
        >>> validate_non_negative("limit", -1)
        Traceback (most recent call last):
        ...
        ValueError: limit must be >= 0, got -1

        ```
    """
    if value < 0:
        msg = f"{name} must be >= 0, got {value}"
        raise ValueError(msg)
