r"""Utility functions shared by delay strategies, predicates and
executors."""

from __future__ import annotations

__all__ = ["get_clock", "to_seconds", "use_clock", "validate_non_negative"]

from aretry.utils.clock import get_clock, use_clock
from aretry.utils.duration import to_seconds
from aretry.utils.validation import validate_non_negative
