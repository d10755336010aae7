r"""Configuration dataclass for retry lifecycle callbacks."""

from __future__ import annotations

__all__ = ["CallbackConfig"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.callbacks import FailureInfo, RetryInfo, SuccessInfo


@dataclass
class CallbackConfig:
    """Configuration for callbacks.

    Attributes:
        on_retry: Optional callback called before waiting for each retry.
        on_success: Optional callback called when the execution succeeds.
        on_failure: Optional callback called when the execution gives up.
    """

    on_retry: Callable[[RetryInfo], None] | None = None
    on_success: Callable[[SuccessInfo], None] | None = None
    on_failure: Callable[[FailureInfo], None] | None = None
