r"""Retry package implementing the execution loop.

Public API:
    - CallbackConfig: Configuration for callbacks
    - CallbackManager: Manager for callback invocations
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
    - execute / execute_async: One-shot helpers around the executors
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "CallbackConfig",
    "CallbackManager",
    "RetryExecutor",
    "execute",
    "execute_async",
]

from aretry.retry.config import CallbackConfig
from aretry.retry.executor import RetryExecutor, execute
from aretry.retry.executor_async import AsyncRetryExecutor, execute_async
from aretry.retry.manager import CallbackManager
