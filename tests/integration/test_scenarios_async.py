r"""End-to-end retry scenarios run with the asynchronous executor."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, call

import pytest

from aretry import execute_async, with_delay
from aretry.delay import constant, linear, no_delay
from aretry.predicate import and_, attempts, on, on_exception, time_limit, until_result

if TYPE_CHECKING:
    from tests.helpers import FakeClock


@pytest.mark.asyncio
async def test_always_failing_coroutine_is_given_up(
    fake_clock: FakeClock, mock_asleep: Mock
) -> None:
    """Test that an always failing coroutine is tried 10 times then re-raised."""
    errors = [OSError(f"failure {i}") for i in range(10)]
    operation = AsyncMock(side_effect=errors)
    with pytest.raises(OSError) as exc_info:
        await execute_async(
            with_delay(and_(on_exception(), attempts(10)), constant(0.5)),
            operation,
            clock=fake_clock,
        )
    assert exc_info.value is errors[-1]
    assert operation.await_args_list == [call(i) for i in range(10)]
    assert mock_asleep.call_args_list == [call(0.5)] * 9
    assert fake_clock() - 1000.0 == 4.5


@pytest.mark.asyncio
async def test_coroutine_succeeding_on_fourth_attempt(mock_asleep: Mock) -> None:
    """Test a coroutine that succeeds after three failures."""
    operation = AsyncMock(side_effect=[OSError(), OSError(), OSError(), "done"])
    assert await execute_async(with_delay(on_exception(), no_delay()), operation) == "done"
    assert operation.await_count == 4
    assert mock_asleep.call_args_list == [call(0.0)] * 3


@pytest.mark.asyncio
async def test_predicate_never_retrying_coroutine(mock_asleep: Mock) -> None:
    """Test that the first failure is re-raised when no retry is allowed."""
    error = RuntimeError("fatal")
    operation = AsyncMock(side_effect=error)
    with pytest.raises(RuntimeError) as exc_info:
        await execute_async(on(lambda outcome, attempt, elapsed: False), operation)
    assert exc_info.value is error
    operation.assert_awaited_once_with(0)
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_polling_until_result(fake_clock: FakeClock, mock_asleep: Mock) -> None:
    """Test polling until a result is available."""
    operation = AsyncMock(side_effect=[None, ConnectionError(), None, {"status": "ready"}])
    result = await execute_async(
        lambda: with_delay(
            and_(until_result(), time_limit(60.0)), linear(1.0, 1.0)
        ),
        operation,
        clock=fake_clock,
    )
    assert result == {"status": "ready"}
    assert mock_asleep.call_args_list == [call(1.0), call(2.0), call(3.0)]


@pytest.mark.asyncio
async def test_concurrent_executions_share_a_policy_factory(mock_asleep: Mock) -> None:
    """Test that concurrent executions each build their own policy."""
    def policy():
        return with_delay(and_(on_exception(), attempts(3)), constant(0.1))

    first = AsyncMock(side_effect=[OSError(), "a"])
    second = AsyncMock(side_effect=[OSError(), OSError(), "b"])
    results = await asyncio.gather(execute_async(policy, first), execute_async(policy, second))
    assert results == ["a", "b"]
    assert mock_asleep.call_count == 3
