r"""Unit tests for RetryPolicy and its construction helpers."""

from __future__ import annotations

import pytest
from coola.equality import objects_are_equal

from aretry.delay import ConstantDelay, constant, linear, no_delay
from aretry.outcome import Failure, Success
from aretry.policy import RetryPolicy, as_policy, with_delay, with_predicate
from aretry.predicate import ExceptionTypePredicate, and_, attempts, on_exception, on_null

OUTCOMES = (Success(1), Success(None), Failure(OSError()))


def test_retry_policy_defaults() -> None:
    """Test that the default policy retries failures without delay."""
    policy = RetryPolicy()
    assert isinstance(policy.predicate, ExceptionTypePredicate)
    assert isinstance(policy.delay, ConstantDelay)
    assert policy.should_retry(Failure(OSError()), 0, 0.0)
    assert not policy.should_retry(Success(None), 0, 0.0)
    assert policy.get(0) == 0.0
    assert policy.get(50) == 0.0


def test_retry_policy_delegates() -> None:
    """Test that the policy delegates to its components."""
    policy = RetryPolicy(predicate=and_(on_exception(), attempts(2)), delay=linear(1.0, 1.0))
    assert policy.should_retry(Failure(OSError()), 0, 0.0)
    assert not policy.should_retry(Failure(OSError()), 1, 0.0)
    assert [policy.get(i) for i in range(3)] == [1.0, 2.0, 3.0]


def test_retry_policy_is_frozen() -> None:
    """Test that a policy cannot be modified."""
    policy = RetryPolicy()
    with pytest.raises(AttributeError):
        policy.delay = constant(1.0)  # type: ignore[misc]


def test_retry_policy_invalid_predicate() -> None:
    """Test that a wrong predicate type raises TypeError."""
    with pytest.raises(TypeError, match=r"predicate must be a BaseRetryPredicate"):
        RetryPolicy(predicate=constant(1.0))  # type: ignore[arg-type]


def test_retry_policy_invalid_delay() -> None:
    """Test that a wrong delay type raises TypeError."""
    with pytest.raises(TypeError, match=r"delay must be a BaseDelayStrategy"):
        RetryPolicy(delay=on_null())  # type: ignore[arg-type]


def test_with_delay_and_with_predicate_are_equivalent() -> None:
    """Test that pairing in either order builds the same policy."""
    predicate, delay = and_(on_exception(), attempts(3)), linear(0.5, 0.5)
    first = with_delay(predicate, delay)
    second = with_predicate(delay, predicate)
    assert objects_are_equal(first, second)
    for outcome in OUTCOMES:
        for attempt in range(4):
            assert first.should_retry(outcome, attempt, 0.0) == second.should_retry(
                outcome, attempt, 0.0
            )
            assert first.get(attempt) == second.get(attempt)


def test_as_policy_from_predicate() -> None:
    """Test that a bare predicate is paired with no delay."""
    predicate = on_null()
    policy = as_policy(predicate)
    assert policy.predicate is predicate
    assert policy.get(3) == 0.0


def test_as_policy_from_delay() -> None:
    """Test that a bare delay strategy is paired with on_exception."""
    delay = constant(2.0)
    policy = as_policy(delay)
    assert policy.delay is delay
    assert policy.should_retry(Failure(OSError()), 0, 0.0)
    assert not policy.should_retry(Success(None), 0, 0.0)


def test_as_policy_from_policy() -> None:
    """Test that a policy is returned unchanged."""
    policy = RetryPolicy(delay=no_delay())
    assert as_policy(policy) is policy


def test_as_policy_invalid() -> None:
    """Test that unsupported values raise TypeError."""
    with pytest.raises(TypeError, match=r"expected a RetryPolicy"):
        as_policy(42)  # type: ignore[arg-type]
