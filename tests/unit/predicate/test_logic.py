r"""Unit tests for the boolean predicate combinators."""

from __future__ import annotations

import pytest

from aretry.outcome import Success
from aretry.predicate import always, and_, nand, never, nor, not_, or_, xnor, xor
from tests.helpers import StaticPredicate

OUTCOME = Success(None)

TRUTH_TABLES = {
    and_: (False, False, False, True),
    or_: (False, True, True, True),
    xor: (False, True, True, False),
    nand: (True, True, True, False),
    nor: (True, False, False, False),
    xnor: (True, False, False, True),
}
INPUTS = ((False, False), (False, True), (True, False), (True, True))


@pytest.mark.parametrize("combinator", list(TRUTH_TABLES))
def test_truth_table(combinator) -> None:
    """Test the binary combinators against their truth tables."""
    for (first, second), expected in zip(INPUTS, TRUTH_TABLES[combinator]):
        predicate = combinator(StaticPredicate(first), StaticPredicate(second))
        assert predicate.should_retry(OUTCOME, 0, 0.0) is expected


def test_not() -> None:
    """Test the negation truth table."""
    assert not not_(always()).should_retry(OUTCOME, 0, 0.0)
    assert not_(never()).should_retry(OUTCOME, 0, 0.0)


def test_double_negation() -> None:
    """Test that negating twice restores the decision."""
    assert not_(not_(always())).should_retry(OUTCOME, 0, 0.0)


def test_and_short_circuits() -> None:
    """Test that and_ skips the second operand when the first is
    false."""
    second = StaticPredicate(True)
    assert not and_(StaticPredicate(False), second).should_retry(OUTCOME, 0, 0.0)
    assert second.calls == 0


def test_or_short_circuits() -> None:
    """Test that or_ skips the second operand when the first is true."""
    second = StaticPredicate(False)
    assert or_(StaticPredicate(True), second).should_retry(OUTCOME, 0, 0.0)
    assert second.calls == 0


@pytest.mark.parametrize("combinator", [xor, nand, nor, xnor])
def test_non_short_circuit_combinators_evaluate_both(combinator) -> None:
    """Test that the other combinators evaluate both operands once."""
    first, second = StaticPredicate(True), StaticPredicate(False)
    combinator(first, second).should_retry(OUTCOME, 0, 0.0)
    assert (first.calls, second.calls) == (1, 1)


def test_nested_composition() -> None:
    """Test a deeper composition of combinators."""
    predicate = or_(and_(always(), never()), not_(xor(always(), always())))
    assert predicate.should_retry(OUTCOME, 0, 0.0)
