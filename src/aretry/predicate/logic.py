r"""Boolean combinators for retry predicates.

Truth tables, for operand decisions A and B:

```
A | B | AND | OR | XOR | NAND | NOR | XNOR
------------------------------------------
0 | 0 |  0  | 0  |  0  |  1   |  1  |  1
0 | 1 |  0  | 1  |  1  |  1   |  0  |  0
1 | 0 |  0  | 1  |  1  |  1   |  0  |  0
1 | 1 |  1  | 1  |  0  |  0   |  0  |  1
```

``and_`` and ``or_`` short-circuit like Python's ``and``/``or``: the
second operand is not evaluated when the first one decides. All other
combinators evaluate both operands, first then second. Keep this in mind
when combining stateful predicates that count their invocations.
"""

from __future__ import annotations

__all__ = [
    "AndPredicate",
    "NandPredicate",
    "NorPredicate",
    "NotPredicate",
    "OrPredicate",
    "XnorPredicate",
    "XorPredicate",
    "and_",
    "nand",
    "nor",
    "not_",
    "or_",
    "xnor",
    "xor",
]

from typing import TYPE_CHECKING

from aretry.predicate.base import BaseRetryPredicate

if TYPE_CHECKING:
    from aretry.outcome import Outcome


class NotPredicate(BaseRetryPredicate):
    """Predicate negating another predicate."""

    def __init__(self, predicate: BaseRetryPredicate) -> None:
        self.predicate = predicate

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.predicate!r})"

    def should_retry(self, outcome: Outcome, attempt: int, elapsed: float) -> bool:
        return not self.predicate.should_retry(outcome, attempt, elapsed)


class BinaryPredicate(BaseRetryPredicate):
    """Base class for predicates combining two predicates."""

    def __init__(self, first: BaseRetryPredicate, second: BaseRetryPredicate) -> None:
        self.first = first
        self.second = second

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.first!r}, {self.second!r})"

    def _evaluate(self, outcome: Outcome, attempt: int, elapsed: float) -> tuple[bool, bool]:
        return (
            self.first.should_retry(outcome, attempt, elapsed),
            self.second.should_retry(outcome, attempt, elapsed),
        )


class AndPredicate(BinaryPredicate):
    """Predicate retrying only when both predicates do."""

    def should_retry(self, outcome: Outcome, attempt: int, elapsed: float) -> bool:
        return self.first.should_retry(outcome, attempt, elapsed) and self.second.should_retry(
            outcome, attempt, elapsed
        )


class OrPredicate(BinaryPredicate):
    """Predicate retrying when at least one predicate does."""

    def should_retry(self, outcome: Outcome, attempt: int, elapsed: float) -> bool:
        return self.first.should_retry(outcome, attempt, elapsed) or self.second.should_retry(
            outcome, attempt, elapsed
        )


class XorPredicate(BinaryPredicate):
    """Predicate retrying when exactly one predicate does."""

    def should_retry(self, outcome: Outcome, attempt: int, elapsed: float) -> bool:
        first, second = self._evaluate(outcome, attempt, elapsed)
        return first != second


class NandPredicate(BinaryPredicate):
    """Predicate retrying unless both predicates do."""

    def should_retry(self, outcome: Outcome, attempt: int, elapsed: float) -> bool:
        first, second = self._evaluate(outcome, attempt, elapsed)
        return not (first and second)


class NorPredicate(BinaryPredicate):
    """Predicate retrying only when neither predicate does."""

    def should_retry(self, outcome: Outcome, attempt: int, elapsed: float) -> bool:
        first, second = self._evaluate(outcome, attempt, elapsed)
        return not (first or second)


class XnorPredicate(BinaryPredicate):
    """Predicate retrying when both predicates agree."""

    def should_retry(self, outcome: Outcome, attempt: int, elapsed: float) -> bool:
        first, second = self._evaluate(outcome, attempt, elapsed)
        return first == second


def not_(predicate: BaseRetryPredicate) -> NotPredicate:
    """Return the negation of ``predicate``."""
    return NotPredicate(predicate)


def and_(first: BaseRetryPredicate, second: BaseRetryPredicate) -> AndPredicate:
    """Return the conjunction of two predicates.

    Example:
        ```pycon
        >>> from aretry.outcome import Failure
        >>> from aretry.predicate import and_, attempts, on_exception
        >>> predicate = and_(on_exception(), attempts(2))
        >>> predicate.should_retry(Failure(OSError()), 0, 0.0)
        True
        >>> predicate.should_retry(Failure(OSError()), 1, 0.0)
        False

        ```
    """
    return AndPredicate(first, second)


def or_(first: BaseRetryPredicate, second: BaseRetryPredicate) -> OrPredicate:
    """Return the disjunction of two predicates."""
    return OrPredicate(first, second)


def xor(first: BaseRetryPredicate, second: BaseRetryPredicate) -> XorPredicate:
    """Return the exclusive disjunction of two predicates."""
    return XorPredicate(first, second)


def nand(first: BaseRetryPredicate, second: BaseRetryPredicate) -> NandPredicate:
    """Return the negated conjunction of two predicates."""
    return NandPredicate(first, second)


def nor(first: BaseRetryPredicate, second: BaseRetryPredicate) -> NorPredicate:
    """Return the negated disjunction of two predicates."""
    return NorPredicate(first, second)


def xnor(first: BaseRetryPredicate, second: BaseRetryPredicate) -> XnorPredicate:
    """Return the equivalence of two predicates."""
    return XnorPredicate(first, second)
