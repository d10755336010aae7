r"""Retry predicates and boolean combinators.

This package provides the predicates deciding whether another attempt
should be made (attempt limits, outcome checks, time limits and failure
counters) and the boolean combinators composing them.
"""

from __future__ import annotations

__all__ = [
    "AndPredicate",
    "AttemptsPredicate",
    "BaseRetryPredicate",
    "ConstantPredicate",
    "ElapsedLimitPredicate",
    "ExceptionLimitPredicate",
    "ExceptionTypePredicate",
    "FunctionPredicate",
    "NandPredicate",
    "NorPredicate",
    "NotPredicate",
    "NullResultPredicate",
    "OrPredicate",
    "ResultTypePredicate",
    "TimeLimitPredicate",
    "XnorPredicate",
    "XorPredicate",
    "always",
    "and_",
    "attempts",
    "elapsed_limit",
    "exception_limit",
    "nand",
    "never",
    "nor",
    "not_",
    "on",
    "on_exception",
    "on_exception_type",
    "on_failure",
    "on_null",
    "on_result_type",
    "or_",
    "time_limit",
    "until",
    "until_result",
    "until_result_type",
    "xnor",
    "xor",
]

from aretry.predicate.base import BaseRetryPredicate
from aretry.predicate.common import (
    AttemptsPredicate,
    ConstantPredicate,
    ExceptionTypePredicate,
    FunctionPredicate,
    NullResultPredicate,
    ResultTypePredicate,
    always,
    attempts,
    never,
    on,
    on_exception,
    on_exception_type,
    on_failure,
    on_null,
    on_result_type,
    until,
    until_result,
    until_result_type,
)
from aretry.predicate.counter import ExceptionLimitPredicate, exception_limit
from aretry.predicate.logic import (
    AndPredicate,
    NandPredicate,
    NorPredicate,
    NotPredicate,
    OrPredicate,
    XnorPredicate,
    XorPredicate,
    and_,
    nand,
    nor,
    not_,
    or_,
    xnor,
    xor,
)
from aretry.predicate.timing import (
    ElapsedLimitPredicate,
    TimeLimitPredicate,
    elapsed_limit,
    time_limit,
)
