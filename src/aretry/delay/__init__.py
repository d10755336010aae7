r"""Delay strategies and combinators for retry delays.

This package provides the base delay strategies (constant, sequential,
linear, Fibonacci, exponential and custom) and the combinators that build
new strategies from existing ones (arithmetic, bounding and jitter).
"""

from __future__ import annotations

__all__ = [
    "BaseDelayStrategy",
    "ClampedDelay",
    "ConstantDelay",
    "CustomDelay",
    "DifferenceDelay",
    "ExponentialDelay",
    "FibonacciDelay",
    "JitteredDelay",
    "LinearDelay",
    "MaxDelay",
    "MinDelay",
    "NegatedDelay",
    "QuotientDelay",
    "ScaledDelay",
    "SequentialDelay",
    "SumDelay",
    "add",
    "clamp_max",
    "clamp_min",
    "clamp_range",
    "constant",
    "custom",
    "divide",
    "exponential",
    "fibonacci",
    "identity",
    "linear",
    "max_of",
    "min_of",
    "negate",
    "no_delay",
    "scale",
    "sequential",
    "subtract",
    "with_jitter",
]

from aretry.delay.arithmetic import (
    DifferenceDelay,
    NegatedDelay,
    QuotientDelay,
    ScaledDelay,
    SumDelay,
    add,
    divide,
    identity,
    negate,
    scale,
    subtract,
)
from aretry.delay.base import BaseDelayStrategy
from aretry.delay.bounds import (
    ClampedDelay,
    MaxDelay,
    MinDelay,
    clamp_max,
    clamp_min,
    clamp_range,
    max_of,
    min_of,
)
from aretry.delay.constant import ConstantDelay, constant, no_delay
from aretry.delay.custom import CustomDelay, custom
from aretry.delay.exponential import ExponentialDelay, exponential
from aretry.delay.fibonacci import FibonacciDelay, fibonacci
from aretry.delay.jitter import JitteredDelay, with_jitter
from aretry.delay.linear import LinearDelay, linear
from aretry.delay.sequential import SequentialDelay, sequential
