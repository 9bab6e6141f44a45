"""Shared fixtures and reference formulas for the kernel tests."""
import math

import pytest

from quantuminspired.config import FEEDBACK_GAIN, TENSOR_BIAS
from quantuminspired.model.parameters import SystemParameters


def reference_recursive_sum(x: float, t: float, depth: int) -> float:
    total = 0.0
    for i in range(1, depth + 1):
        total += math.sin(x + i * t) / (i * i)
    return total + abs(math.log(abs(x * t)))


def reference_tensor_determinant(x: float, t: float, dimensions: int) -> float:
    total = 1.0
    for i in range(1, dimensions + 1):
        row = 1.0
        for j in range(1, dimensions + 1):
            row *= math.cos(x * i + t * j) + TENSOR_BIAS
        total *= row
    return total


def reference_feedback_series(x: float, layers: int) -> float:
    return FEEDBACK_GAIN * sum(1.0 / (x + i) ** 1.5 for i in range(1, layers + 1))


@pytest.fixture
def default_params() -> SystemParameters:
    return SystemParameters()
