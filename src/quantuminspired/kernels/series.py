# series.py
from __future__ import annotations

import numpy as np
import numba as nb

from quantuminspired.config import FEEDBACK_GAIN

# ---- reduction bodies (compiled below as sequential + parallel kernels) ----

def _damped_sine_terms(x: float, t: float, depth: int) -> float:
    """Σ_{i=1}^{depth} sin(x + i·t) / i²."""
    total = 0.0
    for i in nb.prange(1, depth + 1):
        k = float(i)
        total += np.sin(x + k * t) / (k * k)
    return total


def _feedback_terms(x: float, layers: int) -> float:
    """Σ_{i=1}^{layers} 1 / (x + i)^1.5."""
    total = 0.0
    for i in nb.prange(1, layers + 1):
        total += 1.0 / (x + float(i)) ** 1.5
    return total


# error_model="numpy": 1/0 gives inf instead of raising ZeroDivisionError.
# No fastmath, it would allow the compiler to assume finite values.
_damped_sine_seq = nb.njit(cache=True, error_model="numpy")(_damped_sine_terms)
_damped_sine_par = nb.njit(parallel=True, error_model="numpy")(_damped_sine_terms)

_feedback_seq = nb.njit(cache=True, error_model="numpy")(_feedback_terms)
_feedback_par = nb.njit(parallel=True, error_model="numpy")(_feedback_terms)


@nb.njit(cache=True, error_model="numpy")
def log_magnitude(x: float, t: float) -> float:
    """|ln(|x·t|)|; +inf when x·t == 0, nan when either input is nan."""
    return abs(np.log(abs(x * t)))


def recursive_sum(x: float, t: float, depth: int, parallel: bool = False) -> float:
    """
    Damped recursive trigonometric sum.

    Computes Σ_{i=1}^{depth} sin(x + i·t) / i² and adds |ln(|x·t|)|.

    Args:
        x:        Base phase.
        t:        Phase step per term.
        depth:    Number of terms. depth <= 0 gives an empty sum, so the
                  result is the log term alone.
        parallel: If True, use the threaded reduction; otherwise fold
                  sequentially in index order.

    Returns:
        The sum. x·t == 0 yields +inf; nan inputs yield nan.
    """
    x = float(x)
    t = float(t)
    kernel = _damped_sine_par if parallel else _damped_sine_seq
    return float(kernel(x, t, int(depth))) + float(log_magnitude(x, t))


def feedback_series(x: float, layers: int, parallel: bool = False) -> float:
    """
    Feedback series FEEDBACK_GAIN · Σ_{i=1}^{layers} 1 / (x + i)^1.5.

    Args:
        x:        Offset of the series base.
        layers:   Number of terms. layers <= 0 returns 0.0.
        parallel: If True, use the threaded reduction.

    Returns:
        The scaled sum. x + i == 0 for some i yields +inf, a negative base nan.
    """
    kernel = _feedback_par if parallel else _feedback_seq
    return FEEDBACK_GAIN * float(kernel(float(x), int(layers)))
