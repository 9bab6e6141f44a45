from __future__ import annotations

import numpy as np
import numba as nb

from quantuminspired.config import TENSOR_BIAS


def _tensor_rows(x: float, t: float, dimensions: int, bias: float) -> float:
    """
    Π_{i=1}^{n} Π_{j=1}^{n} (cos(x·i + t·j) + bias).

    Rows are independent and reduced with `*=`; columns are folded in order
    inside each row.
    """
    total = 1.0
    for i in nb.prange(1, dimensions + 1):
        row = 1.0
        for j in range(1, dimensions + 1):
            row *= np.cos(x * float(i) + t * float(j)) + bias
        total *= row
    return total


_tensor_seq = nb.njit(cache=True, error_model="numpy")(_tensor_rows)
_tensor_par = nb.njit(parallel=True, error_model="numpy")(_tensor_rows)


def tensor_determinant(x: float, t: float, dimensions: int, parallel: bool = False) -> float:
    """
    Nested product of biased cosines over a dimensions × dimensions index grid.

    This is a nested reduction, not a linear-algebra determinant; no matrix
    is built.

    Args:
        x:          Row phase step.
        t:          Column phase step.
        dimensions: Grid size n. n <= 0 returns 1.0 (empty product).
        parallel:   If True, reduce rows with the threaded kernel.

    Returns:
        The product of all row products. For n == 1 this is cos(x + t) + TENSOR_BIAS.
    """
    kernel = _tensor_par if parallel else _tensor_seq
    return float(kernel(float(x), float(t), int(dimensions), TENSOR_BIAS))
