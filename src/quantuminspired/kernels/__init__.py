"""
Numeric Kernels
===============
The four independent reductions combined by the orchestrator.

Every reduction loops over `numba.prange` and is compiled twice:
a sequential variant (index-order fold, bit-reproducible) and a parallel
variant (threaded fan-out/fan-in, equal up to floating-point reassociation).

Note: This package should be pure NumPy/Numba and should NOT print or log.
"""
from quantuminspired.kernels.series import recursive_sum, feedback_series
from quantuminspired.kernels.tensor import tensor_determinant
from quantuminspired.kernels.scaling import load_scale

__all__ = [
    "recursive_sum",
    "feedback_series",
    "tensor_determinant",
    "load_scale",
]
