"""
Orchestrator
============
Combines the four kernels into the single system output

    output = recursive_sum + tensor_determinant + feedback_series * load_scale

No input is validated; NaN and infinities propagate to the result unchanged.

Classes:
    SystemOutput: The four component values of one evaluation.

Functions:
    evaluate: Run all kernels for a SystemParameters instance.
    orchestrate: Scalar-argument convenience returning only the combined value.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

from quantuminspired.kernels import recursive_sum, tensor_determinant, feedback_series, load_scale
from quantuminspired.model.parameters import SystemParameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SystemOutput:
    recursive_sum: float
    tensor_determinant: float
    feedback_series: float
    load_scale: float

    @property
    def value(self) -> float:
        """Combined output a + b + c*d."""
        return self.recursive_sum + self.tensor_determinant + self.feedback_series * self.load_scale


def evaluate(params: SystemParameters, parallel: bool = False) -> SystemOutput:
    """
    Evaluate every kernel for the given parameters.

    Args:
        params: Inputs of the run.
        parallel: If True, the reductions use the threaded kernels. The result
            then matches the sequential one up to floating-point rounding.

    Returns:
        The component values; use `.value` for the combined output.
    """
    output = SystemOutput(
        recursive_sum=recursive_sum(params.x, params.t, params.depth, parallel=parallel),
        tensor_determinant=tensor_determinant(params.x, params.t, params.dimensions, parallel=parallel),
        feedback_series=feedback_series(params.x, params.layers, parallel=parallel),
        load_scale=load_scale(params.load_factor),
    )
    logger.debug(
        f"Components for {params}: recursive_sum={output.recursive_sum!r}, "
        f"tensor_determinant={output.tensor_determinant!r}, "
        f"feedback_series={output.feedback_series!r}, load_scale={output.load_scale!r}"
    )
    return output


def orchestrate(
    x: float,
    t: float,
    depth: int,
    dimensions: int,
    layers: int,
    load_factor: float,
    parallel: bool = False,
) -> float:
    """Return recursive_sum + tensor_determinant + feedback_series * load_scale."""
    params = SystemParameters(
        x=x, t=t, depth=depth, dimensions=dimensions, layers=layers, load_factor=load_factor
    )
    return evaluate(params, parallel=parallel).value
