"""
Run Parameters
==============
The six scalar inputs of one evaluation.

Classes:
    SystemParameters: Frozen container of the orchestrator inputs. Values are
        taken as given; nothing is validated, so NaN or infinite inputs flow
        through the kernels unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class SystemParameters:
    x: float = 42.0             # base phase
    t: float = 3.14             # phase step
    depth: int = 5              # terms of the recursive sum
    dimensions: int = 4         # grid size of the tensor product
    layers: int = 3             # terms of the feedback series
    load_factor: float = 0.8    # hypothetical system load

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
