"""
Configuration & Global Constants
================================
This module serves as the central registry for process-wide constants.

Why is this file needed?
------------------------
1. Single source: The scaling base and formula constants are used by several
   kernels; defining them here keeps the formulas free of magic numbers.
2. Display: The identification strings and the output precision printed by
   the entry point live next to the numbers they describe.

Exports:
    QOPS_BASE (float): Large scaling base shared by the formulas.
    TENSOR_BIAS (float): Constant added to every cosine factor of the tensor product.
    FEEDBACK_GAIN (float): Fixed scale applied to the feedback series.
    LOAD_SCALE_BASE (float): Constant multiplied by (1 + load_factor).
    SYSTEM_NAME (str), SYSTEM_OWNER (str): Identification strings.
    OUTPUT_DECIMALS (int): Fractional digits of the printed result.
    LOG_LEVEL (int): Level used by the entry point when configuring logging.
"""
import logging

# Global Constants
QOPS_BASE: float = 1.0e6
TENSOR_BIAS: float = 1.5
FEEDBACK_GAIN: float = 0.5
LOAD_SCALE_BASE: float = QOPS_BASE

SYSTEM_NAME: str = "Quantum-Inspired Load Orchestrator"
SYSTEM_OWNER: str = "Systems Research Group"

OUTPUT_DECIMALS: int = 10

# Logs go to stderr; keep them quiet so a run only shows the result lines
LOG_LEVEL: int = logging.WARNING
