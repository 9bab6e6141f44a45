"""
Application Entry Point
=======================
Prints the identification strings and the system output for the fixed
default parameters.

Output (stdout, three lines):
    System Name: <name>
    System Owner: <owner>
    Quantum-Inspired System Output: <value, 10 fractional digits>

Logging goes to stderr so stdout only ever carries these lines.
"""
import logging

from quantuminspired.config import SYSTEM_NAME, SYSTEM_OWNER, LOG_LEVEL
from quantuminspired.dev import timer
from quantuminspired.logging_config import setup_logging
from quantuminspired.model.parameters import SystemParameters
from quantuminspired.orchestrator import evaluate
from quantuminspired.utils import format_fixed

logger = logging.getLogger(__name__)


@timer
def main() -> None:
    # 1. Setup Logging (stderr)
    # Use logging.DEBUG to see the component values during development
    setup_logging(level=LOG_LEVEL)

    # 2. Identification
    print(f"System Name: {SYSTEM_NAME}")
    print(f"System Owner: {SYSTEM_OWNER}")

    # 3. Evaluate with the fixed inputs
    params = SystemParameters()
    try:
        output = evaluate(params)
    except Exception as e:
        logger.exception(f"Evaluation failed for {params}: {e}")
        raise

    print(f"Quantum-Inspired System Output: {format_fixed(output.value)}")


if __name__ == "__main__":
    main()
