from quantuminspired.config import OUTPUT_DECIMALS


def format_fixed(value: float, decimals: int = OUTPUT_DECIMALS) -> str:
    """Render a value in fixed-point notation with exactly `decimals` fractional digits."""
    return f"{value:.{decimals}f}"
