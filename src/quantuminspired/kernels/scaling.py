from quantuminspired.config import LOAD_SCALE_BASE


def load_scale(load_factor: float) -> float:
    """Linear load scaling: LOAD_SCALE_BASE · (1 + load_factor)."""
    return LOAD_SCALE_BASE * (1.0 + float(load_factor))
