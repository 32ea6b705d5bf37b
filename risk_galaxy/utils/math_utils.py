"""Numeric helpers"""


def clamp(value: float, lower: float = 0.0, upper: float = 100.0) -> float:
    """Bound value to [lower, upper]"""
    return max(lower, min(upper, value))
