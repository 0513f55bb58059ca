"""Module for miscellaneous multi-use functions"""

__all__ = [
    'divide', 'to_degree', 'to_radian', 'wrap'
]

import math


def to_radian(degrees: float) -> float:
    """Convert an angle in degrees to radians"""
    return degrees * math.pi / 180


def to_degree(radians: float) -> float:
    """Convert an angle in radians to degrees"""
    return radians * 180 / math.pi


def wrap(n: float, min_value: float, max_value: float) -> float:
    """
    Wraps a value cyclically into the range [min_value, max_value]. Values equal to
    either bound are returned untouched.

    Args:
        n:
            The value to wrap

        min_value:
            The lower bound of the range

        max_value:
            The upper bound of the range

    Returns:
        float
    """
    if n == max_value or n == min_value:
        return n

    d = max_value - min_value
    return ((n - min_value) % d + d) % d + min_value


def divide(numerator: float, denominator: float) -> float:
    """
    Floating point division that follows IEEE 754 on a zero denominator (signed
    infinity, or nan for 0/0) instead of raising ZeroDivisionError.
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan

        return math.copysign(math.inf, numerator) * math.copysign(1., denominator)

    return numerator / denominator

