"""Float amount helpers"""

import math
from typing import Iterable


def sum_amounts(values: Iterable[float]) -> float:
    """
    Sum a sequence of amounts.

    Uses math.fsum so the result does not depend on summation order.

    Args:
        values: Amounts to add up

    Returns:
        Sum of all values
    """
    return math.fsum(values)


def amounts_match(actual: float, expected: float, tolerance: float) -> bool:
    """
    Check whether two amounts are equal within an absolute tolerance.

    Args:
        actual: Computed amount
        expected: Target amount
        tolerance: Largest accepted absolute difference

    Returns:
        True if |actual - expected| <= tolerance
    """
    return abs(actual - expected) <= tolerance


def is_zero(value: float, tolerance: float) -> bool:
    """Check whether an amount is zero within an absolute tolerance"""
    return abs(value) <= tolerance
