"""Module for miscellaneous multi-use functions"""

__all__ = ['round_half_up_int']

import math


def round_half_up_int(value: float) -> int:
    """
    Rounds a float to the nearest integer, where a value exactly between two integers
    is rounded to the higher one (so 2.5 -> 3 and -2.5 -> -2).

    Args:
        value:
            The float value to be rounded

    Returns:
        int
    """
    return math.floor(value + 0.5)
