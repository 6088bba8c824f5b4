import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, ties toward positive infinity.

    Python's round() uses banker's rounding (round(2.5) == 2); dashboard
    figures round halves up instead (2.5 -> 3, -2.5 -> -2).
    """
    return math.floor(value + 0.5)
