import math


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round halves toward +inf (472.5 → 473, 180.5 → 181, -2.5 → -2).

    Python's built-in round() uses banker's rounding and would give 472 and 180.

    Returns an int when ndigits is 0.
    """
    factor = 10 ** ndigits
    rounded = math.floor(value * factor + 0.5)
    if ndigits == 0:
        return int(rounded)
    return rounded / factor
