"""Rounding shared by every model that reports integer or fixed-step values."""
import math


def round_half_up(value: float, ndigits: int = 0):
    """Round to ndigits decimals with ties going towards +infinity.

    Builtin round() rounds ties to even (round(80.5) == 80); reported
    properties must round 80.5 up to 81.

    Returns
    -------
    int or float
        int when ndigits is 0, float otherwise
    """
    if ndigits == 0:
        return math.floor(value + 0.5)
    scale = 10 ** ndigits
    return math.floor(value * scale + 0.5) / scale
