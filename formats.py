import math

import numpy as np

from arithmetic import Q

# Mantissa digits after the point in scientific notation
SCIENTIFIC_PRECISION = 10

def simplified_str(q: Q) -> str:
    """Lowest terms "n/d"; the denominator is always shown, e.g. "2/1", "0/1"."""
    return f"{q.numerator}/{q.denominator}"

def mixed_str(q: Q) -> str:
    """
    Mixed number:
      proper fraction   -> simplified form ("-1/2")
      integral value    -> signed integer part ("-3")
      otherwise         -> "[-]I + r/d" ("-2 + 1/2")
    """
    n = abs(q.numerator)
    d = q.denominator
    if n < d:
        return simplified_str(q)
    sign = '-' if q < 0 else ''
    int_part = n // d
    rem = n % d
    if rem == 0:
        return f"{sign}{int_part}"
    return f"{sign}{int_part} + {rem}/{d}"

def to_float(q: Q) -> float:
    """Nearest binary64 value; values outside the finite range become +-inf."""
    try:
        return float(q)
    except OverflowError:
        return math.copysign(math.inf, q.numerator)

def scientific_str(q: Q, precision: int = SCIENTIFIC_PRECISION) -> str:
    """
    Scientific notation of the nearest binary64 value, e.g. 1/2 -> "5.0000000000e-1".

    This is the only approximate representation: the value is rounded to a
    float first, so digits beyond ~17 significant places are float noise, not
    digits of q.
    """
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")
    x = to_float(q)
    if not math.isfinite(x):
        return "inf" if x > 0 else "-inf"
    # trim='-' drops the bare '.' left behind when precision is 0
    return np.format_float_scientific(
        np.float64(x), precision=precision, unique=False,
        trim='k' if precision > 0 else '-', exp_digits=1
    )
