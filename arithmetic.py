from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Tuple

import sys

Q = Fraction  # rational type alias

# Digit strings are parsed and printed at full length; Python >= 3.11 caps
# int <-> str conversion at 4300 digits by default.
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)

class DivisionByZero(ZeroDivisionError):
    pass

def gcd(a: int, b: int) -> int:
    """
    Euclid over arbitrary-precision ints:
      (a, b) := (|a|, |b|)
      while b != 0: (a, b) := (b, a mod b)
    Returns a >= 0.
    """
    a = abs(a)
    b = abs(b)
    while b != 0:
        a, b = b, a % b
    return a

def reduce_fraction(num: int, den: int) -> Tuple[int, int]:
    """Lowest terms with the sign on the numerator; zero becomes (0, 1)."""
    if den == 0:
        raise DivisionByZero("Division by zero: denominator cannot be zero")
    if num == 0:
        return 0, 1
    negative = (num < 0) != (den < 0)
    num = abs(num)
    den = abs(den)
    g = gcd(num, den)
    num //= g
    den //= g
    return (-num if negative else num), den

def rational(num: int, den: int) -> Q:
    n, d = reduce_fraction(num, den)
    return Q(n, d)

@dataclass(frozen=True)
class Expansion:
    decimal: str    # "-I.N(R)", "I.D" or "I"
    period: int     # len(R); 0 when the expansion terminates

    @property
    def is_repeating(self) -> bool:
        return self.period > 0

    def _unsigned_parts(self) -> Tuple[str, str, str]:
        s = self.decimal.lstrip('-')
        if '.' not in s:
            return s, '', ''
        int_part, frac = s.split('.', 1)
        if not self.is_repeating:
            return int_part, frac, ''
        open_idx = frac.index('(')
        return int_part, frac[:open_idx], frac[open_idx + 1:-1]

    @property
    def int_part(self) -> str:
        return self._unsigned_parts()[0]

    @property
    def non_repeating(self) -> str:
        return self._unsigned_parts()[1]

    @property
    def repeating(self) -> str:
        return self._unsigned_parts()[2]

    def ellipsis(self) -> Optional[str]:
        """
        Ellipsis notation "I.R..." for the same value.
        Only exists when the block repeats straight from the decimal point,
        e.g. "0.(3)" -> "0.3...", while "0.1(6)" has no ellipsis form.
        """
        if not self.is_repeating or self.non_repeating:
            return None
        sign = '-' if self.decimal.startswith('-') else ''
        return f"{sign}{self.int_part}.{self.repeating}..."

def expand(q: Q) -> Expansion:
    """
    Exact decimal expansion of a Fraction without float rounding.
    - If it terminates, returns all digits and period 0.
    - If it repeats, the repeating block is put in parentheses, e.g. "0.(3)",
      and period is the length of that block.
    There are at most d distinct nonzero remainders, so the loop stops within
    d digits and period < d.
    """
    if q == 0:
        return Expansion("0", 0)

    sign = '-' if q < 0 else ''
    n = abs(q.numerator)
    d = q.denominator

    # Integer part
    int_part = n // d
    rem = n % d
    if rem == 0:
        return Expansion(f"{sign}{int_part}", 0)

    # Long division for fractional part with cycle detection
    digits = []
    seen = {}  # remainder -> index in digits

    while rem != 0 and rem not in seen:
        seen[rem] = len(digits)
        rem *= 10
        digits.append(str(rem // d))
        rem = rem % d

    if rem == 0:
        # Terminates
        frac = ''.join(digits)
        return Expansion(f"{sign}{int_part}.{frac}", 0)

    # Repeats
    start = seen[rem]
    nonrep = ''.join(digits[:start])
    rep = ''.join(digits[start:])
    return Expansion(f"{sign}{int_part}.{nonrep}({rep})", len(rep))

def qstr(q: Q) -> str:
    return expand(q).decimal
