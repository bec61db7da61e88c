from enum import Enum
from typing import Tuple

from arithmetic import Q, DivisionByZero, rational

class ParseError(ValueError):
    pass

class InvalidFormat(ParseError):
    pass

class InputKind(Enum):
    FRACTION = "fraction"
    DECIMAL = "decimal"
    UNRECOGNIZED = "unrecognized"

# Decimal notations
PLAIN = "plain"              # 2.142857
PARENTHESIS = "parenthesis"  # 2.1(6), 0.(3)
ELLIPSIS = "ellipsis"        # 0.333...

def parse_digits(s: str, i: int) -> Tuple[str, int]:
    n = len(s)
    start = i
    if i >= n or not s[i].isdigit():
        raise InvalidFormat(f"Expected digit at position {i}")
    while i < n and s[i].isdigit():
        i += 1
    return s[start:i], i

def parse_signed_digits(s: str, i: int) -> Tuple[bool, str, int]:
    negative = False
    # optional leading '-'
    if i < len(s) and s[i] == '-':
        i += 1
        negative = True
        if i >= len(s) or not s[i].isdigit():
            raise InvalidFormat(f"'-' must be followed by digits at position {i}")
    digits, i = parse_digits(s, i)
    return negative, digits, i

def expect_char(s: str, i: int, ch: str) -> int:
    if i >= len(s) or s[i] != ch:
        raise InvalidFormat(f"Expected '{ch}' at position {i}")
    return i + 1

def expect_end(s: str, i: int) -> None:
    if i != len(s):
        raise InvalidFormat(f"Unexpected trailing content at position {i}: {s[i:]}")

def scan_fraction(s: str) -> Tuple[bool, str, bool, str]:
    """
    Grammar: -?digits '/' -?[1-9]digits*
    Returns (numerator_negative, numerator_digits, denominator_negative, denominator_digits).
    A zero-valued denominator raises DivisionByZero before the leading-digit
    rule is applied, so "1/0" and "1/00" are reported as division by zero.
    """
    if not s.isascii():  # isdigit() also accepts non-ASCII digits
        raise InvalidFormat("Illegal non-ASCII character(s) in fraction")
    num_neg, num_digits, i = parse_signed_digits(s, 0)
    i = expect_char(s, i, '/')
    den_start = i + 1 if i < len(s) and s[i] == '-' else i
    den_neg, den_digits, i = parse_signed_digits(s, i)
    expect_end(s, i)
    if int(den_digits) == 0:
        raise DivisionByZero("Division by zero: denominator cannot be zero")
    if den_digits[0] == '0':
        raise InvalidFormat(f"Denominator must start with a nonzero digit at position {den_start}")
    return num_neg, num_digits, den_neg, den_digits

def parse_fraction(s: str) -> Q:
    """Parse "a/b" into a reduced Q. The sign is the XOR of both signs."""
    num_neg, num_digits, den_neg, den_digits = scan_fraction(s)
    num = int(num_digits)
    den = int(den_digits)
    if num_neg != den_neg:
        num = -num
    return rational(num, den)

def scan_decimal(s: str) -> Tuple[str, str, str, str]:
    """
    Grammar: digits '.' ( digits '...' | digits '(' digits ')' | '(' digits ')' | digits )
    Returns (int_part, non_repeating, repeating, notation). For the ellipsis
    notation the whole shown fractional block is the repeating part.
    """
    if not s.isascii():  # isdigit() also accepts non-ASCII digits
        raise InvalidFormat("Illegal non-ASCII character(s) in decimal")
    n = len(s)
    int_part, i = parse_digits(s, 0)
    i = expect_char(s, i, '.')

    if i < n and s[i] == '(':
        rep, i = parse_digits(s, i + 1)
        i = expect_char(s, i, ')')
        expect_end(s, i)
        return int_part, "", rep, PARENTHESIS

    frac, i = parse_digits(s, i)
    if i == n:
        return int_part, frac, "", PLAIN
    if s[i] == '(':
        rep, i = parse_digits(s, i + 1)
        i = expect_char(s, i, ')')
        expect_end(s, i)
        return int_part, frac, rep, PARENTHESIS
    if s.startswith("...", i):
        expect_end(s, i + 3)
        return int_part, "", frac, ELLIPSIS
    raise InvalidFormat(f"Expected '(' or '...' at position {i}")

def parse_decimal_raw(s: str) -> Tuple[int, int]:
    """
    Algebraic reconstruction, before reduction:
      I.F      -> I‖F / 10^|F|
      I.N(R)   -> (I‖N‖R - I‖N) / ((10^|R| - 1) * 10^|N|)
      I.R...   -> (I‖R - I) / (10^|R| - 1)
    """
    int_part, nonrep, rep, notation = scan_decimal(s)
    if notation == PLAIN:
        return int(int_part + nonrep), 10 ** len(nonrep)
    if notation == PARENTHESIS:
        num = int(int_part + nonrep + rep) - int(int_part + nonrep)
        den = (10 ** len(rep) - 1) * 10 ** len(nonrep)
        return num, den
    num = int(int_part + rep) - int(int_part)
    return num, 10 ** len(rep) - 1

def parse_decimal(s: str) -> Q:
    num, den = parse_decimal_raw(s)
    return rational(num, den)

def is_fraction_str(s: str) -> bool:
    try:
        scan_fraction(s)
    except (ParseError, DivisionByZero):
        return False
    return True

def is_decimal_str(s: str) -> bool:
    try:
        scan_decimal(s)
    except ParseError:
        return False
    return True

def classify(s: str) -> InputKind:
    s = s.strip()
    if is_fraction_str(s):
        return InputKind.FRACTION
    if is_decimal_str(s):
        return InputKind.DECIMAL
    return InputKind.UNRECOGNIZED
