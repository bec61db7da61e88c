import pytest

from arithmetic import Q, DivisionByZero, Expansion, gcd, reduce_fraction, rational, expand, qstr
from parsing import parse_decimal


def test_gcd():
    assert gcd(12, 18) == 6
    assert gcd(-12, 18) == 6
    assert gcd(12, -18) == 6
    assert gcd(0, 5) == 5
    assert gcd(7, 0) == 7
    assert gcd(17, 5) == 1

def test_gcd_big_ints():
    assert gcd(3 * 2**100, 5 * 2**90) == 2**90
    assert gcd(10**50 - 1, 10**25 - 1) == 10**25 - 1

def test_reduce_fraction_sign_and_terms():
    assert reduce_fraction(2, 4) == (1, 2)
    assert reduce_fraction(2, -4) == (-1, 2)
    assert reduce_fraction(-2, 4) == (-1, 2)
    assert reduce_fraction(-2, -4) == (1, 2)
    assert reduce_fraction(9, 9) == (1, 1)
    assert reduce_fraction(0, -7) == (0, 1)

def test_reduce_fraction_zero_denominator():
    with pytest.raises(DivisionByZero):
        reduce_fraction(1, 0)
    with pytest.raises(ZeroDivisionError):
        rational(0, 0)

@pytest.mark.parametrize("num,den", [(2, 4), (-6, 9), (10**30, 4 * 10**20), (0, 3), (7, -21)])
def test_rational_is_reduced(num, den):
    q = rational(num, den)
    assert q == Q(num, den)
    assert q.denominator > 0
    assert gcd(q.numerator, q.denominator) == 1


@pytest.mark.parametrize("q,decimal,period", [
    (Q(0), "0", 0),
    (Q(1, 2), "0.5", 0),
    (Q(1, 8), "0.125", 0),
    (Q(2, 3), "0.(6)", 1),
    (Q(1, 6), "0.1(6)", 1),
    (Q(1, 12), "0.08(3)", 1),
    (Q(1, 7), "0.(142857)", 6),
    (Q(22, 7), "3.(142857)", 6),
    (Q(5, 2), "2.5", 0),
    (Q(-5, 2), "-2.5", 0),
    (Q(-1, 3), "-0.(3)", 1),
    (Q(4), "4", 0),
    (Q(-4), "-4", 0),
    (Q(1, 99), "0.(01)", 2),
])
def test_expand(q, decimal, period):
    assert expand(q) == Expansion(decimal, period)
    assert qstr(q) == decimal

def test_expand_long_period():
    exp = expand(Q(1, 97))
    assert exp.period == 96
    assert exp.decimal.startswith("0.(0103092783")
    assert parse_decimal(exp.decimal) == Q(1, 97)

def test_expand_big_denominator_terminates():
    q = Q(1, 2**64)
    exp = expand(q)
    assert exp.period == 0
    assert len(exp.decimal) == len("0.") + 64

def test_period_bounded_by_denominator():
    for d in range(2, 250):
        for n in (1, 7, d - 1, 3 * d + 1):
            q = Q(n, d)
            exp = expand(q)
            if exp.is_repeating:
                assert exp.period < q.denominator

def test_expansion_parts():
    exp = expand(Q(-13, 6))
    assert exp.decimal == "-2.1(6)"
    assert exp.int_part == "2"
    assert exp.non_repeating == "1"
    assert exp.repeating == "6"

    exp = expand(Q(3, 8))
    assert (exp.int_part, exp.non_repeating, exp.repeating) == ("0", "375", "")

    exp = expand(Q(7))
    assert (exp.int_part, exp.non_repeating, exp.repeating) == ("7", "", "")

def test_expansion_ellipsis():
    assert expand(Q(1, 3)).ellipsis() == "0.3..."
    assert expand(Q(-1, 3)).ellipsis() == "-0.3..."
    assert expand(Q(1, 7)).ellipsis() == "0.142857..."
    assert expand(Q(1, 6)).ellipsis() is None
    assert expand(Q(1, 2)).ellipsis() is None


ROUND_TRIP = [Q(n, d) for d in range(2, 60) for n in range(1, 3 * d) if n % d != 0]

def test_round_trip_parenthesis_notation():
    for q in ROUND_TRIP:
        assert parse_decimal(expand(q).decimal) == q

def test_round_trip_ellipsis_notation():
    for q in ROUND_TRIP:
        ellipsis = expand(q).ellipsis()
        if ellipsis is not None:
            assert parse_decimal(ellipsis) == q
