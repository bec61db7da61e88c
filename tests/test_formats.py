import pytest

from arithmetic import Q
from formats import SCIENTIFIC_PRECISION, simplified_str, mixed_str, scientific_str, to_float


def test_simplified_str():
    assert simplified_str(Q(2, 4)) == "1/2"
    assert simplified_str(Q(-3, 6)) == "-1/2"
    assert simplified_str(Q(4, 2)) == "2/1"
    assert simplified_str(Q(0)) == "0/1"

@pytest.mark.parametrize("q,mixed", [
    (Q(10, 4), "2 + 1/2"),
    (Q(-10, 4), "-2 + 1/2"),
    (Q(22, 7), "3 + 1/7"),
    (Q(1, 2), "1/2"),
    (Q(-1, 2), "-1/2"),
    (Q(4, 2), "2"),
    (Q(-6, 3), "-2"),
    (Q(0), "0/1"),
])
def test_mixed_str(q, mixed):
    assert mixed_str(q) == mixed

def test_default_precision():
    assert SCIENTIFIC_PRECISION == 10

@pytest.mark.parametrize("q,sci", [
    (Q(1, 2), "5.0000000000e-1"),
    (Q(2, 3), "6.6666666667e-1"),
    (Q(5, 2), "2.5000000000e+0"),
    (Q(-1, 8), "-1.2500000000e-1"),
    (Q(12345), "1.2345000000e+4"),
    (Q(1, 1000), "1.0000000000e-3"),
    (Q(0), "0.0000000000e+0"),
])
def test_scientific_str(q, sci):
    assert scientific_str(q) == sci

def test_scientific_str_precision():
    assert scientific_str(Q(1, 3), precision=2) == "3.33e-1"
    assert scientific_str(Q(1, 2), precision=0) == "5e-1"
    with pytest.raises(ValueError):
        scientific_str(Q(1, 2), precision=-1)

def test_scientific_str_is_float_approximation():
    # digits past binary64 precision come from the float, not from 1/3
    assert scientific_str(Q(1, 3), precision=20) != "3.33333333333333333333e-1"

def test_scientific_str_out_of_float_range():
    assert to_float(Q(10**400)) == float("inf")
    assert scientific_str(Q(10**400)) == "inf"
    assert scientific_str(Q(-10**400, 3)) == "-inf"
