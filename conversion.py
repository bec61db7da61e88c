from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import List, Optional

import json

from arithmetic import Q, DivisionByZero, expand, qstr, reduce_fraction
from formats import SCIENTIFIC_PRECISION, simplified_str, mixed_str, scientific_str
from parsing import InputKind, ParseError, classify, parse_fraction, parse_decimal, parse_decimal_raw

@dataclass(frozen=True)
class FractionConversion:
    simplified: str          # "n/d" in lowest terms
    decimal: str             # "I.D" or "I.N(R)"
    period: int              # 0 when the decimal terminates
    scientific: str          # approximate, from the nearest float
    mixed: Optional[str]     # None when equal to simplified

@dataclass(frozen=True)
class DecimalConversion:
    integer: Optional[str]    # set when the reduced denominator is 1
    fraction: Optional[str]   # reduced "n/d" otherwise
    unreduced: Optional[str]  # raw reconstructed "n/d", only when it differs from fraction

    @property
    def display(self) -> str:
        if self.integer is not None:
            return self.integer
        if self.unreduced is not None:
            return f"{self.unreduced} = {self.fraction}"
        return self.fraction

@dataclass(frozen=True)
class Result:
    title: str
    subtitle: str
    detail: Optional[str] = None

def convert_fraction(s: str, precision: int = SCIENTIFIC_PRECISION) -> FractionConversion:
    """Raises InvalidFormat or DivisionByZero for bad input."""
    q = parse_fraction(s.strip())
    exp = expand(q)
    simplified = simplified_str(q)
    mixed = mixed_str(q)
    return FractionConversion(
        simplified=simplified,
        decimal=exp.decimal,
        period=exp.period,
        scientific=scientific_str(q, precision),
        mixed=None if mixed == simplified else mixed,
    )

def convert_decimal(s: str) -> DecimalConversion:
    """Raises InvalidFormat for bad input."""
    raw_num, raw_den = parse_decimal_raw(s.strip())
    num, den = reduce_fraction(raw_num, raw_den)
    if den == 1:
        return DecimalConversion(integer=str(num), fraction=None, unreduced=None)
    fraction = f"{num}/{den}"
    unreduced = f"{raw_num}/{raw_den}"
    return DecimalConversion(
        integer=None,
        fraction=fraction,
        unreduced=None if unreduced == fraction else unreduced,
    )

def fraction_results(conv: FractionConversion) -> List[Result]:
    res = [Result("Simplified", conv.simplified)]
    if conv.period > 0:
        res.append(Result("Repeating Decimal", conv.decimal, f"Period: {conv.period}"))
    else:
        res.append(Result("Finite Decimal", conv.decimal))
    res.append(Result("Scientific", conv.scientific))
    if conv.mixed is not None:
        res.append(Result("Mixed", conv.mixed))
    return res

def decimal_results(conv: DecimalConversion) -> List[Result]:
    if conv.integer is not None:
        return [Result("Integer", conv.integer)]
    return [Result("Fraction", conv.display)]

def labeled_results(s: str, precision: int = SCIENTIFIC_PRECISION) -> List[Result]:
    """
    Labeled result lines for a raw input string.
    Unrecognized input and conversion failures both give an empty list;
    call convert_fraction / convert_decimal directly to see the error.
    """
    s = s.strip()
    kind = classify(s)
    try:
        if kind == InputKind.FRACTION:
            return fraction_results(convert_fraction(s, precision))
        if kind == InputKind.DECIMAL:
            return decimal_results(convert_decimal(s))
    except (ParseError, DivisionByZero):
        return []
    return []

class RationalEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, Q):
            return qstr(obj)
        if isinstance(obj, InputKind):
            return obj.value
        return super().default(obj)

def conversion_to_dict(s: str, precision: int = SCIENTIFIC_PRECISION) -> dict:
    """
    JSON-ready summary of a conversion:
      {"input": ..., "kind": ..., "value": Q | None, "result": {...} | None, "error": str | None}
    "value" is the exact rational, written as its (repeating) decimal expansion.
    """
    s = s.strip()
    kind = classify(s)
    summary = {"input": s, "kind": kind, "value": None, "result": None, "error": None}
    try:
        if kind == InputKind.FRACTION or "/" in s:
            summary["value"] = parse_fraction(s)
            summary["result"] = asdict(convert_fraction(s, precision))
        elif kind == InputKind.DECIMAL:
            summary["value"] = parse_decimal(s)
            conv = convert_decimal(s)
            summary["result"] = asdict(conv)
            summary["result"]["display"] = conv.display
        else:
            summary["error"] = "Unrecognized input: expected 'a/b' or a decimal such as 0.5, 0.(3) or 0.3..."
    except (ParseError, DivisionByZero) as e:
        summary["error"] = str(e)
    return summary

def dumps_conversion(s: str, precision: int = SCIENTIFIC_PRECISION) -> str:
    return json.dumps(conversion_to_dict(s, precision), indent=2, cls=RationalEncoder)
