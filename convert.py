from __future__ import annotations
from typing import List

import json
import sys

from conversion import (
    Result, RationalEncoder, convert_fraction, convert_decimal, fraction_results, decimal_results,
    conversion_to_dict,
)
from formats import SCIENTIFIC_PRECISION
from parsing import InputKind, ParseError, classify

# Expansions with a longer repeating block than this are printed with a warning
LONG_PERIOD_WARNING = 10_000

OUTPUT_MODES = ("text", "json")

def format_result(r: Result) -> str:
    if r.detail:
        return f"{r.title}: {r.subtitle} ({r.detail})"
    return f"{r.title}: {r.subtitle}"

def main(argv: List[str] | None = None) -> int:
    argv = sys.argv if argv is None else argv
    if len(argv) not in (3, 4):
        print(f"Usage: {argv[0]} <text|json> <fraction-or-decimal> [SCIENTIFIC_PRECISION]", file=sys.stderr)
        return 1

    mode = argv[1]
    if mode not in OUTPUT_MODES:
        print(f"Error: output mode must be one of {', '.join(OUTPUT_MODES)}, got '{mode}'.", file=sys.stderr)
        return 1

    s = argv[2].strip()

    precision = SCIENTIFIC_PRECISION
    if len(argv) == 4:
        try:
            precision = int(argv[3])
        except ValueError:
            print("Error: [SCIENTIFIC_PRECISION] must be an integer.", file=sys.stderr)
            return 1
        if precision < 0:
            print("Error: [SCIENTIFIC_PRECISION] must be non-negative.", file=sys.stderr)
            return 1

    kind = classify(s)
    if mode == "json":
        summary = conversion_to_dict(s, precision)
        print(json.dumps(summary, indent=2, cls=RationalEncoder))
        if summary["error"] is None:
            return 0
        # same codes as text mode: failed conversion 1, unrecognized 2
        return 2 if kind == InputKind.UNRECOGNIZED and "/" not in s else 1

    try:
        if kind == InputKind.DECIMAL:
            results = decimal_results(convert_decimal(s))
        elif kind == InputKind.FRACTION or "/" in s:
            # near-fractions such as "1/0" go through the parser to report why they fail
            conv = convert_fraction(s, precision)
            if conv.period > LONG_PERIOD_WARNING:
                print(f"WARNING: repeating block of {s} has {conv.period} digits.", file=sys.stderr)
            results = fraction_results(conv)
        else:
            print(f"Error: unrecognized input '{s}'. Expected 'a/b' or a decimal such as 0.5, 0.(3) or 0.3...", file=sys.stderr)
            return 2
    except (ParseError, ZeroDivisionError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for r in results:
        print(format_result(r))
    return 0

if __name__ == "__main__":
    sys.exit(main())
