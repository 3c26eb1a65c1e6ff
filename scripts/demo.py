"""Self-check demo: exact rational arithmetic, canonical form and ordering.

Scenarios covered:
R1) 1/2 + 1/3 == 5/6
R2) 1/2 - 1/3 == 1/6
R3) 1/2 * 1/3 == 1/6
R4) 1/2 / 1/3 == 3/2
R5) -(1/2) == -1/2

Rendering & parsing:
F1) 2/1 renders "2"; -2/4 renders "-1/2"
F2) "117/1098" renders "13/122"

Ordering & big integers:
O1) 1/2 < 2/3 and 1/2 in [1/3, 2/3]
B1) 2000000000/4000000000 == 1/2
B2) 39/40-digit pair reduces to 1/2
"""
from __future__ import annotations

from typing import Callable, List
import argparse
import sys

from exact_rationals.core import (
    Rational,
    RationalDomainError,
    RationalRange,
    div_by,
    parse_rational,
)


# ---------- expression evaluation ----------

_OPS = {
    "+": Rational.add,
    "-": Rational.subtract,
    "*": Rational.multiply,
    "/": Rational.divide,
}


def eval_expression(expr: str) -> Rational:
    """Evaluate ``"A OP B"`` where A and B are rationals and OP one of + - * /."""
    tokens = expr.split()
    if len(tokens) != 3 or tokens[1] not in _OPS:
        raise RationalDomainError(f"Expecting 'A OP B' with OP in {sorted(_OPS)} but was: '{expr}'")
    left = parse_rational(tokens[0])
    right = parse_rational(tokens[2])
    return _OPS[tokens[1]](left, right)


#
# -------- scenario registry helpers --------
class Scenario:
    def __init__(self, sid: str, title: str, fn: Callable[[], bool]):
        self.sid = sid
        self.title = title
        self.fn = fn

scenarios: List[Scenario] = []

def add(sid: str, title: str, fn: Callable[[], bool]) -> None:
    scenarios.append(Scenario(sid, title, fn))


def register_default_scenarios() -> None:
    half = div_by(1, 2)
    third = div_by(1, 3)
    two_thirds = div_by(2, 3)

    add("R1", "1/2 + 1/3 == 5/6", lambda: div_by(5, 6) == half + third)
    add("R2", "1/2 - 1/3 == 1/6", lambda: div_by(1, 6) == half - third)
    add("R3", "1/2 * 1/3 == 1/6", lambda: div_by(1, 6) == half * third)
    add("R4", "1/2 / 1/3 == 3/2", lambda: div_by(3, 2) == half / third)
    add("R5", "-(1/2) == -1/2", lambda: div_by(-1, 2) == -half)
    add("F1", "2/1 -> '2', -2/4 -> '-1/2'",
        lambda: str(div_by(2, 1)) == "2" and str(div_by(-2, 4)) == "-1/2")
    add("F2", "'117/1098' -> '13/122'", lambda: str(parse_rational("117/1098")) == "13/122")
    add("O1", "1/2 < 2/3 and 1/2 in 1/3..2/3",
        lambda: half < two_thirds and half in RationalRange(third, two_thirds))
    add("B1", "2000000000/4000000000 == 1/2", lambda: div_by(2000000000, 4000000000) == half)
    add("B2", "big pair == 1/2", lambda: Rational(
        int("912016490186296920119201192141970416029"),
        int("1824032980372593840238402384283940832058"),
    ) == half)


def run(selected: List[Scenario]) -> int:
    failed = 0
    for sc in selected:
        try:
            ok = bool(sc.fn())
        except RationalDomainError as e:
            ok = False
            print(f"  error: {e}")
        print(f"[{'PASS' if ok else 'FAIL'}] {sc.sid}) {sc.title}")
        if not ok:
            failed += 1
    print(f"\n=== {len(selected) - failed}/{len(selected)} checks passed ===")
    return failed


def main(argv: List[str]) -> int:
    parser = argparse.ArgumentParser(description="Exact rational arithmetic self-check")
    parser.add_argument("--only", type=str, default=None, help="Comma-separated scenario ids to run (e.g., R1,F2)")
    parser.add_argument("--skip", type=str, default=None, help="Comma-separated scenario ids to skip")
    parser.add_argument("--eval", dest="expr", type=str, default=None, help="Evaluate one expression, e.g. '1/2 + 1/3'")
    args = parser.parse_args(argv)

    if args.expr is not None:
        try:
            print(eval_expression(args.expr))
        except RationalDomainError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        return 0

    register_default_scenarios()
    only = {s.strip() for s in args.only.split(",")} if args.only else None
    skip = {s.strip() for s in args.skip.split(",")} if args.skip else set()
    selected = [sc for sc in scenarios if (only is None or sc.sid in only) and sc.sid not in skip]
    return 1 if run(selected) else 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
