"""Search for sums of roots of unity whose house squared stays below 5.1."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterator, Sequence
from decimal import Decimal
from itertools import combinations, combinations_with_replacement, pairwise
from math import gcd
from typing import TextIO

from cassel.cyclotomic import CyclotomicIntegerExponents, cosine_sine_table

logger = logging.getLogger(__name__)

HOUSE_SQUARED_CUTOFF = 5.1

DEFAULT_CASES: tuple[tuple[int, int], ...] = (
    (19, 9),
    (2 * 2 * 3 * 7, 8),
    (2 * 2 * 3 * 5, 8),
    (7 * 13, 7),
    (2 * 2 * 3 * 5 * 7, 7),
    (31, 6),
    (29, 6),
    (23, 6),
    (2 * 2 * 13, 6),
    (3 * 5 * 11, 6),
    (3 * 3 * 7, 6),
    (3 * 3 * 5, 6),
    (3 * 7 * 11 * 13, 5),
    (5 * 13, 5),
    (2 * 2 * 3 * 5 * 7 * 11, 5),
    (5 * 19, 4),
    (5 * 17, 4),
    (2 * 2 * 3 * 5 * 7 * 11 * 13, 4),
    (2 * 2 * 2 * 3 * 3 * 5 * 7, 4),
    (2 * 2 * 2 * 2 * 3 * 5, 4),
)


def normalized_level(n0: int) -> int:
    """Return ``n0`` if it is even, else ``2 * n0``."""
    if n0 < 1:
        raise ValueError(f"level must be positive, got {n0}")
    return n0 if n0 % 2 == 0 else 2 * n0


def _divisor_or_zero(n: int, p: int) -> int:
    return n // p if n % p == 0 else 0


def _has_shifted_pair(exps: Sequence[int], n: int, shifts: tuple[int, ...]) -> bool:
    """Two entries, the later one a root, differ by one of ``shifts``."""
    return any(hi < n and hi - lo in shifts for lo, hi in combinations(exps, 2))


def _has_chain(exps: Sequence[int], n: int, step: int, count: int) -> bool:
    """``count`` entries, increasing in position and value, spaced by multiples of ``step``."""
    for chain in combinations(exps, count):
        if chain[-1] >= n:
            continue
        if all(hi > lo and (hi - lo) % step == 0 for lo, hi in pairwise(chain)):
            return True
    return False


def search_exponents(n0: int, length: int) -> Iterator[tuple[int, ...]]:
    """Yield exponent tuples of the given length at the normalized level of ``n0``.

    Each tuple ``(0, j2, j3, ...)`` describes a sum of roots of unity, with the
    level itself standing for a zero summand; cases redundant by conjugation or
    by vanishing sums of small order are left out, and only those whose house
    squared is below 5.1 are yielded.
    """
    if length < 3:
        raise ValueError(f"length must be at least 3, got {length}")
    n = normalized_level(n0)
    n2 = n // 2
    n3 = _divisor_or_zero(n, 3)
    n5 = _divisor_or_zero(n, 5)
    n7 = _divisor_or_zero(n, 7)
    cos_table, sin_table = cosine_sine_table(n)

    for j2 in range(1, n):
        if n % j2 != 0:
            continue
        for j3 in (x for x in range(n) if gcd(x, n) >= j2):
            candidates = [x for x in range(j3, n + 1) if j2 == 1 or gcd(x, n) >= j2]
            for tail in combinations_with_replacement(candidates, length - 3):
                exps = (0, j2, j3, *tail)

                # Complex conjugation makes these redundant.
                if exps[-1] < n and exps[2] + exps[-1] > n + exps[1]:
                    continue
                # Two roots differing by a factor of -1.
                if _has_shifted_pair(exps, n, (n2,)):
                    continue
                # Two roots differing by a factor of zeta_3.
                if n3 and _has_shifted_pair(exps, n, (n3, 2 * n3)):
                    continue
                # Three roots differing by factors of zeta_5.
                if n5 and _has_chain(exps, n, n5, 3):
                    continue
                candidate = CyclotomicIntegerExponents(
                    exponents=exps, level=n, cos_table=cos_table, sin_table=sin_table
                )
                if not candidate.compare_house_squared(HOUSE_SQUARED_CUTOFF):
                    continue
                # Four roots differing by factors of zeta_7.
                if n7 and _has_chain(exps, n, n7, 4):
                    continue
                yield exps
            logger.info("Checked cases with n = %d, j_2 = %d, j_3 = %d", n, j2, j3)


def _format_float(x: float) -> str:
    """Shortest round-trip decimal form, without exponent or trailing '.0'."""
    text = format(Decimal(repr(x)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def loop_over_roots(
    n0: int, length: int, tables: TextIO, output: TextIO
) -> list[list[int]]:
    """Write the level's cosine/sine table and every case found; return the cases."""
    n = normalized_level(n0)
    cos_table, sin_table = cosine_sine_table(n)
    for j, (c, s) in enumerate(zip(cos_table, sin_table)):
        tables.write(f"{n} {j} {_format_float(c)} {_format_float(s)}\n")

    found = []
    for exps in search_exponents(n0, length):
        case = list(exps)
        output.write(f"{n}; {case}\n")
        found.append(case)
    return found


def _parse_case(text: str) -> tuple[int, int]:
    try:
        level, length = (int(part) for part in text.split(":"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected LEVEL:LENGTH, got {text!r}") from None
    return level, length


def main(argv: Sequence[str] | None = None) -> int:
    """Run the search over the given cases, or over the default ones."""
    parser = argparse.ArgumentParser(
        prog="cassel",
        description="Search for cyclotomic integers of small house.",
    )
    parser.add_argument("--tables", default="tables.txt", help="cosine/sine table file")
    parser.add_argument("--output", default="output.txt", help="file for the cases found")
    parser.add_argument(
        "cases",
        nargs="*",
        type=_parse_case,
        metavar="LEVEL:LENGTH",
        help="cases to search (default: the built-in list)",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    cases = args.cases or list(DEFAULT_CASES)
    try:
        with open(args.tables, "w", encoding="utf-8") as tables, open(
            args.output, "w", encoding="utf-8"
        ) as output:
            for level, length in cases:
                for case in loop_over_roots(level, length, tables, output):
                    print(case)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    print("All cases checked!")
    return 0


if __name__ == "__main__":
    sys.exit(main())