"""Cyclotomic integers given as sums of roots of unity, and their house."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


def cosine_sine_table(n: int) -> tuple[list[float], list[float]]:
    """Return the lists of cos(tau*j/n) and sin(tau*j/n) for j in ``range(n)``."""
    step = math.tau / n if n else 0.0
    angles = [step * j for j in range(n)]
    return [math.cos(a) for a in angles], [math.sin(a) for a in angles]


@dataclass
class CyclotomicIntegerExponents:
    """The sum of zeta_level ** j over ``exponents``.

    Exponents equal to or above ``level`` stand for a zero summand.
    When no tables are given they are computed from ``level``.
    """

    exponents: Sequence[int]
    level: int
    cos_table: Sequence[float] | None = None
    sin_table: Sequence[float] | None = None

    def __post_init__(self) -> None:
        if self.cos_table is None or self.sin_table is None:
            self.cos_table, self.sin_table = cosine_sine_table(self.level)

    def conjugates_abs_squared(self) -> Iterator[float]:
        """Yield the squared modulus of each Galois conjugate."""
        level = self.level
        active = [j for j in self.exponents if j < level]
        for k in range(1, level):
            if math.gcd(k, level) != 1:
                continue
            cos_sum = 0.0
            sin_sum = 0.0
            for j in active:
                index = (k * j) % level
                cos_sum += self.cos_table[index]
                sin_sum += self.sin_table[index]
            yield cos_sum * cos_sum + sin_sum * sin_sum

    def house_squared(self) -> float:
        """Return the square of the house, or 0.0 when there are no conjugates."""
        return max(self.conjugates_abs_squared(), default=0.0)

    def compare_house_squared(self, cutoff: float) -> bool:
        """Tell whether every conjugate has squared modulus below ``cutoff``."""
        return not any(x >= cutoff for x in self.conjugates_abs_squared())