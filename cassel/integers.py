"""Elementary arithmetic on residues modulo an integer."""

from math import gcd


def invertible_mod(n: int) -> list[int]:
    """Return the residues in ``range(n)`` that are invertible modulo ``n``."""
    return [i for i in range(n) if gcd(i, n) == 1]


def euler_phi(n: int) -> int:
    """Euler's totient: how many residues in ``range(n)`` are coprime to ``n``."""
    return sum(1 for i in range(n) if gcd(i, n) == 1)