"""Modular arithmetic helpers over prime fields."""

from __future__ import annotations

from functools import lru_cache


def mod_inv(value: int, p: int) -> int:
    """Multiplicative inverse of value modulo prime p."""
    value %= p
    if value == 0:
        raise ZeroDivisionError("0 has no inverse modulo p")
    return pow(value, -1, p)


def is_quadratic_residue(value: int, p: int) -> bool:
    """Euler's criterion. Zero counts as a residue."""
    value %= p
    return value == 0 or pow(value, (p - 1) // 2, p) == 1


def sqrt_mod(value: int, p: int) -> int | None:
    """Square root of value modulo an odd prime p (Tonelli-Shanks).

    Returns the smaller of the two roots, or None when value is a
    non-residue.
    """
    n = value % p
    if n == 0:
        return 0
    if not is_quadratic_residue(n, p):
        return None

    if p % 4 == 3:
        r = pow(n, (p + 1) // 4, p)
        return min(r, p - r)

    # Factor out powers of 2 from p-1
    q = p - 1
    s = 0
    while q % 2 == 0:
        q //= 2
        s += 1

    # Find a non-residue
    z = 2
    while pow(z, (p - 1) // 2, p) != p - 1:
        z += 1

    m = s
    c = pow(z, q, p)
    t = pow(n, q, p)
    r = pow(n, (q + 1) // 2, p)

    while t != 1:
        i = 1
        temp = (t * t) % p
        while temp != 1:
            temp = (temp * temp) % p
            i += 1
        b = pow(c, 1 << (m - i - 1), p)
        m = i
        c = (b * b) % p
        t = (t * c) % p
        r = (r * b) % p

    return min(r, p - r)


@lru_cache(maxsize=None)
def cached_sqrt_mod(value: int, p: int) -> int:
    """sqrt_mod for constants derived once per process; raises on non-residues."""
    root = sqrt_mod(value, p)
    if root is None:
        raise ValueError(f"{value} is not a quadratic residue modulo p")
    return root
