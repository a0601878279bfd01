"""Integer arithmetic helpers: truncating division, gcd/lcm, modular inverse."""

from __future__ import annotations


def truncated_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """Return the quotient rounded toward zero and the matching remainder.

    The remainder takes the sign of ``dividend``.
    """
    if divisor == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, dividend - divisor * quotient


def _euclid(a: int, b: int) -> int:
    while b:
        a, b = b, a % b
    return a


def _require_unsigned(a: int, b: int) -> None:
    if a < 0 or b < 0:
        raise ValueError(f"expected nonnegative integers, got {a} and {b}")


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two nonnegative integers.

    If either argument is zero, the other is returned.
    """
    _require_unsigned(a, b)
    return _euclid(a, b)


def lcm(a: int, b: int) -> int:
    """Least common multiple of two nonnegative integers; zero if either is zero."""
    d = gcd(a, b)
    return 0 if d == 0 else (a * b) // d


def gcd_signed(a: int, b: int) -> int:
    """Greatest common divisor of two integers; always nonnegative."""
    return _euclid(abs(a), abs(b))


def lcm_signed(a: int, b: int) -> int:
    """Least common multiple of two integers; always nonnegative, zero if either is zero."""
    d = gcd_signed(a, b)
    return 0 if d == 0 else abs(a * b) // d


def modinverse(a: int, n: int) -> int | None:
    """Return the smallest positive ``x`` with ``(a * x) mod n == 1``.

    Returns ``None`` if ``a`` is not coprime to ``n`` or if ``abs(n) < 2``.
    """
    upper, uc = abs(n), 0
    if upper < 2:
        return None
    lower, lc = a % upper, 1
    while lower > 1:
        upper, uc, lower, lc = lower, lc, upper % lower, uc - lc * (upper // lower)
    return lc % abs(n) if lower == 1 else None