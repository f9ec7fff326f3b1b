from __future__ import annotations

import logging
from typing import Tuple

logger = logging.getLogger(__name__)

# Digits of pi consumed by the derivation of the RFC 1319 table.
PI_DIGIT_COUNT = 722

_GUARD_DIGITS = 10


class SBoxConstructionError(RuntimeError):
    """Raised when the digit seed runs out before the table is complete."""


def _arccot(x: int, unity: int) -> int:
    """Fixed-point arctan(1/x) scaled by ``unity``."""
    x_squared = x * x
    term = unity // x
    total = term
    n = 3
    sign = -1
    while term:
        term //= x_squared
        total += sign * (term // n)
        sign = -sign
        n += 2
    return total


def pi_digits(count: int) -> str:
    """
    Return the first ``count`` decimal digits of pi, leading ``3`` included.

    Uses Machin's formula ``pi = 16*atan(1/5) - 4*atan(1/239)`` on integers,
    so the result is exact apart from the truncated guard digits.
    """
    if count < 1:
        raise ValueError("count must be positive")
    unity = 10 ** (count - 1 + _GUARD_DIGITS)
    scaled_pi = 4 * (4 * _arccot(5, unity) - _arccot(239, unity))
    return str(scaled_pi // 10**_GUARD_DIGITS)


def _sample_width(n: int) -> Tuple[int, int]:
    if n <= 10:
        return 1, 10
    if n <= 100:
        return 2, 100
    return 3, 1000


def draw_index(digits: str, cursor: int, n: int) -> Tuple[int, int]:
    """
    Draw an unbiased index in ``[0, n)`` from ``digits`` starting at ``cursor``.

    Digit groups of width 1, 2 or 3 are read as a decimal number ``x`` and
    accepted only when ``x < n * (10**width // n)``; rejected groups are
    skipped, never re-read.

    Returns:
        ``(index, cursor)`` where ``cursor`` points past the consumed digits.

    Raises:
        SBoxConstructionError: If ``digits`` is exhausted before a draw is accepted.
        ValueError: If ``n`` is outside ``1..1000``.
    """
    if not 1 <= n <= 1000:
        raise ValueError(f"n must be in 1..1000, got {n}")
    width, span = _sample_width(n)
    limit = n * (span // n)
    while True:
        end = cursor + width
        if end > len(digits):
            raise SBoxConstructionError(
                f"digit seed exhausted at position {cursor} while drawing for n={n}"
            )
        x = int(digits[cursor:end])
        cursor = end
        if x < limit:
            return x % n, cursor


def derive_sbox(digits: str) -> Tuple[int, ...]:
    """Build the 256-entry permutation by pi-keyed transpositions of the identity."""
    table = list(range(256))
    cursor = 0
    for i in range(1, 256):
        j, cursor = draw_index(digits, cursor, i + 1)
        table[i], table[j] = table[j], table[i]
    logger.debug("derived MD2 substitution table from %d of %d digits", cursor, len(digits))
    return tuple(table)


PI_SUBST = derive_sbox(pi_digits(PI_DIGIT_COUNT))


def sbox() -> bytes:
    """Return the substitution table as 256 bytes."""
    return bytes(PI_SUBST)


__all__ = [
    "PI_DIGIT_COUNT",
    "PI_SUBST",
    "SBoxConstructionError",
    "derive_sbox",
    "draw_index",
    "pi_digits",
    "sbox",
]
