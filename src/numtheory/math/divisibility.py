"""
Divisibility — Предикаты делимости

a делит b, если существует k такое, что b = k*a.

Соглашение: divides(0, b) = True для любого b (а не только для b = 0).
Это сознательное расширение стандартного определения.

Предикаты тотальны на всём домене, включая min_value: остаток
определён и там.
"""

from typing import Optional

from src.numtheory.math.integer_safeguards import IntegerDomain, validate_integer


def divides(a: int, b: int, *, domain: Optional[IntegerDomain] = None) -> bool:
    """
    True, если a делит b.

    Examples:
        >>> divides(0, 0)
        True
        >>> divides(5, 10)
        True
        >>> divides(5, 7)
        False
        >>> divides(5, -10)
        True
        >>> divides(0, 7)
        True
    """
    validate_integer(a, "a", domain)
    validate_integer(b, "b", domain)
    if a != 0:
        return b % a == 0
    return True


def is_divisible_by(a: int, b: int, *, domain: Optional[IntegerDomain] = None) -> bool:
    """True, если a делится на b, т.е. divides(b, a)."""
    return divides(b, a, domain=domain)


def is_common_divisor(d: int, a: int, b: int, *, domain: Optional[IntegerDomain] = None) -> bool:
    """True, если d делит и a, и b."""
    return divides(d, a, domain=domain) and divides(d, b, domain=domain)


def is_common_multiple(d: int, a: int, b: int, *, domain: Optional[IntegerDomain] = None) -> bool:
    """True, если d делится и на a, и на b."""
    return divides(a, d, domain=domain) and divides(b, d, domain=domain)
