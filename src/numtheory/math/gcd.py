"""
GCD / LCM — Наибольший общий делитель и наименьшее общее кратное

Определения:
- gcd(a, b) — наибольший общий делитель, если хотя бы один операнд ненулевой;
  gcd(0, 0) = 0
- lcm(a, b) — наименьшее положительное общее кратное ненулевых операндов;
  lcm(a, 0) = lcm(0, b) = 0

Знаки нормализуются до основного цикла. Вычисления идут на точных модулях
(|min_value| = max_value + 1 представим в Python int); результат, не
помещающийся в домен, обрабатывается через OverflowPolicy домена.
"""

from typing import Optional

from src.numtheory.math.euclid_generic import gcd_nonnegative
from src.numtheory.math.integer_safeguards import (
    IntegerDomain,
    apply_overflow_policy,
    validate_integer,
)


def gcd(a: int, b: int, *, domain: Optional[IntegerDomain] = None) -> int:
    """
    Наибольший общий делитель a и b.

    Args:
        a, b: Целые числа домена
        domain: Целочисленный домен (default: 64-bit, FAIL_FAST)

    Returns:
        НОД >= 0; 0 только для gcd(0, 0)

    Raises:
        IntegerOverflowViolation: FAIL_FAST и НОД не помещается в домен
            (gcd(MIN, 0), gcd(MIN, MIN))

    Examples:
        >>> gcd(10, 14)
        2
        >>> gcd(-9, -12)
        3
        >>> gcd(0, 0)
        0
    """
    validate_integer(a, "a", domain)
    validate_integer(b, "b", domain)
    return apply_overflow_policy(gcd_nonnegative(abs(a), abs(b), 0), "gcd", domain)


def lcm(a: int, b: int, *, domain: Optional[IntegerDomain] = None) -> int:
    """
    Наименьшее общее кратное a и b.

    Если хотя бы один операнд равен 0, результат 0 по определению
    (без деления на нулевой НОД).

    Raises:
        IntegerOverflowViolation: FAIL_FAST и |a*b| / gcd не помещается в домен

    Examples:
        >>> lcm(3, 4)
        12
        >>> lcm(-6, 4)
        12
        >>> lcm(7, 0)
        0
    """
    validate_integer(a, "a", domain)
    validate_integer(b, "b", domain)
    if a == 0 or b == 0:
        return 0

    abs_a = abs(a)
    abs_b = abs(b)
    result = (abs_a // gcd_nonnegative(abs_a, abs_b, 0)) * abs_b
    return apply_overflow_policy(result, "lcm", domain)
