"""
GCD Extended — Расширенный алгоритм Евклида (коэффициенты Безу)

Вычисляет BezoutResult(gcd, x0, y0, x1, y1):
    gcd = x0*a + y0*b
    0   = x1*a + y1*b

АЛГОРИТМ:
1. Беззнаковый расчёт на (|a|, |b|), затем смена знака (x0, x1) при a < 0
   и (y0, y1) при b < 0 (независимо по каждому аргументу)
2. Вырожденные случаи (до основного цикла):
    (0, 0) → (0, 0, 0, 0, 0)
    (a, 0) → (a, 1, 0, 0, 0)
    (0, b) → (b, 0, 1, 0, 0)
    (a, a) → (a, 1, 0, -1, 1)
3. a < b: расчёт на (b, a) и обмен x0↔y0, x1↔y1
4. a > b > 0: итеративный цикл (euclid_generic.bezout_nonnegative)

Коэффициенты Безу не единственны; возвращается именно пара стандартной
итеративной рекуррентности.

Вычисления идут на точных модулях. gcd и коэффициенты связаны тождествами,
поэтому не клампятся: если хотя бы одно значение вне домена, при FAIL_FAST
и SATURATE выбрасывается IntegerOverflowViolation, при PROMOTE результат
возвращается точным.
"""

from typing import Optional

from src.numtheory.domain.results import BezoutResult
from src.numtheory.math.euclid_generic import bezout_nonnegative
from src.numtheory.math.integer_safeguards import (
    IntegerDomain,
    check_representable,
    validate_integer,
)


def gcd_extended(a: int, b: int, *, domain: Optional[IntegerDomain] = None) -> BezoutResult:
    """
    НОД a и b с коэффициентами Безу.

    Args:
        a, b: Целые числа домена
        domain: Целочисленный домен (default: 64-bit, FAIL_FAST)

    Returns:
        BezoutResult с gcd >= 0

    Raises:
        IntegerOverflowViolation: gcd или коэффициент вне домена (FAIL_FAST, SATURATE)

    Examples:
        >>> gcd_extended(6, 10).as_tuple()
        (2, 2, -1, -5, 3)
        >>> gcd_extended(9, -12).as_tuple()
        (3, -1, -1, 4, 3)
    """
    validate_integer(a, "a", domain)
    validate_integer(b, "b", domain)

    res = _gcd_extended_nonnegative(abs(a), abs(b))

    sign_a = -1 if a < 0 else 1
    sign_b = -1 if b < 0 else 1
    result = BezoutResult(
        gcd=res.gcd,
        x0=sign_a * res.x0,
        y0=sign_b * res.y0,
        x1=sign_a * res.x1,
        y1=sign_b * res.y1,
    )
    check_representable(result.as_tuple(), "gcd_extended", domain)
    return result


def _gcd_extended_nonnegative(a: int, b: int) -> BezoutResult:
    if a == 0 and b == 0:
        return BezoutResult(gcd=0, x0=0, y0=0, x1=0, y1=0)
    if b == 0:
        return BezoutResult(gcd=a, x0=1, y0=0, x1=0, y1=0)
    if a == 0:
        return BezoutResult(gcd=b, x0=0, y0=1, x1=0, y1=0)
    if a > b:
        g, x0, y0, x1, y1 = bezout_nonnegative(a, b, 0, 1)
        return BezoutResult(gcd=g, x0=x0, y0=y0, x1=x1, y1=y1)
    if a < b:
        # Цикл всегда считает первый аргумент делимым
        g, x0, y0, x1, y1 = bezout_nonnegative(b, a, 0, 1)
        return BezoutResult(gcd=g, x0=y0, y0=x0, x1=y1, y1=x1)
    return BezoutResult(gcd=a, x0=1, y0=0, x1=-1, y1=1)
