"""
Euclid Generic — Capability-Constrained Euclidean Loops

Обобщённые циклы алгоритма Евклида над любым типом, поддерживающим:
- равенство и упорядочивание (==, <)
- остаток, умножение, целочисленное деление, вычитание (%, *, //, -)
- нулевую (и для расширенного варианта единичную) константу
- частичный модуль числа (abs_fn может вернуть None)

int64-движки (gcd.py, gcd_extended.py) используют эти циклы после
нормализации знаков и проверки домена.
"""

from typing import Callable, Optional, Protocol, Tuple, TypeVar


class EuclideanInteger(Protocol):
    """Минимальный набор операций для алгоритма Евклида."""

    def __eq__(self, other: object) -> bool: ...

    def __lt__(self, other: "EuclideanInteger") -> bool: ...

    def __mod__(self, other: "EuclideanInteger") -> "EuclideanInteger": ...

    def __mul__(self, other: "EuclideanInteger") -> "EuclideanInteger": ...

    def __floordiv__(self, other: "EuclideanInteger") -> "EuclideanInteger": ...

    def __sub__(self, other: "EuclideanInteger") -> "EuclideanInteger": ...


T = TypeVar("T", bound=EuclideanInteger)

# (gcd, a0, b0, a1, b1): gcd = a0*A + b0*B, 0 = a1*A + b1*B
BezoutTuple = Tuple[T, T, T, T, T]


# =============================================================================
# PLAIN GCD
# =============================================================================


def gcd_euclid(a: T, b: T, zero: T) -> T:
    """Цикл Евклида: (a, b) → (b, a mod b) пока b != 0. Требует a > b > 0."""
    while b != zero:
        a, b = b, a % b
    return a


def gcd_nonnegative(a: T, b: T, zero: T) -> T:
    """
    НОД неотрицательных a, b.

    Вырожденные случаи разбираются до основного цикла:
    - gcd(0, 0) = 0
    - gcd(a, 0) = a
    - gcd(0, b) = b
    - gcd(a, a) = a
    """
    if a == zero and b == zero:
        return zero
    if b == zero:
        return a
    if a == zero:
        return b
    if b < a:
        return gcd_euclid(a, b, zero)
    if a < b:
        return gcd_euclid(b, a, zero)
    return a


def gcd_generic(a: T, b: T, *, zero: T, abs_fn: Callable[[T], Optional[T]]) -> Optional[T]:
    """
    НОД для произвольного типа с частичным модулем числа.

    Args:
        a, b: Операнды
        zero: Нулевая константа типа
        abs_fn: Модуль числа; None, если модуль непредставим

    Returns:
        НОД (>= zero) либо None, если модуль одного из операндов непредставим

    Examples:
        >>> gcd_generic(-12, 18, zero=0, abs_fn=abs)
        6
        >>> gcd_generic(4, 6, zero=0, abs_fn=lambda v: None if v == 4 else abs(v))
    """
    abs_a = abs_fn(a)
    if abs_a is None:
        return None
    abs_b = abs_fn(b)
    if abs_b is None:
        return None
    return gcd_nonnegative(abs_a, abs_b, zero)


# =============================================================================
# EXTENDED GCD
# =============================================================================


def bezout_step(a: T, b: T, a0: T, a1: T, b0: T, b1: T) -> Tuple[T, T, T, T, T, T, T]:
    """
    Один шаг расширенного алгоритма Евклида (b != 0).

    Returns:
        (a, b, a0, a1, b0, b1, q) после шага
    """
    q = a // b
    r = a - b * q
    return b, r, a1, a0 - q * a1, b1, b0 - q * b1, q


def bezout_nonnegative(a: T, b: T, zero: T, one: T) -> BezoutTuple:
    """
    Расширенный алгоритм Евклида для a > b > 0.

    Коэффициенты (a0, a1, b0, b1) стартуют с (1, 0, 0, 1) и на каждом шаге
    удовлетворяют a = a0*A + b0*B, b = a1*A + b1*B.

    Returns:
        (gcd, x0, y0, x1, y1)
    """
    a0, a1, b0, b1 = one, zero, zero, one
    while b != zero:
        a, b, a0, a1, b0, b1, _ = bezout_step(a, b, a0, a1, b0, b1)
    return a, a0, b0, a1, b1
