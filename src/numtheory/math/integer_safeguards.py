"""
Integer Safeguards — Fixed-Width Integer Domain

Модуль описывает целочисленный домен фиксированной ширины (по умолчанию
знаковый 64-bit) и политику поведения при переполнении:
- Валидация входов (тип int, попадание в диапазон домена)
- Применение политики переполнения к результатам (gcd, lcm)
- Проверка представимости связанных значений (коэффициенты Безу, состояния)

Python int не ограничен по разрядности: вычисления идут на точных
значениях (включая |MIN|), а границы домена проверяются только на
результатах.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входы вне домена никогда не попадают в вычисления (TypeError/ValueError)
2. Результат вне домена обрабатывается только через OverflowPolicy, никогда молча
3. SATURATE применяется только к скалярным результатам и логируется как WARNING
4. Связанные значения (gcd + коэффициенты, состояние шага) не клампятся:
   при SATURATE, как и при FAIL_FAST, выбрасывается IntegerOverflowViolation
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterable, Optional

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ ДОМЕНА
# =============================================================================

# Разрядность домена по умолчанию
DEFAULT_INTEGER_BITS: Final[int] = 64

# Границы знакового 64-bit домена
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class IntegerOverflowViolation(OverflowError):
    """
    Значение не представимо в целочисленном домене.

    Возникает, когда результат операции (например, gcd(MIN, 0) или lcm)
    выходит за границы домена при политике FAIL_FAST, а также для связанных
    значений, которые нельзя клампить согласованно (SATURATE).
    """

    pass


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


class OverflowPolicy(str, Enum):
    """Политика обработки непредставимых значений."""

    PROMOTE = "promote"  # Точный результат в неограниченном int
    FAIL_FAST = "fail_fast"  # IntegerOverflowViolation
    SATURATE = "saturate"  # Clamp к max_value домена


@dataclass(frozen=True)
class IntegerDomain:
    """Знаковый целочисленный домен фиксированной ширины.

    Default: 64 bits, FAIL_FAST.
    """

    bits: int = DEFAULT_INTEGER_BITS
    overflow_policy: OverflowPolicy = OverflowPolicy.FAIL_FAST

    def __post_init__(self) -> None:
        if self.bits < 2:
            raise ValueError(f"bits must be >= 2, got {self.bits}")
        # Допускается строковое значение политики, например "fail_fast"
        object.__setattr__(self, "overflow_policy", OverflowPolicy(self.overflow_policy))

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1

    def contains(self, value: int) -> bool:
        """Проверка попадания значения в [min_value, max_value]."""
        return self.min_value <= value <= self.max_value


DEFAULT_INTEGER_DOMAIN: Final[IntegerDomain] = IntegerDomain()


def resolve_domain(domain: Optional[IntegerDomain]) -> IntegerDomain:
    """Домен по умолчанию, если явно не задан."""
    return DEFAULT_INTEGER_DOMAIN if domain is None else domain


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_integer(value: object, domain: Optional[IntegerDomain] = None) -> bool:
    """
    Проверка, что значение является int домена.

    bool отклоняется, несмотря на то что является подклассом int.

    Examples:
        >>> is_valid_integer(42)
        True
        >>> is_valid_integer(True)
        False
        >>> is_valid_integer(2**63)
        False
    """
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    return resolve_domain(domain).contains(value)


def validate_integer(value: object, name: str, domain: Optional[IntegerDomain] = None) -> int:
    """
    Валидация входного целого.

    Args:
        value: Проверяемое значение
        name: Имя параметра для сообщения об ошибке
        domain: Целочисленный домен (default: DEFAULT_INTEGER_DOMAIN)

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int (или bool)
        ValueError: Если value вне диапазона домена
    """
    if is_valid_integer(value, domain):
        return value

    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")

    dom = resolve_domain(domain)
    raise ValueError(
        f"{name}={value} outside {dom.bits}-bit domain "
        f"[{dom.min_value}, {dom.max_value}]"
    )


# =============================================================================
# ПОЛИТИКА ПЕРЕПОЛНЕНИЯ
# =============================================================================


def apply_overflow_policy(value: int, operation: str, domain: Optional[IntegerDomain] = None) -> int:
    """
    Применение политики переполнения к неотрицательному результату.

    Args:
        value: Точный результат (неотрицательный)
        operation: Имя операции для логов и сообщений
        domain: Целочисленный домен

    Returns:
        - value, если value <= max_value
        - PROMOTE: value без изменений
        - SATURATE: max_value

    Raises:
        IntegerOverflowViolation: FAIL_FAST и value > max_value
    """
    dom = resolve_domain(domain)
    if value <= dom.max_value:
        return value

    policy = dom.overflow_policy
    if policy == OverflowPolicy.PROMOTE:
        logger.debug("%s: promoted result %d beyond %d-bit domain", operation, value, dom.bits)
        return value

    if policy == OverflowPolicy.SATURATE:
        logger.warning(
            "%s: result %d saturated to %d (%d-bit domain)",
            operation,
            value,
            dom.max_value,
            dom.bits,
        )
        return dom.max_value

    logger.debug("%s: result %d overflows %d-bit domain", operation, value, dom.bits)
    raise IntegerOverflowViolation(
        f"{operation}: result {value} does not fit {dom.bits}-bit domain "
        f"(max {dom.max_value}), overflow_policy={policy.value}"
    )


def check_representable(values: Iterable[int], operation: str, domain: Optional[IntegerDomain] = None) -> None:
    """
    Проверка представимости связанных значений.

    Используется для результатов, которые нельзя клампить по отдельности:
    gcd вместе с коэффициентами Безу, состояние шага алгоритма Евклида.

    Args:
        values: Точные значения
        operation: Имя операции для логов и сообщений
        domain: Целочисленный домен

    Raises:
        IntegerOverflowViolation: Значение вне домена при FAIL_FAST или SATURATE
    """
    dom = resolve_domain(domain)
    overflowed = [value for value in values if not dom.contains(value)]
    if not overflowed:
        return

    policy = dom.overflow_policy
    if policy == OverflowPolicy.PROMOTE:
        logger.debug("%s: promoted values %s beyond %d-bit domain", operation, overflowed, dom.bits)
        return

    logger.debug("%s: values %s overflow %d-bit domain", operation, overflowed, dom.bits)
    raise IntegerOverflowViolation(
        f"{operation}: values {overflowed} do not fit {dom.bits}-bit domain "
        f"and cannot be clamped consistently, overflow_policy={policy.value}"
    )
