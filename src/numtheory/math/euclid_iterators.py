"""
Euclid Iterators — Пошаговые формы алгоритма Евклида

Два ленивых конечных итератора, выдающих каждое промежуточное состояние:
- GcdIterator: (a, b) обычного алгоритма, включая явный шаг нормализации знаков
- GcdExtendedIterator: (a, b, a0, a1, b0, b1, q) расширенного алгоритма

Итераторы одноразовые: экземпляр проходится один раз от состояния,
заданного при создании; для повторного прохода создаётся новый экземпляр.

Каждый итератор — state machine: текущее состояние (или None после
завершения) и чистая функция шага, возвращающая следующее состояние
или None.

Функции шага работают на точных значениях. Состояние, поля которого
выходят за домен (|MIN| на шаге нормализации), не клампится: при
FAIL_FAST и SATURATE итератор выбрасывает IntegerOverflowViolation,
при PROMOTE выдаёт состояние как есть.
"""

import logging
from typing import Iterator, Optional

from src.numtheory.domain.results import EuclidStep, ExtendedEuclidStep
from src.numtheory.math.euclid_generic import bezout_step
from src.numtheory.math.integer_safeguards import (
    IntegerDomain,
    check_representable,
    validate_integer,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ФУНКЦИИ ШАГА
# =============================================================================


def euclid_step(state: EuclidStep) -> Optional[EuclidStep]:
    """
    Следующее состояние обычного алгоритма Евклида.

    Правила (по порядку):
    1. a < 0 или b < 0 → (|a|, |b|)
    2. b == 0 → None (конец)
    3. a < b → (b, a)
    4. иначе → (b, a mod b)
    """
    a, b = state.a, state.b
    if a < 0 or b < 0:
        return EuclidStep(a=abs(a), b=abs(b))
    if b == 0:
        return None
    if a < b:
        return EuclidStep(a=b, b=a)
    return EuclidStep(a=b, b=a % b)


def extended_euclid_step(state: ExtendedEuclidStep) -> Optional[ExtendedEuclidStep]:
    """Следующее состояние расширенного алгоритма Евклида; None при b == 0."""
    if state.b == 0:
        return None
    a, b, a0, a1, b0, b1, q = bezout_step(state.a, state.b, state.a0, state.a1, state.b0, state.b1)
    return ExtendedEuclidStep(a=a, b=b, a0=a0, a1=a1, b0=b0, b1=b1, q=q)


# =============================================================================
# ИТЕРАТОРЫ
# =============================================================================


class GcdIterator:
    """
    Итератор обычного алгоритма Евклида.

    Начальное состояние — исходные (a, b) без нормализации; отрицательные
    значения дают явный шаг (|a|, |b|), видимый потребителю.

    Пример: GcdIterator(-9, -12) → (-9, -12), (9, 12), (12, 9), (9, 3), (3, 0)
    """

    def __init__(self, a: int, b: int, *, domain: Optional[IntegerDomain] = None):
        validate_integer(a, "a", domain)
        validate_integer(b, "b", domain)
        self._domain = domain
        self._state: Optional[EuclidStep] = EuclidStep(a=a, b=b)
        self._started = False

    def __iter__(self) -> Iterator[EuclidStep]:
        return self

    def __next__(self) -> EuclidStep:
        # Следующее состояние вычисляется лениво, при запросе
        if self._state is not None and self._started:
            previous = self._state
            state = euclid_step(previous)
            if state is None:
                logger.debug("GcdIterator exhausted at %s", previous.as_tuple())
            else:
                check_representable(state.as_tuple(), "GcdIterator", self._domain)
            self._state = state
        if self._state is None:
            raise StopIteration
        self._started = True
        return self._state


class GcdExtendedIterator:
    """
    Итератор расширенного алгоритма Евклида.

    В отличие от GcdIterator, нормализация выполняется при создании:
    (a, b) ← (|a|, |b|), затем обмен при a < b. Первое состояние уже
    удовлетворяет a >= b >= 0, коэффициенты (1, 0, 0, 1), q = 0.
    Инвариант шага проверяется относительно этих нормализованных (A, B).
    """

    def __init__(self, a: int, b: int, *, domain: Optional[IntegerDomain] = None):
        validate_integer(a, "a", domain)
        validate_integer(b, "b", domain)
        a = abs(a)
        b = abs(b)
        if a < b:
            a, b = b, a
        self.a = a
        self.b = b
        self._domain = domain
        self._state: Optional[ExtendedEuclidStep] = ExtendedEuclidStep(
            a=a, b=b, a0=1, a1=0, b0=0, b1=1, q=0
        )
        check_representable(self._state.as_tuple(), "GcdExtendedIterator", domain)

    def __iter__(self) -> Iterator[ExtendedEuclidStep]:
        return self

    def __next__(self) -> ExtendedEuclidStep:
        current = self._state
        if current is None:
            raise StopIteration
        state = extended_euclid_step(current)
        if state is None:
            logger.debug("GcdExtendedIterator exhausted at %s", current.as_tuple())
        else:
            check_representable(state.as_tuple(), "GcdExtendedIterator", self._domain)
        self._state = state
        return current
