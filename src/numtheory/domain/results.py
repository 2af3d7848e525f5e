"""
Results — Модели результатов алгоритма Евклида

Immutable Pydantic модели:
- BezoutResult: НОД и коэффициенты Безу (основная пара + пара ядра)
- EuclidStep: состояние обычного алгоритма Евклида
- ExtendedEuclidStep: состояние расширенного алгоритма Евклида

JSON Schema контракты строятся из этих моделей (src.numtheory.contracts).
"""

from typing import Tuple

from pydantic import BaseModel, Field


# =============================================================================
# BEZOUT RESULT
# =============================================================================


class BezoutResult(BaseModel):
    """
    Результат расширенного алгоритма Евклида.

    Инварианты для входов (a, b):
    - gcd = x0*a + y0*b (тождество Безу)
    - 0 = x1*a + y1*b (соотношение ядра)
    - gcd >= 0

    Все решения тождества Безу: (x0 + k*x1, y0 + k*y1).
    Для вырожденных входов (хотя бы один операнд равен 0) пара ядра
    равна (0, 0) и семейство решений вырождено.

    Immutable модель (frozen=True).
    """

    gcd: int = Field(..., ge=0, description="Наибольший общий делитель")
    x0: int = Field(..., description="Коэффициент при a в тождестве Безу")
    y0: int = Field(..., description="Коэффициент при b в тождестве Безу")
    x1: int = Field(..., description="Коэффициент при a в соотношении ядра")
    y1: int = Field(..., description="Коэффициент при b в соотношении ядра")

    model_config = {"frozen": True}  # Immutable

    def solution(self, k: int) -> Tuple[int, int]:
        """
        k-е решение тождества Безу.

        Returns:
            (x0 + k*x1, y0 + k*y1)
        """
        return self.x0 + k * self.x1, self.y0 + k * self.y1

    def satisfies(self, a: int, b: int) -> bool:
        """Проверка тождества Безу и соотношения ядра для (a, b)."""
        return (
            self.x0 * a + self.y0 * b == self.gcd
            and self.x1 * a + self.y1 * b == 0
        )

    def as_tuple(self) -> Tuple[int, int, int, int, int]:
        return self.gcd, self.x0, self.y0, self.x1, self.y1


# =============================================================================
# EUCLID STEPS
# =============================================================================


class EuclidStep(BaseModel):
    """Состояние обычного алгоритма Евклида. Терминальное состояние: b == 0."""

    a: int
    b: int

    model_config = {"frozen": True}

    def as_tuple(self) -> Tuple[int, int]:
        return self.a, self.b


class ExtendedEuclidStep(BaseModel):
    """
    Состояние расширенного алгоритма Евклида.

    Для нормализованных входов (A, B), A >= B >= 0, на каждом шаге:
    - a = a0*A + b0*B
    - b = a1*A + b1*B

    q — частное, которым получено состояние из предыдущего (0 для начального).
    """

    a: int = Field(..., ge=0)
    b: int = Field(..., ge=0)
    a0: int
    a1: int
    b0: int
    b1: int
    q: int = Field(..., ge=0, description="Частное предыдущего шага")

    model_config = {"frozen": True}

    def satisfies(self, a: int, b: int) -> bool:
        """Проверка инварианта шага для нормализованных входов (a, b)."""
        return (
            self.a0 * a + self.b0 * b == self.a
            and self.a1 * a + self.b1 * b == self.b
        )

    def as_tuple(self) -> Tuple[int, int, int, int, int, int, int]:
        return self.a, self.b, self.a0, self.a1, self.b0, self.b1, self.q
