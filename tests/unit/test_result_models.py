"""
Tests for Pydantic Result Models

Покрывает:
- Создание и валидацию BezoutResult / EuclidStep / ExtendedEuclidStep
- Immutability (frozen=True)
- Семейство решений и проверки инвариантов
- JSON сериализацию/десериализацию
"""

import pytest
from pydantic import ValidationError

from src.numtheory.domain import BezoutResult, EuclidStep, ExtendedEuclidStep


@pytest.fixture
def bezout_6_10():
    """gcd_extended(6, 10)"""
    return BezoutResult(gcd=2, x0=2, y0=-1, x1=-5, y1=3)


class TestBezoutResult:
    """Тесты для BezoutResult"""

    def test_negative_gcd_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BezoutResult(gcd=-1, x0=0, y0=0, x1=0, y1=0)

    def test_missing_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BezoutResult(gcd=1, x0=0, y0=0, x1=0)

    def test_frozen(self, bezout_6_10) -> None:
        with pytest.raises(ValidationError):
            bezout_6_10.x0 = 7

    def test_satisfies(self, bezout_6_10) -> None:
        assert bezout_6_10.satisfies(6, 10)
        assert not bezout_6_10.satisfies(6, 12)

    def test_solution_family(self, bezout_6_10) -> None:
        assert bezout_6_10.solution(0) == (2, -1)
        assert bezout_6_10.solution(1) == (-3, 2)
        assert bezout_6_10.solution(-1) == (7, -4)
        for k in range(-3, 4):
            x, y = bezout_6_10.solution(k)
            assert 6 * x + 10 * y == 2

    def test_json_round_trip(self, bezout_6_10) -> None:
        restored = BezoutResult.model_validate_json(bezout_6_10.model_dump_json())
        assert restored == bezout_6_10
        assert restored.as_tuple() == (2, 2, -1, -5, 3)


class TestEuclidSteps:
    """Тесты для EuclidStep / ExtendedEuclidStep"""

    def test_euclid_step_allows_negative(self) -> None:
        step = EuclidStep(a=-9, b=-12)
        assert step.as_tuple() == (-9, -12)

    def test_extended_step_rejects_negative_remainder(self) -> None:
        with pytest.raises(ValidationError):
            ExtendedEuclidStep(a=5, b=-1, a0=1, a1=0, b0=0, b1=1, q=0)

    def test_extended_step_satisfies(self) -> None:
        step = ExtendedEuclidStep(a=4, b=2, a0=1, a1=-1, b0=-1, b1=2, q=1)
        assert step.satisfies(10, 6)
        assert not step.satisfies(10, 7)

    def test_steps_are_hashable(self) -> None:
        """Frozen модели пригодны как ключи"""
        seen = {EuclidStep(a=3, b=0), EuclidStep(a=3, b=0)}
        assert len(seen) == 1
