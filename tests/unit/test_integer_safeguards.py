"""
Тесты для модуля Integer Safeguards

Проверяет:
1. Границы домена (64-bit и произвольная разрядность)
2. Валидацию входов (тип, bool, диапазон)
3. check_representable для связанных значений (без клампинга)
4. apply_overflow_policy и логирование вмешательств
"""

import logging

import pytest

from src.numtheory.math.gcd import gcd
from src.numtheory.math.integer_safeguards import (
    DEFAULT_INTEGER_DOMAIN,
    INT64_MAX,
    INT64_MIN,
    IntegerDomain,
    IntegerOverflowViolation,
    OverflowPolicy,
    apply_overflow_policy,
    check_representable,
    is_valid_integer,
    validate_integer,
)


# =============================================================================
# ТЕСТЫ ДОМЕНА
# =============================================================================


class TestIntegerDomain:
    """Тесты для IntegerDomain"""

    def test_default_is_int64_fail_fast(self) -> None:
        assert DEFAULT_INTEGER_DOMAIN.bits == 64
        assert DEFAULT_INTEGER_DOMAIN.min_value == INT64_MIN
        assert DEFAULT_INTEGER_DOMAIN.max_value == INT64_MAX
        assert DEFAULT_INTEGER_DOMAIN.overflow_policy == OverflowPolicy.FAIL_FAST

    def test_narrow_domain_bounds(self) -> None:
        domain = IntegerDomain(bits=8)
        assert domain.min_value == -128
        assert domain.max_value == 127
        assert domain.contains(-128)
        assert not domain.contains(128)

    def test_invalid_bits_raises(self) -> None:
        with pytest.raises(ValueError, match="bits must be >= 2"):
            IntegerDomain(bits=1)

    def test_string_policy_coerced_to_enum(self) -> None:
        domain = IntegerDomain(overflow_policy="fail_fast")
        assert domain.overflow_policy is OverflowPolicy.FAIL_FAST
        assert domain == IntegerDomain()

    def test_string_policy_applied_by_operations(self) -> None:
        domain = IntegerDomain(overflow_policy="fail_fast")
        with pytest.raises(IntegerOverflowViolation, match="overflow_policy=fail_fast"):
            gcd(INT64_MIN, 0, domain=domain)
        saturating = IntegerDomain(overflow_policy="saturate")
        assert gcd(INT64_MIN, 0, domain=saturating) == INT64_MAX

    def test_unknown_policy_string_rejected(self) -> None:
        with pytest.raises(ValueError):
            IntegerDomain(overflow_policy="wrap")

    def test_domain_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_INTEGER_DOMAIN.bits = 32


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidateInteger:
    """Тесты для validate_integer / is_valid_integer"""

    def test_valid_values_unchanged(self) -> None:
        for value in (0, 1, -1, INT64_MIN, INT64_MAX):
            assert validate_integer(value, "x") == value
            assert is_valid_integer(value)

    def test_bool_rejected(self) -> None:
        assert not is_valid_integer(True)
        with pytest.raises(TypeError, match="flag must be int, got bool"):
            validate_integer(False, "flag")

    def test_non_int_rejected(self) -> None:
        assert not is_valid_integer(1.0)
        assert not is_valid_integer("1")
        with pytest.raises(TypeError, match="x must be int, got float"):
            validate_integer(1.5, "x")

    def test_validate_agrees_with_predicate(self) -> None:
        """validate_integer принимает ровно то, что is_valid_integer"""
        domain = IntegerDomain(bits=8)
        for value in (-129, -128, 0, 127, 128, True, 1.0, None):
            if is_valid_integer(value, domain):
                assert validate_integer(value, "x", domain) == value
            else:
                with pytest.raises((TypeError, ValueError)):
                    validate_integer(value, "x", domain)

    def test_out_of_domain_rejected(self) -> None:
        assert not is_valid_integer(INT64_MAX + 1)
        assert not is_valid_integer(INT64_MIN - 1)
        with pytest.raises(ValueError, match="outside 64-bit domain"):
            validate_integer(INT64_MAX + 1, "x")


# =============================================================================
# ТЕСТЫ ПОЛИТИКИ ПЕРЕПОЛНЕНИЯ
# =============================================================================


class TestCheckRepresentable:
    """check_representable для каждой политики"""

    def test_in_range_values_pass(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG):
            check_representable((INT64_MIN, INT64_MAX, 0, -1), "op")
        assert caplog.records == []

    def test_fail_fast_raises(self) -> None:
        with pytest.raises(IntegerOverflowViolation, match="overflow_policy=fail_fast"):
            check_representable((2**63, 0), "gcd_extended")

    def test_violation_is_overflow_error(self) -> None:
        with pytest.raises(OverflowError):
            check_representable((2**63,), "op")

    def test_saturate_raises_instead_of_clamping(self) -> None:
        """Связанные значения нельзя клампить по отдельности"""
        domain = IntegerDomain(overflow_policy=OverflowPolicy.SATURATE)
        with pytest.raises(IntegerOverflowViolation, match="cannot be clamped consistently"):
            check_representable((2**63, -1, 0, 0, 0), "gcd_extended", domain)

    def test_promote_passes_and_logs_debug(self, caplog) -> None:
        domain = IntegerDomain(overflow_policy=OverflowPolicy.PROMOTE)
        with caplog.at_level(logging.DEBUG):
            check_representable((2**63, 6), "GcdIterator", domain)
        assert any(r.levelno == logging.DEBUG for r in caplog.records)

    def test_message_lists_offending_values(self) -> None:
        domain = IntegerDomain(bits=8)
        with pytest.raises(IntegerOverflowViolation, match=r"op: values \[128\]"):
            check_representable((1, 128, -128), "op", domain)


class TestApplyOverflowPolicy:
    """apply_overflow_policy и логирование"""

    def test_in_range_passthrough(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG):
            assert apply_overflow_policy(42, "op") == 42
        assert caplog.records == []

    def test_saturate_logs_warning(self, caplog) -> None:
        domain = IntegerDomain(bits=8, overflow_policy=OverflowPolicy.SATURATE)
        with caplog.at_level(logging.WARNING):
            assert apply_overflow_policy(300, "lcm", domain) == 127
        assert any(
            r.levelno == logging.WARNING and "saturated" in r.getMessage()
            for r in caplog.records
        )

    def test_promote_logs_debug(self, caplog) -> None:
        domain = IntegerDomain(bits=8, overflow_policy=OverflowPolicy.PROMOTE)
        with caplog.at_level(logging.DEBUG):
            assert apply_overflow_policy(300, "lcm", domain) == 300
        assert any("promoted" in r.getMessage() for r in caplog.records)

    def test_fail_fast_message_names_operation(self) -> None:
        domain = IntegerDomain(bits=8)
        with pytest.raises(IntegerOverflowViolation, match="lcm: result 300"):
            apply_overflow_policy(300, "lcm", domain)
