"""
Core math modules

Целочисленные примитивы: делимость, НОД/НОК, расширенный алгоритм Евклида
и его пошаговые формы.
"""

# Integer Safeguards
from src.numtheory.math.integer_safeguards import (
    DEFAULT_INTEGER_BITS,
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

# Generic Euclid
from src.numtheory.math.euclid_generic import (
    EuclideanInteger,
    bezout_nonnegative,
    gcd_generic,
    gcd_nonnegative,
)

# Divisibility
from src.numtheory.math.divisibility import (
    divides,
    is_common_divisor,
    is_common_multiple,
    is_divisible_by,
)

# GCD / LCM
from src.numtheory.math.gcd import gcd, lcm

# Extended GCD
from src.numtheory.math.gcd_extended import gcd_extended

# Iterators
from src.numtheory.math.euclid_iterators import (
    GcdExtendedIterator,
    GcdIterator,
    euclid_step,
    extended_euclid_step,
)

__all__ = [
    # Integer Safeguards
    "DEFAULT_INTEGER_BITS",
    "DEFAULT_INTEGER_DOMAIN",
    "INT64_MAX",
    "INT64_MIN",
    "IntegerDomain",
    "IntegerOverflowViolation",
    "OverflowPolicy",
    "apply_overflow_policy",
    "check_representable",
    "is_valid_integer",
    "validate_integer",
    # Generic Euclid
    "EuclideanInteger",
    "bezout_nonnegative",
    "gcd_generic",
    "gcd_nonnegative",
    # Divisibility
    "divides",
    "is_divisible_by",
    "is_common_divisor",
    "is_common_multiple",
    # GCD / LCM
    "gcd",
    "lcm",
    # Extended GCD
    "gcd_extended",
    # Iterators
    "GcdIterator",
    "GcdExtendedIterator",
    "euclid_step",
    "extended_euclid_step",
]
