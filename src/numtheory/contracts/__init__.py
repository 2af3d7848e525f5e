"""
Contract Validation Module

JSON Schema контракты результатов, построенные из pydantic моделей.
"""

from .validators import (
    BezoutResultValidator,
    ContractValidator,
    EuclidStepValidator,
    ExtendedEuclidStepValidator,
    build_contract_schema,
    dump_contract,
    validate_bezout_result,
    validate_euclid_step,
    validate_extended_euclid_step,
)

__all__ = [
    # Classes
    "ContractValidator",
    "BezoutResultValidator",
    "EuclidStepValidator",
    "ExtendedEuclidStepValidator",
    # Functions
    "build_contract_schema",
    "dump_contract",
    "validate_bezout_result",
    "validate_euclid_step",
    "validate_extended_euclid_step",
]
