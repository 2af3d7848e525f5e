"""
Result Contracts — JSON Schema контракты результатов

Контракт = JSON Schema модели (model_json_schema()) плюс ограничения
формата передачи:
- каждое целочисленное поле ограничено границами IntegerDomain
  (по умолчанию знаковый 64-bit)
- additionalProperties: false

Схемы строятся из самих pydantic моделей и кэшируются по (модель, домен),
поэтому контракт не расходится с моделью при её изменении.

Контракты:
- BezoutResult
- EuclidStep
- ExtendedEuclidStep
"""

from functools import lru_cache
from typing import Any, Dict, Iterator, Optional, Type

from jsonschema import Draft202012Validator, ValidationError
from pydantic import BaseModel

from src.numtheory.domain.results import BezoutResult, EuclidStep, ExtendedEuclidStep
from src.numtheory.math.integer_safeguards import IntegerDomain, resolve_domain


# =============================================================================
# ПОСТРОЕНИЕ СХЕМ
# =============================================================================


def _bound_integer(prop: Dict[str, Any], domain: IntegerDomain) -> None:
    if prop.get("type") != "integer":
        return
    prop["minimum"] = max(prop.get("minimum", domain.min_value), domain.min_value)
    prop["maximum"] = min(prop.get("maximum", domain.max_value), domain.max_value)


@lru_cache(maxsize=None)
def _cached_schema(model: Type[BaseModel], domain: IntegerDomain) -> Dict[str, Any]:
    schema = model.model_json_schema()
    schema["$schema"] = "https://json-schema.org/draft/2020-12/schema"
    schema["additionalProperties"] = False
    for prop in schema.get("properties", {}).values():
        _bound_integer(prop, domain)

    Draft202012Validator.check_schema(schema)
    return schema


def build_contract_schema(
    model: Type[BaseModel], domain: Optional[IntegerDomain] = None
) -> Dict[str, Any]:
    """
    JSON Schema контракта для модели результата.

    Args:
        model: Pydantic модель (BezoutResult, EuclidStep, ExtendedEuclidStep)
        domain: Целочисленный домен для границ полей (default: 64-bit)

    Returns:
        Схема Draft 2020-12 (кэшированный dict, не изменять)
    """
    return _cached_schema(model, resolve_domain(domain))


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор данных против контракта модели."""

    model: Type[BaseModel]

    def __init__(self, domain: Optional[IntegerDomain] = None):
        self.domain = resolve_domain(domain)
        self.schema = build_contract_schema(self.model, self.domain)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют контракту
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class BezoutResultValidator(ContractValidator):
    model = BezoutResult


class EuclidStepValidator(ContractValidator):
    model = EuclidStep


class ExtendedEuclidStepValidator(ContractValidator):
    model = ExtendedEuclidStep


_VALIDATORS: Dict[Type[BaseModel], Type[ContractValidator]] = {
    BezoutResult: BezoutResultValidator,
    EuclidStep: EuclidStepValidator,
    ExtendedEuclidStep: ExtendedEuclidStepValidator,
}


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def dump_contract(result: BaseModel, domain: Optional[IntegerDomain] = None) -> Dict[str, Any]:
    """
    Сериализация результата с проверкой контракта.

    Результат PROMOTE за пределами домена (например, gcd = 2**63)
    не проходит контракт.

    Args:
        result: BezoutResult, EuclidStep или ExtendedEuclidStep
        domain: Целочисленный домен контракта

    Returns:
        model_dump() результата

    Raises:
        TypeError: Для модели без контракта
        ValidationError: Если данные не соответствуют контракту
    """
    validator_cls = _VALIDATORS.get(type(result))
    if validator_cls is None:
        raise TypeError(f"No contract for {type(result).__name__}")

    data = result.model_dump()
    validator_cls(domain).validate(data)
    return data


def validate_bezout_result(data: Dict[str, Any], domain: Optional[IntegerDomain] = None) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют контракту BezoutResult
    """
    BezoutResultValidator(domain).validate(data)


def validate_euclid_step(data: Dict[str, Any], domain: Optional[IntegerDomain] = None) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют контракту EuclidStep
    """
    EuclidStepValidator(domain).validate(data)


def validate_extended_euclid_step(
    data: Dict[str, Any], domain: Optional[IntegerDomain] = None
) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют контракту ExtendedEuclidStep
    """
    ExtendedEuclidStepValidator(domain).validate(data)
