"""
JSON Schema контракты для BigInt и BigFrac

Payload хранит числа десятичными литералами (Draft 2020-12):
- big_int.json:  {"value": "<literal>"}
- big_frac.json: {"numerator": "<literal>", "denominator": "<literal>"}

Схема проверяет только форму литералов. Нулевой знаменатель и сокращение
дроби остаются за конструкторами BigInt/BigFrac.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator

from exactnum.core.domain.fraction import BigFrac
from exactnum.core.domain.integer import BigInt

BIG_INT_SCHEMA = "big_int"
BIG_FRAC_SCHEMA = "big_frac"

_PACKAGED_SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Чтение схем из каталога (по умолчанию schema/ в пакете) с кэшем
    и meta-валидацией.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or _PACKAGED_SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Raises:
            FileNotFoundError: Нет файла <schema_name>.json
            ValueError: Файл не является валидной JSON Schema
        """
        if schema_name not in self._schemas:
            schema_path = self._schema_dir / f"{schema_name}.json"
            if not schema_path.exists():
                raise FileNotFoundError(f"Schema not found: {schema_path}")

            schema = json.loads(schema_path.read_text(encoding="utf-8"))
            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e
            self._schemas[schema_name] = schema

        return self._schemas[schema_name]


_PACKAGED_SCHEMAS = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Draft 2020-12 валидатор одной упакованной схемы."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.validator = Draft202012Validator(_PACKAGED_SCHEMAS.load_schema(schema_name))

    def validate(self, data: Dict[str, Any]) -> None:
        """Raises jsonschema.ValidationError на первом нарушении."""
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        return self.validator.iter_errors(data)


class BigIntValidator(ContractValidator):
    def __init__(self):
        super().__init__(BIG_INT_SCHEMA)


class BigFracValidator(ContractValidator):
    def __init__(self):
        super().__init__(BIG_FRAC_SCHEMA)


# =============================================================================
# PAYLOAD CONVERSION
# =============================================================================


def validate_big_int(data: Dict[str, Any]) -> None:
    BigIntValidator().validate(data)


def validate_big_frac(data: Dict[str, Any]) -> None:
    BigFracValidator().validate(data)


def big_int_to_payload(x: BigInt) -> Dict[str, str]:
    return {"value": str(x)}


def big_int_from_payload(data: Dict[str, Any]) -> BigInt:
    """Проверка по схеме, затем разбор литерала."""
    validate_big_int(data)
    return BigInt(data["value"])


def big_frac_to_payload(x: BigFrac) -> Dict[str, str]:
    return {"numerator": str(x.numerator), "denominator": str(x.denominator)}


def big_frac_from_payload(data: Dict[str, Any]) -> BigFrac:
    """
    Проверка по схеме, затем BigFrac(numerator, denominator).

    Дробь сокращается, знак переносится в числитель.

    Raises:
        jsonschema.ValidationError: payload не соответствует схеме
        DivisionByZero: denominator == "0"
    """
    validate_big_frac(data)
    return BigFrac(data["numerator"], data["denominator"])
