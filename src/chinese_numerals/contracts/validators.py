"""
JSON Schema Contract Validators

Валидация внешних запросов на рендеринг (JSON) до построения SignedNumeral.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (в пакете, contracts/schema/):
- numeral_request.json
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from chinese_numerals.core.magnitude import parse_decimal
from chinese_numerals.core.render_tables import Case, Variant
from chinese_numerals.core.scale import MagnitudeForm, Scale
from chinese_numerals.domain.numeral import SignedNumeral

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются внутри пакета (contracts/schema/).
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'numeral_request')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        """
        Args:
            schema_name: Имя схемы для валидации
            loader: Загрузчик схем (default: общий загрузчик пакета)
        """
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """True если данные валидны, False иначе"""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации"""
        return self.validator.iter_errors(data)


class NumeralRequestValidator(ContractValidator):
    """Валидатор для numeral_request контракта."""

    def __init__(self):
        super().__init__("numeral_request")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_numeral_request(data: Dict[str, Any]) -> None:
    """
    Валидация numeral_request данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    NumeralRequestValidator().validate(data)


def numeral_from_request(data: Dict[str, Any]) -> SignedNumeral:
    """
    Построение SignedNumeral из валидного запроса.

    Args:
        data: Запрос numeral_request

    Returns:
        SignedNumeral

    Raises:
        ValidationError: Если запрос не соответствует схеме
        OutOfRangeError: Если значение вне диапазона системы
    """
    validate_numeral_request(data)

    raw = data["value"]
    # JSON Schema "integer" допускает 5.0; строки разбираются без лимита int(str)
    value = parse_decimal(raw) if isinstance(raw, str) else int(raw)

    return SignedNumeral.from_int(
        value,
        Scale(data["scale"]),
        MagnitudeForm(data.get("form", MagnitudeForm.BOUNDED.value)),
    )


def render_numeral_request(data: Dict[str, Any]) -> str:
    """
    Рендеринг запроса numeral_request в строку.

    Examples:
        >>> render_numeral_request({"value": 10005, "scale": "myriad"})
        '一万零五'

    Raises:
        ValidationError: Если запрос не соответствует схеме
        OutOfRangeError: Если значение вне диапазона системы
    """
    numeral = numeral_from_request(data)
    variant = Variant(data.get("variant", Variant.SIMPLIFIED.value))
    case = Case(data.get("case", Case.LOWER.value))

    logger.debug("Rendering %s numeral (%s, %s)", numeral.scale.label, variant.value, case.value)
    return numeral.render(variant, case)
