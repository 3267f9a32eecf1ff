"""
JSON Schema Contract Validators

Модуль для валидации конфигураций профилей (RationalProfile), пришедших
извне (JSON/YAML/dict), согласно формальному JSON Schema контракту.
Использует библиотеку jsonschema для проверки соответствия данных схеме,
после чего профиль строится Pydantic моделью.

Схемы:
- rational_profile.json
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from fixed_rational.core.domain.profile import RationalProfile

# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
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
            schema_name: Имя схемы без расширения (например, 'rational_profile')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема сама по себе невалидна
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
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
    """Валидация данных против JSON Schema."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


class RationalProfileValidator(ContractValidator):
    """Валидатор для rational_profile контракта."""

    def __init__(self):
        super().__init__("rational_profile")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_rational_profile(data: Dict[str, Any]) -> None:
    """
    Валидация конфигурации профиля.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    RationalProfileValidator().validate(data)


def load_profile(data: Dict[str, Any]) -> RationalProfile:
    """
    Построение RationalProfile из внешней конфигурации.

    Сначала структурная проверка по JSON Schema, затем Pydantic валидация
    (включая проверку, что denominator помещается в int_type).

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
        pydantic.ValidationError: Если профиль не проходит валидацию модели
    """
    validate_rational_profile(data)
    return RationalProfile.model_validate(data)
