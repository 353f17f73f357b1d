"""
JSON Schema Contract Validators

Валидация сериализованного квинтильного распределения против формального
JSON Schema контракта (Draft 2020-12). Схемы поставляются вместе с пакетом
в src/core/contracts/schema/.

Схемы:
- distribution.json (Distribution.model_dump(mode="json"))
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator
from pydantic import BaseModel

# Каталог схем внутри пакета
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с кэшем и meta-валидацией.

    По умолчанию читает схемы из SCHEMA_DIR.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени без расширения.

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name not in self._schemas:
            schema_path = self._schema_dir / f"{schema_name}.json"
            if not schema_path.is_file():
                raise FileNotFoundError(f"Schema not found: {schema_path}")

            schema = json.loads(schema_path.read_text(encoding="utf-8"))
            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

            self._schemas[schema_name] = schema

        return self._schemas[schema_name]


@lru_cache(maxsize=1)
def default_schema_loader() -> SchemaLoader:
    """Общий загрузчик пакетных схем (создаётся при первом обращении)."""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class DistributionValidator:
    """
    Валидатор контракта distribution.

    Принимает как сериализованные данные, так и модель Distribution.
    """

    schema_name = "distribution"

    def __init__(self, loader: SchemaLoader | None = None):
        self.schema = (loader or default_schema_loader()).load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any] | BaseModel) -> None:
        """
        Валидация данных против схемы.

        Args:
            data: dict из model_dump(mode="json") или сама модель

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        if isinstance(data, BaseModel):
            data = data.model_dump(mode="json")
        self.validator.validate(data)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_distribution(data: Dict[str, Any] | BaseModel) -> None:
    """
    Валидация сериализованного Distribution.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DistributionValidator().validate(data)
