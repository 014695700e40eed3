"""
JSON Schema Contract Validators

Проверка входного документа с долями против JSON Schema контракта
до построения pydantic моделей. Схемы лежат в schema/ как package data.

Схемы:
- share_document.json (порог k, объявленное n, доли по меткам x)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

# Каталог схем по умолчанию
SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Чтение и meta-validation схем с кэшированием по имени.

    Args:
        schema_dir: Каталог со схемами <name>.json (default: SCHEMA_DIR)
    """

    def __init__(self, schema_dir: Path | None = None):
        self.schema_dir = schema_dir or SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени без расширения (например, 'share_document').

        Raises:
            FileNotFoundError: нет файла <schema_name>.json
            ValueError: схема не проходит Draft 2020-12 meta-validation
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        path = self.schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}")

        self._cache[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Draft 2020-12 валидатор, привязанный к одной именованной схеме."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.validator = Draft202012Validator((loader or _SCHEMA_LOADER).load_schema(schema_name))

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: наиболее релевантное нарушение схемы
        """
        self.validator.validate(data)


class ShareDocumentValidator(ContractValidator):
    """Контракт документа с долями."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("share_document", loader)


def validate_share_document(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: документ не соответствует share_document.json
    """
    ShareDocumentValidator().validate(data)
