"""
JSON Schema Contract Validators

Валидация сериализованных значений palindromeda по JSON Schema
(Draft 2020-12), поставляемым вместе с пакетом:
- schema/palindrome.json        — Palindrome.model_dump()
- schema/palindrome_range.json  — PalindromeRange.model_dump(mode="json")

Схема palindrome.json проверяет только границы значения;
палиндромность гарантируется моделью Palindrome.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

PALINDROME_SCHEMA: Final[str] = "palindrome"
PALINDROME_RANGE_SCHEMA: Final[str] = "palindrome_range"


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация схемы по имени (без расширения).

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    schema_path = SCHEMA_DIR / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

    return schema


@lru_cache(maxsize=None)
def get_validator(schema_name: str) -> Draft202012Validator:
    """Validator для схемы; is_valid / iter_errors / validate."""
    return Draft202012Validator(load_schema(schema_name))


def validate_palindrome(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного Palindrome.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    get_validator(PALINDROME_SCHEMA).validate(data)


def validate_palindrome_range(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного PalindromeRange.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    get_validator(PALINDROME_RANGE_SCHEMA).validate(data)
