"""JSON Schema validation utilities."""

from functools import lru_cache
from pathlib import Path
from typing import Any, cast

from jsonschema import Draft7Validator

from cyrlat.utils.io import read_json


ETC_DIR = Path(__file__).parent.parent / "etc"
DEFINITION_SCHEMA_PATH = ETC_DIR / "schema.schema.json"


def load_json_schema(schema_path: Path) -> dict[str, Any]:
    """
    Load JSON schema from file.

    Args:
        schema_path: Path to schema file

    Returns:
        Parsed schema dict
    """
    return cast(dict[str, Any], read_json(schema_path))


@lru_cache(maxsize=1)
def _definition_validator() -> Draft7Validator:
    return Draft7Validator(load_json_schema(DEFINITION_SCHEMA_PATH))


def validate_against_schema(
    data: Any,
    schema: dict[str, Any],
) -> list[str]:
    """
    Validate data against JSON schema.

    Args:
        data: Data to validate
        schema: JSON schema

    Returns:
        List of validation error messages (empty if valid)
    """
    return _format_errors(Draft7Validator(schema), data)


def validate_definition(data: Any) -> list[str]:
    """Validate a transliteration schema definition."""
    return _format_errors(_definition_validator(), data)


def _format_errors(validator: Draft7Validator, data: Any) -> list[str]:
    errors = []
    for error in sorted(validator.iter_errors(data), key=str):
        path = ".".join(str(p) for p in error.path) if error.path else "root"
        errors.append(f"{path}: {error.message}")
    return errors
