"""Quality checks for transliteration schema definitions."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from cyrlat.models import SampleCheckResult, SampleMismatch, Schema
from cyrlat.normalize.transliteration import transliterate_with_schema
from cyrlat.schemas import SCHEMA_DIR, list_schemas
from cyrlat.utils.io import read_json
from cyrlat.utils.schema import validate_definition as validate_structure


# Expected key length per table; endings may be one or two letters
KEY_LENGTHS = {
    "mapping": (1,),
    "prev_mapping": (1, 2),
    "next_mapping": (1, 2),
    "ending_mapping": (1, 2),
}


@dataclass
class ValidationResult:
    """Result of validation."""

    valid: bool
    errors: list[str]
    warnings: list[str]


def validate_definition(data: Any) -> ValidationResult:
    """
    Validate a parsed schema definition.

    Structural problems (unknown tables, non-string values) are errors.
    Suspicious keys are only warnings: schemas are not checked for
    consistency beyond their shape.

    Args:
        data: Parsed JSON definition

    Returns:
        Validation result
    """
    errors = validate_structure(data)
    warnings: list[str] = []

    if errors or not isinstance(data, dict):
        return ValidationResult(valid=False, errors=errors, warnings=warnings)

    for table_name, lengths in KEY_LENGTHS.items():
        for key in data.get(table_name) or {}:
            if key != key.lower():
                warnings.append(f"{table_name}: key {key!r} is not lowercase")
            if len(key) not in lengths:
                warnings.append(f"{table_name}: key {key!r} has unexpected length {len(key)}")

    return ValidationResult(valid=True, errors=errors, warnings=warnings)


def check_samples(schema: Schema) -> SampleCheckResult:
    """
    Run a schema's example pairs and collect mismatches.

    Args:
        schema: Loaded schema

    Returns:
        Sample check result
    """
    result = SampleCheckResult(schema=schema.name, total=len(schema.samples))
    for source, expected in schema.samples:
        actual = transliterate_with_schema(source, schema)
        if actual != expected:
            result.mismatches.append(
                SampleMismatch(source=source, expected=expected, actual=actual)
            )
    return result


def validate_schema_file(path: Path, logger: logging.Logger) -> ValidationResult:
    """
    Validate one definition file: structure first, then its samples.

    Args:
        path: Path to definition file
        logger: Logger instance

    Returns:
        Validation result
    """
    if not path.exists():
        return ValidationResult(valid=False, errors=[f"Schema file not found: {path}"], warnings=[])

    data = read_json(path)
    result = validate_definition(data)
    if not result.valid:
        logger.warning(f"{path.name}: {len(result.errors)} structural errors")
        return result

    samples = check_samples(Schema.from_dict(data))
    for mismatch in samples.mismatches:
        result.errors.append(
            f"sample {mismatch.source!r}: expected {mismatch.expected!r}, got {mismatch.actual!r}"
        )
    result.valid = not result.errors

    logger.info(f"{path.name}: {samples.total - len(samples.mismatches)}/{samples.total} samples passed")
    return result


def validate_bundled(
    logger: logging.Logger,
    names: list[str] | None = None,
) -> dict[str, ValidationResult]:
    """
    Validate bundled schemas.

    Args:
        logger: Logger instance
        names: Schema names to check (default: all bundled)

    Returns:
        Validation result per schema name
    """
    return {
        name: validate_schema_file(SCHEMA_DIR / f"{name}.json", logger)
        for name in (names if names is not None else list_schemas())
    }
