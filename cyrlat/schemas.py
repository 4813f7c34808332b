"""Loading of bundled and user-supplied transliteration schemas."""

import json
import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Any

from cyrlat.exceptions import SchemaFormatError, SchemaNotFoundError
from cyrlat.models import Schema
from cyrlat.utils.io import read_json
from cyrlat.utils.schema import ETC_DIR, validate_definition


SCHEMA_DIR = ETC_DIR / "schemas"

# Names double as file names, so keep them to a safe alphabet
SCHEMA_NAME = re.compile(r"[a-z0-9_]+")

logger = logging.getLogger(__name__)


def list_schemas() -> list[str]:
    """
    List bundled schema names.

    Returns:
        Sorted schema names
    """
    return sorted(path.stem for path in SCHEMA_DIR.glob("*.json"))


def schema_from_definition(data: Any, source: str) -> Schema:
    """
    Validate a parsed definition and build a schema from it.

    Args:
        data: Parsed JSON definition
        source: Where the definition came from, for error messages

    Returns:
        Loaded schema

    Raises:
        SchemaFormatError: If the definition is structurally invalid
    """
    errors = validate_definition(data)
    if errors:
        raise SchemaFormatError(source, errors)
    return Schema.from_dict(data)


def load_schema_file(path: Path) -> Schema:
    """
    Load a schema definition from a JSON file.

    Args:
        path: Path to definition file

    Returns:
        Loaded schema

    Raises:
        SchemaNotFoundError: If the file does not exist
        SchemaFormatError: If the file is not a valid definition
    """
    path = Path(path)
    if not path.is_file():
        raise SchemaNotFoundError(str(path))

    try:
        data = read_json(path)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SchemaFormatError(str(path), [str(e)]) from e

    schema = schema_from_definition(data, str(path))
    logger.debug(f"Loaded schema {schema.name} from {path}")
    return schema


@lru_cache(maxsize=None)
def load_schema(name: str) -> Schema:
    """
    Get a bundled schema by name.

    Loaded once per name; later calls return the same read-only instance.

    Args:
        name: Schema name, e.g. "wikipedia"

    Returns:
        Loaded schema

    Raises:
        SchemaNotFoundError: If there is no bundled schema with this name
        SchemaFormatError: If the bundled definition is malformed
    """
    if not SCHEMA_NAME.fullmatch(name):
        raise SchemaNotFoundError(name)

    path = SCHEMA_DIR / f"{name}.json"
    if not path.is_file():
        raise SchemaNotFoundError(name)

    return load_schema_file(path)
