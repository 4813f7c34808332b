"""Schema-driven Cyrillic to Latin transliteration."""

from cyrlat.exceptions import SchemaFormatError, SchemaLoadError, SchemaNotFoundError
from cyrlat.models import Schema
from cyrlat.normalize.transliteration import (
    transliterate,
    transliterate_many,
    transliterate_with_schema,
    transliterate_word,
)
from cyrlat.schemas import list_schemas, load_schema, load_schema_file


__version__ = "0.1.0"

__all__ = [
    "Schema",
    "SchemaFormatError",
    "SchemaLoadError",
    "SchemaNotFoundError",
    "list_schemas",
    "load_schema",
    "load_schema_file",
    "transliterate",
    "transliterate_many",
    "transliterate_with_schema",
    "transliterate_word",
]
