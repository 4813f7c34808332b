"""Exception hierarchy for cyrlat.

Only loading can fail: a schema that cannot be found or parsed is fatal for
the calling operation. Transliteration itself never raises.
"""


class CyrlatError(Exception):
    """Base exception for all cyrlat errors."""

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class SchemaLoadError(CyrlatError):
    """A transliteration schema could not be loaded."""

    pass


class SchemaNotFoundError(SchemaLoadError):
    """No schema exists under the requested name or path."""

    def __init__(self, name: str):
        super().__init__(f"There is no schema with name {name!r}", code="schema_not_found")
        self.name = name


class SchemaFormatError(SchemaLoadError):
    """Schema definition is not valid JSON or violates the definition schema."""

    def __init__(self, source: str, errors: list[str]):
        details = "; ".join(errors)
        super().__init__(f"Malformed schema definition {source}: {details}", code="schema_format")
        self.source = source
        self.errors = errors


class ConfigurationError(CyrlatError):
    """Settings file is missing, unreadable, or has the wrong shape."""

    pass
