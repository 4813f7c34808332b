"""Data models for transliteration schemas."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


# Padding placed on both sides of a word during letter resolution. Being
# zero-length it adds nothing to a context key and never equals a real letter.
BOUNDARY = ""

MAPPING_FIELDS = ("mapping", "prev_mapping", "next_mapping", "ending_mapping")


def _freeze(table: Mapping[str, str] | None) -> Mapping[str, str] | None:
    if table is None:
        return None
    return MappingProxyType({key.lower(): value for key, value in table.items()})


def _lookup(table: Mapping[str, str] | None, key: str) -> str | None:
    if table is None:
        return None
    return table.get(key)


@dataclass(frozen=True)
class Schema:
    """
    Named, read-only bundle of transliteration lookup tables.

    All four tables are optional. Keys are stored lowercase and every lookup
    lowercases its argument, so lookups are case-insensitive. A missing table
    and a missing key both yield ``None``.
    """

    name: str
    mapping: Mapping[str, str] | None = None
    prev_mapping: Mapping[str, str] | None = None
    next_mapping: Mapping[str, str] | None = None
    ending_mapping: Mapping[str, str] | None = None
    description: str = ""
    url: str = ""
    comments: tuple[str, ...] = ()
    samples: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        for name in MAPPING_FIELDS:
            object.__setattr__(self, name, _freeze(getattr(self, name)))

    def get_letter(self, s: str) -> str | None:
        """Plain single-letter mapping."""
        return _lookup(self.mapping, s.lower())

    def get_prev(self, s: str) -> str | None:
        """Rendering of the last letter of ``s`` given the letter before it."""
        return _lookup(self.prev_mapping, s.lower())

    def get_next(self, s: str) -> str | None:
        """Rendering of the first letter of ``s`` given the letter after it."""
        return _lookup(self.next_mapping, s.lower())

    def get_ending(self, s: str) -> str | None:
        """Word-final mapping for a 1- or 2-letter suffix."""
        return _lookup(self.ending_mapping, s.lower())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Schema":
        """Build a schema from a parsed definition."""
        return cls(
            name=data["name"],
            mapping=data.get("mapping"),
            prev_mapping=data.get("prev_mapping"),
            next_mapping=data.get("next_mapping"),
            ending_mapping=data.get("ending_mapping"),
            description=data.get("description", ""),
            url=data.get("url", ""),
            comments=tuple(data.get("comments", ())),
            samples=tuple((pair[0], pair[1]) for pair in data.get("samples", ())),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "url": self.url,
        }
        if self.comments:
            result["comments"] = list(self.comments)
        for name in MAPPING_FIELDS:
            table = getattr(self, name)
            if table is not None:
                result[name] = dict(table)
        if self.samples:
            result["samples"] = [list(pair) for pair in self.samples]
        return result


@dataclass(frozen=True)
class Ending:
    """A resolved word ending and the index where it starts."""

    translation: str
    start: int


@dataclass
class SampleMismatch:
    """An example pair whose actual output differs from the expected one."""

    source: str
    expected: str
    actual: str


@dataclass
class SampleCheckResult:
    """Result of running a schema's example pairs."""

    schema: str
    total: int
    mismatches: list[SampleMismatch] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.mismatches
