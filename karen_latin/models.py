"""Data models for Karen transliteration."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


TABLE_KEYS = ("consonants", "medials", "vowels", "tone")


@dataclass(frozen=True)
class SyllableUnit:
    """A matched syllable: consonant plus optional medial, vowel and tone."""

    consonant: str
    medial: str | None = None
    vowel: str | None = None
    tone: str | None = None
    start: int = 0
    end: int = 0

    @property
    def text(self) -> str:
        """Source text covered by this syllable."""
        return self.consonant + (self.medial or "") + (self.vowel or "") + (self.tone or "")


@dataclass(frozen=True)
class Segment:
    """One output segment, either passthrough text or a rendered syllable."""

    text: str
    syllable: SyllableUnit | None = None

    @property
    def is_passthrough(self) -> bool:
        return self.syllable is None


def _freeze(entries: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(entries))


@dataclass(frozen=True)
class MappingTable:
    """
    Grapheme to Latin lookup tables.

    The tables are wrapped in read-only proxies on construction, so a
    table can be shared between threads once built. A tone entry mapped
    to the empty string is a real entry, distinct from a missing one.
    """

    consonants: Mapping[str, str] = field(default_factory=dict)
    medials: Mapping[str, str] = field(default_factory=dict)
    vowels: Mapping[str, str] = field(default_factory=dict)
    tone: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for key in TABLE_KEYS:
            object.__setattr__(self, key, _freeze(getattr(self, key)))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MappingTable":
        """Build a table from a parsed mapping document."""
        return cls(**{key: data.get(key, {}) for key in TABLE_KEYS})

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Convert to dictionary for JSON serialization."""
        return {key: dict(getattr(self, key)) for key in TABLE_KEYS}
