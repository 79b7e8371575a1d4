"""Models for the genre taxonomy source document and the runtime index."""

from dataclasses import dataclass
from enum import Enum, IntEnum

from pydantic import BaseModel, Field, field_validator


class Subgenre(BaseModel):
    """Subgenre declared under a genre block. `name` may be omitted in the compact variant."""

    id: str = Field(..., description="Short machine id (snake/kebab/space case).")
    name: str | None = Field(default=None, description="Human-readable label.")

    @field_validator("id")
    @classmethod
    def _strip_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("id must be a non-empty string")
        return v

    @field_validator("name")
    @classmethod
    def _strip_name(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None


class Genre(BaseModel):
    """Top-level genre owning an ordered list of subgenres."""

    id: str = Field(..., description="Short machine id (snake/kebab/space case).")
    name: str = Field(..., description="Human-readable label.")
    subgenres: list[Subgenre] = Field(default_factory=list)

    @field_validator("id", "name")
    @classmethod
    def _non_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must be a non-empty string")
        return v


class GenreTaxonomy(BaseModel):
    """Source of truth: genres in declaration order. Order drives ordinal assignment."""

    genres: list[Genre]

    @property
    def subgenre_count(self) -> int:
        return sum(len(g.subgenres) for g in self.genres)


class EntryKind(str, Enum):
    """Whether an index entry is a parent genre or a subgenre."""

    GENRE = "genre"
    SUBGENRE = "subgenre"


@dataclass(frozen=True)
class IndexEntry:
    """Runtime lookup record pairing a string id with its identifier-space member."""

    id: str
    name: str
    kind: EntryKind
    parent_id: str | None
    value: IntEnum


@dataclass(frozen=True)
class GenreNode:
    """Genre entry together with its subgenre entries (hierarchical view)."""

    genre: IndexEntry
    subgenres: tuple[IndexEntry, ...]
