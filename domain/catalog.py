"""Read-only query surface over a frozen snapshot of index entries."""

import unicodedata
from collections.abc import Iterable, Iterator
from enum import IntEnum
from types import MappingProxyType

from domain.schemas import EntryKind, GenreNode, IndexEntry
from domain.taxonomy.normalizer import to_symbolic_name


class GenreCatalog:
    """
    Immutable lookup structure over genre/subgenre index entries.

    All lookup tables are built once in the constructor; no method mutates them,
    so one instance can be shared freely between readers. Absence is reported as
    None / False / an empty tuple, never as an exception.
    """

    def __init__(self, entries: Iterable[IndexEntry]) -> None:
        self._entries: tuple[IndexEntry, ...] = tuple(entries)

        by_id: dict[str, IndexEntry] = {}
        by_value: dict[IntEnum, IndexEntry] = {}
        children: dict[str, list[IndexEntry]] = {}
        symbol_by_value: dict[IntEnum, str] = {}
        enum_cls: type[IntEnum] | None = None

        for entry in self._entries:
            if entry.id in by_id:
                raise ValueError(f"Duplicate entry id in catalog: {entry.id!r}")
            symbol = unicodedata.normalize("NFKC", to_symbolic_name(entry.id))
            if enum_cls is None:
                enum_cls = type(entry.value)
            elif type(entry.value) is not enum_cls:
                raise ValueError(
                    f"Entry {entry.id!r} is bound to {type(entry.value).__name__}, expected {enum_cls.__name__}"
                )
            if entry.value.name != symbol:
                raise ValueError(
                    f"Entry {entry.id!r} is bound to {entry.value!r}, expected member {symbol!r}"
                )
            by_id[entry.id] = entry
            by_value[entry.value] = entry
            symbol_by_value[entry.value] = symbol
            if entry.parent_id is not None:
                children.setdefault(entry.parent_id, []).append(entry)

        self._by_id = MappingProxyType(by_id)
        self._by_value = MappingProxyType(by_value)
        self._value_by_symbol = MappingProxyType({s: v for v, s in symbol_by_value.items()})
        self._symbol_by_value = MappingProxyType(symbol_by_value)
        self._children = MappingProxyType({k: tuple(v) for k, v in children.items()})
        self._genres = tuple(e for e in self._entries if e.kind is EntryKind.GENRE)
        self._enum_cls = enum_cls

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[IndexEntry]:
        return iter(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        return isinstance(entry_id, str) and entry_id in self._by_id

    def all_entries(self) -> tuple[IndexEntry, ...]:
        """Every entry, in ordinal order."""
        return self._entries

    def genres(self) -> tuple[IndexEntry, ...]:
        """Top-level genres only, in ordinal order."""
        return self._genres

    def subgenres_of(self, parent_id: str) -> tuple[IndexEntry, ...]:
        """Subgenres declared under `parent_id`; empty for unknown ids or genres without subgenres."""
        return self._children.get(parent_id, ())

    def find_by_id(self, entry_id: str) -> IndexEntry | None:
        return self._by_id.get(entry_id)

    def name_of(self, entry_id: str) -> str | None:
        entry = self.find_by_id(entry_id)
        return entry.name if entry is not None else None

    def is_valid_id(self, entry_id: str) -> bool:
        return entry_id in self._by_id

    def _is_member(self, value: object) -> bool:
        # IntEnum members hash like ints; bare ints and other enums must not match
        return self._enum_cls is not None and type(value) is self._enum_cls

    def entry_for_identifier(self, value: IntEnum) -> IndexEntry | None:
        if not self._is_member(value):
            return None
        return self._by_value.get(value)

    def identifier_to_string(self, value: IntEnum) -> str | None:
        """Canonical string form of an identifier-space member (its symbolic name)."""
        if not self._is_member(value):
            return None
        return self._symbol_by_value.get(value)

    def identifier_from_string(self, symbol: str) -> IntEnum | None:
        """Inverse of identifier_to_string."""
        return self._value_by_symbol.get(symbol)

    def hierarchy(self) -> tuple[GenreNode, ...]:
        """Genres in order, each carrying its subgenre entries in declaration order."""
        return tuple(GenreNode(genre=g, subgenres=self.subgenres_of(g.id)) for g in self._genres)
