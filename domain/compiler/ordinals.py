"""Ordinal assignment: flatten the taxonomy into a collision-free identifier space."""

import keyword
import logging
import unicodedata
from dataclasses import dataclass
from enum import IntEnum

from domain.codec import MAX_MEMBERS
from domain.errors import IdentifierSpaceOverflowError, InvalidSymbolError, SymbolCollisionError
from domain.schemas import EntryKind, GenreTaxonomy
from domain.taxonomy.normalizer import to_symbolic_name
from domain.taxonomy.traversal import iter_taxonomy_nodes

logger = logging.getLogger(__name__)

GROUP_MARKER_TEMPLATE = "===== Genre: {name} ====="


@dataclass(frozen=True)
class IdentifierMember:
    """A member of the identifier space at its ordinal position."""

    ordinal: int
    symbol: str
    source_id: str
    kind: EntryKind
    name: str
    parent_id: str | None
    group_marker: str | None  # set on the first member of each genre block


@dataclass(frozen=True)
class IdentifierSpace:
    """Ordered identifier space; position == ordinal."""

    members: tuple[IdentifierMember, ...]

    def __len__(self) -> int:
        return len(self.members)

    @property
    def symbols(self) -> tuple[str, ...]:
        return tuple(m.symbol for m in self.members)

    def pairs(self) -> list[tuple[str, str | None]]:
        """(symbolic_name, group marker) pairs in ordinal order."""
        return [(m.symbol, m.group_marker) for m in self.members]

    def to_enum(self, class_name: str = "GenreId") -> type[IntEnum]:
        """Build the runtime identifier type; member values are the ordinals."""
        return IntEnum(class_name, [(m.symbol, m.ordinal) for m in self.members])  # type: ignore[return-value]


def _group_marker(genre_name: str) -> str:
    # rendered as a single-line comment
    return GROUP_MARKER_TEMPLATE.format(name=" ".join(genre_name.splitlines()))


def _check_symbol(source_id: str, symbol: str) -> None:
    if not symbol:
        raise InvalidSymbolError(source_id, symbol, "empty after removing separators")
    if not symbol.isidentifier():
        raise InvalidSymbolError(source_id, symbol, "not a valid identifier")
    if keyword.iskeyword(symbol):
        raise InvalidSymbolError(source_id, symbol, "reserved keyword")
    if unicodedata.normalize("NFKC", symbol) != symbol:
        # the compiler folds identifiers to NFKC, so the emitted member would be renamed
        raise InvalidSymbolError(source_id, symbol, "not in NFKC normal form")


def assign_ordinals(taxonomy: GenreTaxonomy) -> IdentifierSpace:
    """
    Walk the taxonomy in source order and assign each node its ordinal.

    Raises:
        InvalidSymbolError: If an id cannot produce an enum member name
        SymbolCollisionError: If two nodes share a symbolic name (names both ids)
        IdentifierSpaceOverflowError: If the space exceeds the compact encoding range
    """
    members: list[IdentifierMember] = []
    owner_by_symbol: dict[str, str] = {}

    for ordinal, node in enumerate(iter_taxonomy_nodes(taxonomy)):
        symbol = to_symbolic_name(node.id)
        _check_symbol(node.id, symbol)

        if symbol in owner_by_symbol:
            raise SymbolCollisionError(symbol, owner_by_symbol[symbol], node.id)
        owner_by_symbol[symbol] = node.id

        members.append(
            IdentifierMember(
                ordinal=ordinal,
                symbol=symbol,
                source_id=node.id,
                kind=node.kind,
                name=node.name,
                parent_id=node.parent_id,
                group_marker=_group_marker(node.group) if node.kind is EntryKind.GENRE else None,
            )
        )

    if len(members) > MAX_MEMBERS:
        raise IdentifierSpaceOverflowError(len(members), MAX_MEMBERS)

    logger.debug("Assigned %d ordinals across %d genres", len(members), len(taxonomy.genres))
    return IdentifierSpace(members=tuple(members))
