"""Index construction: one lookup entry per identifier-space member."""

from enum import IntEnum

from domain.compiler.ordinals import IdentifierSpace
from domain.schemas import IndexEntry


def build_index_entries(space: IdentifierSpace, enum_cls: type[IntEnum]) -> tuple[IndexEntry, ...]:
    """
    Build index entries in ordinal order, binding each to its member of `enum_cls`.

    `enum_cls` must be the type produced from the same `space`; a member whose
    symbol does not match its ordinal raises ValueError.
    """
    entries: list[IndexEntry] = []
    for member in space.members:
        value = enum_cls(member.ordinal)
        if value.name != member.symbol:
            raise ValueError(
                f"{enum_cls.__name__}({member.ordinal}) is {value.name!r}, expected {member.symbol!r}"
            )
        entries.append(
            IndexEntry(
                id=member.source_id,
                name=member.name,
                kind=member.kind,
                parent_id=member.parent_id,
                value=value,
            )
        )
    return tuple(entries)
