"""
Render the identifier space and its index as Python source modules.

Both renderers take the same IdentifierSpace, so the enum members and the
index entries are emitted from one ordered member list.
"""

import json

from domain.codec import MAX_ENCODED_LEN
from domain.compiler.ordinals import IdentifierSpace
from domain.schemas import EntryKind

GENERATED_BANNER = "# AUTO-GENERATED FILE. DO NOT EDIT MANUALLY."
INDEX_VAR_NAME = "GENRE_ENTRIES"

_INDENT = "    "


def _py_str(value: str) -> str:
    # JSON string escapes are a subset of Python's
    return json.dumps(value, ensure_ascii=False)


def _comment_block(text: str) -> str:
    """Turn a notice block into Python comments; lines already starting with "#" are kept verbatim."""
    lines = []
    for line in text.rstrip().splitlines():
        stripped = line.rstrip()
        if not stripped or stripped.lstrip().startswith("#"):
            lines.append(stripped)
        else:
            lines.append(f"# {stripped}")
    return "\n".join(lines)


def _preamble(header: str, source_label: str | None) -> list[str]:
    lines: list[str] = []
    if header.strip():
        lines.append(_comment_block(header))
    lines.append(GENERATED_BANNER)
    if source_label:
        lines.append(f"# Generated from {source_label}")
    lines.append("")
    return lines


def render_enum_module(
    space: IdentifierSpace,
    *,
    header: str = "",
    class_name: str = "GenreId",
    source_label: str | None = None,
) -> str:
    """Render the identifier-space type as an IntEnum grouped by genre marker comments."""
    lines = _preamble(header, source_label)
    lines += [
        '"""',
        "Flat enum containing all main genres and subgenres.",
        "",
        "Subgenres are grouped under genre-level comments. Member values are the",
        "ordinals persisted by the binary codec: never reorder or renumber members.",
        '"""',
        "",
        "from enum import IntEnum",
        "",
        f"MAX_ENCODED_LEN = {MAX_ENCODED_LEN}",
        "",
        "",
        f"class {class_name}(IntEnum):",
    ]

    if not space.members:
        lines.append(f"{_INDENT}pass")

    for member in space.members:
        if member.group_marker is not None:
            if member.ordinal > 0:
                lines.append("")
            lines.append(f"{_INDENT}# {member.group_marker}")
        lines.append(f"{_INDENT}{member.symbol} = {member.ordinal}")

    return "\n".join(lines) + "\n"


def render_index_module(
    space: IdentifierSpace,
    *,
    header: str = "",
    class_name: str = "GenreId",
    enum_module: str = "domain.generated.genre_id",
    source_label: str | None = None,
) -> str:
    """Render the index as a literal tuple of IndexEntry, in ordinal order."""
    lines = _preamble(header, source_label)
    lines += [
        f'"""Flat index of all genre and subgenre entries, in {class_name} ordinal order."""',
        "",
        f"from {enum_module} import {class_name}",
        "from domain.schemas import EntryKind, IndexEntry",
        "",
    ]

    if not space.members:
        lines.append(f"{INDEX_VAR_NAME}: tuple[IndexEntry, ...] = ()")
        return "\n".join(lines) + "\n"

    lines.append(f"{INDEX_VAR_NAME}: tuple[IndexEntry, ...] = (")
    for member in space.members:
        kind = "GENRE" if member.kind is EntryKind.GENRE else "SUBGENRE"
        parent = "None" if member.parent_id is None else _py_str(member.parent_id)
        lines += [
            f"{_INDENT}IndexEntry(",
            f"{_INDENT * 2}id={_py_str(member.source_id)},",
            f"{_INDENT * 2}name={_py_str(member.name)},",
            f"{_INDENT * 2}kind=EntryKind.{kind},",
            f"{_INDENT * 2}parent_id={parent},",
            f"{_INDENT * 2}value={class_name}.{member.symbol},",
            f"{_INDENT}),",
        ]
    lines.append(")")
    return "\n".join(lines) + "\n"
