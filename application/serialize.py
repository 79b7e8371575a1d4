"""JSON-ready projection of catalog queries for callers outside Python."""

import json
import logging
from typing import Any

from application.constants import (
    GENRE_ID_STR_KEY,
    GENRE_TYPE_KEY,
    ID_KEY,
    NAME_KEY,
    PARENT_ID_KEY,
    SUBGENRES_KEY,
)
from domain.catalog import GenreCatalog
from domain.schemas import GenreNode, IndexEntry

logger = logging.getLogger(__name__)


def entry_to_dict(catalog: GenreCatalog, entry: IndexEntry) -> dict[str, Any]:
    """Flat record for one entry; the identifier is carried as its canonical string."""
    return {
        ID_KEY: entry.id,
        NAME_KEY: entry.name,
        GENRE_TYPE_KEY: entry.kind.value,
        PARENT_ID_KEY: entry.parent_id,
        GENRE_ID_STR_KEY: catalog.identifier_to_string(entry.value),
    }


def entries_to_dicts(catalog: GenreCatalog, entries: tuple[IndexEntry, ...]) -> list[dict[str, Any]]:
    return [entry_to_dict(catalog, e) for e in entries]


def node_to_dict(catalog: GenreCatalog, node: GenreNode) -> dict[str, Any]:
    return {
        ID_KEY: node.genre.id,
        NAME_KEY: node.genre.name,
        GENRE_ID_STR_KEY: catalog.identifier_to_string(node.genre.value),
        SUBGENRES_KEY: entries_to_dicts(catalog, node.subgenres),
    }


def hierarchy_to_dicts(catalog: GenreCatalog) -> list[dict[str, Any]]:
    """Genres with nested subgenre records, in ordinal order."""
    return [node_to_dict(catalog, node) for node in catalog.hierarchy()]


def dump_json(payload: Any) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2)
