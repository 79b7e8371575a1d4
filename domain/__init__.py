"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- schemas: Pydantic models for the taxonomy source, plus runtime index records
- taxonomy: Parsing, identifier normalization, and traversal
- compiler: Ordinal assignment, index construction, and source rendering
- codec: Compact binary encoding of identifier-space members
- catalog: Read-only query surface over index entries
"""

from domain.catalog import GenreCatalog
from domain.schemas import EntryKind, Genre, GenreNode, GenreTaxonomy, IndexEntry, Subgenre

__all__ = [
    "Genre",
    "Subgenre",
    "GenreTaxonomy",
    "EntryKind",
    "IndexEntry",
    "GenreNode",
    "GenreCatalog",
]
