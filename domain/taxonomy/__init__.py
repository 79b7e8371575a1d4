"""
Taxonomy handling: parsing, identifier normalization, and traversal.

All functions in this module are pure (no file I/O).
"""

from domain.taxonomy.loader import parse_taxonomy_document
from domain.taxonomy.normalizer import display_name_from_id, to_symbolic_name
from domain.taxonomy.traversal import TaxonomyNode, iter_taxonomy_nodes

__all__ = [
    "parse_taxonomy_document",
    "to_symbolic_name",
    "display_name_from_id",
    "TaxonomyNode",
    "iter_taxonomy_nodes",
]
