"""
Taxonomy compiler: ordinal assignment, index construction, and source rendering.

All functions in this module are pure (no file I/O).
"""

from domain.compiler.codegen import GENERATED_BANNER, render_enum_module, render_index_module
from domain.compiler.index import build_index_entries
from domain.compiler.ordinals import IdentifierMember, IdentifierSpace, assign_ordinals

__all__ = [
    # Ordinals
    "IdentifierMember",
    "IdentifierSpace",
    "assign_ordinals",
    # Index
    "build_index_entries",
    # Rendering
    "GENERATED_BANNER",
    "render_enum_module",
    "render_index_module",
]
