"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing generation of the identifier space and runtime catalog access.
"""

from application.catalog import build_catalog, default_catalog
from application.generation import GenerationResult, is_generation_enabled, run_generation
from application.serialize import dump_json, entries_to_dicts, entry_to_dict, hierarchy_to_dicts

__all__ = [
    # Main workflows
    "run_generation",
    "is_generation_enabled",
    "GenerationResult",
    # Runtime catalogs
    "default_catalog",
    "build_catalog",
    # JSON projection
    "entry_to_dict",
    "entries_to_dicts",
    "hierarchy_to_dicts",
    "dump_json",
]
