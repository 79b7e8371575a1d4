"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML, environment toggle)
- Taxonomy document loading (JSON, YAML)
- Atomic file writes
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import GeneratorConfig, load_generator_config, load_taxonomy

__all__ = [
    "load_generator_config",
    "load_taxonomy",
    "GeneratorConfig",
]
