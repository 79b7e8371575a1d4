"""
Configuration management: models, loading, and validation.

Handles:
- GeneratorConfig: Paths, class/module names and the environment toggle
- Taxonomy loading from JSON or YAML

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_generator_config, load_taxonomy
from infrastructure.config.models import GeneratorConfig

__all__ = [
    # Main config (most commonly used)
    "GeneratorConfig",
    "load_generator_config",
    # Loaders
    "load_taxonomy",
]
