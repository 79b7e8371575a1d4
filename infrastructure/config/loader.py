"""Configuration and taxonomy loading from YAML/JSON files."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from domain.schemas import GenreTaxonomy
from domain.taxonomy.loader import parse_taxonomy_document
from infrastructure.config.models import GeneratorConfig

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # An empty file parses to None; treat it as "all defaults"
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def _load_document(path: Path) -> Any:
    """Load a structured document, picking the parser from the file extension."""
    if not path.exists():
        raise FileNotFoundError(f"Taxonomy file not found: {path}")

    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    if suffix in JSON_SUFFIXES:
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Malformed JSON in {path} at line {e.lineno}, column {e.colno}: {e.msg}") from e
    elif suffix in YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed YAML in {path}: {e}") from e
    else:
        raise ValueError(f"Unsupported taxonomy format: {suffix}. Supported formats: .json, .yaml, .yml")


def load_taxonomy(path: Path) -> GenreTaxonomy:
    """
    Load the genre taxonomy from a JSON or YAML file.

    This function handles file I/O, then delegates parsing to domain layer.
    """
    data = _load_document(path)
    taxonomy = parse_taxonomy_document(data, source=str(path))
    logger.debug(
        "Loaded taxonomy from %s: %d genres, %d subgenres",
        path,
        len(taxonomy.genres),
        taxonomy.subgenre_count,
    )
    return taxonomy


def load_generator_config(path: Path) -> GeneratorConfig:
    """
    Load generator.yaml into a GeneratorConfig.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML is not a mapping or a field is invalid
    """
    data = _load_yaml(path)
    return GeneratorConfig(**data)
