"""Parse a genre taxonomy document from a pre-loaded dict."""

from typing import Any

from pydantic import ValidationError

from domain.errors import TaxonomyFormatError
from domain.schemas import GenreTaxonomy


def _format_location(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or "<root>"


def parse_taxonomy_document(data: Any, source: str = "<memory>") -> GenreTaxonomy:
    """
    Parse pre-loaded JSON/YAML data into a GenreTaxonomy.

    This is a pure function - it does NOT perform file I/O.
    The file loading happens in infrastructure.config.loader.

    Args:
        data: Top-level mapping with a `genres` list
        source: Where the data came from (used in error messages only)

    Returns:
        Validated GenreTaxonomy in declaration order

    Raises:
        TaxonomyFormatError: If the document has a missing field or the wrong shape
    """
    if not isinstance(data, dict):
        raise TaxonomyFormatError(source, "<root>", f"expected a mapping, got {type(data).__name__}")

    try:
        return GenreTaxonomy.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        raise TaxonomyFormatError(source, _format_location(first["loc"]), first["msg"]) from e
