"""Runtime catalogs: the committed default snapshot and on-demand compiled snapshots."""

import logging
from functools import cache

from domain.catalog import GenreCatalog
from domain.compiler import assign_ordinals, build_index_entries
from domain.schemas import GenreTaxonomy

logger = logging.getLogger(__name__)


@cache
def default_catalog() -> GenreCatalog:
    """
    Process-wide catalog over the committed generated index.

    Built on first use and shared afterwards; the snapshot is immutable.
    """
    from domain.generated.genre_entries import GENRE_ENTRIES

    catalog = GenreCatalog(GENRE_ENTRIES)
    logger.debug("Default genre catalog loaded: %d entries", len(catalog))
    return catalog


def build_catalog(taxonomy: GenreTaxonomy, class_name: str = "GenreId") -> GenreCatalog:
    """
    Compile a taxonomy held in memory into a brand-new, independent catalog.

    The identifier type is created at runtime from the same identifier space as
    the index, so values and string ids stay in lockstep. Readers holding an
    older catalog are unaffected.
    """
    space = assign_ordinals(taxonomy)
    enum_cls = space.to_enum(class_name)
    return GenreCatalog(build_index_entries(space, enum_cls))
