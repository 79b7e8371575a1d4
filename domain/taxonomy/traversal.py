"""Flattened traversal of the taxonomy shared by the ordinal assigner and the index builder."""

from collections.abc import Iterator
from dataclasses import dataclass

from domain.schemas import EntryKind, GenreTaxonomy
from domain.taxonomy.normalizer import display_name_from_id


@dataclass(frozen=True)
class TaxonomyNode:
    """One genre or subgenre in traversal position."""

    kind: EntryKind
    id: str
    name: str
    parent_id: str | None
    group: str  # display name of the owning genre block


def iter_taxonomy_nodes(taxonomy: GenreTaxonomy) -> Iterator[TaxonomyNode]:
    """
    Yield every node in identifier-space order: a genre, then its subgenres, then the next genre.

    Position in this sequence is the ordinal. Anything that assigns or references
    ordinals must iterate through here.
    """
    for genre in taxonomy.genres:
        yield TaxonomyNode(
            kind=EntryKind.GENRE,
            id=genre.id,
            name=genre.name,
            parent_id=None,
            group=genre.name,
        )
        for sub in genre.subgenres:
            yield TaxonomyNode(
                kind=EntryKind.SUBGENRE,
                id=sub.id,
                name=sub.name or display_name_from_id(sub.id),
                parent_id=genre.id,
                group=genre.name,
            )
