from enum import IntEnum

import pytest

from application.catalog import build_catalog
from domain.catalog import GenreCatalog
from domain.schemas import EntryKind, IndexEntry
from domain.taxonomy import parse_taxonomy_document


def _catalog() -> GenreCatalog:
    return build_catalog(
        parse_taxonomy_document(
            {
                "genres": [
                    {
                        "id": "rock",
                        "name": "Rock",
                        "subgenres": [{"id": "hard_rock"}, {"id": "punk_rock", "name": "Punk Rock"}],
                    },
                    {"id": "new_age", "name": "New Age"},
                    {"id": "jazz", "name": "Jazz", "subgenres": [{"id": "bebop", "name": "Bebop"}]},
                ]
            }
        )
    )


def test_concrete_rock_scenario() -> None:
    catalog = _catalog()

    assert [catalog.identifier_to_string(e.value) for e in catalog.all_entries()[:3]] == [
        "Rock",
        "HardRock",
        "PunkRock",
    ]

    hard_rock = catalog.find_by_id("hard_rock")
    assert hard_rock is not None
    assert hard_rock.name == "Hard Rock"
    assert hard_rock.kind is EntryKind.SUBGENRE
    assert hard_rock.parent_id == "rock"
    assert int(hard_rock.value) == 1

    assert catalog.is_valid_id("unknown") is False
    assert [e.id for e in catalog.subgenres_of("rock")] == ["hard_rock", "punk_rock"]


def test_index_value_matches_ordinal_position() -> None:
    catalog = _catalog()
    for position, entry in enumerate(catalog.all_entries()):
        assert int(entry.value) == position


def test_genres_lists_top_level_only_in_order() -> None:
    catalog = _catalog()
    assert [e.id for e in catalog.genres()] == ["rock", "new_age", "jazz"]
    assert all(e.parent_id is None for e in catalog.genres())


def test_absence_is_a_normal_result() -> None:
    catalog = _catalog()
    assert catalog.find_by_id("unknown") is None
    assert catalog.name_of("unknown") is None
    assert catalog.subgenres_of("unknown") == ()
    assert catalog.subgenres_of("hard_rock") == ()
    assert catalog.identifier_from_string("Unknown") is None
    assert "unknown" not in catalog


def test_empty_genre_has_no_subgenres() -> None:
    catalog = _catalog()
    assert catalog.is_valid_id("new_age")
    assert catalog.subgenres_of("new_age") == ()


def test_round_trip_by_id_and_by_symbol() -> None:
    catalog = _catalog()
    symbols = set()
    for entry in catalog:
        assert catalog.find_by_id(entry.id) == entry
        assert catalog.name_of(entry.id) == entry.name
        symbol = catalog.identifier_to_string(entry.value)
        assert symbol == entry.value.name
        assert catalog.identifier_from_string(symbol) is entry.value
        assert catalog.entry_for_identifier(entry.value) == entry
        symbols.add(symbol)
    assert len(symbols) == len(catalog)


def test_hierarchy_reproduces_parent_child_structure() -> None:
    catalog = _catalog()
    tree = catalog.hierarchy()

    assert [(n.genre.id, [s.id for s in n.subgenres]) for n in tree] == [
        ("rock", ["hard_rock", "punk_rock"]),
        ("new_age", []),
        ("jazz", ["bebop"]),
    ]

    flattened = [s for n in tree for s in n.subgenres]
    all_subgenres = [e for e in catalog.all_entries() if e.kind is EntryKind.SUBGENRE]
    assert flattened == all_subgenres


def test_catalogs_built_separately_are_independent() -> None:
    first = _catalog()
    second = build_catalog(parse_taxonomy_document({"genres": [{"id": "pop", "name": "Pop"}]}))
    assert first.is_valid_id("rock") and not second.is_valid_id("rock")
    assert len(first) == 5 and len(second) == 1


def test_duplicate_ids_are_rejected() -> None:
    catalog = _catalog()
    rock = catalog.find_by_id("rock")
    assert rock is not None
    with pytest.raises(ValueError):
        GenreCatalog([rock, rock])


def test_entry_bound_to_wrong_member_is_rejected() -> None:
    catalog = _catalog()
    rock = catalog.find_by_id("rock")
    jazz = catalog.find_by_id("jazz")
    assert rock is not None and jazz is not None
    mismatched = IndexEntry(id="rock", name="Rock", kind=EntryKind.GENRE, parent_id=None, value=jazz.value)
    with pytest.raises(ValueError):
        GenreCatalog([mismatched])


def test_identifier_lookups_require_a_member_of_the_catalog_enum() -> None:
    catalog = _catalog()
    Other = IntEnum("Other", [("Unrelated", 1)])

    assert catalog.identifier_to_string(1) is None  # type: ignore[arg-type]
    assert catalog.entry_for_identifier(1) is None  # type: ignore[arg-type]
    assert catalog.identifier_to_string(Other.Unrelated) is None
    assert catalog.entry_for_identifier(Other.Unrelated) is None

    hard_rock = catalog.find_by_id("hard_rock")
    assert hard_rock is not None
    assert catalog.identifier_to_string(hard_rock.value) == "HardRock"


def test_entries_bound_to_different_enums_are_rejected() -> None:
    rock = _catalog().find_by_id("rock")
    pop = build_catalog(parse_taxonomy_document({"genres": [{"id": "pop", "name": "Pop"}]})).find_by_id("pop")
    assert rock is not None and pop is not None
    with pytest.raises(ValueError):
        GenreCatalog([rock, pop])
