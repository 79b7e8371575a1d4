from application.catalog import default_catalog
from domain.codec import decode_identifier, encode_identifier
from domain.generated.genre_id import GenreId
from domain.schemas import EntryKind


def test_default_catalog_is_built_once() -> None:
    assert default_catalog() is default_catalog()


def test_every_member_has_exactly_one_entry_in_ordinal_order() -> None:
    catalog = default_catalog()
    assert [e.value for e in catalog.all_entries()] == list(GenreId)
    assert len(catalog) == len(GenreId)


def test_well_known_lookups() -> None:
    catalog = default_catalog()

    rock = catalog.find_by_id("rock")
    assert rock is not None and rock.value is GenreId.Rock and int(rock.value) == 0

    hard_rock = catalog.find_by_id("hard_rock")
    assert hard_rock is not None
    assert hard_rock.name == "Hard Rock"
    assert hard_rock.parent_id == "rock"
    assert hard_rock.value is GenreId.HardRock

    assert catalog.name_of("r_and_b") == "R&B / Soul"
    assert catalog.identifier_to_string(GenreId.ContemporaryRAndB) == "ContemporaryRAndB"
    assert catalog.is_valid_id("electronic_ambient")
    assert not catalog.is_valid_id("unknown")


def test_hierarchy_covers_every_subgenre_once() -> None:
    catalog = default_catalog()
    from_tree = [s.id for node in catalog.hierarchy() for s in node.subgenres]
    declared = [e.id for e in catalog.all_entries() if e.kind is EntryKind.SUBGENRE]
    assert from_tree == declared
    assert len(set(from_tree)) == len(from_tree)


def test_members_survive_the_codec() -> None:
    for member in GenreId:
        assert decode_identifier(GenreId, encode_identifier(member)) is member
