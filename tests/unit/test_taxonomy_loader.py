import pytest

from domain.errors import TaxonomyFormatError
from domain.taxonomy import parse_taxonomy_document


def test_parses_genres_in_declaration_order() -> None:
    taxonomy = parse_taxonomy_document(
        {
            "genres": [
                {"id": "rock", "name": "Rock", "subgenres": [{"id": "hard_rock", "name": "Hard Rock"}]},
                {"id": "jazz", "name": "Jazz", "subgenres": []},
            ]
        }
    )
    assert [g.id for g in taxonomy.genres] == ["rock", "jazz"]
    assert taxonomy.genres[0].subgenres[0].name == "Hard Rock"
    assert taxonomy.subgenre_count == 1


def test_subgenre_name_and_subgenre_list_are_optional() -> None:
    taxonomy = parse_taxonomy_document({"genres": [{"id": "rock", "name": "Rock", "subgenres": [{"id": "punk_rock"}]}]})
    assert taxonomy.genres[0].subgenres[0].name is None

    taxonomy = parse_taxonomy_document({"genres": [{"id": "jazz", "name": "Jazz"}]})
    assert taxonomy.genres[0].subgenres == []


def test_missing_genres_key_is_a_format_error() -> None:
    with pytest.raises(TaxonomyFormatError) as exc:
        parse_taxonomy_document({"categories": []}, source="genres.json")
    assert exc.value.location == "genres"
    assert "genres.json" in str(exc.value)


def test_error_location_points_at_the_offending_field() -> None:
    data = {"genres": [{"id": "rock", "name": "Rock", "subgenres": [{"name": "Hard Rock"}]}]}
    with pytest.raises(TaxonomyFormatError) as exc:
        parse_taxonomy_document(data)
    assert exc.value.location == "genres.0.subgenres.0.id"


def test_blank_genre_name_is_rejected() -> None:
    with pytest.raises(TaxonomyFormatError):
        parse_taxonomy_document({"genres": [{"id": "rock", "name": "   "}]})


def test_wrong_shape_is_rejected() -> None:
    with pytest.raises(TaxonomyFormatError):
        parse_taxonomy_document({"genres": {"id": "rock"}})
    with pytest.raises(TaxonomyFormatError):
        parse_taxonomy_document(["rock"])
