import ast
from pathlib import Path

from domain.compiler import GENERATED_BANNER, assign_ordinals, render_enum_module, render_index_module
from domain.taxonomy import parse_taxonomy_document
from infrastructure.config import load_taxonomy

REPO_ROOT = Path(__file__).resolve().parents[2]


def _space():
    return assign_ordinals(
        parse_taxonomy_document(
            {
                "genres": [
                    {"id": "rock", "name": "Rock", "subgenres": [{"id": "hard_rock"}, {"id": "punk_rock"}]},
                    {"id": "r_and_b", "name": 'R&B "Soul"', "subgenres": []},
                ]
            }
        )
    )


def _exec_enum(source: str):
    namespace: dict = {"__name__": "generated_under_test"}
    exec(compile(source, "<generated>", "exec"), namespace)
    return namespace


def test_enum_module_defines_members_in_ordinal_order() -> None:
    namespace = _exec_enum(render_enum_module(_space(), class_name="GenreId"))
    GenreId = namespace["GenreId"]
    assert [(m.name, int(m)) for m in GenreId] == [("Rock", 0), ("HardRock", 1), ("PunkRock", 2), ("RAndB", 3)]
    assert namespace["MAX_ENCODED_LEN"] == 1


def test_enum_module_groups_members_under_genre_markers() -> None:
    source = render_enum_module(_space())
    lines = source.splitlines()
    rock_marker = lines.index("    # ===== Genre: Rock =====")
    assert lines[rock_marker + 1 : rock_marker + 4] == ["    Rock = 0", "    HardRock = 1", "    PunkRock = 2"]
    rnb_marker = lines.index('    # ===== Genre: R&B "Soul" =====')
    assert lines[rnb_marker - 1] == ""
    assert lines[rnb_marker + 1] == "    RAndB = 3"


def test_header_is_spliced_before_the_banner() -> None:
    header = "# Copyright (C) Example.\n# SPDX-License-Identifier: GPL-3.0-or-later\n\n"
    source = render_enum_module(_space(), header=header, source_label="genres.json")
    lines = source.splitlines()
    assert lines[:4] == [
        "# Copyright (C) Example.",
        "# SPDX-License-Identifier: GPL-3.0-or-later",
        GENERATED_BANNER,
        "# Generated from genres.json",
    ]


def test_no_header_starts_with_the_banner() -> None:
    assert render_enum_module(_space()).startswith(GENERATED_BANNER + "\n")


def test_empty_identifier_space_still_renders_valid_modules() -> None:
    space = assign_ordinals(parse_taxonomy_document({"genres": []}))
    namespace = _exec_enum(render_enum_module(space))
    assert len(namespace["GenreId"]) == 0
    ast.parse(render_index_module(space))


def test_index_module_is_a_literal_entry_table() -> None:
    source = render_index_module(_space(), class_name="GenreId", enum_module="pkg.genre_id")
    ast.parse(source)
    assert "from pkg.genre_id import GenreId" in source
    assert source.count("IndexEntry(\n") == 4
    assert 'id="hard_rock",\n        name="Hard Rock",\n        kind=EntryKind.SUBGENRE,\n' in source
    assert 'parent_id="rock",\n        value=GenreId.HardRock,' in source
    assert 'name="R&B \\"Soul\\"",' in source


def test_committed_artifacts_match_the_taxonomy() -> None:
    space = assign_ordinals(load_taxonomy(REPO_ROOT / "genres.json"))
    generated = REPO_ROOT / "domain" / "generated"
    assert (generated / "genre_id.py").read_text(encoding="utf-8") == render_enum_module(
        space, source_label="genres.json"
    )
    assert (generated / "genre_entries.py").read_text(encoding="utf-8") == render_index_module(
        space, source_label="genres.json"
    )


def test_plain_text_header_lines_become_comments() -> None:
    header = "This file is part of Example.\n\n# Already a comment\n"
    source = render_index_module(_space(), header=header)
    assert source.splitlines()[:4] == [
        "# This file is part of Example.",
        "",
        "# Already a comment",
        GENERATED_BANNER,
    ]
    ast.parse(source)
