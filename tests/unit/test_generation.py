import json
from pathlib import Path

import pytest

from application.generation import is_generation_enabled, run_generation
from domain.errors import GenerationError, SymbolCollisionError, TaxonomyFormatError
from infrastructure.config import GeneratorConfig


def _write_taxonomy(path: Path, genres: list[dict]) -> Path:
    path.write_text(json.dumps({"genres": genres}), encoding="utf-8")
    return path


def _cfg(tmp_path: Path, taxonomy_file: Path) -> GeneratorConfig:
    return GeneratorConfig(
        taxonomy_file=taxonomy_file,
        header_file=tmp_path / "HEADER",
        enum_output=tmp_path / "out" / "genre_id.py",
        index_output=tmp_path / "out" / "genre_entries.py",
    )


ROCK = {"id": "rock", "name": "Rock", "subgenres": [{"id": "hard_rock", "name": "Hard Rock"}, {"id": "punk_rock"}]}


def test_toggle_presence_enables_generation() -> None:
    cfg = GeneratorConfig()
    assert is_generation_enabled(cfg, {"BUILD_GENRES": ""}) is True
    assert is_generation_enabled(cfg, {"BUILD_GENRES": "0"}) is True
    assert is_generation_enabled(cfg, {}) is False


def test_disabled_generation_is_a_no_op(tmp_path: Path) -> None:
    cfg = _cfg(tmp_path, tmp_path / "missing.json")
    cfg.enum_output.parent.mkdir(parents=True)
    cfg.enum_output.write_text("previous", encoding="utf-8")

    result = run_generation(cfg, enabled=False)

    assert result.skipped is True
    assert cfg.enum_output.read_text(encoding="utf-8") == "previous"
    assert not cfg.index_output.exists()


def test_generation_writes_both_artifacts(tmp_path: Path) -> None:
    cfg = _cfg(tmp_path, _write_taxonomy(tmp_path / "genres.json", [ROCK, {"id": "jazz", "name": "Jazz"}]))

    result = run_generation(cfg, enabled=True)

    assert result.skipped is False
    assert (result.genre_count, result.subgenre_count, result.member_count) == (2, 2, 4)
    assert result.written == (cfg.enum_output, cfg.index_output)
    enum_src = cfg.enum_output.read_text(encoding="utf-8")
    assert "    PunkRock = 2\n" in enum_src
    assert "    Jazz = 3\n" in enum_src
    assert "# Generated from genres.json" in enum_src
    assert 'name="Punk Rock",' in cfg.index_output.read_text(encoding="utf-8")
    assert sorted(p.name for p in cfg.enum_output.parent.iterdir()) == ["genre_entries.py", "genre_id.py"]


def test_header_is_prepended_when_present(tmp_path: Path) -> None:
    cfg = _cfg(tmp_path, _write_taxonomy(tmp_path / "genres.json", [ROCK]))
    cfg.header_file.write_text("# This file is part of Example.\n", encoding="utf-8")

    run_generation(cfg, enabled=True)

    for path in (cfg.enum_output, cfg.index_output):
        assert path.read_text(encoding="utf-8").startswith("# This file is part of Example.\n# AUTO-GENERATED")


def test_plain_text_header_is_turned_into_comments(tmp_path: Path) -> None:
    cfg = _cfg(tmp_path, _write_taxonomy(tmp_path / "genres.json", [ROCK]))
    cfg.header_file.write_text(
        "This file is part of Example.\n\n"
        "Copyright (C) Example Authors.\n"
        "# SPDX-License-Identifier: GPL-3.0-or-later\n",
        encoding="utf-8",
    )

    run_generation(cfg, enabled=True)

    for path in (cfg.enum_output, cfg.index_output):
        source = path.read_text(encoding="utf-8")
        assert source.splitlines()[:4] == [
            "# This file is part of Example.",
            "",
            "# Copyright (C) Example Authors.",
            "# SPDX-License-Identifier: GPL-3.0-or-later",
        ]
        compile(source, str(path), "exec")


def test_uncompilable_output_aborts_before_writing(tmp_path: Path) -> None:
    cfg = _cfg(tmp_path, _write_taxonomy(tmp_path / "genres.json", [ROCK]))
    cfg = cfg.model_copy(update={"enum_class_name": "class"})

    with pytest.raises(GenerationError) as exc:
        run_generation(cfg, enabled=True)

    assert str(cfg.header_file) in str(exc.value)
    assert not cfg.enum_output.exists()
    assert not cfg.index_output.exists()


def test_yaml_taxonomy_is_supported(tmp_path: Path) -> None:
    source = tmp_path / "genres.yaml"
    source.write_text(
        "genres:\n  - id: rock\n    name: Rock\n    subgenres:\n      - id: hard_rock\n",
        encoding="utf-8",
    )
    result = run_generation(_cfg(tmp_path, source), enabled=True)
    assert result.member_count == 2


def test_collision_aborts_without_touching_artifacts(tmp_path: Path) -> None:
    genres = [ROCK, {"id": "metal", "name": "Metal", "subgenres": [{"id": "hard-rock"}]}]
    cfg = _cfg(tmp_path, _write_taxonomy(tmp_path / "genres.json", genres))
    cfg.enum_output.parent.mkdir(parents=True)
    cfg.enum_output.write_text("previous", encoding="utf-8")

    with pytest.raises(SymbolCollisionError) as exc:
        run_generation(cfg, enabled=True)

    assert "hard_rock" in str(exc.value) and "hard-rock" in str(exc.value)
    assert cfg.enum_output.read_text(encoding="utf-8") == "previous"
    assert not cfg.index_output.exists()


def test_missing_taxonomy_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        run_generation(_cfg(tmp_path, tmp_path / "missing.json"), enabled=True)


def test_malformed_json_reports_location(tmp_path: Path) -> None:
    source = tmp_path / "genres.json"
    source.write_text('{"genres": [\n  {"id": "rock",, }\n]}', encoding="utf-8")
    with pytest.raises(ValueError) as exc:
        run_generation(_cfg(tmp_path, source), enabled=True)
    assert "line 2" in str(exc.value)


def test_structurally_invalid_taxonomy_is_fatal(tmp_path: Path) -> None:
    cfg = _cfg(tmp_path, _write_taxonomy(tmp_path / "genres.json", [{"id": "rock"}]))
    with pytest.raises(TaxonomyFormatError) as exc:
        run_generation(cfg, enabled=True)
    assert exc.value.location == "genres.0.name"
    assert not cfg.enum_output.exists()


def test_write_failure_leaves_no_partial_output(tmp_path: Path) -> None:
    cfg = _cfg(tmp_path, _write_taxonomy(tmp_path / "genres.json", [ROCK]))
    blocker = tmp_path / "blocked"
    blocker.write_text("not a directory", encoding="utf-8")
    cfg = cfg.model_copy(update={"index_output": blocker / "genre_entries.py"})

    with pytest.raises(OSError):
        run_generation(cfg, enabled=True)

    assert not cfg.enum_output.exists()
    assert not any(p.name.endswith(".tmp") for p in tmp_path.rglob("*"))
