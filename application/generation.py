"""Generation pipeline: taxonomy -> identifier space -> enum module + index module."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from domain.compiler import assign_ordinals, render_enum_module, render_index_module
from domain.errors import GenerationError
from infrastructure.config import GeneratorConfig, load_taxonomy
from infrastructure.io import read_optional_text, write_files_atomic
from infrastructure.observability import clear_stage_context, set_log_context

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one generation run."""

    skipped: bool
    genre_count: int = 0
    subgenre_count: int = 0
    member_count: int = 0
    written: tuple[Path, ...] = field(default_factory=tuple)


def is_generation_enabled(cfg: GeneratorConfig, environ: Mapping[str, str] | None = None) -> bool:
    """Presence of the toggle variable enables generation; its value is not inspected."""
    env = os.environ if environ is None else environ
    return cfg.toggle_env_var in env


def run_generation(cfg: GeneratorConfig, *, enabled: bool) -> GenerationResult:
    """
    Run the whole pipeline once.

    When disabled, nothing is read or written and previously generated files stay as they are.
    Both artifacts are rendered in memory before either is written, so a fatal error
    (unreadable/malformed taxonomy, symbol collision, write failure) leaves no partial output.

    Raises:
        FileNotFoundError, ValueError: Taxonomy unreadable or malformed
        GenerationError: Invalid or colliding symbols, identifier space too large
        OSError: An artifact could not be written
    """
    if not enabled:
        logger.warning(
            "Skipping genre generation: %s not set (existing artifacts left untouched)",
            cfg.toggle_env_var,
        )
        return GenerationResult(skipped=True)

    try:
        return _run_stages(cfg)
    finally:
        clear_stage_context()


def _run_stages(cfg: GeneratorConfig) -> GenerationResult:
    set_log_context(stage="load")
    logger.info("Loading taxonomy from %s...", cfg.taxonomy_file)
    taxonomy = load_taxonomy(cfg.taxonomy_file)
    header = read_optional_text(cfg.header_file)
    if not header:
        logger.info("No header at %s; generated files will have no notice block", cfg.header_file)

    set_log_context(stage="assign")
    space = assign_ordinals(taxonomy)
    logger.info(
        "Identifier space: %d members (%d genres, %d subgenres)",
        len(space),
        len(taxonomy.genres),
        taxonomy.subgenre_count,
    )

    set_log_context(stage="render")
    source_label = cfg.taxonomy_file.name
    enum_src = render_enum_module(
        space,
        header=header,
        class_name=cfg.enum_class_name,
        source_label=source_label,
    )
    index_src = render_index_module(
        space,
        header=header,
        class_name=cfg.enum_class_name,
        enum_module=cfg.enum_module,
        source_label=source_label,
    )

    outputs = {cfg.enum_output: enum_src, cfg.index_output: index_src}
    for path, source in outputs.items():
        _check_compiles(path, source, cfg.header_file)

    set_log_context(stage="write")
    write_files_atomic(outputs)
    logger.info("Wrote %s and %s", cfg.enum_output, cfg.index_output)

    return GenerationResult(
        skipped=False,
        genre_count=len(taxonomy.genres),
        subgenre_count=taxonomy.subgenre_count,
        member_count=len(space),
        written=(cfg.enum_output, cfg.index_output),
    )


def _check_compiles(path: Path, source: str, header_file: Path) -> None:
    try:
        compile(source, str(path), "exec")
    except SyntaxError as e:
        raise GenerationError(
            f"Rendered {path} is not valid Python (line {e.lineno}: {e.msg}); check the header in {header_file}"
        ) from e
