"""
CLI entrypoint for the genre taxonomy compiler.

Subcommands:
- generate: loads .env and configs/generator.yaml, and (when the toggle variable
  is set) compiles the taxonomy into the GenreId enum module and the index module
- query: answers catalog lookups over the committed generated index, printing JSON
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from application import (
    default_catalog,
    dump_json,
    entries_to_dicts,
    entry_to_dict,
    hierarchy_to_dicts,
    is_generation_enabled,
    run_generation,
)
from application.constants import (
    LOG_DIR,
    LOG_FILENAME,
    QUERIES_WITH_ID,
    QUERY_ALL,
    QUERY_CHOICES,
    QUERY_FIND,
    QUERY_GENRES,
    QUERY_NAME,
    QUERY_SUBGENRES,
    QUERY_TREE,
    QUERY_VALID,
)
from domain.errors import GenerationError, TaxonomyError
from infrastructure.config import load_generator_config
from infrastructure.constants import GENERATOR_CONFIG_FILE
from infrastructure.observability import configure_logging, make_run_tag, set_log_context

logger = logging.getLogger(__name__)

LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Genre taxonomy compiler")
    p.add_argument(
        "--console-level",
        type=str,
        default="INFO",
        choices=LEVELS,
        help="Console log level",
    )
    sub = p.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate the GenreId enum and index modules")
    gen.add_argument(
        "--config",
        type=str,
        default=str(GENERATOR_CONFIG_FILE),
        help="Path to generator.yaml (default: configs/generator.yaml)",
    )
    gen.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file, loaded if present (default: .env)",
    )
    gen.add_argument(
        "--force",
        action="store_true",
        help="Generate even if the toggle environment variable is not set.",
    )
    gen.add_argument(
        "--log-file",
        action="store_true",
        help=f"Also write a DEBUG log under {LOG_DIR}/",
    )

    q = sub.add_parser("query", help="Query the generated genre catalog (JSON output)")
    q.add_argument("what", choices=QUERY_CHOICES)
    q.add_argument(
        "id",
        nargs="?",
        default=None,
        help=f"Genre/subgenre id (required for: {', '.join(QUERIES_WITH_ID)})",
    )

    args = p.parse_args(argv)
    if args.command == "query" and args.what in QUERIES_WITH_ID and args.id is None:
        p.error(f"query {args.what} requires an id")
    return args


def _generate(args: argparse.Namespace) -> int:
    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=False)

    run_id = f"{datetime.now().strftime('%Y%m%d_%H%M%S')}_generate"
    if args.log_file:
        configure_logging(
            log_file=Path(LOG_DIR) / LOG_FILENAME,
            console_level=getattr(logging, args.console_level),
        )
    set_log_context(run_id_full=run_id)
    logger.info("Starting run: run_id=%s (run_tag=%s)", run_id, make_run_tag(run_id))

    try:
        cfg = load_generator_config(Path(args.config))
        enabled = args.force or is_generation_enabled(cfg)
        result = run_generation(cfg, enabled=enabled)
    except (TaxonomyError, GenerationError, OSError, ValueError) as e:
        logger.error("Generation failed: %s", e)
        return 1

    if not result.skipped:
        logger.info(
            "Generated %d identifiers (%d genres, %d subgenres)",
            result.member_count,
            result.genre_count,
            result.subgenre_count,
        )
    return 0


def _query(args: argparse.Namespace) -> int:
    catalog = default_catalog()
    what = args.what

    if what == QUERY_ALL:
        payload = entries_to_dicts(catalog, catalog.all_entries())
    elif what == QUERY_GENRES:
        payload = entries_to_dicts(catalog, catalog.genres())
    elif what == QUERY_TREE:
        payload = hierarchy_to_dicts(catalog)
    elif what == QUERY_SUBGENRES:
        payload = entries_to_dicts(catalog, catalog.subgenres_of(args.id))
    elif what == QUERY_FIND:
        entry = catalog.find_by_id(args.id)
        payload = entry_to_dict(catalog, entry) if entry is not None else None
    elif what == QUERY_NAME:
        payload = catalog.name_of(args.id)
    elif what == QUERY_VALID:
        payload = catalog.is_valid_id(args.id)
    else:
        raise ValueError(f"Unsupported query: {what}")

    print(dump_json(payload))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging(console_level=getattr(logging, args.console_level))

    if args.command == "generate":
        return _generate(args)
    return _query(args)


if __name__ == "__main__":
    sys.exit(main())
