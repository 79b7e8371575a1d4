"""Filesystem utility functions."""

import logging
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)


def read_optional_text(path: Path) -> str:
    """Read a UTF-8 text file verbatim, or return "" if it does not exist."""
    if not path.exists():
        logger.debug("Optional file not found, using empty content: %s", path)
        return ""
    return path.read_text(encoding="utf-8")


def write_files_atomic(contents: Mapping[Path, str]) -> None:
    """
    Write several text files so that none is left half-written.

    Every file is first written to a temporary sibling; targets are replaced
    only after all temporaries were written successfully. Existing targets are
    moved aside while replacing, and if any replace fails the ones already
    swapped in are rolled back, so the targets always come from one call.
    """
    staged: list[tuple[Path, Path]] = []
    backups: list[tuple[Path, Path | None]] = []
    try:
        for target, text in contents.items():
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
            tmp = Path(tmp_name)
            staged.append((tmp, target))
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(text)

        try:
            for tmp, target in staged:
                backup = None
                if target.exists():
                    backup = tmp.with_name(tmp.name + ".bak")
                    os.replace(target, backup)
                backups.append((target, backup))
                os.replace(tmp, target)
        except OSError:
            _rollback(backups)
            raise

        for target, _ in staged:
            logger.debug("Wrote %s", target)
    finally:
        for tmp, _ in staged:
            if tmp.exists():
                tmp.unlink()
        for _, backup in backups:
            if backup is not None and backup.exists():
                backup.unlink()


def _rollback(backups: list[tuple[Path, Path | None]]) -> None:
    for target, backup in reversed(backups):
        if backup is not None:
            os.replace(backup, target)
        elif target.exists():
            target.unlink()
    logger.warning("Rolled back %d file(s) after a failed replace", len(backups))
