"""Report identifier-space ordinal drift between two versions of the taxonomy."""

import argparse
from dataclasses import dataclass
from pathlib import Path

from domain.compiler import IdentifierSpace, assign_ordinals
from infrastructure.config import load_taxonomy


@dataclass(frozen=True)
class Drift:
    moved: list[tuple[str, int, int]]  # (symbol, old ordinal, new ordinal)
    removed: list[tuple[str, int]]
    added: list[tuple[str, int]]

    @property
    def breaking(self) -> bool:
        return bool(self.moved or self.removed)


def compare_spaces(old: IdentifierSpace, new: IdentifierSpace) -> Drift:
    old_ord = {m.symbol: m.ordinal for m in old.members}
    new_ord = {m.symbol: m.ordinal for m in new.members}

    moved = [(s, o, new_ord[s]) for s, o in old_ord.items() if s in new_ord and new_ord[s] != o]
    removed = [(s, o) for s, o in old_ord.items() if s not in new_ord]
    added = [(s, n) for s, n in new_ord.items() if s not in old_ord]
    return Drift(moved=moved, removed=removed, added=added)


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("old", help="Previously shipped taxonomy file")
    ap.add_argument("new", help="Candidate taxonomy file")
    args = ap.parse_args()

    drift = compare_spaces(
        assign_ordinals(load_taxonomy(Path(args.old))),
        assign_ordinals(load_taxonomy(Path(args.new))),
    )

    for symbol, old_ordinal, new_ordinal in drift.moved:
        print(f"MOVED    {symbol}: {old_ordinal} -> {new_ordinal}")
    for symbol, old_ordinal in drift.removed:
        print(f"REMOVED  {symbol} (was {old_ordinal})")
    for symbol, new_ordinal in drift.added:
        print(f"ADDED    {symbol} at {new_ordinal}")

    if drift.breaking:
        raise SystemExit("Ordinal drift detected: previously encoded identifiers would decode differently")
    print("No ordinal drift.")


if __name__ == "__main__":
    main()
