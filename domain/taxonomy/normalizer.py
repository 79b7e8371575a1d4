"""Identifier normalization: raw taxonomy ids to symbolic enum member names."""

import re

SEPARATORS = ("_", "-", " ")

_SPLIT_RE = re.compile("[" + re.escape("".join(SEPARATORS)) + "]")


def _segments(raw_id: str) -> list[str]:
    return [s for s in _SPLIT_RE.split(raw_id) if s]


def _capitalize_first(segment: str) -> str:
    # str.capitalize() would lower-case the tail ("RAndB" must survive as-is)
    return segment[0].upper() + segment[1:]


def to_symbolic_name(raw_id: str) -> str:
    """
    Convert a snake/kebab/space-case id to capitalized-concatenation case.

    Examples:
        >>> to_symbolic_name("hard_rock")
        'HardRock'
        >>> to_symbolic_name("r-and-b")
        'RAndB'
        >>> to_symbolic_name("__")
        ''

    Never raises. An empty result is a degenerate symbol; callers treat it as invalid.
    Characters without case mapping pass through unchanged.
    """
    return "".join(_capitalize_first(s) for s in _segments(raw_id))


def display_name_from_id(raw_id: str) -> str:
    """Fallback display label for nodes declared without a name (`hard_rock` -> `Hard Rock`)."""
    return " ".join(_capitalize_first(s) for s in _segments(raw_id))
