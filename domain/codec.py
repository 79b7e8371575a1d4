"""
Compact binary codec for identifier-space members.

A member is encoded as its ordinal in a single byte, so the encoded form depends
only on position in the identifier space, never on the symbolic name.
"""

from enum import IntEnum
from typing import TypeVar

MAX_ENCODED_LEN = 1
MAX_MEMBERS = 1 << (8 * MAX_ENCODED_LEN)

E = TypeVar("E", bound=IntEnum)


def encode_identifier(member: IntEnum) -> bytes:
    """Encode a member as its ordinal byte."""
    ordinal = int(member)
    if not 0 <= ordinal < MAX_MEMBERS:
        raise ValueError(f"Ordinal {ordinal} of {member!r} does not fit in {MAX_ENCODED_LEN} byte(s)")
    return ordinal.to_bytes(MAX_ENCODED_LEN, "little")


def decode_identifier(enum_cls: type[E], data: bytes) -> E:
    """
    Decode an ordinal byte back into a member of `enum_cls`.

    Raises:
        ValueError: If `data` has the wrong length or names no member
    """
    if len(data) != MAX_ENCODED_LEN:
        raise ValueError(f"Expected {MAX_ENCODED_LEN} byte(s), got {len(data)}")
    ordinal = int.from_bytes(data, "little")
    try:
        return enum_cls(ordinal)
    except ValueError as e:
        raise ValueError(f"Ordinal {ordinal} is not a member of {enum_cls.__name__}") from e


def max_encoded_len(enum_cls: type[IntEnum]) -> int:
    """Upper bound on the encoded size of any member of `enum_cls`."""
    if len(enum_cls) > MAX_MEMBERS:
        raise ValueError(f"{enum_cls.__name__} has {len(enum_cls)} members; at most {MAX_MEMBERS} fit")
    return MAX_ENCODED_LEN
