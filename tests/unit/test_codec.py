from enum import IntEnum

import pytest

from domain.codec import MAX_ENCODED_LEN, decode_identifier, encode_identifier, max_encoded_len


class Sample(IntEnum):
    Rock = 0
    HardRock = 1
    Jazz = 2


def test_encoding_is_the_ordinal_byte() -> None:
    assert encode_identifier(Sample.Rock) == b"\x00"
    assert encode_identifier(Sample.Jazz) == b"\x02"
    assert decode_identifier(Sample, b"\x01") is Sample.HardRock


def test_encoded_size_is_bounded() -> None:
    assert max_encoded_len(Sample) == MAX_ENCODED_LEN == 1
    assert all(len(encode_identifier(m)) <= MAX_ENCODED_LEN for m in Sample)


def test_decode_rejects_unknown_ordinal_and_bad_length() -> None:
    with pytest.raises(ValueError):
        decode_identifier(Sample, b"\x03")
    with pytest.raises(ValueError):
        decode_identifier(Sample, b"")
    with pytest.raises(ValueError):
        decode_identifier(Sample, b"\x00\x00")
