import pytest

from latte.hashing import Hash256, blake2s, blake3, sha256


def test_sha256_matches_known_digest():
    result = sha256(bytes([1, 2, 3, 222]))
    assert result.value[0] == 208
    assert result.value[1] == 248
    expected = bytes([
        208, 248, 244, 16, 7, 69, 127, 26, 105, 104, 227, 224, 134, 164, 114, 37,
        51, 198, 130, 164, 190, 76, 95, 84, 106, 3, 67, 92, 122, 5, 128, 250,
    ])
    assert result.value == expected


def test_sha256_of_empty_input():
    assert str(sha256(b"")) == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_blake3_of_empty_input():
    assert str(blake3(b"")) == (
        "af1349b9f5f9a1a6a0404dea36dcc9499bcb25c9adc112b7cc9a93cae41f3262"
    )


def test_blake3_of_abc():
    assert str(blake3(b"abc")) == (
        "6437b3ac38465133ffb63b75273a8db548c558465d79db03fd359c6cd5bd9d85"
    )


def test_blake2s_is_the_blake3_digest():
    for data in (b"", b"abc", bytes(range(200))):
        assert blake2s(data) == blake3(data)


@pytest.mark.parametrize("length", [63, 64, 65, 1023, 1024, 1025, 2048, 3073, 5000])
def test_blake3_is_deterministic_across_block_and_chunk_boundaries(length):
    data = bytes(i % 251 for i in range(length))
    first = blake3(data)
    assert first == blake3(bytearray(data))
    assert len(bytes(first)) == 32


def test_blake3_lengths_give_distinct_digests():
    digests = {blake3(bytes(n)) for n in (0, 1, 64, 65, 1024, 1025, 2049, 4096)}
    assert len(digests) == 8


def test_hash256_rejects_wrong_length():
    with pytest.raises(ValueError):
        Hash256(b"\x00" * 31)


def test_hash256_is_hashable_and_comparable():
    a = Hash256(b"\x01" * 32)
    b = Hash256(bytearray(b"\x01" * 32))
    assert a == b
    assert {a, b} == {a}
    assert bytes(a) == b"\x01" * 32