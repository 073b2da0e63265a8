import pytest

from latte.address import Address
from latte.hashing import blake3


def test_address_from_pubkey():
    address = Address.from_pubkey(bytes([1] * 20))
    expected = bytes([
        32, 235, 88, 148, 153, 41, 86, 52, 183, 56, 113, 19, 251, 165, 110, 215,
        178, 26, 169, 142,
    ])
    assert address.value == expected


def test_address_is_prefix_of_blake3_digest():
    key = b"\x07" * 32
    assert bytes(Address.from_pubkey(key)) == bytes(blake3(key))[:20]


def test_address_accepts_byte_lists():
    assert Address.from_pubkey([1] * 20) == Address.from_pubkey(bytes([1] * 20))


def test_address_rejects_wrong_length():
    with pytest.raises(ValueError):
        Address(b"\x00" * 19)


def test_address_usable_as_dict_key():
    a = Address.from_pubkey(b"\x01\x02")
    b = Address.from_pubkey(b"\x01\x02")
    c = Address.from_pubkey(b"\x01\x03")
    table = {a: 1}
    assert table[b] == 1
    assert c not in table