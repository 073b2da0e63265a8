import pytest

from latte.address import Address
from latte.hashing import sha256
from latte.transaction import Transaction


def _sample(**overrides):
    addr = Address.from_pubkey(bytes([1, 2, 3, 4, 5]))
    fields = dict(
        sender=addr,
        to=addr,
        value=1,
        nonce=1,
        gas_limit=10,
        gas_price=1,
        data=bytes([1, 2, 3]),
        signature=bytes([1, 2, 3]),
    )
    fields.update(overrides)
    return Transaction(**fields)


def test_hash_tx():
    assert (
        _sample().hash().value.hex()
        == "7523ce1be16598af7559f0a0b4cd9aa40b4f75df6184e5e29daf735a19820f66"
    )


def test_hash_is_sha256_of_encoding():
    tx = _sample()
    assert tx.hash() == sha256(tx.encode())


def test_encoding_layout_with_recipient():
    tx = _sample()
    encoded = tx.encode()
    assert encoded[:20] == tx.sender.value
    assert encoded[20:21] == b"\x01"
    assert encoded[21:41] == tx.to.value
    assert encoded[41:49] == (1).to_bytes(8, "little")
    assert encoded[-11:] == (3).to_bytes(8, "little") + bytes([1, 2, 3])


def test_encoding_without_recipient_uses_zero_tag():
    tx = _sample(to=None)
    encoded = tx.encode()
    assert encoded[20:21] == b"\x00"
    assert len(encoded) == len(_sample().encode()) - 20


def test_hash_changes_with_any_field():
    base = _sample()
    assert base.hash() != _sample(value=2).hash()
    assert base.hash() != _sample(nonce=2).hash()
    assert base.hash() != _sample(signature=b"").hash()


def test_negative_value_cannot_be_encoded():
    with pytest.raises(OverflowError):
        _sample(value=-1).encode()


def test_data_is_normalised_to_bytes():
    tx = _sample(data=bytearray(b"\x0e"))
    assert tx.data == b"\x0e"
    assert isinstance(tx.data, bytes)