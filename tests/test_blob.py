from latte.blob import Bytes


def test_empty_has_no_length():
    assert len(Bytes.empty()) == 0
    assert bytes(Bytes.empty()) == b""


def test_empty_equals_default():
    assert Bytes.empty() == Bytes()


def test_round_trip_through_bytes():
    payload = b"\x00\x01\xfe\xff"
    wrapped = Bytes(payload)
    assert bytes(wrapped) == payload
    assert len(wrapped) == len(payload)


def test_built_from_list_of_ints():
    assert Bytes([1, 2, 3]) == Bytes(b"\x01\x02\x03")


def test_hashable_and_distinct():
    a = Bytes(b"a")
    b = Bytes(bytearray(b"a"))
    c = Bytes(b"b")
    assert {a, b, c} == {a, c}
    assert a != c