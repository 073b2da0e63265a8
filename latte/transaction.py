"""Transactions and their canonical binary encoding."""

from __future__ import annotations

from dataclasses import dataclass

from latte.address import Address
from latte.hashing import Hash256, sha256

__all__ = ["Transaction"]


def _u64(value: int) -> bytes:
    return int(value).to_bytes(8, "little")


def _byte_vec(data: bytes) -> bytes:
    return _u64(len(data)) + data


@dataclass(frozen=True)
class Transaction:
    """A value transfer, optionally carrying VM bytecode in ``data``."""

    sender: Address
    to: Address | None
    value: int
    nonce: int
    gas_limit: int
    gas_price: int
    data: bytes = b""
    signature: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))
        object.__setattr__(self, "signature", bytes(self.signature))

    def encode(self) -> bytes:
        """Serialise the transaction in its fixed little-endian binary layout.

        Addresses are raw 20-byte arrays, the recipient is preceded by a
        one-byte presence tag, integers are 8-byte little-endian, and byte
        strings carry an 8-byte little-endian length prefix.
        """
        recipient = b"\x00" if self.to is None else b"\x01" + self.to.value
        return b"".join(
            (
                self.sender.value,
                recipient,
                _u64(self.value),
                _u64(self.nonce),
                _u64(self.gas_limit),
                _u64(self.gas_price),
                _byte_vec(self.data),
                _byte_vec(self.signature),
            )
        )

    def hash(self) -> Hash256:
        """Return the SHA-256 digest of the encoded transaction."""
        return sha256(self.encode())