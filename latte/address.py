"""Account addresses derived from public keys."""

from __future__ import annotations

from dataclasses import dataclass

from latte.hashing import blake3

__all__ = ["Address"]

ADDRESS_LENGTH = 20


@dataclass(frozen=True)
class Address:
    """A 20-byte account address."""

    value: bytes

    def __post_init__(self) -> None:
        raw = bytes(self.value)
        if len(raw) != ADDRESS_LENGTH:
            raise ValueError(f"Address needs {ADDRESS_LENGTH} bytes, got {len(raw)}")
        object.__setattr__(self, "value", raw)

    @classmethod
    def from_pubkey(cls, pubkey: bytes) -> "Address":
        """Derive an address: the first 20 bytes of the BLAKE3 hash of the key."""
        return cls(blake3(bytes(pubkey)).value[:ADDRESS_LENGTH])

    def __bytes__(self) -> bytes:
        return self.value

    def __str__(self) -> str:
        return self.value.hex()