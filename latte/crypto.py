"""Ed25519 key pairs, signing and verification."""

from __future__ import annotations

from dataclasses import dataclass

from cryptography.exceptions import InvalidSignature as _BadSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

__all__ = ["Keypair", "verify"]


@dataclass(frozen=True)
class Keypair:
    """An Ed25519 signing key and the verifying key derived from it."""

    signing: Ed25519PrivateKey
    verifying: Ed25519PublicKey

    @classmethod
    def generate(cls) -> "Keypair":
        """Create a fresh key pair from the operating system's random source."""
        signing = Ed25519PrivateKey.generate()
        return cls(signing, signing.public_key())

    def sign(self, msg: bytes) -> bytes:
        """Return the 64-byte signature of ``msg``."""
        return self.signing.sign(bytes(msg))


def verify(pubkey, msg: bytes, sig: bytes) -> bool:
    """Check that ``sig`` is a valid signature of ``msg`` under ``pubkey``.

    ``pubkey`` is an Ed25519 public key or its 32 raw bytes.
    """
    if not isinstance(pubkey, Ed25519PublicKey):
        pubkey = Ed25519PublicKey.from_public_bytes(bytes(pubkey))
    try:
        pubkey.verify(bytes(sig), bytes(msg))
    except (_BadSignature, ValueError):
        return False
    return True