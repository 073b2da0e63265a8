"""Account records held in the world state."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Account"]


@dataclass
class Account:
    """An account's nonce, balance and key/value contract storage."""

    nonce: int = 0
    balance: int = 0
    storage: dict[bytes, bytes] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "Account":
        """Return an account with zero nonce, zero balance and no storage."""
        return cls(nonce=0, balance=0, storage={})