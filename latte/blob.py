"""An immutable byte payload."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Bytes"]


@dataclass(frozen=True)
class Bytes:
    """A sequence of raw bytes carried by receipts and logs."""

    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def empty(cls) -> "Bytes":
        """Return an empty payload."""
        return cls(b"")

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return self.data