"""Transaction receipts."""

from __future__ import annotations

from dataclasses import dataclass, field

from latte.blob import Bytes

__all__ = ["Receipt"]


@dataclass
class Receipt:
    """Outcome of executing a transaction."""

    transaction_hash: Bytes
    status: Bytes
    gas_used: int
    logs: list[Bytes] = field(default_factory=list)