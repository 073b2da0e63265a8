"""Blocks and block headers."""

from __future__ import annotations

from dataclasses import dataclass, field

from latte.hashing import Hash256
from latte.transaction import Transaction

__all__ = ["BlockHeader", "Block"]


@dataclass(frozen=True)
class BlockHeader:
    """Header of a block.

    ``state_root`` commits to the world state after executing the block,
    ``tx_root`` to the ordered transaction list, ``number`` is the block
    height and ``timestamp`` is in seconds.
    """

    parent_hash: Hash256
    state_root: Hash256
    tx_root: Hash256
    number: int
    timestamp: int


@dataclass
class Block:
    """A header together with the transactions it commits to."""

    header: BlockHeader
    transactions: list[Transaction] = field(default_factory=list)