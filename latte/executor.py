"""Applying transactions to the world state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from latte.address import Address
from latte.errors import InsufficientBalance, InvalidNonce
from latte.state import WorldState
from latte.transaction import Transaction

__all__ = ["VmEngine", "Executor"]


class VmEngine(ABC):
    """A virtual machine that runs a transaction's bytecode."""

    @abstractmethod
    def execute(self, state: WorldState, caller: Address, tx: Transaction) -> None:
        """Run ``tx.data`` on behalf of ``caller``; raise StateError on failure."""


def _require_account(state: WorldState, addr: Address):
    account = state.get_account_mut(addr)
    if account is None:
        raise KeyError(f"no account at address {addr}")
    return account


@dataclass(frozen=True)
class Executor:
    """Applies transactions using a given VM engine."""

    vm: VmEngine

    def apply_tx(self, state: WorldState, tx: Transaction) -> None:
        """Check nonce and balance, move the value, then run any bytecode.

        Raises InvalidNonce or InsufficientBalance when the checks fail,
        KeyError when the sender or recipient has no account, and whatever
        StateError the VM raises.
        """
        sender = _require_account(state, tx.sender)
        if sender.nonce != tx.nonce:
            raise InvalidNonce()
        if sender.balance < tx.value:
            raise InsufficientBalance()

        sender.balance -= tx.value
        sender.nonce += 1

        if tx.to is not None:
            receiver = _require_account(state, tx.to)
            receiver.balance += tx.value

        if tx.data:
            self.vm.execute(state, tx.sender, tx)