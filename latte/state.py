"""The world state: accounts keyed by address."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from latte.account import Account
from latte.address import Address

__all__ = ["AccountReader", "AccountWriter", "ExecutorContext", "WorldState"]


class AccountReader(ABC):
    """Read access to accounts."""

    @abstractmethod
    def get(self, addr: Address) -> Account | None:
        """Return the account at ``addr``, or None."""


class AccountWriter(ABC):
    """Write access to accounts."""

    @abstractmethod
    def get_mut(self, addr: Address) -> Account | None:
        """Return the account at ``addr`` for modification, or None."""


@dataclass
class ExecutorContext:
    """Per-execution context: the calling address and the gas budget."""

    caller: Address | None
    gas_limit: int


@dataclass
class WorldState(AccountReader, AccountWriter):
    """All accounts known to the chain."""

    accounts: dict[Address, Account] = field(default_factory=dict)

    def get_account(self, addr: Address) -> Account | None:
        return self.accounts.get(addr)

    def get_account_mut(self, addr: Address) -> Account | None:
        return self.accounts.get(addr)

    def get(self, addr: Address) -> Account | None:
        return self.get_account(addr)

    def get_mut(self, addr: Address) -> Account | None:
        return self.get_account_mut(addr)

    def insert_account(self, addr: Address, account: Account) -> None:
        """Store ``account`` at ``addr``, replacing any existing one."""
        self.accounts[addr] = account

    def __contains__(self, addr: object) -> bool:
        return addr in self.accounts

    def __len__(self) -> int:
        return len(self.accounts)