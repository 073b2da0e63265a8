"""Operand stack of the virtual machine."""

from __future__ import annotations

from collections.abc import Iterable

from latte.errors import StackUnderflow

__all__ = ["Stack"]


class Stack:
    """A last-in, first-out stack of integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = list(values)

    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value; raise StackUnderflow when empty."""
        if not self._items:
            raise StackUnderflow()
        return self._items.pop()

    def dup(self) -> None:
        """Push a copy of the top value; raise StackUnderflow when empty."""
        if not self._items:
            raise StackUnderflow()
        self._items.append(self._items[-1])

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"