"""Executes decoded instructions against the world state."""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from latte.address import Address
from latte.errors import DivideByZero, InvalidJump
from latte.gas import GasMeter
from latte.instruction import I64_MAX, I64_MIN, Instruction, Opcode
from latte.stack import Stack
from latte.state import AccountWriter

__all__ = ["Interpreter"]

_GAS_PER_INSTRUCTION = 1


def _checked(value: int) -> int:
    if not I64_MIN <= value <= I64_MAX:
        raise OverflowError("64-bit integer overflow")
    return value


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


_BINARY_OPS: dict[Opcode, Callable[[int, int], int]] = {
    Opcode.ADD: operator.add,
    Opcode.SUB: operator.sub,
    Opcode.MUL: operator.mul,
    Opcode.EQ: lambda a, b: int(a == b),
    Opcode.GT: lambda a, b: int(a > b),
    Opcode.LT: lambda a, b: int(a < b),
}


def _storage_key(value: int) -> bytes:
    return value.to_bytes(8, "big", signed=True)


def _decode_word(raw: bytes) -> int:
    if len(raw) != 8:
        raise ValueError(f"storage value must be 8 bytes, got {len(raw)}")
    return int.from_bytes(raw, "big", signed=True)


@dataclass
class Interpreter:
    """Runs a program for ``caller``, reading and writing its storage in ``state``.

    After every instruction that does not jump or return, the program counter
    advances past the following instruction as well.
    """

    state: AccountWriter
    caller: Address
    gas: GasMeter
    pc: int = 0
    stack: Stack = field(default_factory=Stack)

    def execute(self, code: Sequence[Instruction]) -> None:
        """Run ``code`` until the end, a RETURN, or an error.

        Raises OutOfGas, StackUnderflow, DivideByZero or InvalidJump from the
        VM, and OverflowError when arithmetic leaves the 64-bit signed range.
        """
        while self.pc < len(code):
            instruction = code[self.pc]
            self.pc += 1
            self.gas.charge(_GAS_PER_INSTRUCTION)

            opcode = instruction.opcode
            if opcode in _BINARY_OPS:
                b = self.stack.pop()
                a = self.stack.pop()
                self.stack.push(_checked(_BINARY_OPS[opcode](a, b)))
            else:
                match opcode:
                    case Opcode.PUSH:
                        self.stack.push(instruction.operand)
                    case Opcode.DIV:
                        b = self.stack.pop()
                        if b == 0:
                            raise DivideByZero()
                        a = self.stack.pop()
                        self.stack.push(_checked(_truncating_div(a, b)))
                    case Opcode.LOAD:
                        self._load()
                    case Opcode.STORE:
                        self._store()
                    case Opcode.JUMP:
                        if instruction.operand >= len(code):
                            raise InvalidJump()
                        self.pc = instruction.operand
                        continue
                    case Opcode.JUMP_IF:
                        if self.stack.pop() != 0:
                            self.pc = instruction.operand
                            continue
                    case Opcode.DUP:
                        self.stack.dup()
                    case Opcode.POP:
                        self.stack.pop()
                    case Opcode.RETURN:
                        break

            self.pc += 1

    def _load(self) -> None:
        key = _storage_key(self.stack.pop())
        account = self.state.get_mut(self.caller)
        if account is not None:
            raw = account.storage.get(key)
            self.stack.push(0 if raw is None else _decode_word(raw))

    def _store(self) -> None:
        key = _storage_key(self.stack.pop())
        value = self.stack.pop()
        account = self.state.get_mut(self.caller)
        if account is not None:
            account.storage[key] = value.to_bytes(8, "big", signed=True)