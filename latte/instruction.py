"""Instruction set of the stack-based script virtual machine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = ["Opcode", "Instruction", "I64_MIN", "I64_MAX", "U64_MAX"]

I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1
U64_MAX = (1 << 64) - 1


class Opcode(IntEnum):
    """Operation codes, valued by their byte in encoded bytecode."""

    PUSH = 0x00
    ADD = 0x01
    SUB = 0x02
    MUL = 0x03
    DIV = 0x04
    EQ = 0x05
    GT = 0x06
    LT = 0x07
    LOAD = 0x08
    STORE = 0x09
    JUMP = 0x0A
    JUMP_IF = 0x0B
    DUP = 0x0C
    POP = 0x0D
    RETURN = 0x0E

    @property
    def takes_operand(self) -> bool:
        """Whether the instruction carries an 8-byte operand."""
        return self in (Opcode.PUSH, Opcode.JUMP, Opcode.JUMP_IF)


@dataclass(frozen=True)
class Instruction:
    """One VM instruction.

    ``PUSH`` carries a signed 64-bit value; ``JUMP`` and ``JUMP_IF`` carry an
    unsigned 64-bit target index. All other opcodes carry no operand.
    """

    opcode: Opcode
    operand: int | None = None

    def __post_init__(self) -> None:
        opcode = Opcode(self.opcode)
        object.__setattr__(self, "opcode", opcode)
        if not opcode.takes_operand:
            if self.operand is not None:
                raise ValueError(f"{opcode.name} takes no operand")
            return
        if self.operand is None:
            raise ValueError(f"{opcode.name} needs an operand")
        operand = int(self.operand)
        if opcode is Opcode.PUSH:
            if not I64_MIN <= operand <= I64_MAX:
                raise ValueError(f"PUSH value {operand} does not fit in 64 signed bits")
        elif not 0 <= operand <= U64_MAX:
            raise ValueError(f"{opcode.name} target {operand} is out of range")
        object.__setattr__(self, "operand", operand)

    @classmethod
    def push(cls, value: int) -> "Instruction":
        """Push ``value`` onto the stack."""
        return cls(Opcode.PUSH, value)

    @classmethod
    def jump(cls, target: int) -> "Instruction":
        """Continue execution at instruction index ``target``."""
        return cls(Opcode.JUMP, target)

    @classmethod
    def jump_if(cls, target: int) -> "Instruction":
        """Pop a value and continue at ``target`` when it is non-zero."""
        return cls(Opcode.JUMP_IF, target)

    def __str__(self) -> str:
        if self.operand is None:
            return self.opcode.name
        return f"{self.opcode.name} {self.operand}"