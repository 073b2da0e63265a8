"""The script VM: decodes transaction bytecode and runs it."""

from __future__ import annotations

import io

from latte.address import Address
from latte.errors import VMError, VmExecutionFailed
from latte.executor import VmEngine
from latte.gas import GasMeter
from latte.instruction import Instruction, Opcode
from latte.interpreter import Interpreter
from latte.state import WorldState
from latte.transaction import Transaction

__all__ = ["ScriptVm", "DecodeError", "decode_instructions"]

_OPERAND_SIZE = 8


class DecodeError(ValueError):
    """Bytecode holds an unknown opcode or a truncated operand."""


def _read_operand(reader: io.BytesIO, opcode: Opcode, signed: bool) -> int:
    raw = reader.read(_OPERAND_SIZE)
    if len(raw) != _OPERAND_SIZE:
        raise DecodeError(f"truncated operand for {opcode.name}")
    return int.from_bytes(raw, "big", signed=signed)


def decode_instructions(data: bytes) -> list[Instruction]:
    """Decode bytecode into instructions.

    Each instruction is one opcode byte; PUSH is followed by an 8-byte
    big-endian signed value, JUMP and JUMP_IF by an 8-byte big-endian
    unsigned target. Raises DecodeError on malformed input.
    """
    reader = io.BytesIO(bytes(data))
    instructions: list[Instruction] = []
    while byte := reader.read(1):
        try:
            opcode = Opcode(byte[0])
        except ValueError:
            raise DecodeError(f"unknown opcode 0x{byte[0]:02x}") from None
        if opcode.takes_operand:
            operand = _read_operand(reader, opcode, signed=opcode is Opcode.PUSH)
            instructions.append(Instruction(opcode, operand))
        else:
            instructions.append(Instruction(opcode))
    return instructions


class ScriptVm(VmEngine):
    """Runs a transaction's data as bytecode with the transaction's gas limit."""

    def execute(self, state: WorldState, caller: Address, tx: Transaction) -> None:
        """Decode and run ``tx.data``; raise VmExecutionFailed on any VM failure."""
        try:
            code = decode_instructions(tx.data)
        except DecodeError as exc:
            raise VmExecutionFailed() from exc

        interpreter = Interpreter(state, caller, GasMeter(tx.gas_limit))
        try:
            interpreter.execute(code)
        except VMError as exc:
            raise VmExecutionFailed() from exc