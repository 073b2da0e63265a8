"""Exceptions raised by the chain, the state layer and the virtual machine."""

from __future__ import annotations

__all__ = [
    "BlockchainError",
    "InvalidTransaction",
    "InsufficientGas",
    "InvalidReceipt",
    "InvalidSignature",
    "UnknownError",
    "StateError",
    "InvalidNonce",
    "InsufficientBalance",
    "VmExecutionFailed",
    "VMError",
    "OutOfGas",
    "StackUnderflow",
    "InvalidJump",
    "DivideByZero",
]


class _DefaultMessageError(Exception):
    default_message = ""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class BlockchainError(_DefaultMessageError):
    """Base class for chain-level errors."""

    default_message = "Blockchain error"


class InvalidTransaction(BlockchainError):
    default_message = "Invalid transaction"


class InsufficientGas(BlockchainError):
    default_message = "Insufficient gas"


class InvalidReceipt(BlockchainError):
    default_message = "Invalid receipt"


class InvalidSignature(BlockchainError):
    default_message = "Invalid signature"


class UnknownError(BlockchainError):
    """A chain error described only by free text."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Unknown error: {detail}")


class StateError(_DefaultMessageError):
    """Base class for errors while applying a transaction to the world state."""

    default_message = "state error"


class InvalidNonce(StateError):
    default_message = "invalid state nonce"


class InsufficientBalance(StateError):
    default_message = "insufficient balance"


class VmExecutionFailed(StateError):
    default_message = "vm execution failed"


class VMError(_DefaultMessageError):
    """Base class for errors raised while interpreting bytecode."""

    default_message = "vm error"


class OutOfGas(VMError):
    default_message = "out of gas"


class StackUnderflow(VMError):
    default_message = "stack underflow"


class InvalidJump(VMError):
    default_message = "invalid jump"


class DivideByZero(VMError):
    default_message = "divide by zero"