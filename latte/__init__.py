"""Blockchain primitives, transactions, world state and a stack-based script VM."""

__version__ = "0.1.0"