"""Gas accounting for VM execution."""

from __future__ import annotations

from dataclasses import dataclass

from latte.errors import OutOfGas

__all__ = ["GasMeter"]


@dataclass
class GasMeter:
    """Tracks the gas still available to an execution."""

    remaining: int

    def charge(self, amount: int) -> None:
        """Deduct ``amount``; raise OutOfGas, leaving the meter unchanged, if short."""
        if self.remaining < amount:
            raise OutOfGas()
        self.remaining -= amount