"""
Transaction fee strategies.

The network charges per operation. The default strategy charges a fixed
base fee for every operation; congestion-aware pricing plugs in by
implementing FeeStrategy.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass

BASE_OPERATION_FEE = 100  # stroops


class FeeStrategy(ABC):
    """Computes the total transaction fee from the operation count."""

    @abstractmethod
    def compute(self, operation_count: int) -> int:
        """
        Args:
            operation_count: Number of operations in the transaction

        Returns:
            Total fee in stroops
        """
        pass


@dataclass(frozen=True)
class FixedPerOperationFee(FeeStrategy):
    """operation_count * base_fee."""

    base_fee: int = BASE_OPERATION_FEE

    def compute(self, operation_count: int) -> int:
        return operation_count * self.base_fee


@dataclass(frozen=True)
class SurgePricingFee(FeeStrategy):
    """
    Per-operation fee scaled by a congestion multiplier and capped.

    The multiplier is usually taken from recent ledger fee statistics.
    """

    base_fee: int = BASE_OPERATION_FEE
    multiplier: float = 1.0
    max_fee_per_operation: int = 10_000

    def compute(self, operation_count: int) -> int:
        per_operation = max(self.base_fee, int(self.base_fee * self.multiplier))
        return operation_count * min(per_operation, self.max_fee_per_operation)


DEFAULT_FEE_STRATEGY = FixedPerOperationFee()
