"""
Amount scaling.

Amounts travel as int64 counts of stroops; one unit of an asset is
10,000,000 stroops.
"""

from __future__ import annotations
from decimal import Decimal, InvalidOperation
from typing import Union

from ..runtime.errors import InvalidAmountError

STROOPS_PER_UNIT = 10_000_000
MAX_STROOPS = (1 << 63) - 1

AmountLike = Union[int, str, Decimal]


def to_stroops(amount: AmountLike) -> int:
    """
    Convert a human amount (``"50"``, ``Decimal("0.5")``, ``50``) to stroops.

    Floats are rejected; use a string or Decimal instead.

    Raises:
        InvalidAmountError: If the amount is negative, has more than 7
            decimal places or does not fit in int64
    """
    if isinstance(amount, (float, bool)):
        raise InvalidAmountError(f"Amount must be int, str or Decimal, got {type(amount).__name__}")
    try:
        value = Decimal(amount)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise InvalidAmountError(f"Invalid amount {amount!r}", cause=e)

    if not value.is_finite():
        raise InvalidAmountError(f"Invalid amount {amount!r}")

    stroops = value * STROOPS_PER_UNIT
    if stroops != stroops.to_integral_value():
        raise InvalidAmountError(f"Amount {amount} has more than 7 decimal places")
    stroops = int(stroops)
    if stroops < 0 or stroops > MAX_STROOPS:
        raise InvalidAmountError(f"Amount {amount} out of range")
    return stroops


def from_stroops(stroops: int) -> Decimal:
    """Convert stroops back to a unit amount."""
    return Decimal(stroops) / STROOPS_PER_UNIT
