"""
XDR value types: the fields a transaction is assembled from.
"""

from .account_id import AccountId
from .amount import STROOPS_PER_UNIT, to_stroops, from_stroops
from .asset import Asset
from .memo import Memo
from .time_bounds import TimeBounds
from .decorated_signature import DecoratedSignature
from .operations import Operation, CreateAccountOp, PaymentOp, ChangeTrustOp
from .transaction_ext import TransactionExt

__all__ = [
    "AccountId",
    "STROOPS_PER_UNIT",
    "to_stroops",
    "from_stroops",
    "Asset",
    "Memo",
    "TimeBounds",
    "Operation",
    "CreateAccountOp",
    "PaymentOp",
    "ChangeTrustOp",
    "DecoratedSignature",
    "TransactionExt",
]
