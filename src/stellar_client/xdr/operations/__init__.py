"""
Operation payload encoders.
"""

from .base import Operation, register_operation, supported_operation_types
from .create_account import CreateAccountOp
from .payment import PaymentOp
from .change_trust import ChangeTrustOp

__all__ = [
    "Operation",
    "register_operation",
    "supported_operation_types",
    "CreateAccountOp",
    "PaymentOp",
    "ChangeTrustOp",
]
