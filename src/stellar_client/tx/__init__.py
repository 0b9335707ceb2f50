"""
Transaction assembly, envelopes and decoding.
"""

from .builder import TransactionBuilder
from .collaborators import AccountStateProvider, TransactionSubmitter, ApiClient
from .decode import DecodedTransaction, decode_transaction, read_transaction
from .envelope import TransactionEnvelope
from .fees import BASE_OPERATION_FEE, FeeStrategy, FixedPerOperationFee, SurgePricingFee

__all__ = [
    "TransactionBuilder",
    "AccountStateProvider",
    "TransactionSubmitter",
    "ApiClient",
    "DecodedTransaction",
    "decode_transaction",
    "read_transaction",
    "TransactionEnvelope",
    "BASE_OPERATION_FEE",
    "FeeStrategy",
    "FixedPerOperationFee",
    "SurgePricingFee",
]
