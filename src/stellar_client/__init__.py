"""
Stellar Python Client

Builds Stellar transactions, encodes them to the canonical XDR the network
verifies, signs them and submits them through Horizon.
"""

from .enums import *
from .network import Network, PUBLIC_NETWORK_PASSPHRASE, TESTNET_NETWORK_PASSPHRASE
from .runtime.errors import *

# Encoding
from .codec import XdrEncodable, XdrReader, XdrWriter, transaction_hash

# Transaction fields and operations
from .xdr import (
    AccountId, Asset, Memo, TimeBounds, TransactionExt, DecoratedSignature,
    Operation, CreateAccountOp, PaymentOp, ChangeTrustOp,
    to_stroops, from_stroops,
)

# Keys and signing
from .crypto import Keypair
from .signers import Signer, Ed25519Signer

# Transactions
from .tx import (
    TransactionBuilder, TransactionEnvelope, DecodedTransaction, decode_transaction,
    FeeStrategy, FixedPerOperationFee, SurgePricingFee,
    AccountStateProvider, TransactionSubmitter,
)

# Horizon
from .horizon import ClientConfig, HorizonClient, public_client, testnet_client

__version__ = "0.1.0"
__all__ = [
    "Network",
    "PUBLIC_NETWORK_PASSPHRASE",
    "TESTNET_NETWORK_PASSPHRASE",

    # Encoding
    "XdrEncodable",
    "XdrReader",
    "XdrWriter",
    "transaction_hash",

    # Transaction fields
    "AccountId",
    "Asset",
    "Memo",
    "TimeBounds",
    "TransactionExt",
    "DecoratedSignature",
    "Operation",
    "CreateAccountOp",
    "PaymentOp",
    "ChangeTrustOp",
    "to_stroops",
    "from_stroops",

    # Keys and signing
    "Keypair",
    "Signer",
    "Ed25519Signer",

    # Transactions
    "TransactionBuilder",
    "TransactionEnvelope",
    "DecodedTransaction",
    "decode_transaction",
    "FeeStrategy",
    "FixedPerOperationFee",
    "SurgePricingFee",
    "AccountStateProvider",
    "TransactionSubmitter",

    # Horizon
    "ClientConfig",
    "HorizonClient",
    "public_client",
    "testnet_client",
]
