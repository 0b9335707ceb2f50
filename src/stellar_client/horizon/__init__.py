"""
Horizon HTTP client: account state and transaction submission.
"""

from .client import ClientConfig, HorizonClient, WELL_KNOWN_ENDPOINTS, public_client, testnet_client
from .models import AccountResponse, Balance, SubmitTransactionResponse

__all__ = [
    "ClientConfig",
    "HorizonClient",
    "WELL_KNOWN_ENDPOINTS",
    "public_client",
    "testnet_client",
    "AccountResponse",
    "Balance",
    "SubmitTransactionResponse",
]
