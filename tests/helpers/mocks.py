"""
Mock collaborators for transaction builder tests.
"""

from __future__ import annotations
from typing import Any, List, Optional

from stellar_client.network import TESTNET_NETWORK_PASSPHRASE
from stellar_client.tx.collaborators import AccountStateProvider, ApiClient


class StaticAccountState(ApiClient):
    """
    Account state provider reporting a configurable sequence number.

    Records every lookup and every submitted envelope.
    """

    def __init__(self, sequence: int = 41, network_passphrase: str = TESTNET_NETWORK_PASSPHRASE,
                 submit_result: Any = None):
        self.sequence = sequence
        self.network_passphrase = network_passphrase
        self.submit_result = submit_result if submit_result is not None else {"hash": "mock"}
        self.lookups: List[str] = []
        self.submitted: List[Any] = []

    def get_account_sequence(self, account_id: str) -> int:
        self.lookups.append(account_id)
        return self.sequence

    def submit_transaction(self, envelope: Any) -> Any:
        self.submitted.append(envelope)
        return self.submit_result


class SequenceOnlyAccountState(AccountStateProvider):
    """Account state provider that cannot submit or name a network."""

    def __init__(self, sequence: int = 41):
        self.sequence = sequence

    def get_account_sequence(self, account_id: str) -> int:
        return self.sequence


class FailingAccountState(StaticAccountState):
    """Account state provider whose lookups always raise ``error``."""

    def __init__(self, error: Exception):
        super().__init__()
        self.error = error

    def get_account_sequence(self, account_id: str) -> int:
        self.lookups.append(account_id)
        raise self.error


class StubOperation:
    """Operation stand-in with a fixed encoding."""

    def __init__(self, payload: bytes, name: Optional[str] = None):
        self.payload = payload
        self.name = name

    def to_xdr(self) -> bytes:
        return self.payload
