"""
Interfaces of the external services a TransactionBuilder talks to.

HorizonClient implements both; tests and alternative backends can provide
their own.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .envelope import TransactionEnvelope


class AccountStateProvider(ABC):
    """Source of the current on-chain sequence number of an account."""

    @abstractmethod
    def get_account_sequence(self, account_id: str) -> int:
        """
        Args:
            account_id: ``G...`` address

        Returns:
            Current sequence number of the account

        Raises:
            CollaboratorFailure: On network errors or unknown accounts
        """
        pass


class TransactionSubmitter(ABC):
    """Accepts signed envelopes for a given network."""

    network_passphrase: str

    @abstractmethod
    def submit_transaction(self, envelope: TransactionEnvelope) -> Any:
        """
        Submit a signed envelope.

        Returns:
            The submission result, passed through untouched
        """
        pass


class ApiClient(AccountStateProvider, TransactionSubmitter):
    """A service providing both account state and submission."""
    pass
