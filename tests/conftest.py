"""
Shared fixtures: deterministic keys and a mock account state provider.
"""

import pytest

from helpers import StaticAccountState, mk_keypair

from stellar_client.tx import TransactionBuilder


@pytest.fixture
def source_keypair():
    """Deterministic keypair for the transaction source account."""
    return mk_keypair(1)


@pytest.fixture
def destination_keypair():
    return mk_keypair(2)


@pytest.fixture
def account_state():
    """Account state provider reporting sequence 41."""
    return StaticAccountState(sequence=41)


@pytest.fixture
def builder(source_keypair, account_state):
    """Builder for the source account with the mock provider attached."""
    return TransactionBuilder(source_keypair.account_id, api_client=account_state)
