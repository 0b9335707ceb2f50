"""
Test factories for creating keys and addresses consistently.
"""

from __future__ import annotations

from stellar_client.crypto import Keypair
from stellar_client.runtime.strkey import encode_account_id


def mk_raw_key(n: int) -> bytes:
    """Deterministic 32-byte key material."""
    return bytes([n % 256]) * 32


def mk_keypair(seed: int = 1) -> Keypair:
    """
    Create a deterministic keypair for testing.

    Args:
        seed: Small integer turned into a 32-byte seed
    """
    return Keypair.from_raw_seed(seed.to_bytes(32, "big"))


def mk_account_id(n: int) -> str:
    """A valid ``G...`` address whose raw key is ``mk_raw_key(n)``."""
    return encode_account_id(mk_raw_key(n))
