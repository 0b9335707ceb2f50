"""
Stellar network identities.

Every signature commits to the network it was produced for through the
SHA-256 hash of the network passphrase.
"""

from __future__ import annotations
from dataclasses import dataclass
from .codec.hashes import network_id as _network_id

PUBLIC_NETWORK_PASSPHRASE = "Public Global Stellar Network ; September 2015"
TESTNET_NETWORK_PASSPHRASE = "Test SDF Network ; September 2015"


@dataclass(frozen=True)
class Network:
    """A Stellar network, identified by its passphrase."""

    passphrase: str

    def network_id(self) -> bytes:
        """32-byte network id (SHA-256 of the passphrase)."""
        return _network_id(self.passphrase)

    @classmethod
    def public(cls) -> Network:
        return cls(PUBLIC_NETWORK_PASSPHRASE)

    @classmethod
    def testnet(cls) -> Network:
        return cls(TESTNET_NETWORK_PASSPHRASE)


__all__ = [
    "PUBLIC_NETWORK_PASSPHRASE",
    "TESTNET_NETWORK_PASSPHRASE",
    "Network",
]
