"""
Cryptographic primitives for Stellar keys.
"""

from .ed25519 import Ed25519Error, Ed25519PrivateKey, Ed25519PublicKey
from .keypair import Keypair

__all__ = [
    "Ed25519Error",
    "Ed25519PrivateKey",
    "Ed25519PublicKey",
    "Keypair",
]
