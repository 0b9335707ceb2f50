"""
Hash Functions

Transaction hashing follows the network rules: the signed payload is the
network id, the envelope type and the transaction XDR, and the transaction
hash is the SHA-256 of that payload.
"""

import hashlib
import struct

from ..enums import EnvelopeType

ENVELOPE_TYPE_TX = EnvelopeType.ENVELOPE_TYPE_TX


def sha256_bytes(input_bytes: bytes) -> bytes:
    """
    Compute SHA-256 hash of input bytes.

    Args:
        input_bytes: Input bytes to hash

    Returns:
        SHA-256 hash as bytes (32 bytes)
    """
    return hashlib.sha256(input_bytes).digest()


def network_id(network_passphrase: str) -> bytes:
    """SHA-256 of the network passphrase."""
    return sha256_bytes(network_passphrase.encode("utf-8"))


def transaction_signature_base(tx_xdr: bytes, network_passphrase: str) -> bytes:
    """
    Build the payload whose hash is signed.

    Args:
        tx_xdr: Canonical transaction bytes
        network_passphrase: Passphrase of the target network

    Returns:
        network id (32) || uint32 ENVELOPE_TYPE_TX || transaction bytes
    """
    return network_id(network_passphrase) + struct.pack(">I", ENVELOPE_TYPE_TX) + tx_xdr


def transaction_hash(tx_xdr: bytes, network_passphrase: str) -> bytes:
    """
    Hash a transaction for signing.

    Returns:
        Transaction hash (32 bytes)
    """
    return sha256_bytes(transaction_signature_base(tx_xdr, network_passphrase))
