"""
Stellar XDR Codec Module

Canonical XDR encoding/decoding for transactions, envelopes and the types
they are built from.

Key components:
- writer.py: XDR writer for fixed-width integers, opaques, arrays and unions
- reader.py: XDR reader decoding the same primitives
- hashes.py: network id and transaction hash helpers
"""

from .hashes import sha256_bytes, network_id, transaction_signature_base, transaction_hash
from .reader import XdrReader
from .writer import XdrEncodable, XdrWriter

__all__ = [
    "XdrEncodable",
    "XdrReader",
    "XdrWriter",
    "sha256_bytes",
    "network_id",
    "transaction_signature_base",
    "transaction_hash",
]
