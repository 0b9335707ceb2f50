"""
Transaction envelope: transaction bytes plus the signatures over them.

Layout:

    Transaction                 (the canonical transaction bytes)
    DecoratedSignature<20>      (uint32 count + signatures)
"""

from __future__ import annotations
import base64
import binascii
from typing import List, Optional

from ..codec import XdrReader, XdrWriter, transaction_hash, transaction_signature_base
from ..runtime.errors import XdrDecodingError
from ..signers import SecretKeyLike, as_signer
from ..xdr.decorated_signature import DecoratedSignature
from .decode import read_transaction

MAX_SIGNATURES = 20


class TransactionEnvelope:
    """
    A transaction ready to be signed and submitted.

    The envelope keeps the exact bytes it was created from, so hashing and
    signing never re-resolve the sequence number.
    """

    def __init__(self, tx_xdr: bytes, network_passphrase: str,
                 signatures: Optional[List[DecoratedSignature]] = None):
        """
        Args:
            tx_xdr: Canonical transaction bytes
            network_passphrase: Passphrase of the network the signatures target
            signatures: Existing signatures
        """
        self.tx_xdr = bytes(tx_xdr)
        self.network_passphrase = network_passphrase
        self.signatures: List[DecoratedSignature] = list(signatures or [])

    def signature_base(self) -> bytes:
        return transaction_signature_base(self.tx_xdr, self.network_passphrase)

    def hash(self) -> bytes:
        """32-byte transaction hash."""
        return transaction_hash(self.tx_xdr, self.network_passphrase)

    def hash_hex(self) -> str:
        return self.hash().hex()

    def sign(self, secret_key: SecretKeyLike) -> TransactionEnvelope:
        """
        Add a signature over the transaction hash.

        Args:
            secret_key: ``S...`` secret, Keypair or Signer

        Returns:
            Self for chaining
        """
        self.add_signature(as_signer(secret_key).sign_decorated(self.hash()))
        return self

    def add_signature(self, signature: DecoratedSignature) -> TransactionEnvelope:
        self.signatures.append(signature)
        return self

    def to_xdr(self) -> bytes:
        writer = XdrWriter()
        writer.bytes(self.tx_xdr)
        writer.var_array(self.signatures, MAX_SIGNATURES)
        return writer.to_bytes()

    def to_base64(self) -> str:
        """Envelope XDR as base64, the form Horizon accepts."""
        return base64.b64encode(self.to_xdr()).decode("ascii")

    @classmethod
    def from_xdr(cls, data: bytes, network_passphrase: str) -> TransactionEnvelope:
        """
        Parse an envelope.

        Raises:
            XdrDecodingError: If the bytes do not form exactly one envelope
        """
        reader = XdrReader(data)
        read_transaction(reader)
        tx_xdr = data[:reader.offset]
        signatures = reader.var_array(DecoratedSignature.from_xdr, MAX_SIGNATURES)
        reader.ensure_eof()
        return cls(tx_xdr, network_passphrase, signatures)

    @classmethod
    def from_base64(cls, encoded: str, network_passphrase: str) -> TransactionEnvelope:
        try:
            data = base64.b64decode(encoded, validate=True)
        except binascii.Error as e:
            raise XdrDecodingError("Envelope is not valid base64", cause=e)
        return cls.from_xdr(data, network_passphrase)

    def __repr__(self) -> str:
        return f"TransactionEnvelope(hash={self.hash_hex()}, signatures={len(self.signatures)})"
