r"""
Base signer interface.

Defines the signing interface transaction envelopes rely on.
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from ..runtime.errors import SignerError
from ..xdr.decorated_signature import DecoratedSignature


class Signer(ABC):
    """
    Base signer interface.

    A signer turns a 32-byte transaction hash into a DecoratedSignature.
    """

    @abstractmethod
    def sign(self, digest: bytes) -> bytes:
        """
        Sign a digest.

        Args:
            digest: 32-byte hash to sign

        Returns:
            Signature bytes

        Raises:
            SignerError: If signing fails
        """
        pass

    @abstractmethod
    def verify(self, signature: bytes, digest: bytes) -> bool:
        """
        Verify a signature against a digest.

        Args:
            signature: Signature bytes to verify
            digest: 32-byte hash that was signed

        Returns:
            True if signature is valid
        """
        pass

    @abstractmethod
    def get_public_key(self) -> bytes:
        """
        Get the public key bytes.

        Returns:
            32-byte raw public key
        """
        pass

    def signature_hint(self) -> bytes:
        """Last 4 bytes of the public key."""
        return self.get_public_key()[-4:]

    def sign_decorated(self, digest: bytes) -> DecoratedSignature:
        """
        Sign a transaction hash and attach the signer's hint.

        Args:
            digest: 32-byte transaction hash

        Returns:
            DecoratedSignature ready for an envelope
        """
        if len(digest) != 32:
            raise SignerError(f"Digest must be 32 bytes, got {len(digest)}")
        return DecoratedSignature(self.signature_hint(), self.sign(digest))
