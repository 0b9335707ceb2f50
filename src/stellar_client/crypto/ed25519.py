"""
Ed25519 cryptographic operations for Stellar keys.

Thin wrappers around the ``cryptography`` package providing raw 32-byte
key handling, signing and verification.
"""

from __future__ import annotations
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey as CryptoEd25519PrivateKey,
    Ed25519PublicKey as CryptoEd25519PublicKey
)
from cryptography.hazmat.primitives import serialization

from ..runtime.errors import SignerError


class Ed25519Error(SignerError):
    """Base exception for Ed25519 operations."""
    pass


class Ed25519PublicKey:
    """
    Ed25519 public key.

    Provides verification operations and serialization.
    """

    def __init__(self, public_key_bytes: bytes):
        """
        Initialize from 32-byte public key.

        Args:
            public_key_bytes: 32-byte Ed25519 public key

        Raises:
            Ed25519Error: If key is invalid
        """
        if len(public_key_bytes) != 32:
            raise Ed25519Error(f"Ed25519 public key must be 32 bytes, got {len(public_key_bytes)}")

        self._key_bytes = bytes(public_key_bytes)
        try:
            self._crypto_key = CryptoEd25519PublicKey.from_public_bytes(self._key_bytes)
        except ValueError as e:
            raise Ed25519Error(f"Invalid Ed25519 public key: {e}", cause=e)

    def to_bytes(self) -> bytes:
        """Get the 32-byte public key."""
        return self._key_bytes

    def to_hex(self) -> str:
        """Get the public key as hex string."""
        return self._key_bytes.hex()

    def verify(self, signature: bytes, message: bytes) -> bool:
        """
        Verify a signature against a message.

        Args:
            signature: 64-byte Ed25519 signature
            message: Message that was signed

        Returns:
            True if signature is valid
        """
        if len(signature) != 64:
            return False
        try:
            self._crypto_key.verify(signature, message)
        except InvalidSignature:
            return False
        return True

    def __eq__(self, other) -> bool:
        """Check equality with another public key."""
        if not isinstance(other, Ed25519PublicKey):
            return False
        return self._key_bytes == other._key_bytes

    def __hash__(self) -> int:
        return hash(self._key_bytes)

    def __repr__(self) -> str:
        return f"Ed25519PublicKey('{self.to_hex()}')"


class Ed25519PrivateKey:
    """
    Ed25519 private key.

    Provides signing operations and public key derivation.
    """

    def __init__(self, private_key_bytes: bytes):
        """
        Initialize from 32-byte private key seed.

        Args:
            private_key_bytes: 32-byte Ed25519 private key seed

        Raises:
            Ed25519Error: If key is invalid
        """
        if len(private_key_bytes) != 32:
            raise Ed25519Error(f"Ed25519 private key must be 32 bytes, got {len(private_key_bytes)}")

        self._key_bytes = bytes(private_key_bytes)
        self._crypto_key = CryptoEd25519PrivateKey.from_private_bytes(self._key_bytes)
        self._public_key = Ed25519PublicKey(
            self._crypto_key.public_key().public_bytes(
                encoding=serialization.Encoding.Raw,
                format=serialization.PublicFormat.Raw
            )
        )

    @classmethod
    def generate(cls) -> Ed25519PrivateKey:
        """Generate a new random Ed25519 private key."""
        crypto_key = CryptoEd25519PrivateKey.generate()
        private_bytes = crypto_key.private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption()
        )
        return cls(private_bytes)

    def to_bytes(self) -> bytes:
        """Get the 32-byte private key seed."""
        return self._key_bytes

    def public_key(self) -> Ed25519PublicKey:
        """Get the corresponding public key."""
        return self._public_key

    def sign(self, message: bytes) -> bytes:
        """
        Sign a message.

        Args:
            message: Message to sign

        Returns:
            64-byte Ed25519 signature
        """
        return self._crypto_key.sign(message)

    def __repr__(self) -> str:
        # seed stays out of reprs and logs
        return f"Ed25519PrivateKey(public={self.public_key().to_hex()})"
