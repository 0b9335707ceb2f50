"""
ED25519 signer implementation.

Provides ED25519 signing functionality using the crypto module.
"""

from typing import Union

from ..crypto.keypair import Keypair
from ..runtime.errors import SignerError
from .signer import Signer


class Ed25519Signer(Signer):
    """ED25519 signer implementation."""

    def __init__(self, keypair_or_secret: Union[Keypair, str]):
        """
        Initialize ED25519 signer.

        Args:
            keypair_or_secret: Keypair holding a private key, or an ``S...`` secret

        Raises:
            InvalidSecretKeyError: If the secret is malformed
            SignerError: If the keypair cannot sign
        """
        if isinstance(keypair_or_secret, str):
            keypair_or_secret = Keypair.from_secret(keypair_or_secret)
        elif not isinstance(keypair_or_secret, Keypair):
            raise SignerError(f"Cannot sign with {type(keypair_or_secret).__name__}")
        if not keypair_or_secret.can_sign():
            raise SignerError(f"Keypair {keypair_or_secret.account_id} has no private key")
        self.keypair = keypair_or_secret

    @property
    def account_id(self) -> str:
        return self.keypair.account_id

    def get_public_key(self) -> bytes:
        """
        Get the public key bytes.

        Returns:
            Public key bytes
        """
        return self.keypair.raw_public_key()

    def verify(self, signature: bytes, digest: bytes) -> bool:
        """
        Verify a signature against a digest.

        Args:
            signature: Signature bytes to verify
            digest: 32-byte hash that was signed

        Returns:
            True if signature is valid
        """
        return self.keypair.verify(digest, signature)

    def sign(self, digest: bytes) -> bytes:
        """
        Sign data with the private key.

        Args:
            digest: Data to sign

        Returns:
            Raw signature bytes
        """
        return self.keypair.sign(digest)
