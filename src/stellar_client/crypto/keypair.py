"""
Stellar keypair: an Ed25519 key addressed through StrKey strings.
"""

from __future__ import annotations
from typing import Optional

from ..runtime.errors import SignerError
from ..runtime.strkey import (
    decode_account_id,
    decode_secret_seed,
    encode_account_id,
    encode_secret_seed,
)
from ..xdr.account_id import AccountId
from .ed25519 import Ed25519PrivateKey, Ed25519PublicKey


class Keypair:
    """
    A public key and, when known, its private seed.

    Example:
        ```python
        keypair = Keypair.from_secret("SB...")
        keypair.account_id       # "GA..."
        keypair.sign(b"payload")
        ```
    """

    def __init__(self, public_key: Ed25519PublicKey, private_key: Optional[Ed25519PrivateKey] = None):
        self.public_key = public_key
        self.private_key = private_key

    @classmethod
    def random(cls) -> Keypair:
        """Generate a new random keypair."""
        private_key = Ed25519PrivateKey.generate()
        return cls(private_key.public_key(), private_key)

    @classmethod
    def from_raw_seed(cls, seed: bytes) -> Keypair:
        """Create from a 32-byte Ed25519 seed."""
        private_key = Ed25519PrivateKey(seed)
        return cls(private_key.public_key(), private_key)

    @classmethod
    def from_secret(cls, secret: str) -> Keypair:
        """
        Create from an ``S...`` secret seed.

        Raises:
            InvalidSecretKeyError: If the secret is malformed
        """
        return cls.from_raw_seed(decode_secret_seed(secret))

    @classmethod
    def from_public_key(cls, account_id: str) -> Keypair:
        """
        Create a verify-only keypair from a ``G...`` address.

        Raises:
            InvalidAccountIdError: If the address is malformed
        """
        return cls(Ed25519PublicKey(decode_account_id(account_id)))

    @property
    def account_id(self) -> str:
        """``G...`` address of this keypair."""
        return encode_account_id(self.public_key.to_bytes())

    def to_account_id(self) -> AccountId:
        return AccountId.from_raw(self.public_key.to_bytes())

    @property
    def secret_seed(self) -> str:
        """``S...`` secret of this keypair."""
        return encode_secret_seed(self._require_private_key().to_bytes())

    def can_sign(self) -> bool:
        return self.private_key is not None

    def raw_public_key(self) -> bytes:
        return self.public_key.to_bytes()

    def signature_hint(self) -> bytes:
        """Last 4 bytes of the public key, used to match signatures to signers."""
        return self.public_key.to_bytes()[-4:]

    def _require_private_key(self) -> Ed25519PrivateKey:
        if self.private_key is None:
            raise SignerError("Keypair has no private key")
        return self.private_key

    def sign(self, data: bytes) -> bytes:
        """
        Sign data with the private key.

        Raises:
            SignerError: If this is a verify-only keypair
        """
        return self._require_private_key().sign(data)

    def verify(self, data: bytes, signature: bytes) -> bool:
        return self.public_key.verify(signature, data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Keypair):
            return False
        return self.public_key == other.public_key

    def __hash__(self) -> int:
        return hash(self.public_key)

    def __repr__(self) -> str:
        return f"Keypair('{self.account_id}', can_sign={self.can_sign()})"
