"""
Transaction signers.
"""

from typing import Union

from ..crypto.keypair import Keypair
from .signer import Signer
from .ed25519 import Ed25519Signer

SecretKeyLike = Union[str, Keypair, Signer]


def as_signer(secret_key: SecretKeyLike) -> Signer:
    """
    Normalize an ``S...`` secret, a Keypair or a Signer to a Signer.

    Raises:
        InvalidSecretKeyError: If a secret string is malformed
        SignerError: If the keypair cannot sign
    """
    if isinstance(secret_key, Signer):
        return secret_key
    return Ed25519Signer(secret_key)


__all__ = [
    "Signer",
    "Ed25519Signer",
    "SecretKeyLike",
    "as_signer",
]
