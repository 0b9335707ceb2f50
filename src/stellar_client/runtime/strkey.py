"""
StrKey encoding for Stellar keys.

A StrKey is base32(version_byte || payload || crc16_xmodem(version_byte || payload)),
with the checksum stored little-endian. Account ids start with ``G`` and
secret seeds with ``S``.
"""

from __future__ import annotations
import base64
import binascii
import struct

from .errors import InvalidAccountIdError, InvalidSecretKeyError

VERSION_BYTE_ACCOUNT_ID = 6 << 3
VERSION_BYTE_SEED = 18 << 3

KEY_LENGTH = 32
STRKEY_LENGTH = 56


def _checksum(data: bytes) -> bytes:
    # binascii.crc_hqx with a zero seed is CRC16-XModem
    return struct.pack("<H", binascii.crc_hqx(data, 0))


def encode_check(version_byte: int, payload: bytes) -> str:
    """
    Encode a raw key as a StrKey string.

    Args:
        version_byte: One of the VERSION_BYTE_* constants
        payload: 32-byte raw key

    Returns:
        56 character StrKey
    """
    if len(payload) != KEY_LENGTH:
        raise ValueError(f"StrKey payload must be {KEY_LENGTH} bytes, got {len(payload)}")
    data = bytes([version_byte]) + payload
    return base64.b32encode(data + _checksum(data)).decode("ascii")


def decode_check(version_byte: int, encoded: str) -> bytes:
    """
    Decode a StrKey string and verify its version byte and checksum.

    Raises:
        ValueError: If the string is malformed
    """
    if not isinstance(encoded, str):
        raise ValueError(f"StrKey must be a string, got {type(encoded).__name__}")
    if len(encoded) != STRKEY_LENGTH:
        raise ValueError(f"StrKey must be {STRKEY_LENGTH} characters, got {len(encoded)}")

    try:
        decoded = base64.b32decode(encoded.encode("ascii"), casefold=False)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise ValueError(f"StrKey is not valid base32: {e}")
    if "=" in encoded or len(decoded) != 1 + KEY_LENGTH + 2:
        raise ValueError(f"StrKey must decode to {1 + KEY_LENGTH + 2} bytes without padding")

    data, checksum = decoded[:-2], decoded[-2:]
    if data[0] != version_byte:
        raise ValueError(f"Unexpected StrKey version byte {data[0]}")
    if _checksum(data) != checksum:
        raise ValueError("StrKey checksum mismatch")

    return data[1:]


def encode_account_id(raw_public_key: bytes) -> str:
    """Encode a 32-byte Ed25519 public key as a ``G...`` address."""
    return encode_check(VERSION_BYTE_ACCOUNT_ID, raw_public_key)


def decode_account_id(account_id: str) -> bytes:
    """
    Decode a ``G...`` address to its 32-byte public key.

    Raises:
        InvalidAccountIdError: If the address is malformed
    """
    try:
        return decode_check(VERSION_BYTE_ACCOUNT_ID, account_id)
    except ValueError as e:
        raise InvalidAccountIdError(f"Invalid account id {account_id!r}", cause=e)


def encode_secret_seed(raw_seed: bytes) -> str:
    """Encode a 32-byte Ed25519 seed as an ``S...`` secret."""
    return encode_check(VERSION_BYTE_SEED, raw_seed)


def decode_secret_seed(secret: str) -> bytes:
    """
    Decode an ``S...`` secret to its 32-byte seed.

    Raises:
        InvalidSecretKeyError: If the secret is malformed
    """
    try:
        return decode_check(VERSION_BYTE_SEED, secret)
    except ValueError as e:
        # never echo the secret itself
        raise InvalidSecretKeyError("Invalid secret seed", cause=e)


def is_valid_account_id(account_id: str) -> bool:
    """Check whether a string is a well-formed ``G...`` address."""
    try:
        decode_check(VERSION_BYTE_ACCOUNT_ID, account_id)
    except ValueError:
        return False
    return True


__all__ = [
    "VERSION_BYTE_ACCOUNT_ID",
    "VERSION_BYTE_SEED",
    "encode_check",
    "decode_check",
    "encode_account_id",
    "decode_account_id",
    "encode_secret_seed",
    "decode_secret_seed",
    "is_valid_account_id",
]
