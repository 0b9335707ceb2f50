"""
Discriminants of the XDR unions used by transactions.

Values are part of the wire contract and must never be renumbered.
"""

from enum import IntEnum


class PublicKeyType(IntEnum):
    KEY_TYPE_ED25519 = 0


class MemoType(IntEnum):
    MEMO_NONE = 0
    MEMO_TEXT = 1
    MEMO_ID = 2
    MEMO_HASH = 3
    MEMO_RETURN = 4


class AssetType(IntEnum):
    ASSET_TYPE_NATIVE = 0
    ASSET_TYPE_CREDIT_ALPHANUM4 = 1
    ASSET_TYPE_CREDIT_ALPHANUM12 = 2


class OperationType(IntEnum):
    """Operation body discriminants."""

    CREATE_ACCOUNT = 0
    PAYMENT = 1
    PATH_PAYMENT = 2
    MANAGE_OFFER = 3
    CREATE_PASSIVE_OFFER = 4
    SET_OPTIONS = 5
    CHANGE_TRUST = 6
    ALLOW_TRUST = 7
    ACCOUNT_MERGE = 8
    INFLATION = 9
    MANAGE_DATA = 10


class EnvelopeType(IntEnum):
    ENVELOPE_TYPE_SCP = 1
    ENVELOPE_TYPE_TX = 2


__all__ = [
    "PublicKeyType",
    "MemoType",
    "AssetType",
    "OperationType",
    "EnvelopeType",
]
