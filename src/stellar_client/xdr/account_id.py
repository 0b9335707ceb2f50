"""
AccountId XDR type and Pydantic custom type for Stellar addresses.
"""

from __future__ import annotations
from typing import Any, Union
from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from ..codec import XdrEncodable, XdrReader, XdrWriter
from ..enums import PublicKeyType
from ..runtime.errors import InvalidAccountIdError, XdrDecodingError
from ..runtime.strkey import decode_account_id, encode_account_id


class AccountId(XdrEncodable):
    """
    A network address (``G...``), encoded as the 36-byte PublicKey union:
    uint32 KEY_TYPE_ED25519 followed by the 32-byte Ed25519 key.
    """

    XDR_SIZE = 36

    def __init__(self, account_id: Union[str, AccountId]):
        if isinstance(account_id, AccountId):
            account_id = account_id.account_id
        if not isinstance(account_id, str):
            raise InvalidAccountIdError(f"Account id must be a string, got {type(account_id).__name__}")

        self._raw = decode_account_id(account_id)
        self.account_id = account_id

    @classmethod
    def from_raw(cls, raw_public_key: bytes) -> AccountId:
        """Create from a 32-byte Ed25519 public key."""
        if len(raw_public_key) != 32:
            raise InvalidAccountIdError(f"Public key must be 32 bytes, got {len(raw_public_key)}")
        return cls(encode_account_id(raw_public_key))

    @property
    def raw(self) -> bytes:
        """32-byte Ed25519 public key."""
        return self._raw

    def to_xdr(self) -> bytes:
        writer = XdrWriter()
        writer.discriminant(PublicKeyType.KEY_TYPE_ED25519)
        writer.opaque_fixed(self._raw, 32)
        return writer.to_bytes()

    @classmethod
    def from_xdr(cls, reader: XdrReader) -> AccountId:
        key_type = reader.discriminant()
        if key_type != PublicKeyType.KEY_TYPE_ED25519:
            raise XdrDecodingError(f"Unsupported public key type {key_type}")
        return cls.from_raw(reader.opaque_fixed(32))

    def __str__(self) -> str:
        return self.account_id

    def __repr__(self) -> str:
        return f"AccountId('{self.account_id}')"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, AccountId):
            return self._raw == other._raw
        elif isinstance(other, str):
            return self.account_id == other
        return False

    def __hash__(self) -> int:
        return hash(self._raw)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        """Return a Pydantic CoreSchema that validates the AccountId."""
        return core_schema.no_info_before_validator_function(
            cls._validate,
            core_schema.is_instance_schema(cls),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def _validate(cls, value: Any) -> AccountId:
        """Validate and convert the input to an AccountId."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except InvalidAccountIdError as e:
                # pydantic only collects ValueError / AssertionError
                raise ValueError(e.message)
        raise ValueError(f"Invalid AccountId: {value!r}")
