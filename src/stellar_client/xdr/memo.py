"""
Memo XDR type.

A memo is a closed union; exactly one variant is active:

    MEMO_NONE    no payload                       4 bytes
    MEMO_TEXT    string<28>                       8-36 bytes
    MEMO_ID      uint64                           12 bytes
    MEMO_HASH    opaque[32]                       36 bytes
    MEMO_RETURN  opaque[32]                       36 bytes
"""

from __future__ import annotations
from typing import Any, Union

from ..codec import XdrEncodable, XdrReader, XdrWriter
from ..codec.writer import UINT64_MAX
from ..enums import MemoType
from ..runtime.errors import InvalidMemoError, XdrDecodingError

MAX_TEXT_LENGTH = 28
HASH_LENGTH = 32

MemoPayload = Union[None, str, bytes, int]


class Memo(XdrEncodable):
    """Typed metadata attached to a transaction."""

    MEMO_TYPE_NONE = MemoType.MEMO_NONE
    MEMO_TYPE_TEXT = MemoType.MEMO_TEXT
    MEMO_TYPE_ID = MemoType.MEMO_ID
    MEMO_TYPE_HASH = MemoType.MEMO_HASH
    MEMO_TYPE_RETURN = MemoType.MEMO_RETURN

    def __init__(self, memo_type: Union[int, MemoType] = MemoType.MEMO_NONE, value: MemoPayload = None):
        """
        Create a memo, validating the payload against its variant.

        Args:
            memo_type: Variant discriminant
            value: str or bytes for TEXT (at most 28 UTF-8 bytes), int for ID,
                32 bytes for HASH / RETURN, None for NONE

        Raises:
            InvalidMemoError: If the payload does not fit the variant
        """
        try:
            self.memo_type = MemoType(memo_type)
        except ValueError as e:
            raise InvalidMemoError(f"Unknown memo type {memo_type!r}", cause=e)
        self.value = self._validate(self.memo_type, value)

    @staticmethod
    def _validate(memo_type: MemoType, value: MemoPayload) -> MemoPayload:
        if memo_type == MemoType.MEMO_NONE:
            if value is not None:
                raise InvalidMemoError("MEMO_NONE takes no payload")
            return None

        if memo_type == MemoType.MEMO_TEXT:
            if isinstance(value, str):
                encoded = value.encode("utf-8")
            elif isinstance(value, bytes):
                encoded = value
            else:
                raise InvalidMemoError(f"Text memo must be str or bytes, got {type(value).__name__}")
            if len(encoded) > MAX_TEXT_LENGTH:
                raise InvalidMemoError(
                    f"Text memo is {len(encoded)} bytes, maximum is {MAX_TEXT_LENGTH}",
                    details={"length": len(encoded)},
                )
            return encoded

        if memo_type == MemoType.MEMO_ID:
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidMemoError(f"Id memo must be an int, got {type(value).__name__}")
            if value < 0 or value > UINT64_MAX:
                raise InvalidMemoError(f"Id memo {value} is not an unsigned 64-bit value")
            return value

        # MEMO_HASH / MEMO_RETURN
        if not isinstance(value, bytes):
            raise InvalidMemoError(f"{memo_type.name} payload must be bytes, got {type(value).__name__}")
        if len(value) != HASH_LENGTH:
            raise InvalidMemoError(
                f"{memo_type.name} payload must be exactly {HASH_LENGTH} bytes, got {len(value)}",
                details={"length": len(value)},
            )
        return value

    @classmethod
    def none(cls) -> Memo:
        return cls(MemoType.MEMO_NONE)

    @classmethod
    def text(cls, text: Union[str, bytes]) -> Memo:
        return cls(MemoType.MEMO_TEXT, text)

    @classmethod
    def id(cls, memo_id: int) -> Memo:
        return cls(MemoType.MEMO_ID, memo_id)

    @classmethod
    def hash(cls, digest: bytes) -> Memo:
        return cls(MemoType.MEMO_HASH, digest)

    @classmethod
    def return_hash(cls, digest: bytes) -> Memo:
        return cls(MemoType.MEMO_RETURN, digest)

    def to_xdr(self) -> bytes:
        writer = XdrWriter()
        writer.discriminant(self.memo_type)
        if self.memo_type == MemoType.MEMO_TEXT:
            writer.opaque_var(self.value, MAX_TEXT_LENGTH)
        elif self.memo_type == MemoType.MEMO_ID:
            writer.uint64(self.value)
        elif self.memo_type in (MemoType.MEMO_HASH, MemoType.MEMO_RETURN):
            writer.opaque_fixed(self.value, HASH_LENGTH)
        return writer.to_bytes()

    @classmethod
    def from_xdr(cls, reader: XdrReader) -> Memo:
        memo_type = reader.discriminant()
        if memo_type == MemoType.MEMO_NONE:
            return cls.none()
        if memo_type == MemoType.MEMO_TEXT:
            return cls.text(reader.opaque_var(MAX_TEXT_LENGTH))
        if memo_type == MemoType.MEMO_ID:
            return cls.id(reader.uint64())
        if memo_type in (MemoType.MEMO_HASH, MemoType.MEMO_RETURN):
            return cls(memo_type, reader.opaque_fixed(HASH_LENGTH))
        raise XdrDecodingError(f"Unknown memo type {memo_type}")

    @property
    def text_value(self) -> str:
        """Text payload decoded as UTF-8 (TEXT memos only)."""
        if self.memo_type != MemoType.MEMO_TEXT:
            raise InvalidMemoError(f"{self.memo_type.name} memo has no text")
        return self.value.decode("utf-8", errors="replace")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Memo):
            return False
        return self.memo_type == other.memo_type and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.memo_type, self.value))

    def __repr__(self) -> str:
        return f"Memo({self.memo_type.name}, {self.value!r})"
