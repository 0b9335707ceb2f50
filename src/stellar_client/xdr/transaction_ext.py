"""
TransactionExt: reserved extension slot at the end of every transaction.
"""

from __future__ import annotations
from typing import Any

from ..codec import XdrEncodable, XdrReader, XdrWriter
from ..runtime.errors import XdrDecodingError, XdrEncodingError


class TransactionExt(XdrEncodable):
    """
    Closed union with a single populated arm today, ``v = 0`` (no payload).

    New arms get new discriminants; the v0 encoding never changes.
    """

    SUPPORTED_VERSIONS = (0,)

    def __init__(self, v: int = 0):
        if v not in self.SUPPORTED_VERSIONS:
            raise XdrEncodingError(f"Unsupported transaction extension v{v}")
        self.v = v

    def to_xdr(self) -> bytes:
        writer = XdrWriter()
        writer.discriminant(self.v)
        return writer.to_bytes()

    @classmethod
    def from_xdr(cls, reader: XdrReader) -> TransactionExt:
        v = reader.discriminant()
        if v not in cls.SUPPORTED_VERSIONS:
            raise XdrDecodingError(f"Unsupported transaction extension v{v}")
        return cls(v)

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, TransactionExt) and self.v == other.v

    def __repr__(self) -> str:
        return f"TransactionExt(v={self.v})"
