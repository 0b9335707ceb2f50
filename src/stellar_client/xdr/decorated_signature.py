"""
DecoratedSignature XDR type: a signature tagged with its signer's hint.
"""

from __future__ import annotations
from typing import Any

from ..codec import XdrEncodable, XdrReader, XdrWriter
from ..runtime.errors import XdrEncodingError

HINT_LENGTH = 4
MAX_SIGNATURE_LENGTH = 64


class DecoratedSignature(XdrEncodable):
    """
    Layout: hint opaque[4], signature opaque<64>.
    """

    def __init__(self, hint: bytes, signature: bytes):
        if len(hint) != HINT_LENGTH:
            raise XdrEncodingError(f"Signature hint must be {HINT_LENGTH} bytes, got {len(hint)}")
        if len(signature) > MAX_SIGNATURE_LENGTH:
            raise XdrEncodingError(f"Signature must be at most {MAX_SIGNATURE_LENGTH} bytes")
        self.hint = bytes(hint)
        self.signature = bytes(signature)

    def to_xdr(self) -> bytes:
        writer = XdrWriter()
        writer.opaque_fixed(self.hint, HINT_LENGTH)
        writer.opaque_var(self.signature, MAX_SIGNATURE_LENGTH)
        return writer.to_bytes()

    @classmethod
    def from_xdr(cls, reader: XdrReader) -> DecoratedSignature:
        hint = reader.opaque_fixed(HINT_LENGTH)
        signature = reader.opaque_var(MAX_SIGNATURE_LENGTH)
        return cls(hint, signature)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DecoratedSignature):
            return False
        return self.hint == other.hint and self.signature == other.signature

    def __repr__(self) -> str:
        return f"DecoratedSignature(hint={self.hint.hex()}, signature={self.signature.hex()[:16]}...)"
