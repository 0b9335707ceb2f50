"""
XDR Reader

Decodes the primitives written by XdrWriter. Used to read transactions and
envelopes back field by field using the same fixed grammar.
"""

import builtins
import struct
from typing import Callable, List, Optional, TypeVar

from ..runtime.errors import XdrDecodingError
from .writer import padding_for

T = TypeVar("T")


class XdrReader:
    """
    Binary reader for XDR primitives.

    Keeps a cursor into the buffer; every read advances it.
    """

    def __init__(self, buf: builtins.bytes):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
        """
        self._buf = bytes(buf)
        self._off = 0

    @property
    def offset(self) -> int:
        """Current cursor position."""
        return self._off

    @property
    def eof(self) -> bool:
        """
        Check if at end of buffer.

        Returns:
            True if at end of buffer
        """
        return self._off >= len(self._buf)

    @property
    def remaining(self) -> int:
        return len(self._buf) - self._off

    def _take(self, n: int) -> builtins.bytes:
        if self._off + n > len(self._buf):
            raise XdrDecodingError(
                f"Buffer overflow: need {n} bytes at offset {self._off}, {self.remaining} left"
            )
        out = self._buf[self._off : self._off + n]
        self._off += n
        return out

    def uint32(self) -> int:
        """Read unsigned 32-bit big-endian integer."""
        return struct.unpack(">I", self._take(4))[0]

    def int32(self) -> int:
        """Read signed 32-bit big-endian integer."""
        return struct.unpack(">i", self._take(4))[0]

    def uint64(self) -> int:
        """Read unsigned 64-bit big-endian integer."""
        return struct.unpack(">Q", self._take(8))[0]

    def int64(self) -> int:
        """Read signed 64-bit big-endian integer."""
        return struct.unpack(">q", self._take(8))[0]

    def boolean(self) -> bool:
        """
        Read an XDR bool.

        Raises:
            XdrDecodingError: If the value is neither 0 nor 1
        """
        v = self.uint32()
        if v not in (0, 1):
            raise XdrDecodingError(f"Invalid bool value {v} at offset {self._off - 4}")
        return v == 1

    def discriminant(self) -> int:
        """Read a union discriminant."""
        return self.uint32()

    def bytes(self, n: int) -> builtins.bytes:
        """
        Read n raw bytes without padding.

        Args:
            n: Number of bytes to read
        """
        return self._take(n)

    def _skip_padding(self, length: int) -> None:
        pad = self._take(padding_for(length))
        if pad.strip(b"\x00"):
            raise XdrDecodingError(f"Non-zero padding at offset {self._off - len(pad)}")

    def opaque_fixed(self, size: int) -> builtins.bytes:
        """Read a fixed-length opaque and its padding."""
        out = self._take(size)
        self._skip_padding(size)
        return out

    def opaque_var(self, max_length: Optional[int] = None) -> builtins.bytes:
        """
        Read a variable-length opaque.

        Raises:
            XdrDecodingError: If the declared length exceeds ``max_length``
        """
        n = self.uint32()
        if max_length is not None and n > max_length:
            raise XdrDecodingError(f"opaque<{max_length}> declared length {n}")
        out = self._take(n)
        self._skip_padding(n)
        return out

    def string(self, max_length: Optional[int] = None) -> str:
        """Read a UTF-8 string."""
        raw = self.opaque_var(max_length)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise XdrDecodingError("String is not valid UTF-8", cause=e)

    def optional(self, read: Callable[["XdrReader"], T]) -> Optional[T]:
        """Read an XDR optional, delegating the present arm to ``read``."""
        if self.boolean():
            return read(self)
        return None

    def var_array(self, read: Callable[["XdrReader"], T], max_length: Optional[int] = None) -> List[T]:
        """Read a count-prefixed array, delegating each element to ``read``."""
        n = self.uint32()
        if max_length is not None and n > max_length:
            raise XdrDecodingError(f"array<{max_length}> declared count {n}")
        return [read(self) for _ in range(n)]

    def ensure_eof(self) -> None:
        """
        Raises:
            XdrDecodingError: If unread bytes remain
        """
        if not self.eof:
            raise XdrDecodingError(f"{self.remaining} trailing bytes after offset {self._off}")
