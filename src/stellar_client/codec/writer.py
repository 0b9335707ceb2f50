"""
XDR Writer

Implements the canonical XDR (RFC 4506) encoding rules the Stellar network
re-derives when it verifies a transaction: big-endian fixed-width integers,
4-byte aligned opaques, count-prefixed arrays and discriminant-prefixed unions.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
import struct
from typing import Iterable, List, Optional

from ..runtime.errors import XdrEncodingError

UINT32_MAX = 0xFFFFFFFF
UINT64_MAX = 0xFFFFFFFFFFFFFFFF
INT32_MIN, INT32_MAX = -(1 << 31), (1 << 31) - 1
INT64_MIN, INT64_MAX = -(1 << 63), (1 << 63) - 1


def padding_for(length: int) -> int:
    """Number of zero bytes needed to align ``length`` to 4 bytes."""
    return (4 - length % 4) % 4


class XdrEncodable(ABC):
    """Anything that knows its own canonical XDR encoding."""

    @abstractmethod
    def to_xdr(self) -> bytes:
        """
        Encode to canonical XDR bytes.

        Returns:
            Encoded bytes, always a multiple of 4 long
        """
        pass


class XdrWriter:
    """
    Binary writer for XDR primitives.

    Accumulates bytes in order; every method appends and returns nothing,
    except the chainable helpers noted below.
    """

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb: List[int] = []

    def _check_range(self, kind: str, v: int, lo: int, hi: int) -> None:
        if not isinstance(v, int) or isinstance(v, bool):
            raise XdrEncodingError(f"{kind} requires an int, got {type(v).__name__}")
        if v < lo or v > hi:
            raise XdrEncodingError(f"{kind} value {v} out of range [{lo}, {hi}]")

    def uint32(self, v: int) -> None:
        """
        Write unsigned 32-bit integer in big-endian format.

        Args:
            v: Integer value to write (0 to 2**32-1)

        Raises:
            XdrEncodingError: If the value does not fit
        """
        self._check_range("uint32", v, 0, UINT32_MAX)
        self._bb.extend(struct.pack(">I", v))

    def int32(self, v: int) -> None:
        """Write signed 32-bit integer in big-endian two's complement."""
        self._check_range("int32", v, INT32_MIN, INT32_MAX)
        self._bb.extend(struct.pack(">i", v))

    def uint64(self, v: int) -> None:
        """
        Write unsigned 64-bit integer in big-endian format.

        Args:
            v: Integer value to write (0 to 2**64-1)

        Raises:
            XdrEncodingError: If the value does not fit
        """
        self._check_range("uint64", v, 0, UINT64_MAX)
        self._bb.extend(struct.pack(">Q", v))

    def int64(self, v: int) -> None:
        """Write signed 64-bit integer in big-endian two's complement."""
        self._check_range("int64", v, INT64_MIN, INT64_MAX)
        self._bb.extend(struct.pack(">q", v))

    def boolean(self, v: bool) -> None:
        """Write an XDR bool (uint32 0 or 1)."""
        self.uint32(1 if v else 0)

    def discriminant(self, v: int) -> None:
        """Write the 4-byte discriminant of a union."""
        self.uint32(int(v))

    def bytes(self, v: bytes) -> None:
        """
        Write raw bytes without length prefix or padding.

        Args:
            v: Bytes to write directly
        """
        self._bb.extend(v)

    def opaque_fixed(self, v: bytes, size: int) -> None:
        """
        Write a fixed-length opaque, zero padded to a multiple of 4.

        Args:
            v: Bytes, exactly ``size`` long
            size: Declared length of the opaque

        Raises:
            XdrEncodingError: If ``v`` is not exactly ``size`` bytes
        """
        if len(v) != size:
            raise XdrEncodingError(f"opaque[{size}] requires {size} bytes, got {len(v)}")
        self._bb.extend(v)
        self._bb.extend(b"\x00" * padding_for(size))

    def opaque_var(self, v: bytes, max_length: Optional[int] = None) -> None:
        """
        Write a variable-length opaque: uint32 length, data, zero padding.

        Args:
            v: Bytes to write
            max_length: Declared upper bound, if any

        Raises:
            XdrEncodingError: If ``v`` exceeds ``max_length``
        """
        if max_length is not None and len(v) > max_length:
            raise XdrEncodingError(f"opaque<{max_length}> got {len(v)} bytes")
        self.uint32(len(v))
        self._bb.extend(v)
        self._bb.extend(b"\x00" * padding_for(len(v)))

    def string(self, s: str, max_length: Optional[int] = None) -> None:
        """Write a UTF-8 string as a variable-length opaque."""
        self.opaque_var(s.encode("utf-8"), max_length)

    def encodable(self, item: XdrEncodable) -> None:
        """Write an item's own canonical encoding."""
        self._bb.extend(item.to_xdr())

    def optional(self, item: Optional[XdrEncodable]) -> None:
        """
        Write an XDR optional (``T*``): discriminant 0 when absent,
        1 followed by the item when present.
        """
        if item is None:
            self.boolean(False)
        else:
            self.boolean(True)
            self.encodable(item)

    def var_array(self, items: Iterable[XdrEncodable], max_length: Optional[int] = None) -> None:
        """
        Write a variable-length array: uint32 element count followed by each
        element's encoding, with no padding between elements.
        """
        items = list(items)
        if max_length is not None and len(items) > max_length:
            raise XdrEncodingError(f"array<{max_length}> got {len(items)} elements")
        self.uint32(len(items))
        for item in items:
            self.encodable(item)

    def __len__(self) -> int:
        return len(self._bb)

    def to_bytes(self) -> bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return bytes(self._bb)
