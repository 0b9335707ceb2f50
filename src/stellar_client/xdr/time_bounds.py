"""
TimeBounds XDR type.

Encoded as an XDR optional: a 4-byte zero when no bound has been set, or a
4-byte one followed by minTime and maxTime as uint64 epoch seconds. An unset
side of a present TimeBounds encodes as 0, which the network reads as
"unrestricted".
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Optional, Union

from ..codec import XdrEncodable, XdrReader, XdrWriter
from ..codec.writer import UINT64_MAX
from ..runtime.errors import InvalidTimeBoundsError

TimePoint = Union[datetime, int]


def to_epoch(value: TimePoint) -> int:
    """
    Convert a time point to network epoch seconds.

    Naive datetimes are taken as UTC.

    Raises:
        InvalidTimeBoundsError: If the value is not a datetime or a
            non-negative int within uint64
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        epoch = int(value.timestamp())
    elif isinstance(value, int) and not isinstance(value, bool):
        epoch = value
    else:
        raise InvalidTimeBoundsError(f"Time bound must be a datetime or int, got {type(value).__name__}")

    if epoch < 0 or epoch > UINT64_MAX:
        raise InvalidTimeBoundsError(f"Time bound {epoch} is not a valid epoch value")
    return epoch


class TimeBounds(XdrEncodable):
    """
    Optional validity window of a transaction.

    min_time > max_time is accepted; the network rejects such a window itself.
    """

    def __init__(self, min_time: Optional[TimePoint] = None, max_time: Optional[TimePoint] = None):
        self.min_time: Optional[int] = None if min_time is None else to_epoch(min_time)
        self.max_time: Optional[int] = None if max_time is None else to_epoch(max_time)

    def is_empty(self) -> bool:
        """True when neither bound has been set."""
        return self.min_time is None and self.max_time is None

    def set_min_time(self, value: TimePoint) -> TimeBounds:
        self.min_time = to_epoch(value)
        return self

    def set_max_time(self, value: TimePoint) -> TimeBounds:
        self.max_time = to_epoch(value)
        return self

    def get_min_time(self) -> Optional[datetime]:
        if self.min_time is None:
            return None
        return datetime.fromtimestamp(self.min_time, tz=timezone.utc)

    def get_max_time(self) -> Optional[datetime]:
        if self.max_time is None:
            return None
        return datetime.fromtimestamp(self.max_time, tz=timezone.utc)

    def to_xdr(self) -> bytes:
        writer = XdrWriter()
        if self.is_empty():
            writer.boolean(False)
        else:
            writer.boolean(True)
            writer.uint64(self.min_time or 0)
            writer.uint64(self.max_time or 0)
        return writer.to_bytes()

    @classmethod
    def from_xdr(cls, reader: XdrReader) -> TimeBounds:
        if not reader.boolean():
            return cls()
        return cls(reader.uint64(), reader.uint64())

    def copy(self) -> TimeBounds:
        bounds = TimeBounds()
        bounds.min_time, bounds.max_time = self.min_time, self.max_time
        return bounds

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, TimeBounds):
            return False
        return (self.min_time, self.max_time) == (other.min_time, other.max_time)

    def __repr__(self) -> str:
        return f"TimeBounds(min_time={self.min_time}, max_time={self.max_time})"
