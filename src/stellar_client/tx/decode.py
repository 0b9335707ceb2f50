"""
Transaction decoding.

Reads the canonical transaction grammar back field by field:

    source account · fee · sequence number · time bounds · memo ·
    operations · extension
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from ..codec import XdrReader
from ..xdr.account_id import AccountId
from ..xdr.memo import Memo
from ..xdr.operations import Operation
from ..xdr.time_bounds import TimeBounds
from ..xdr.transaction_ext import TransactionExt

MAX_OPERATIONS = 100


@dataclass
class DecodedTransaction:
    """Plain view of a decoded transaction."""

    source_account: AccountId
    fee: int
    sequence_number: int
    time_bounds: TimeBounds
    memo: Memo
    operations: List[Operation] = field(default_factory=list)
    ext: TransactionExt = field(default_factory=TransactionExt)


def read_transaction(reader: XdrReader) -> DecodedTransaction:
    """Read one transaction from the reader's current position."""
    return DecodedTransaction(
        source_account=AccountId.from_xdr(reader),
        fee=reader.uint32(),
        sequence_number=reader.uint64(),
        time_bounds=TimeBounds.from_xdr(reader),
        memo=Memo.from_xdr(reader),
        operations=reader.var_array(Operation.from_xdr, MAX_OPERATIONS),
        ext=TransactionExt.from_xdr(reader),
    )


def decode_transaction(data: bytes) -> DecodedTransaction:
    """
    Decode canonical transaction bytes.

    Raises:
        XdrDecodingError: On truncated input, unknown discriminants or
            trailing bytes
    """
    reader = XdrReader(data)
    tx = read_transaction(reader)
    reader.ensure_eof()
    return tx
