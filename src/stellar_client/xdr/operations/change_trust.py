"""
ChangeTrust operation: creates, updates or removes a trust line.
"""

from __future__ import annotations
from typing import Optional, Union

from ...codec import XdrReader, XdrWriter
from ...enums import OperationType
from ..account_id import AccountId
from ..amount import MAX_STROOPS, AmountLike, from_stroops, to_stroops
from ..asset import Asset
from .base import Operation, register_operation


@register_operation
class ChangeTrustOp(Operation):
    """
    Body layout: line Asset, limit int64.

    A missing limit means the maximum; a limit of 0 removes the trust line.
    """

    operation_type = OperationType.CHANGE_TRUST

    def __init__(self, asset: Asset, limit: Optional[AmountLike] = None,
                 source_account: Optional[Union[str, AccountId]] = None):
        super().__init__(source_account)
        self.asset = asset
        self.limit = MAX_STROOPS if limit is None else to_stroops(limit)

    def body_to_xdr(self, writer: XdrWriter) -> None:
        writer.encodable(self.asset)
        writer.int64(self.limit)

    @classmethod
    def body_from_xdr(cls, reader: XdrReader, source_account: Optional[AccountId]) -> ChangeTrustOp:
        asset = Asset.from_xdr(reader)
        limit = from_stroops(reader.int64())
        return cls(asset, limit, source_account)
