"""
Payment operation.
"""

from __future__ import annotations
from typing import Optional, Union

from ...codec import XdrReader, XdrWriter
from ...enums import OperationType
from ..account_id import AccountId
from ..amount import AmountLike, from_stroops, to_stroops
from ..asset import Asset
from .base import Operation, register_operation


@register_operation
class PaymentOp(Operation):
    """
    Body layout: destination AccountId, Asset, amount int64.
    """

    operation_type = OperationType.PAYMENT

    def __init__(self, destination: Union[str, AccountId], amount: AmountLike,
                 asset: Optional[Asset] = None,
                 source_account: Optional[Union[str, AccountId]] = None):
        super().__init__(source_account)
        self.destination = AccountId(destination)
        self.asset = asset or Asset.native()
        self.amount = to_stroops(amount)

    @classmethod
    def new_native_payment(cls, destination: Union[str, AccountId], amount: AmountLike,
                           source_account: Optional[Union[str, AccountId]] = None) -> PaymentOp:
        return cls(destination, amount, Asset.native(), source_account)

    @classmethod
    def new_custom_payment(cls, destination: Union[str, AccountId], amount: AmountLike,
                           asset_code: str, asset_issuer: Union[str, AccountId],
                           source_account: Optional[Union[str, AccountId]] = None) -> PaymentOp:
        return cls(destination, amount, Asset.credit(asset_code, asset_issuer), source_account)

    def body_to_xdr(self, writer: XdrWriter) -> None:
        writer.encodable(self.destination)
        writer.encodable(self.asset)
        writer.int64(self.amount)

    @classmethod
    def body_from_xdr(cls, reader: XdrReader, source_account: Optional[AccountId]) -> PaymentOp:
        destination = AccountId.from_xdr(reader)
        asset = Asset.from_xdr(reader)
        amount = from_stroops(reader.int64())
        return cls(destination, amount, asset, source_account)
