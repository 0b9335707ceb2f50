"""
CreateAccount operation: funds a new account with a starting balance of lumens.
"""

from __future__ import annotations
from typing import Optional, Union

from ...codec import XdrReader, XdrWriter
from ...enums import OperationType
from ..account_id import AccountId
from ..amount import AmountLike, from_stroops, to_stroops
from .base import Operation, register_operation


@register_operation
class CreateAccountOp(Operation):
    """
    Body layout: destination AccountId (36 bytes), startingBalance int64.
    """

    operation_type = OperationType.CREATE_ACCOUNT

    def __init__(self, destination: Union[str, AccountId], starting_balance: AmountLike,
                 source_account: Optional[Union[str, AccountId]] = None):
        super().__init__(source_account)
        self.destination = AccountId(destination)
        self.starting_balance = to_stroops(starting_balance)

    def body_to_xdr(self, writer: XdrWriter) -> None:
        writer.encodable(self.destination)
        writer.int64(self.starting_balance)

    @classmethod
    def body_from_xdr(cls, reader: XdrReader, source_account: Optional[AccountId]) -> CreateAccountOp:
        destination = AccountId.from_xdr(reader)
        balance = from_stroops(reader.int64())
        return cls(destination, balance, source_account)
