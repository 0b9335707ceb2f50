"""
Operation base type.

Every operation encodes as:

    optional source account (AccountId*)
    uint32 operation type
    operation body
"""

from __future__ import annotations
from abc import abstractmethod
from typing import Callable, ClassVar, Dict, Optional, Type, Union

from ...codec import XdrEncodable, XdrReader, XdrWriter
from ...enums import OperationType
from ...runtime.errors import ValidationError, XdrDecodingError
from ..account_id import AccountId

_OPERATION_TYPES: Dict[OperationType, Type["Operation"]] = {}


def register_operation(cls: Type["Operation"]) -> Type["Operation"]:
    """Class decorator adding an operation to the decoding registry."""
    _OPERATION_TYPES[cls.operation_type] = cls
    return cls


class Operation(XdrEncodable):
    """One ledger-mutating instruction inside a transaction."""

    operation_type: ClassVar[OperationType]

    def __init__(self, source_account: Optional[Union[str, AccountId]] = None):
        """
        Args:
            source_account: Account the operation acts on behalf of; defaults
                to the transaction source when omitted
        """
        self.source_account = None if source_account is None else AccountId(source_account)

    @abstractmethod
    def body_to_xdr(self, writer: XdrWriter) -> None:
        """Write the type-specific body."""
        pass

    @classmethod
    @abstractmethod
    def body_from_xdr(cls, reader: XdrReader, source_account: Optional[AccountId]) -> Operation:
        """Read the type-specific body."""
        pass

    def to_xdr(self) -> bytes:
        writer = XdrWriter()
        writer.optional(self.source_account)
        writer.discriminant(self.operation_type)
        self.body_to_xdr(writer)
        return writer.to_bytes()

    @staticmethod
    def from_xdr(reader: XdrReader) -> Operation:
        """
        Decode any registered operation.

        Raises:
            XdrDecodingError: If the operation type is not supported or its
                body holds an out-of-range value
        """
        source_account = reader.optional(AccountId.from_xdr)
        op_type = reader.discriminant()
        try:
            cls = _OPERATION_TYPES[OperationType(op_type)]
        except (KeyError, ValueError):
            raise XdrDecodingError(f"Unsupported operation type {op_type}")
        try:
            return cls.body_from_xdr(reader, source_account)
        except ValidationError as e:
            raise XdrDecodingError(f"Invalid {cls.__name__} body: {e.message}", cause=e)

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in vars(self).items() if v is not None)
        return f"{self.__class__.__name__}({fields})"


def supported_operation_types() -> Dict[OperationType, Type[Operation]]:
    return dict(_OPERATION_TYPES)
