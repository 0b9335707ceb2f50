"""
Horizon response models.

Only the fields the client relies on are declared; everything else Horizon
returns is ignored.
"""

from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, Field

from ..xdr.account_id import AccountId


class Balance(BaseModel):
    """One balance line of an account."""

    balance: str
    asset_type: str
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None
    limit: Optional[str] = None

    @property
    def is_native(self) -> bool:
        return self.asset_type == "native"


class AccountResponse(BaseModel):
    """
    State of an account as reported by ``GET /accounts/{id}``.

    Horizon sends the sequence number as a decimal string; it is parsed to int.
    """

    id: AccountId
    sequence: int = Field(ge=0)
    subentry_count: int = 0
    balances: List[Balance] = Field(default_factory=list)

    model_config = {"arbitrary_types_allowed": True}

    def get_sequence(self) -> int:
        return self.sequence

    def native_balance(self) -> Optional[str]:
        for line in self.balances:
            if line.is_native:
                return line.balance
        return None


class SubmitTransactionResponse(BaseModel):
    """Result of ``POST /transactions``."""

    hash: str
    ledger: Optional[int] = None
    successful: Optional[bool] = None
    envelope_xdr: Optional[str] = None
    result_xdr: Optional[str] = None
    result_meta_xdr: Optional[str] = None
