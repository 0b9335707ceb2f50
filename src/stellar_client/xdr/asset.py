"""
Asset XDR type.
"""

from __future__ import annotations
import re
from typing import Any, Optional, Union

from ..codec import XdrEncodable, XdrReader, XdrWriter
from ..enums import AssetType
from ..runtime.errors import InvalidAssetError, XdrDecodingError
from .account_id import AccountId

_ASSET_CODE = re.compile(r"^[A-Za-z0-9]{1,12}$")


class Asset(XdrEncodable):
    """
    Native lumens or a credit asset identified by (code, issuer).

    Codes of 1-4 characters encode as alphanum4, 5-12 as alphanum12; the
    code is right-padded with zero bytes to its fixed width.
    """

    def __init__(self, asset_type: AssetType, code: Optional[str] = None,
                 issuer: Optional[AccountId] = None):
        self.asset_type = AssetType(asset_type)
        self.code = code
        self.issuer = issuer

    @classmethod
    def native(cls) -> Asset:
        return cls(AssetType.ASSET_TYPE_NATIVE)

    @classmethod
    def credit(cls, code: str, issuer: Union[str, AccountId]) -> Asset:
        """
        Create a credit asset.

        Raises:
            InvalidAssetError: If the code is not 1-12 alphanumeric characters
            InvalidAccountIdError: If the issuer is not a valid address
        """
        if not isinstance(code, str) or not _ASSET_CODE.match(code):
            raise InvalidAssetError(f"Invalid asset code {code!r}")
        asset_type = (
            AssetType.ASSET_TYPE_CREDIT_ALPHANUM4 if len(code) <= 4
            else AssetType.ASSET_TYPE_CREDIT_ALPHANUM12
        )
        return cls(asset_type, code, AccountId(issuer))

    @property
    def is_native(self) -> bool:
        return self.asset_type == AssetType.ASSET_TYPE_NATIVE

    def get_asset_code(self) -> Optional[str]:
        return self.code

    def get_issuer(self) -> Optional[AccountId]:
        return self.issuer

    def _code_width(self) -> int:
        return 4 if self.asset_type == AssetType.ASSET_TYPE_CREDIT_ALPHANUM4 else 12

    def to_xdr(self) -> bytes:
        writer = XdrWriter()
        writer.discriminant(self.asset_type)
        if not self.is_native:
            width = self._code_width()
            writer.opaque_fixed(self.code.encode("ascii").ljust(width, b"\x00"), width)
            writer.encodable(self.issuer)
        return writer.to_bytes()

    @classmethod
    def from_xdr(cls, reader: XdrReader) -> Asset:
        asset_type = reader.discriminant()
        if asset_type == AssetType.ASSET_TYPE_NATIVE:
            return cls.native()
        if asset_type == AssetType.ASSET_TYPE_CREDIT_ALPHANUM4:
            width = 4
        elif asset_type == AssetType.ASSET_TYPE_CREDIT_ALPHANUM12:
            width = 12
        else:
            raise XdrDecodingError(f"Unknown asset type {asset_type}")
        code = reader.opaque_fixed(width).rstrip(b"\x00").decode("ascii")
        return cls(AssetType(asset_type), code, AccountId.from_xdr(reader))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Asset):
            return False
        return (self.asset_type, self.code, self.issuer) == (other.asset_type, other.code, other.issuer)

    def __hash__(self) -> int:
        return hash((self.asset_type, self.code, self.issuer))

    def __repr__(self) -> str:
        if self.is_native:
            return "Asset.native()"
        return f"Asset.credit('{self.code}', '{self.issuer}')"
