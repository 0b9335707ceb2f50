"""
Tests for decoding encoded transactions.
"""

import pytest

from helpers import mk_account_id

from stellar_client.runtime.errors import XdrDecodingError
from stellar_client.tx import decode_transaction
from stellar_client.xdr import AccountId, Asset, ChangeTrustOp, CreateAccountOp, Memo, PaymentOp, TimeBounds

DESTINATION = mk_account_id(2)
ISSUER = mk_account_id(4)


class TestDecodeTransaction:
    """Builder output decodes back to the same fields"""

    def test_all_fields(self, builder, source_keypair):
        asset = Asset.credit("USD", ISSUER)
        builder.add_create_account_op(DESTINATION, 50)
        builder.add_custom_asset_payment_op(asset, "1.5", DESTINATION, source_account_id=ISSUER)
        builder.add_change_trust_op(asset)
        builder.set_text_memo("decoded").set_time_bounds(100, 200)

        tx = decode_transaction(builder.encode())

        assert tx.source_account == AccountId(source_keypair.account_id)
        assert tx.fee == 300
        assert tx.sequence_number == 42
        assert tx.time_bounds == TimeBounds(100, 200)
        assert tx.memo == Memo.text("decoded")
        assert [type(op) for op in tx.operations] == [CreateAccountOp, PaymentOp, ChangeTrustOp]
        assert tx.operations[1].amount == 15_000_000
        assert tx.operations[1].source_account == AccountId(ISSUER)
        assert tx.operations[2].asset == asset

    def test_empty_transaction(self, builder):
        tx = decode_transaction(builder.encode())
        assert tx.operations == []
        assert tx.time_bounds.is_empty()
        assert tx.memo == Memo.none()

    def test_truncated(self, builder):
        builder.add_payment_op(DESTINATION, 1)
        with pytest.raises(XdrDecodingError):
            decode_transaction(builder.encode()[:-6])

    def test_trailing_bytes(self, builder):
        with pytest.raises(XdrDecodingError):
            decode_transaction(builder.encode() + b"\x00" * 4)

    def test_unknown_memo_type(self, builder):
        encoded = bytearray(builder.encode())
        encoded[52:56] = bytes.fromhex("00000009")
        with pytest.raises(XdrDecodingError):
            decode_transaction(bytes(encoded))

    def test_unsupported_ext(self, builder):
        encoded = builder.encode()[:-4] + bytes.fromhex("00000001")
        with pytest.raises(XdrDecodingError):
            decode_transaction(encoded)

    def test_negative_amount(self, builder):
        builder.add_create_account_op(DESTINATION, 50)
        encoded = bytearray(builder.encode())
        # starting balance sits just before the 4-byte ext
        encoded[-12:-4] = b"\xff" * 8
        with pytest.raises(XdrDecodingError):
            decode_transaction(bytes(encoded))
