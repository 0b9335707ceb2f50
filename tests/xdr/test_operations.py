"""
Tests for operation encoding and decoding.
"""

from decimal import Decimal

import pytest

from helpers import assert_hex_equal, mk_account_id, mk_raw_key

from stellar_client.codec import XdrReader
from stellar_client.enums import OperationType
from stellar_client.runtime.errors import XdrDecodingError
from stellar_client.xdr import AccountId, Asset, ChangeTrustOp, CreateAccountOp, Operation, PaymentOp
from stellar_client.xdr.operations import supported_operation_types


DESTINATION = mk_account_id(2)
SOURCE = mk_account_id(3)
ISSUER = mk_account_id(4)


class TestCreateAccount:
    """CREATE_ACCOUNT operation"""

    def test_encoding(self):
        op = CreateAccountOp(DESTINATION, 50)
        assert_hex_equal(
            op.to_xdr(),
            "00000000"                      # no source account
            "00000000"                      # CREATE_ACCOUNT
            "00000000" + mk_raw_key(2).hex() +
            "000000001dcd6500",             # 50 * 10^7
            "create account",
        )

    def test_with_source_account(self):
        encoded = CreateAccountOp(DESTINATION, 50, SOURCE).to_xdr()
        assert encoded[:4].hex() == "00000001"
        assert encoded[4:40] == AccountId(SOURCE).to_xdr()
        assert len(encoded) == 4 + 36 + 4 + 36 + 8

    def test_decode(self):
        op = CreateAccountOp(DESTINATION, "12.5", SOURCE)
        decoded = Operation.from_xdr(XdrReader(op.to_xdr()))

        assert isinstance(decoded, CreateAccountOp)
        assert decoded.destination == op.destination
        assert decoded.starting_balance == 125_000_000
        assert decoded.source_account == AccountId(SOURCE)


class TestPayment:
    """PAYMENT operation"""

    def test_native_encoding(self):
        op = PaymentOp.new_native_payment(DESTINATION, 10)
        assert_hex_equal(
            op.to_xdr(),
            "00000000"
            "00000001"                      # PAYMENT
            "00000000" + mk_raw_key(2).hex() +
            "00000000"                      # native
            "0000000005f5e100",             # 10 * 10^7
            "native payment",
        )

    def test_custom_asset(self):
        op = PaymentOp.new_custom_payment(DESTINATION, "1", "USD", ISSUER)
        assert op.asset == Asset.credit("USD", ISSUER)
        assert op.amount == 10_000_000

    def test_decode(self):
        op = PaymentOp(DESTINATION, Decimal("0.25"), Asset.credit("EURT", ISSUER))
        decoded = Operation.from_xdr(XdrReader(op.to_xdr()))

        assert isinstance(decoded, PaymentOp)
        assert decoded.asset == op.asset
        assert decoded.amount == 2_500_000
        assert decoded.source_account is None


class TestChangeTrust:
    """CHANGE_TRUST operation"""

    def test_default_limit_is_maximum(self):
        asset = Asset.credit("USD", ISSUER)
        encoded = ChangeTrustOp(asset).to_xdr()
        assert encoded[4:8].hex() == "00000006"
        assert encoded[8:-8] == asset.to_xdr()
        assert encoded[-8:].hex() == "7fffffffffffffff"

    def test_zero_limit_removes_trust_line(self):
        assert ChangeTrustOp(Asset.credit("USD", ISSUER), 0).to_xdr()[-8:] == b"\x00" * 8

    def test_decode(self):
        op = ChangeTrustOp(Asset.credit("USD", ISSUER), 1000)
        decoded = Operation.from_xdr(XdrReader(op.to_xdr()))
        assert isinstance(decoded, ChangeTrustOp)
        assert decoded.limit == op.limit


class TestOperationRegistry:
    """Decoding dispatch"""

    def test_registered_types(self):
        assert set(supported_operation_types()) == {
            OperationType.CREATE_ACCOUNT,
            OperationType.PAYMENT,
            OperationType.CHANGE_TRUST,
        }

    @pytest.mark.parametrize("op_type", ["00000002", "000000ff"])
    def test_unsupported_type(self, op_type):
        with pytest.raises(XdrDecodingError):
            Operation.from_xdr(XdrReader(bytes.fromhex("00000000" + op_type)))

    @pytest.mark.parametrize("body", [
        # CREATE_ACCOUNT with starting balance -1
        "00000000" + "00000000" + mk_raw_key(2).hex() + "ffffffffffffffff",
        # CHANGE_TRUST native with limit INT64_MIN
        "00000006" + "00000000" + "8000000000000000",
    ])
    def test_negative_amount_is_a_decoding_error(self, body):
        with pytest.raises(XdrDecodingError):
            Operation.from_xdr(XdrReader(bytes.fromhex("00000000" + body)))
