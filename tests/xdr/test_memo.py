"""
Tests for the Memo union.
"""

import hashlib

import pytest

from stellar_client.codec import XdrReader
from stellar_client.enums import MemoType
from stellar_client.runtime.errors import InvalidMemoError
from stellar_client.xdr import Memo


class TestMemoEncoding:
    """Wire encoding of each variant"""

    def test_none(self):
        assert Memo.none().to_xdr().hex() == "00000000"

    def test_text(self):
        assert Memo.text("hi").to_xdr().hex() == "00000001" + "00000002" + "6869" + "0000"

    def test_text_at_limit(self):
        encoded = Memo.text("a" * 28).to_xdr()
        assert len(encoded) == 4 + 4 + 28
        assert encoded[4:8].hex() == "0000001c"

    def test_text_bytes_payload(self):
        assert Memo.text(b"\x00\xff").value == b"\x00\xff"

    def test_id(self):
        assert Memo.id(2 ** 64 - 1).to_xdr().hex() == "00000002" + "ff" * 8

    def test_hash(self):
        digest = hashlib.sha256(b"invoice 42").digest()
        encoded = Memo.hash(digest).to_xdr()
        assert encoded == bytes.fromhex("00000003") + digest

    def test_return(self):
        digest = b"\x11" * 32
        assert Memo.return_hash(digest).to_xdr() == bytes.fromhex("00000004") + digest

    @pytest.mark.parametrize("memo", [
        Memo.none(),
        Memo.text("welcome"),
        Memo.id(12345),
        Memo.hash(b"\x01" * 32),
        Memo.return_hash(b"\x02" * 32),
    ])
    def test_decode(self, memo):
        assert Memo.from_xdr(XdrReader(memo.to_xdr())) == memo


class TestMemoValidation:
    """Payloads that do not fit their variant"""

    def test_text_over_limit(self):
        with pytest.raises(InvalidMemoError):
            Memo.text("a" * 29)

    def test_text_limit_counts_utf8_bytes(self):
        Memo.text("é" * 14)
        with pytest.raises(InvalidMemoError):
            Memo.text("é" * 15)

    @pytest.mark.parametrize("value", [-1, 2 ** 64, True, "12"])
    def test_invalid_id(self, value):
        with pytest.raises(InvalidMemoError):
            Memo.id(value)

    @pytest.mark.parametrize("value", [b"\x00" * 31, b"\x00" * 33, "a" * 32])
    def test_invalid_hash(self, value):
        with pytest.raises(InvalidMemoError):
            Memo.hash(value)

    def test_none_takes_no_payload(self):
        with pytest.raises(InvalidMemoError):
            Memo(MemoType.MEMO_NONE, "x")

    def test_unknown_type(self):
        with pytest.raises(InvalidMemoError):
            Memo(9, None)

    def test_text_value(self):
        assert Memo.text("hello").text_value == "hello"
        with pytest.raises(InvalidMemoError):
            Memo.id(1).text_value
