"""
Tests for the XDR reader.
"""

import pytest

from stellar_client.codec import XdrReader, XdrWriter
from stellar_client.runtime.errors import XdrDecodingError


class TestReader:
    """Reading what the writer produces"""

    def test_integers(self):
        writer = XdrWriter()
        writer.uint32(7)
        writer.int64(-5)
        writer.uint64(2 ** 63)
        reader = XdrReader(writer.to_bytes())

        assert reader.uint32() == 7
        assert reader.int64() == -5
        assert reader.uint64() == 2 ** 63
        assert reader.eof

    def test_opaque_var_skips_padding(self):
        reader = XdrReader(bytes.fromhex("00000003616263000000000a"))
        assert reader.opaque_var() == b"abc"
        assert reader.uint32() == 10

    def test_string(self):
        reader = XdrReader(bytes.fromhex("0000000268690000"))
        assert reader.string() == "hi"

    def test_optional(self):
        reader = XdrReader(bytes.fromhex("00000000" + "00000001" + "00000009"))
        assert reader.optional(XdrReader.uint32) is None
        assert reader.optional(XdrReader.uint32) == 9

    def test_var_array(self):
        reader = XdrReader(bytes.fromhex("00000002" + "00000001" + "00000002"))
        assert reader.var_array(XdrReader.uint32) == [1, 2]


class TestReaderErrors:
    """Malformed input is rejected"""

    def test_truncated(self):
        with pytest.raises(XdrDecodingError):
            XdrReader(b"\x00\x00").uint32()

    def test_invalid_bool(self):
        with pytest.raises(XdrDecodingError):
            XdrReader(bytes.fromhex("00000002")).boolean()

    def test_non_zero_padding(self):
        with pytest.raises(XdrDecodingError):
            XdrReader(bytes.fromhex("0000000161ff0000")).opaque_var()

    def test_opaque_var_over_max_length(self):
        with pytest.raises(XdrDecodingError):
            XdrReader(bytes.fromhex("0000001d") + b"\x00" * 32).opaque_var(28)

    def test_array_over_max_length(self):
        with pytest.raises(XdrDecodingError):
            XdrReader(bytes.fromhex("00000065")).var_array(XdrReader.uint32, 100)

    def test_trailing_bytes(self):
        reader = XdrReader(bytes.fromhex("0000000100000002"))
        reader.uint32()
        assert reader.remaining == 4
        with pytest.raises(XdrDecodingError):
            reader.ensure_eof()
