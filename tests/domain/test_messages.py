"""Tests for BinMsg and StrMsg read/write."""

import logging
from io import BytesIO

import pytest

from binctl.domain.errors import DecodeError, InvalidDigitError, InvalidLengthError
from binctl.domain.messages import BinMsg, StrMsg


def _digits_of(data: bytes) -> str:
    return "".join(f"{b:08b}" for b in data)


class TestBinMsgRead:
    @pytest.mark.parametrize(
        ("digits", "expected"),
        [
            ("0000000000000000", b"\x00\x00"),
            ("0000000100000010", b"\x01\x02"),
            ("01100001", b"a"),
            ("0110000101100010", b"ab"),
            ("", b""),
        ],
    )
    def test_vectors(self, digits: str, expected: bytes) -> None:
        msg = BinMsg.read(BytesIO(digits.encode()))
        assert msg.data == expected

    def test_single_zero_byte(self) -> None:
        assert BinMsg.read(BytesIO(b"00000000")).data == b"\x00"

    def test_seven_digits_is_invalid_length(self) -> None:
        with pytest.raises(InvalidLengthError) as excinfo:
            BinMsg.read(BytesIO(b"0000000"))
        assert excinfo.value.expected_multiple == 8
        assert excinfo.value.actual == 7
        assert "multiple of 8, got 7" in str(excinfo.value)

    def test_length_checked_before_digits(self) -> None:
        with pytest.raises(InvalidLengthError):
            BinMsg.read(BytesIO(b"x"))

    def test_invalid_digit(self) -> None:
        with pytest.raises(InvalidDigitError) as excinfo:
            BinMsg.read(BytesIO(b"0000000200000000"))
        assert excinfo.value.digit == "2"
        assert excinfo.value.position == 7

    def test_trailing_whitespace_rejected(self) -> None:
        with pytest.raises(InvalidDigitError) as excinfo:
            BinMsg.read(BytesIO(b"0000000\n"))
        assert excinfo.value.digit == "\n"

    def test_non_ascii_character_is_invalid_digit(self) -> None:
        # "é" is two bytes, so the input is 8 bytes long.
        with pytest.raises(InvalidDigitError) as excinfo:
            BinMsg.read(BytesIO("é000000".encode()))
        assert excinfo.value.digit == "é"

    def test_input_must_be_text(self) -> None:
        with pytest.raises(DecodeError):
            BinMsg.read(BytesIO(b"\xff0000000"))


class TestBinMsgWrite:
    def test_writes_digits(self) -> None:
        sink = BytesIO()
        BinMsg(data=b"\x01\x02").write(sink)
        assert sink.getvalue() == b"0000000100000010"

    def test_no_trailing_separator(self) -> None:
        sink = BytesIO()
        BinMsg(data=b"a").write(sink)
        assert sink.getvalue() == b"01100001"

    def test_empty(self) -> None:
        sink = BytesIO()
        BinMsg().write(sink)
        assert sink.getvalue() == b""

    def test_read_then_write_is_identity(self) -> None:
        digits = _digits_of(bytes(range(256)))
        sink = BytesIO()
        BinMsg.read(BytesIO(digits.encode())).write(sink)
        assert sink.getvalue().decode() == digits


class TestBinMsgHelpers:
    def test_from_digits(self) -> None:
        assert BinMsg.from_digits("0110000101100010").data == b"ab"

    def test_from_digits_length(self) -> None:
        with pytest.raises(InvalidLengthError):
            BinMsg.from_digits("011")

    def test_digits_property(self) -> None:
        assert BinMsg(data=b"ab").digits == "0110000101100010"

    def test_bit_count(self) -> None:
        assert BinMsg(data=b"abc").bit_count == 24

    def test_frozen(self) -> None:
        msg = BinMsg(data=b"a")
        with pytest.raises(Exception):
            msg.data = b"b"  # type: ignore[misc]


class TestStrMsg:
    def test_read(self) -> None:
        assert StrMsg.read(BytesIO(b"hello")).text == "hello"

    def test_read_multibyte(self) -> None:
        text = "héllo 世界 🎉"
        assert StrMsg.read(BytesIO(text.encode("utf-8"))).text == text

    def test_read_invalid_utf8(self) -> None:
        with pytest.raises(DecodeError) as excinfo:
            StrMsg.read(BytesIO(b"ok\xc3\x28"))
        assert excinfo.value.position == 2

    def test_write_verbatim(self) -> None:
        sink = BytesIO()
        StrMsg(text="line\n").write(sink)
        assert sink.getvalue() == b"line\n"

    def test_to_bytes(self) -> None:
        assert StrMsg(text="é").to_bytes() == b"\xc3\xa9"

    def test_equality_by_value(self) -> None:
        assert StrMsg(text="a") == StrMsg(text="a")


class TestDebugLogging:
    def test_pack_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="binctl.domain.messages"):
            BinMsg.read(BytesIO(b"0110000101100010"))
        assert "Packed 16 digits into 2 bytes" in caplog.text

    def test_text_read_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="binctl.domain.messages"):
            StrMsg.read(BytesIO("é".encode()))
        assert "Read 2 bytes of text (1 chars)" in caplog.text
