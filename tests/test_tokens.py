"""Test token kinds, classification helpers and display names."""

from lazi.tokens import (
    TokenKind,
    is_digit,
    is_name_char,
    is_name_start,
    token_kind_name,
)


class TestKindNames:
    def test_int(self):
        assert token_kind_name(TokenKind.INT) == "integer"

    def test_name(self):
        assert token_kind_name(TokenKind.NAME) == "name"

    def test_printable(self):
        assert token_kind_name(ord("+")) == "'+'"
        assert token_kind_name(ord(")")) == "')'"
        assert token_kind_name(ord(" ")) == "' '"

    def test_end_of_input(self):
        assert token_kind_name(TokenKind.EOF) == "<ASCII 0>"

    def test_control_and_high_bytes(self):
        assert token_kind_name(10) == "<ASCII 10>"
        assert token_kind_name(127) == "<ASCII 127>"

    def test_high_bytes_render_as_ascii_codes(self):
        assert token_kind_name(0x80) == "<ASCII 128>"
        assert token_kind_name(0x81) == "<ASCII 129>"


class TestKindValues:
    def test_reserved_kinds_above_byte_range(self):
        assert TokenKind.EOF == 0
        assert TokenKind.INT == 256
        assert TokenKind.NAME == 257


class TestClassification:
    def test_digits(self):
        assert all(is_digit(b) for b in b"0123456789")
        assert not is_digit(ord("a"))

    def test_name_start(self):
        assert is_name_start(ord("_"))
        assert is_name_start(ord("A"))
        assert is_name_start(ord("z"))
        assert not is_name_start(ord("1"))
        assert not is_name_start(0xC3)

    def test_name_char(self):
        assert is_name_char(ord("9"))
        assert not is_name_char(ord("-"))
