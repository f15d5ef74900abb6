"""
Тесты для модуля HexCodec

Проверяет:
1. Формат EncodedPayload (4 hex-цифры на UTF-16 code unit)
2. Закон обратимости decode_hex(encode_hex(s)) == s
3. Политику разбора некорректного payload (strict / lenient)
"""

import logging

import pytest

from src.core.encoding import GROUP_WIDTH, InvalidEncoding, decode_hex, encode_hex


class TestEncodeHex:
    """Тесты для encode_hex"""

    def test_ascii(self) -> None:
        assert encode_hex("Hi") == "00480069"

    def test_empty(self) -> None:
        assert encode_hex("") == ""

    def test_zero_padded_groups(self) -> None:
        """Каждый символ — ровно GROUP_WIDTH цифр"""
        payload = encode_hex("\x01a€")
        assert payload == "0001006120ac"
        assert len(payload) == 3 * GROUP_WIDTH

    def test_lowercase(self) -> None:
        assert encode_hex("\uabcd") == "abcd"

    def test_astral_character_is_surrogate_pair(self) -> None:
        """Символ вне BMP занимает две группы"""
        assert encode_hex("😀") == "d83dde00"


class TestDecodeHex:
    """Тесты для decode_hex"""

    def test_ascii(self) -> None:
        assert decode_hex("00480069") == "Hi"

    def test_empty(self) -> None:
        assert decode_hex("") == ""

    def test_uppercase_digits(self) -> None:
        assert decode_hex("20AC") == "€"

    def test_0x_prefix(self) -> None:
        assert decode_hex("0x0048") == "H"
        assert decode_hex("0X0048") == "H"

    def test_surrogate_pair(self) -> None:
        assert decode_hex("d83dde00") == "😀"


class TestMalformedPayload:
    """Политика разбора некорректного payload"""

    def test_strict_rejects_partial_group(self) -> None:
        with pytest.raises(InvalidEncoding, match="not a multiple of 4"):
            decode_hex("004800")

    def test_lenient_drops_partial_group(self, caplog) -> None:
        """strict=False: неполная хвостовая группа молча отбрасывается"""
        caplog.set_level(logging.DEBUG, logger="src.core.encoding.hex_codec")
        assert decode_hex("004800", strict=False) == "H"
        assert decode_hex("004", strict=False) == ""
        assert "partial hex group" in caplog.text

    @pytest.mark.parametrize("strict", [True, False])
    def test_non_hex_rejected_in_both_modes(self, strict: bool) -> None:
        with pytest.raises(InvalidEncoding, match="non-hex"):
            decode_hex("zz48", strict=strict)

    def test_whitespace_rejected(self) -> None:
        """bytes.fromhex допускает пробелы, payload — нет"""
        with pytest.raises(InvalidEncoding):
            decode_hex("0048 0069")

    def test_non_string_rejected(self) -> None:
        with pytest.raises(InvalidEncoding, match="must be a string"):
            decode_hex(b"0048")

    def test_invalid_encoding_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            decode_hex("0g00")


class TestRoundtrip:
    """Закон обратимости"""

    @pytest.mark.parametrize(
        "text",
        ["", "a", "QiibeeToken", "Привет, мир", "日本語", "tab\tnull\x00", "😀 emoji", "\ud800"],
    )
    def test_decode_encode(self, text: str) -> None:
        assert decode_hex(encode_hex(text)) == text
