"""
HexCodec — кодирование текста в hex-payload для call data

Формат EncodedPayload: последовательность групп по 4 hex-цифры,
одна группа на UTF-16 code unit исходной строки, с ведущими нулями.

    "Hi" → "00480069"

Символы вне BMP занимают две группы (суррогатная пара), поэтому
закон обратимости decode_hex(encode_hex(s)) == s выполняется для
любой строки, включая одиночные суррогаты.

Политика разбора некорректного payload:
- strict=True (по умолчанию): длина не кратна 4 → InvalidEncoding
- strict=False: неполная хвостовая группа молча отбрасывается
- не-hex символы → InvalidEncoding в обоих режимах
"""

import logging
import re
from typing import Final

logger = logging.getLogger(__name__)


# Ширина группы в hex-цифрах (один UTF-16 code unit)
GROUP_WIDTH: Final[int] = 4

_HEX_DIGITS: Final[re.Pattern[str]] = re.compile(r"[0-9a-fA-F]*")


class InvalidEncoding(ValueError):
    """Некорректный hex-payload (не-hex цифры или неполная группа)."""


def encode_hex(text: str) -> str:
    """
    Кодирование строки в EncodedPayload.

    Args:
        text: Произвольная строка (в том числе пустая)

    Returns:
        Конкатенация 4-значных hex-групп в нижнем регистре

    Examples:
        >>> encode_hex("Hi")
        '00480069'
        >>> encode_hex("")
        ''
    """
    return text.encode("utf-16-be", "surrogatepass").hex()


def decode_hex(payload: str, strict: bool = True) -> str:
    """
    Декодирование EncodedPayload обратно в строку.

    Args:
        payload: Hex-строка, опционально с префиксом 0x
        strict: Отклонять payload с неполной хвостовой группой

    Returns:
        Восстановленная строка

    Raises:
        InvalidEncoding: Если payload содержит не-hex символы или
            (в strict режиме) его длина не кратна 4
    """
    if not isinstance(payload, str):
        raise InvalidEncoding(f"Payload must be a string, got {type(payload).__name__}")

    body = payload[2:] if payload[:2].lower() == "0x" else payload

    if not _HEX_DIGITS.fullmatch(body):
        raise InvalidEncoding(f"Payload contains non-hex characters: {payload!r}")

    partial = len(body) % GROUP_WIDTH
    if partial:
        if strict:
            raise InvalidEncoding(
                f"Payload length {len(body)} is not a multiple of {GROUP_WIDTH}"
            )
        logger.debug("Dropping trailing partial hex group %r", body[-partial:])
        body = body[:-partial]

    return bytes.fromhex(body).decode("utf-16-be", "surrogatepass")
