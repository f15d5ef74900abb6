"""
Encoding of text payloads for ledger call data.
"""

from src.core.encoding.hex_codec import (
    GROUP_WIDTH,
    InvalidEncoding,
    decode_hex,
    encode_hex,
)

__all__ = [
    "GROUP_WIDTH",
    "InvalidEncoding",
    "decode_hex",
    "encode_hex",
]
