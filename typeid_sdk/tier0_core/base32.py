"""
typeid_sdk.tier0_core.base32
─────────────────────────────
Fixed-width codec between a 16-byte value and its 26-character suffix.

The 128 bits are read MSB-first as if left-padded with two zero bits to 130,
then cut into 26 groups of 5 bits. The padding lands in the top of the first
group, so a valid suffix always starts with 0-7. The layout is one lead byte
(2 symbols) followed by three 5-byte blocks (8 symbols each).

Alphabet is Crockford base32, lowercase: no i, l, o or u.
"""
from __future__ import annotations

from typeid_sdk.tier0_core.errors import (
    InvalidByteLengthError,
    InvalidSuffixAlphabetError,
    InvalidSuffixLengthError,
    InvalidSuffixRangeError,
)

ALPHABET = "0123456789abcdefghjkmnpqrstvwxyz"

BYTE_LENGTH = 16
SUFFIX_LENGTH = 26

_DECODE: dict[str, int] = {ch: i for i, ch in enumerate(ALPHABET)}


# ── Encode ─────────────────────────────────────────────────────────────────

def _encode_block(b0: int, b1: int, b2: int, b3: int, b4: int) -> list[str]:
    # 40 bits -> 8 symbols
    return [
        ALPHABET[b0 >> 3],
        ALPHABET[((b0 & 0x07) << 2) | (b1 >> 6)],
        ALPHABET[(b1 >> 1) & 0x1F],
        ALPHABET[((b1 & 0x01) << 4) | (b2 >> 4)],
        ALPHABET[((b2 & 0x0F) << 1) | (b3 >> 7)],
        ALPHABET[(b3 >> 2) & 0x1F],
        ALPHABET[((b3 & 0x03) << 3) | (b4 >> 5)],
        ALPHABET[b4 & 0x1F],
    ]


def encode(data: bytes) -> str:
    """
    Encode exactly 16 bytes as a 26-character suffix.
    Raises InvalidByteLengthError for any other length.
    """
    if len(data) != BYTE_LENGTH:
        raise InvalidByteLengthError(len(data))
    src = bytes(data)

    out = [ALPHABET[src[0] >> 5], ALPHABET[src[0] & 0x1F]]
    out += _encode_block(*src[1:6])
    out += _encode_block(*src[6:11])
    out += _encode_block(*src[11:16])
    return "".join(out)


# ── Decode ─────────────────────────────────────────────────────────────────

def _decode_block(c0: int, c1: int, c2: int, c3: int,
                  c4: int, c5: int, c6: int, c7: int) -> tuple[int, ...]:
    # 8 symbols -> 40 bits
    return (
        (c0 << 3) | (c1 >> 2),
        ((c1 & 0x03) << 6) | (c2 << 1) | (c3 >> 4),
        ((c3 & 0x0F) << 4) | (c4 >> 1),
        ((c4 & 0x01) << 7) | (c5 << 2) | (c6 >> 3),
        ((c6 & 0x07) << 5) | c7,
    )


def decode(text: str) -> bytes:
    """
    Decode a 26-character suffix back to its 16 bytes.

    Raises, in order of checking:
      InvalidSuffixLengthError   — length is not 26
      InvalidSuffixAlphabetError — a character is outside the alphabet
      InvalidSuffixRangeError    — first symbol > 7 (value exceeds 128 bits)
    """
    if len(text) != SUFFIX_LENGTH:
        raise InvalidSuffixLengthError(len(text))

    values: list[int] = []
    for position, ch in enumerate(text):
        value = _DECODE.get(ch)
        if value is None:
            raise InvalidSuffixAlphabetError(text, ch, position)
        values.append(value)

    if values[0] > 7:
        raise InvalidSuffixRangeError(text)

    out = bytearray([(values[0] << 5) | values[1]])
    out += bytes(_decode_block(*values[2:10]))
    out += bytes(_decode_block(*values[10:18]))
    out += bytes(_decode_block(*values[18:26]))
    return bytes(out)


__sdk_export__ = {
    "exports": ["encode", "decode", "ALPHABET"],
    "description": "Fixed-width 16-byte <-> 26-character base32 codec",
    "tier": "tier0_core",
    "module": "base32",
}
