"""
RFC 4648 Base32 codec.

Every 5 bits of input become one symbol of the alphabet ``A-Z2-7``; output is
padded with ``=`` to a multiple of 8 characters. Decoding is case-insensitive
and tolerates missing padding.
"""
import string
from typing import Dict

from .exceptions import EmptyInput, InvalidCharacter

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
PAD = "="

# ASCII only: str.upper maps "\u00df" to "SS" and dotless i to "I".
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

_VALUES: Dict[str, int] = {}
for _value, _char in enumerate(ALPHABET):
    _VALUES[_char] = _value
    _VALUES[_char.lower()] = _value


def _char_to_value(char: str, position: int) -> int:
    try:
        return _VALUES[char]
    except KeyError:
        raise InvalidCharacter(char, position) from None


def normalize_secret(secret: str) -> str:
    """
    Uppercases a Base32 secret and restores the padding that
    authenticator apps and otpauth URIs usually leave out.
    """
    secret = secret.translate(_ASCII_UPPER)
    missing_padding = (8 - len(secret) % 8) % 8
    return secret + PAD * missing_padding


def b32decode(text: str) -> bytes:
    """
    Decodes Base32 text to bytes.

    :param text: Base32 text, any case, padding optional
    :returns: decoded bytes
    :raises EmptyInput: if ``text`` holds no symbols
    :raises InvalidCharacter: on anything outside the alphabet
    """
    if not text:
        raise EmptyInput("Base32 input must not be empty")
    text = text.rstrip(PAD)
    if not text:
        raise EmptyInput("Base32 input holds nothing but padding")

    # Trailing bits that do not fill a byte are dropped by this bound.
    byte_count = len(text) * 5 // 8
    output = bytearray()

    current, bits_remaining = 0, 8
    for position, char in enumerate(text):
        value = _char_to_value(char, position)
        if bits_remaining > 5:
            current |= value << (bits_remaining - 5)
            bits_remaining -= 5
        else:
            current |= value >> (5 - bits_remaining)
            output.append(current)
            current = (value << (3 + bits_remaining)) & 0xFF
            bits_remaining += 3

    if len(output) < byte_count:
        output.append(current)

    return bytes(output)


def b32encode(data: bytes) -> str:
    """
    Encodes bytes to canonical (uppercase, padded) Base32 text.

    :param data: non-empty bytes
    :returns: Base32 text, ``ceil(len(data) / 5) * 8`` characters long
    :raises EmptyInput: if ``data`` is empty
    """
    if not data:
        raise EmptyInput("cannot Base32 encode an empty buffer")

    char_count = (len(data) + 4) // 5 * 8
    symbols = []

    current, bits_remaining = 0, 5
    for byte in bytearray(data):
        current |= byte >> (8 - bits_remaining)
        symbols.append(ALPHABET[current])

        if bits_remaining < 4:
            current = (byte >> (3 - bits_remaining)) & 0x1F
            symbols.append(ALPHABET[current])
            bits_remaining += 5

        bits_remaining -= 3
        current = (byte << bits_remaining) & 0x1F

    if len(symbols) != char_count:
        symbols.append(ALPHABET[current])
        symbols.append(PAD * (char_count - len(symbols)))

    return "".join(symbols)
