import logging
from typing import Union

from . import base32
from .digests import Algorithm, keyed_hash
from .exceptions import DigitsOutOfRange, InvalidCounter

logger = logging.getLogger(__name__)

# The truncated value is below 2**31, so it never has more than 10 decimal digits.
MAX_DIGITS = 10
COUNTER_BYTES = 8
TRUNCATED_BYTES = 4


def check_digits(digits: int) -> int:
    if not 1 <= digits <= MAX_DIGITS:
        raise DigitsOutOfRange(digits)
    return digits


def int_to_bytestring(i: int, padding: int = COUNTER_BYTES) -> bytes:
    """
    Turns a counter into the OATH specified bytestring, which is fed to the
    HMAC along with the secret: ``padding`` bytes, most significant first.
    """
    if i < 0 or i >= 1 << (8 * padding):
        raise InvalidCounter(i)
    result = bytearray()
    while i != 0:
        result.append(i & 0xFF)
        i >>= 8
    return bytes(bytearray(reversed(result)).rjust(padding, b"\0"))


def truncate(hmac_hash: bytes) -> int:
    """
    RFC 4226 dynamic truncation: the low nibble of the last byte picks four
    bytes, read big-endian with the sign bit cleared.
    """
    hmac_hash = bytearray(hmac_hash)
    offset = hmac_hash[-1] & 0xF
    assert offset + TRUNCATED_BYTES <= len(hmac_hash), "digest too short for dynamic truncation"
    return (
        (hmac_hash[offset] & 0x7F) << 24
        | (hmac_hash[offset + 1] & 0xFF) << 16
        | (hmac_hash[offset + 2] & 0xFF) << 8
        | (hmac_hash[offset + 3] & 0xFF)
    )


def format_code(code: int, digits: int) -> str:
    return str(code % 10**digits).zfill(digits)


class OTP(object):
    """
    Base class for OTP handlers.
    """

    def __init__(
        self,
        s: str,
        digits: int = 6,
        algorithm: Union[Algorithm, str] = Algorithm.SHA1,
    ) -> None:
        self.digits = check_digits(digits)
        self.algorithm = Algorithm.parse(algorithm)
        self.secret = s

    def generate_otp(self, input: int) -> str:
        """
        :param input: the HMAC counter value to use as the OTP input.
            Usually either the counter, or the computed integer based on the Unix timestamp
        """
        counter_bytes = int_to_bytestring(input)
        hmac_hash = keyed_hash(self.algorithm, self.byte_secret())(counter_bytes)
        code = truncate(hmac_hash)
        logger.debug("generated %s code for counter %d (%d digits)", self.algorithm.value, input, self.digits)
        return format_code(code, self.digits)

    def byte_secret(self) -> bytes:
        return base32.b32decode(base32.normalize_secret(self.secret))

    def __repr__(self) -> str:
        return "{}(digits={}, algorithm={})".format(type(self).__name__, self.digits, self.algorithm.value)
