from typing import Union

from . import utils
from .digests import Algorithm
from .otp import OTP


def generate_hotp(
    secret: str,
    algorithm: Union[Algorithm, str],
    counter: int,
    digits: int,
) -> str:
    """
    Computes the RFC 4226 code for one counter value.

    :param secret: the shared secret in Base32, any case, padding optional
    :param algorithm: sha1, sha256 or sha512
    :param counter: non-negative counter, fits in 8 bytes
    :param digits: length of the returned code, 1 to 10
    :returns: ``digits`` decimal characters, zero padded on the left
    """
    return OTP(secret, digits=digits, algorithm=algorithm).generate_otp(counter)


class HOTP(OTP):
    """
    Handler for HMAC-based OTP counters.
    """

    def __init__(
        self,
        s: str,
        digits: int = 6,
        algorithm: Union[Algorithm, str] = Algorithm.SHA1,
        initial_count: int = 0,
    ) -> None:
        """
        :param s: secret in base32 format
        :param digits: number of integers in the OTP. Some apps expect this to be 6 digits, others support more.
        :param algorithm: hash family keying the HMAC, sha1 unless the issuer says otherwise
        :param initial_count: starting HMAC counter value, defaults to 0
        """
        self.initial_count = initial_count
        super().__init__(s=s, digits=digits, algorithm=algorithm)

    def at(self, count: int) -> str:
        """
        Generates the OTP for the given count.

        :param count: the OTP HMAC counter
        :returns: OTP
        """
        return self.generate_otp(self.initial_count + count)

    def verify(self, otp: str, counter: int) -> bool:
        """
        Verifies the OTP passed in against the current counter OTP.

        :param otp: the OTP to check against
        :param counter: the OTP HMAC counter
        """
        return utils.strings_equal(str(otp), str(self.at(counter)))
