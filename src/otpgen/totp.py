import calendar
import datetime
import logging
import math
import time
from typing import Optional, Union

from . import utils
from .digests import Algorithm
from .exceptions import ConfigError, InvalidTimestamp
from .otp import OTP

logger = logging.getLogger(__name__)

DEFAULT_PERIOD = 30

Timestamp = Union[int, float, datetime.datetime]


def _unix_seconds(for_time: Timestamp) -> float:
    if isinstance(for_time, datetime.datetime):
        if for_time.tzinfo is None:
            return time.mktime(for_time.timetuple())
        return calendar.timegm(for_time.utctimetuple())
    if not math.isfinite(for_time):
        raise InvalidTimestamp(for_time)
    return for_time


def timecode(for_time: Timestamp, period: int = DEFAULT_PERIOD) -> int:
    """
    Number of whole ``period`` second steps between the Unix epoch and
    ``for_time``.
    """
    if period <= 0:
        raise ConfigError("period must be positive, got {}".format(period))
    return int(_unix_seconds(for_time) // period)


def generate_totp(
    secret: str,
    algorithm: Union[Algorithm, str],
    period: int,
    digits: int,
    now: Timestamp,
) -> str:
    """
    Computes the RFC 6238 code valid at ``now``.

    The clock is the caller's: pass ``time.time()`` for the current code.

    :param secret: the shared secret in Base32, any case, padding optional
    :param algorithm: sha1, sha256 or sha512
    :param period: length of a time step in seconds
    :param digits: length of the returned code, 1 to 10
    :param now: Unix seconds or a datetime
    :returns: ``digits`` decimal characters, zero padded on the left
    """
    return TOTP(secret, digits=digits, algorithm=algorithm, interval=period).at(now)


class TOTP(OTP):
    """
    Handler for time-based OTP counters.
    """

    def __init__(
        self,
        s: str,
        digits: int = 6,
        algorithm: Union[Algorithm, str] = Algorithm.SHA1,
        interval: int = DEFAULT_PERIOD,
    ) -> None:
        """
        :param s: secret in base32 format
        :param digits: number of integers in the OTP
        :param algorithm: hash family keying the HMAC
        :param interval: the time interval in seconds for OTP. This defaults to 30.
        """
        if interval <= 0:
            raise ConfigError("interval must be positive, got {}".format(interval))
        self.interval = interval
        super().__init__(s=s, digits=digits, algorithm=algorithm)

    def at(self, for_time: Timestamp, counter_offset: int = 0) -> str:
        """
        Accepts either a Unix timestamp integer or a datetime object.

        :param for_time: the time to generate an OTP for
        :param counter_offset: the amount of ticks to add to the time counter
        :returns: OTP value
        """
        return self.generate_otp(self.timecode(for_time) + counter_offset)

    def now(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.at(time.time())

    def verify(self, otp: str, for_time: Optional[Timestamp] = None, valid_window: int = 0) -> bool:
        """
        Verifies the OTP passed in against the current time OTP.

        :param otp: the OTP to check against
        :param for_time: Time to check OTP at (defaults to now)
        :param valid_window: extends the validity to this many counter ticks before and after the current one
        :returns: True if verification succeeded, False otherwise
        """
        if for_time is None:
            for_time = time.time()

        if valid_window:
            for i in range(-valid_window, valid_window + 1):
                if self.timecode(for_time) + i < 0:
                    continue
                if utils.strings_equal(str(otp), str(self.at(for_time, i))):
                    logger.debug("code matched %d steps from the current one", i)
                    return True
            return False

        return utils.strings_equal(str(otp), str(self.at(for_time)))

    def timecode(self, for_time: Timestamp) -> int:
        return timecode(for_time, self.interval)
