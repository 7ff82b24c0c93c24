import os
from dataclasses import dataclass
from typing import Optional

from .digests import Algorithm
from .exceptions import ConfigError, UnsupportedAlgorithm

SECRET_ENV_VAR = "OTPGEN_SECRET"

HOTP = "hotp"
TOTP = "totp"


@dataclass
class Config:
    """
    Settings of one command line invocation. ``counter`` is -1 until given.
    """

    method: Optional[str] = None
    secret: Optional[str] = None
    algorithm: str = Algorithm.SHA1.value
    counter: int = -1
    digits: int = 6
    period: int = 30

    def validate(self) -> "Config":
        if self.method not in (HOTP, TOTP):
            raise ConfigError("Either -h or -t must be provided")
        if not self.secret:
            raise ConfigError("A secret must be provided with -s or ${}".format(SECRET_ENV_VAR))
        try:
            Algorithm.parse(self.algorithm)
        except UnsupportedAlgorithm:
            raise ConfigError("Argument of -a must be 'sha1', 'sha256' or 'sha512'") from None
        if self.counter < 0 and self.method != TOTP:
            raise ConfigError("Non-negative counter must be provided if -h is in use")
        if self.digits <= 0:
            raise ConfigError("Argument of -d must be positive")
        if self.period <= 0:
            raise ConfigError("Argument of -p must be positive")
        return self


def secret_from_env() -> Optional[str]:
    return os.environ.get(SECRET_ENV_VAR) or None
