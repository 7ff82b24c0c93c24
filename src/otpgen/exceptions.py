class OTPError(ValueError):
    """
    Base class for every error raised while generating a one-time password.
    """


class EmptyInput(OTPError):
    """
    Raised when a secret or a byte buffer to encode is empty.
    """


class InvalidCharacter(OTPError):
    """
    Raised when Base32 text contains a character outside ``A-Z``/``2-7``.
    """

    def __init__(self, char: str, position: int) -> None:
        self.char = char
        self.position = position
        super().__init__("{!r} at position {} is not a Base32 character".format(char, position))


class UnsupportedAlgorithm(OTPError):
    def __init__(self, algorithm: object) -> None:
        self.algorithm = algorithm
        super().__init__("Invalid value for algorithm {!r}, must be sha1, sha256 or sha512".format(algorithm))


class DigitsOutOfRange(OTPError):
    def __init__(self, digits: int) -> None:
        self.digits = digits
        super().__init__("digits must be between 1 and 10, got {}".format(digits))


class InvalidCounter(OTPError):
    def __init__(self, counter: int) -> None:
        self.counter = counter
        super().__init__("counter must be a non-negative 64-bit integer, got {}".format(counter))


class ConfigError(OTPError):
    """
    Raised by :meth:`otpgen.config.Config.validate` for command line settings
    the generator cannot work with.
    """


class InvalidTimestamp(OTPError):
    def __init__(self, timestamp: float) -> None:
        self.timestamp = timestamp
        super().__init__("time must be a finite number of seconds, got {}".format(timestamp))
