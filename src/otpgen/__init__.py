from .base32 import b32decode as b32decode
from .base32 import b32encode as b32encode
from .base32 import normalize_secret as normalize_secret
from .config import Config as Config
from .digests import Algorithm as Algorithm
from .digests import keyed_hash as keyed_hash
from .exceptions import ConfigError as ConfigError
from .exceptions import DigitsOutOfRange as DigitsOutOfRange
from .exceptions import EmptyInput as EmptyInput
from .exceptions import InvalidCharacter as InvalidCharacter
from .exceptions import InvalidCounter as InvalidCounter
from .exceptions import InvalidTimestamp as InvalidTimestamp
from .exceptions import OTPError as OTPError
from .exceptions import UnsupportedAlgorithm as UnsupportedAlgorithm
from .hotp import HOTP as HOTP
from .hotp import generate_hotp as generate_hotp
from .otp import OTP as OTP
from .otp import int_to_bytestring as int_to_bytestring
from .otp import truncate as truncate
from .totp import TOTP as TOTP
from .totp import generate_totp as generate_totp
from .totp import timecode as timecode
