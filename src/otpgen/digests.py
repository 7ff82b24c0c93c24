import enum
import hashlib
import hmac
from typing import Any, Callable, Union

from .exceptions import UnsupportedAlgorithm


class Algorithm(enum.Enum):
    """
    Hash families the HMAC may be keyed with.
    """

    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"

    @property
    def digest(self) -> Any:
        return _CONSTRUCTORS[self]

    @property
    def digest_size(self) -> int:
        return self.digest().digest_size

    @classmethod
    def parse(cls, value: Union["Algorithm", str]) -> "Algorithm":
        """
        Accepts an :class:`Algorithm` or its name in any case ("sha1", "SHA256").

        :raises UnsupportedAlgorithm: for anything else, md5 included
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise UnsupportedAlgorithm(value)


_CONSTRUCTORS = {
    Algorithm.SHA1: hashlib.sha1,
    Algorithm.SHA256: hashlib.sha256,
    Algorithm.SHA512: hashlib.sha512,
}


def keyed_hash(algorithm: Union[Algorithm, str], key: bytes) -> Callable[[bytes], bytes]:
    """
    Binds an HMAC key to a hash family.

    :param algorithm: sha1, sha256 or sha512
    :param key: raw secret bytes
    :returns: callable mapping a message to its HMAC digest
        (20, 32 or 64 bytes long)
    """
    digest = Algorithm.parse(algorithm).digest

    def compute(message: bytes) -> bytes:
        return hmac.new(key, message, digest).digest()

    return compute
