import hashlib
import hmac

import pytest

from otpgen.digests import Algorithm, keyed_hash
from otpgen.exceptions import UnsupportedAlgorithm


@pytest.mark.parametrize(
    "algorithm, size",
    [(Algorithm.SHA1, 20), (Algorithm.SHA256, 32), (Algorithm.SHA512, 64)],
)
def test_digest_lengths(algorithm: Algorithm, size: int) -> None:
    assert algorithm.digest_size == size
    assert len(keyed_hash(algorithm, b"key")(b"message")) == size


@pytest.mark.parametrize("name", ["sha1", "SHA1", "Sha256", "sha512"])
def test_parse_accepts_names_in_any_case(name: str) -> None:
    assert Algorithm.parse(name).value == name.lower()


@pytest.mark.parametrize("name", ["md5", "sha384", "", None, 1])
def test_parse_rejects_other_values(name: object) -> None:
    with pytest.raises(UnsupportedAlgorithm):
        Algorithm.parse(name)  # type: ignore[arg-type]


def test_keyed_hash_is_hmac() -> None:
    compute = keyed_hash("sha256", b"secret")
    assert compute(b"data") == hmac.new(b"secret", b"data", hashlib.sha256).digest()


def test_keyed_hash_rejects_md5() -> None:
    with pytest.raises(UnsupportedAlgorithm):
        keyed_hash("md5", b"secret")
