import unicodedata
from hmac import compare_digest


def normalize_code(otp: str) -> str:
    """
    Folds a user-typed code to plain ASCII digits: NFKC turns fullwidth and
    mathematical digits into ``0-9``, and the grouping space some apps show
    ("123 456") is dropped.
    """
    return "".join(unicodedata.normalize("NFKC", str(otp)).split())


def strings_equal(s1: str, s2: str) -> bool:
    """
    Compares two codes without short-circuiting on the first mismatch.

    Only the equality of lengths leaks through timing.
    """
    return compare_digest(normalize_code(s1).encode("utf-8"), normalize_code(s2).encode("utf-8"))
