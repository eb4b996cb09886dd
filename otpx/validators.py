"""
validators.py — Precondition checks shared by HOTP, TOTP and the helpers.

Each function returns the normalised value or raises the matching
``ValidationError`` subclass. Callers run all checks before touching the
HMAC so that invalid input never causes any cryptographic work.
"""

from typing import Union

from .errors import (
    InvalidCounter,
    InvalidDigits,
    InvalidLength,
    InvalidPeriod,
    InvalidSecret,
    InvalidWindow,
    UnsupportedAlgorithm,
)
from .models import Algorithm

MAX_COUNTER = 2 ** 64 - 1

AlgorithmLike = Union[Algorithm, str]


def _is_int(value) -> bool:
    # bool is an int subclass but True is not a meaningful counter
    return isinstance(value, int) and not isinstance(value, bool)


def validate_digits(digits) -> int:
    if not _is_int(digits) or digits < 1:
        raise InvalidDigits("digits", digits, "must be an integer >= 1")
    return digits


def validate_period(period) -> int:
    if not _is_int(period) or period < 1:
        raise InvalidPeriod("period", period, "must be an integer number of seconds >= 1")
    return period


def validate_counter(counter) -> int:
    if not _is_int(counter) or not 0 <= counter <= MAX_COUNTER:
        raise InvalidCounter("counter", counter, f"must be an integer in [0, {MAX_COUNTER}]")
    return counter


def validate_timestamp(timestamp) -> int:
    """Timestamps map straight onto a counter, so they fail as counters do."""
    if not _is_int(timestamp) or timestamp < 0:
        raise InvalidCounter("timestamp", timestamp, "must be a non-negative integer of epoch milliseconds")
    return timestamp


def validate_window(window, parameter: str = "window") -> int:
    if not _is_int(window) or window < 0:
        raise InvalidWindow(parameter, window, "must be an integer >= 0")
    return window


def validate_length(length) -> int:
    if not _is_int(length) or length < 1:
        raise InvalidLength("length", length, "must be an integer >= 1")
    return length


def validate_secret(secret) -> bytes:
    """
    Accept raw key bytes only.

    bytearray / memoryview are copied to an immutable bytes object so the
    caller cannot change the key halfway through a derivation. Text is
    rejected: turning a string into key bytes (ASCII, hex, Base32...) is the
    caller's decision.
    """
    if isinstance(secret, bytes):
        return secret
    if isinstance(secret, (bytearray, memoryview)):
        return bytes(secret)
    raise InvalidSecret("secret", secret, "must be a bytes-like object of raw key material")


def resolve_algorithm(algorithm: AlgorithmLike) -> Algorithm:
    """
    Map an Algorithm member or a tag such as "SHA1", "sha256" or "SHA-512"
    onto the Algorithm enum.
    """
    if isinstance(algorithm, Algorithm):
        return algorithm
    if isinstance(algorithm, str):
        tag = algorithm.strip().replace("-", "").lower()
        for member in Algorithm:
            if member.value == tag:
                return member
    supported = ", ".join(member.name for member in Algorithm)
    raise UnsupportedAlgorithm("algorithm", algorithm, f"must be one of {supported}")
