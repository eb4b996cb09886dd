"""
otp_core.py — Core library for HOTP (RFC 4226) and TOTP (RFC 6238).

Goals:
- Pure functions only: no file I/O, no CLI, no state kept between calls.
- Secrets are raw key bytes. Decoding Base32/hex/... is the caller's job.
- Every parameter is validated before the HMAC is computed.

Derivation, in short:
    counter --int_to_bytes--> 8 bytes --HMAC--> digest
    digest --dynamic_truncate--> 31-bit int --format_code--> "042815"
TOTP only adds the step from a millisecond timestamp to a counter.
"""

import hmac
import logging
import os
import struct
import time
from typing import Optional

from .models import Algorithm, TOTPToken
from .validators import (
    AlgorithmLike,
    resolve_algorithm,
    validate_counter,
    validate_digits,
    validate_length,
    validate_period,
    validate_secret,
    validate_timestamp,
)

logger = logging.getLogger(__name__)

# --- Config / constants ----------------------------------------------------
DEFAULT_DIGITS = 6          # RFC 4226 recommends at least 6 digits
DEFAULT_TIME_STEP = 30      # TOTP step (seconds)
DEFAULT_ALGORITHM = Algorithm.SHA1
SECRET_BYTES = 20           # 160-bit secret (common practice)


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def generate_secret(nbytes: int = SECRET_BYTES) -> bytes:
    """
    Generate a random raw secret from the OS CSPRNG.

    The bytes are returned as is; encoding them for display or for an
    authenticator app is up to the caller.
    """
    return os.urandom(validate_length(nbytes))


# --- RFC helpers -----------------------------------------------------------
def int_to_bytes(counter: int) -> bytes:
    """
    Convert a counter into the 8-byte big-endian message required by RFC 4226.

    Example: int_to_bytes(1) -> b'\\x00\\x00\\x00\\x00\\x00\\x00\\x00\\x01'

    Raises:
        InvalidCounter: negative, larger than 2**64 - 1, or not an int
    """
    return struct.pack(">Q", validate_counter(counter))


def dynamic_truncate(hmac_digest: bytes) -> int:
    """
    Apply RFC 4226 dynamic truncation.

    - offset = low nibble of the last byte (0..15)
    - take 4 bytes from offset, clear the top bit of the first one
    - return the resulting 31-bit unsigned integer

    Every supported digest is at least 20 bytes long, so offset + 3 is
    always in range.
    """
    offset = hmac_digest[-1] & 0x0F
    return (
        ((hmac_digest[offset] & 0x7F) << 24)
        | ((hmac_digest[offset + 1] & 0xFF) << 16)
        | ((hmac_digest[offset + 2] & 0xFF) << 8)
        | (hmac_digest[offset + 3] & 0xFF)
    )


def format_code(binary: int, digits: int = DEFAULT_DIGITS) -> str:
    """Reduce a truncated value to `digits` decimal digits, zero-padded."""
    digits = validate_digits(digits)
    return str(binary % (10 ** digits)).zfill(digits)


def hotp(
    secret: bytes,
    counter: int,
    algorithm: AlgorithmLike = DEFAULT_ALGORITHM,
    digits: int = DEFAULT_DIGITS,
) -> str:
    """
    Generate an HOTP code (RFC 4226).

    Steps:
    1. Validate digits, algorithm, secret and counter (no hashing before this)
    2. Message = 8-byte big-endian counter
    3. HMAC-<algorithm>(key=secret, msg=message)
    4. Dynamic truncation -> 31-bit int
    5. code = value % 10^digits, zero-padded to `digits` characters

    Arguments:
        secret: raw key bytes
        counter: 0 <= counter <= 2**64 - 1
        algorithm: Algorithm member or tag ("SHA1", "sha256", "SHA-512")
        digits: output width, >= 1

    Returns:
        str: exactly `digits` decimal characters

    Raises:
        InvalidDigits, UnsupportedAlgorithm, InvalidSecret, InvalidCounter
    """
    digits = validate_digits(digits)
    algo = resolve_algorithm(algorithm)
    key = validate_secret(secret)
    msg = int_to_bytes(counter)

    digest = hmac.new(key, msg, algo.digestmod).digest()
    binary = dynamic_truncate(digest)
    logger.debug("HOTP: HMAC-%s(counter=%d), %d digits", algo, counter, digits)
    return format_code(binary, digits)


def time_step(timestamp: Optional[int] = None, period: int = DEFAULT_TIME_STEP) -> int:
    """
    Map an epoch-millisecond timestamp onto a TOTP counter:
    floor(floor(timestamp / 1000) / period).
    """
    period = validate_period(period)
    if timestamp is None:
        timestamp = now_ms()
    timestamp = validate_timestamp(timestamp)
    return (timestamp // 1000) // period


def totp(
    secret: bytes,
    algorithm: AlgorithmLike = DEFAULT_ALGORITHM,
    digits: int = DEFAULT_DIGITS,
    period: int = DEFAULT_TIME_STEP,
    timestamp: Optional[int] = None,
) -> str:
    """
    Generate a TOTP code (RFC 6238): HOTP with counter = time_step(timestamp, period).

    `timestamp` is in milliseconds since the epoch (59000 means 59 s) and
    defaults to now. All HOTP checks apply, plus period >= 1.
    """
    digits = validate_digits(digits)
    algo = resolve_algorithm(algorithm)
    counter = time_step(timestamp, period)
    logger.debug("TOTP: period=%ds -> counter=%d", period, counter)
    return hotp(secret, counter, algo, digits)


def totp_token(
    secret: bytes,
    algorithm: AlgorithmLike = DEFAULT_ALGORITHM,
    digits: int = DEFAULT_DIGITS,
    period: int = DEFAULT_TIME_STEP,
    timestamp: Optional[int] = None,
) -> TOTPToken:
    """Like totp(), but also report the step counter and when the code expires."""
    if timestamp is None:
        timestamp = now_ms()
    code = totp(secret, algorithm, digits, period, timestamp)
    counter = time_step(timestamp, period)
    expires_at = (counter + 1) * period * 1000
    remaining = period - (timestamp // 1000) % period
    return TOTPToken(code, counter, remaining, expires_at)
