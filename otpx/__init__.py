"""
otpx package
============

One-time passwords: HOTP (RFC 4226), TOTP (RFC 6238) and random codes
drawn from a character set.

──────────────────────────────────────────────
Core algorithm
──────────────────────────────────────────────
- HOTP (HMAC-based One-Time Password):
  code = Truncate(HMAC-<alg>(key=secret, msg=counter)) mod 10^digits
  counter is an 8-byte big-endian integer; alg is SHA1, SHA256 or SHA512.

- TOTP (Time-based One-Time Password):
  HOTP with counter = floor(floor(timestamp_ms / 1000) / period)
  period defaults to 30 seconds.

- Dynamic truncation:
  take 4 bytes of the HMAC at offset = last byte & 0x0F, clear the top bit.

──────────────────────────────────────────────
Quick example
──────────────────────────────────────────────
>>> from otpx import hotp, totp
>>> hotp(b"12345678901234567890", 0)
'755224'
>>> totp(b"12345678901234567890", digits=8, timestamp=59000)
'94287082'

Secrets are raw bytes: decode Base32/hex before calling. Nothing is stored
between calls; replay protection belongs to the caller.
"""

from . import charset
from .charset import generate_otp
from .errors import (
    InvalidCharset,
    InvalidCounter,
    InvalidDigits,
    InvalidLength,
    InvalidPeriod,
    InvalidSecret,
    InvalidToken,
    InvalidWindow,
    OTPXError,
    UnsupportedAlgorithm,
    ValidationError,
)
from .models import Algorithm, TOTPToken, VerificationResult
from .otp_core import (
    DEFAULT_DIGITS,
    DEFAULT_TIME_STEP,
    dynamic_truncate,
    format_code,
    generate_secret,
    hotp,
    int_to_bytes,
    time_step,
    totp,
    totp_token,
)
from .verify import verify_hotp, verify_totp

__version__ = "1.0.0"

__all__ = [
    "Algorithm",
    "DEFAULT_DIGITS",
    "DEFAULT_TIME_STEP",
    "InvalidCharset",
    "InvalidCounter",
    "InvalidDigits",
    "InvalidLength",
    "InvalidPeriod",
    "InvalidSecret",
    "InvalidToken",
    "InvalidWindow",
    "OTPXError",
    "TOTPToken",
    "UnsupportedAlgorithm",
    "ValidationError",
    "VerificationResult",
    "charset",
    "dynamic_truncate",
    "format_code",
    "generate_otp",
    "generate_secret",
    "hotp",
    "int_to_bytes",
    "time_step",
    "totp",
    "totp_token",
    "verify_hotp",
    "verify_totp",
]
