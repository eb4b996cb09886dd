"""
verify.py — Check a submitted OTP against a window of counters.

These helpers only compare: they do not remember which codes or counters
have been used. Blocking replays (storing the last accepted counter, or the
delta returned here) is up to the caller.
"""

import hmac
import logging
from typing import Optional

from .errors import InvalidToken
from .models import VerificationResult
from .otp_core import DEFAULT_ALGORITHM, DEFAULT_DIGITS, DEFAULT_TIME_STEP, hotp, now_ms, time_step
from .validators import (
    MAX_COUNTER,
    AlgorithmLike,
    resolve_algorithm,
    validate_counter,
    validate_digits,
    validate_secret,
    validate_window,
)

logger = logging.getLogger(__name__)


def _well_formed(token, digits: int) -> bool:
    if not isinstance(token, str):
        raise InvalidToken("token", token, "must be a string of decimal digits")
    return len(token) == digits and token.isascii() and token.isdigit()


def verify_hotp(
    secret: bytes,
    token: str,
    counter: int,
    algorithm: AlgorithmLike = DEFAULT_ALGORITHM,
    digits: int = DEFAULT_DIGITS,
    look_ahead: int = 0,
) -> VerificationResult:
    """
    Verify an HOTP code for `counter`, also accepting up to `look_ahead`
    counters after it (token generators drift ahead when codes go unused).

    On success `delta` tells how far ahead the match was; the caller should
    store counter + delta + 1 as the next expected counter.
    """
    secret = validate_secret(secret)
    counter = validate_counter(counter)
    digits = validate_digits(digits)
    algo = resolve_algorithm(algorithm)
    look_ahead = validate_window(look_ahead, "look_ahead")
    if not _well_formed(token, digits):
        return VerificationResult(False)

    for delta in range(look_ahead + 1):
        candidate = counter + delta
        if candidate > MAX_COUNTER:
            break
        if hmac.compare_digest(hotp(secret, candidate, algo, digits), token):
            logger.debug("HOTP verified at counter=%d (delta=%d)", candidate, delta)
            return VerificationResult(True, delta)
    return VerificationResult(False)


def verify_totp(
    secret: bytes,
    token: str,
    algorithm: AlgorithmLike = DEFAULT_ALGORITHM,
    digits: int = DEFAULT_DIGITS,
    period: int = DEFAULT_TIME_STEP,
    timestamp: Optional[int] = None,
    window: int = 1,
) -> VerificationResult:
    """
    Verify a TOTP code, accepting `window` time steps on either side of the
    current one to absorb clock drift. `delta` is the step offset of the
    match (-1 = previous step).
    """
    secret = validate_secret(secret)
    digits = validate_digits(digits)
    algo = resolve_algorithm(algorithm)
    window = validate_window(window)
    if timestamp is None:
        timestamp = now_ms()
    current = time_step(timestamp, period)
    if not _well_formed(token, digits):
        return VerificationResult(False)

    for delta in range(-window, window + 1):
        candidate = current + delta
        if candidate < 0 or candidate > MAX_COUNTER:
            continue
        if hmac.compare_digest(hotp(secret, candidate, algo, digits), token):
            logger.debug("TOTP verified at step=%d (delta=%d)", candidate, delta)
            return VerificationResult(True, delta)
    return VerificationResult(False)
