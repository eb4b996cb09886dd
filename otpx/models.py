"""
models.py — Value types shared by the otpx modules.

All of them are immutable and created per call; nothing here holds state
between derivations.
"""

import enum
import hashlib
from typing import NamedTuple, Optional


class Algorithm(str, enum.Enum):
    """HMAC hash functions allowed by RFC 6238."""

    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"

    @property
    def digestmod(self):
        return _DIGESTMODS[self]

    def __str__(self) -> str:
        return self.name


# The only place an algorithm is bound to a hash constructor.
_DIGESTMODS = {
    Algorithm.SHA1: hashlib.sha1,
    Algorithm.SHA256: hashlib.sha256,
    Algorithm.SHA512: hashlib.sha512,
}


class TOTPToken(NamedTuple):
    """A TOTP code together with the time step it belongs to."""

    token: str
    counter: int
    remaining: int      # whole seconds left in the current step
    expires_at: int     # epoch milliseconds at which the step ends


class VerificationResult(NamedTuple):
    """
    Outcome of comparing a submitted token against a counter window.

    ``delta`` is the matching counter minus the reference counter
    (0 = exact match, -1 = previous time step, ...), or None when nothing
    matched. The result is truthy only when the token was valid.
    """

    is_valid: bool
    delta: Optional[int] = None

    def __bool__(self) -> bool:
        return self.is_valid
