"""
charset.py — Random OTPs drawn from a character set.

Unlike HOTP/TOTP these codes are not derived from anything: they are plain
random strings, e.g. for e-mail or SMS confirmation codes that the server
stores and compares itself.

Usage:
    generate_otp()                                   # "482915"
    generate_otp(8, "alphanumeric", exclude_similar=True)
    generate_otp(6, custom="ACEFHJKLMNPRTUVWXY")
"""

import logging
import secrets
from types import MappingProxyType
from typing import Callable, Optional

from .errors import InvalidCharset
from .validators import validate_length

logger = logging.getLogger(__name__)

CHARSETS = MappingProxyType({
    "numeric": "0123456789",
    "alphabetic": "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz",
    "alphanumeric": "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
    "hex": "0123456789abcdef",
})

SIMILAR_CHARS = "O0Il"
CASES = ("upper", "lower", "mixed")


def _resolve_chars(charset: str, custom: Optional[str]) -> str:
    if custom is not None:
        if not isinstance(custom, str) or not custom:
            raise InvalidCharset("custom", custom, "must be a non-empty string")
        return custom
    try:
        return CHARSETS[charset]
    except (KeyError, TypeError):
        raise InvalidCharset("charset", charset, f"must be one of {', '.join(CHARSETS)}") from None


def build_alphabet(
    charset: str = "numeric",
    custom: Optional[str] = None,
    exclude_similar: bool = False,
    case: Optional[str] = None,
) -> str:
    """
    Return the characters a code will be drawn from, after applying the
    options. Similar-looking characters are removed before the case change;
    duplicates left by the case change are dropped so every character keeps
    the same probability.
    """
    chars = _resolve_chars(charset, custom)
    if exclude_similar:
        chars = "".join(c for c in chars if c not in SIMILAR_CHARS)

    if case == "upper":
        chars = chars.upper()
    elif case == "lower":
        chars = chars.lower()
    elif case not in (None, "mixed"):
        raise InvalidCharset("case", case, f"must be one of {', '.join(CASES)}")

    chars = "".join(dict.fromkeys(chars))
    if not chars:
        raise InvalidCharset("charset", charset if custom is None else custom,
                             "no characters left after applying options")
    return chars


def generate_otp(
    length: int = 6,
    charset: str = "numeric",
    *,
    custom: Optional[str] = None,
    exclude_similar: bool = False,
    case: Optional[str] = None,
    run: Optional[Callable[[str], None]] = None,
) -> str:
    """
    Generate a random OTP of `length` characters.

    Arguments:
        length: number of characters (>= 1)
        charset: "numeric", "alphabetic", "alphanumeric" or "hex"
        custom: explicit character set, overrides `charset`
        exclude_similar: drop O, 0, I and l
        case: "upper", "lower" or "mixed" (leave as is)
        run: optional callback, called once with the generated code

    Raises:
        InvalidLength, InvalidCharset
    """
    length = validate_length(length)
    chars = build_alphabet(charset, custom, exclude_similar, case)
    otp = "".join(secrets.choice(chars) for _ in range(length))
    logger.debug("Generated %d-char OTP from a %d-char alphabet", length, len(chars))
    if run is not None:
        run(otp)
    return otp


def numeric(length: int = 6) -> str:
    return generate_otp(length, "numeric")


def alphabetic(length: int = 6, **opts) -> str:
    return generate_otp(length, "alphabetic", **opts)


def alphanumeric(length: int = 6, **opts) -> str:
    return generate_otp(length, "alphanumeric", **opts)


def hex(length: int = 6) -> str:
    return generate_otp(length, "hex")
