"""
config.py — Defaults for the CLI, overridable from the environment.

    OTPX_DIGITS     number of digits (default 6)
    OTPX_PERIOD     TOTP step in seconds (default 30)
    OTPX_ALGORITHM  SHA1 / SHA256 / SHA512 (default SHA1)
    OTPX_LOG_LEVEL  logging level name (default WARNING)

The library functions never read these; they take explicit arguments.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ValidationError
from .models import Algorithm
from .otp_core import DEFAULT_ALGORITHM, DEFAULT_DIGITS, DEFAULT_TIME_STEP
from .validators import resolve_algorithm, validate_digits, validate_period

logger = logging.getLogger(__name__)

ENV_PREFIX = "OTPX_"
SECRET_ENV = ENV_PREFIX + "SECRET"


@dataclass(frozen=True)
class Settings:
    digits: int = DEFAULT_DIGITS
    period: int = DEFAULT_TIME_STEP
    algorithm: Algorithm = DEFAULT_ALGORITHM
    log_level: str = "WARNING"


def _read(environ: Mapping[str, str], name: str, parse, default):
    raw = environ.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return parse(raw.strip())
    except (ValueError, ValidationError):
        logger.warning("Ignoring %s%s=%r, using default %r", ENV_PREFIX, name, raw, default)
        return default


def _parse_level(raw: str) -> str:
    level = raw.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown log level {raw!r}")
    return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from `environ` (os.environ by default)."""
    if environ is None:
        environ = os.environ
    return Settings(
        digits=_read(environ, "DIGITS", lambda v: validate_digits(int(v)), DEFAULT_DIGITS),
        period=_read(environ, "PERIOD", lambda v: validate_period(int(v)), DEFAULT_TIME_STEP),
        algorithm=_read(environ, "ALGORITHM", resolve_algorithm, DEFAULT_ALGORITHM),
        log_level=_read(environ, "LOG_LEVEL", _parse_level, "WARNING"),
    )
