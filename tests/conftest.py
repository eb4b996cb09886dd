import hmac
import logging

import pytest

from otpx import otp_core

RFC4226_SECRET = b"12345678901234567890"


@pytest.fixture
def rfc_secret():
    return RFC4226_SECRET


@pytest.fixture
def hmac_spy(monkeypatch):
    """Record every HMAC computed by otp_core while still computing it."""
    calls = []
    real_new = hmac.new

    def spy(key, msg=None, digestmod=None):
        calls.append((key, msg, digestmod))
        return real_new(key, msg, digestmod)

    monkeypatch.setattr(otp_core.hmac, "new", spy)
    return calls


@pytest.fixture
def clean_env(monkeypatch):
    for key in ("OTPX_DIGITS", "OTPX_PERIOD", "OTPX_ALGORITHM", "OTPX_LOG_LEVEL", "OTPX_SECRET"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def reset_otpx_logger():
    logger = logging.getLogger("otpx")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
